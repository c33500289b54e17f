"""
Обработчики команд /start и /help
"""

from aiogram import Router, types
from aiogram.filters import Command, CommandStart
from aiogram.fsm.context import FSMContext
from aiogram.types import ReplyKeyboardRemove

from handlers.states import RegistrationStates
from services import texts

router = Router()


@router.message(CommandStart())
async def start_cmd(message: types.Message, state: FSMContext):
    """Начало регистрации; незавершённый тест сбрасывается"""
    await state.clear()
    await state.set_state(RegistrationStates.first_name)
    await message.answer(texts.ASK_FIRST_NAME, reply_markup=ReplyKeyboardRemove())


@router.message(Command("help"))
async def help_cmd(message: types.Message):
    await message.answer(texts.HELP)
