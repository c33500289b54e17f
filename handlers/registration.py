"""
Диалог регистрации: имя, фамилия, телефон
"""

import logging

from aiogram import Router, types, F
from aiogram.filters import StateFilter
from aiogram.fsm.context import FSMContext
from aiogram.types import ReplyKeyboardRemove

from db.database import async_session_maker
from handlers.states import RegistrationStates
from services import texts
from services.quiz import upsert_user
from services.utils import contact_keyboard
from services.validation import clean_name, clean_phone

logger = logging.getLogger(__name__)

router = Router()


@router.message(RegistrationStates.first_name, F.text)
async def process_first_name(message: types.Message, state: FSMContext):
    first_name = clean_name(message.text)
    if first_name is None:
        await message.answer(texts.invalid_input("first_name"))
        return

    await state.update_data(first_name=first_name)
    await state.set_state(RegistrationStates.last_name)
    await message.answer(texts.ASK_LAST_NAME)


@router.message(RegistrationStates.last_name, F.text)
async def process_last_name(message: types.Message, state: FSMContext):
    last_name = clean_name(message.text)
    if last_name is None:
        await message.answer(texts.invalid_input("last_name"))
        return

    await state.update_data(last_name=last_name)
    await state.set_state(RegistrationStates.phone)
    await message.answer(texts.ASK_PHONE, reply_markup=contact_keyboard())


@router.message(RegistrationStates.phone, F.contact)
async def process_contact(message: types.Message, state: FSMContext):
    """Телефон из кнопки «Поделиться контактом»"""
    phone = message.contact.phone_number if message.contact else None
    if not phone:
        await message.answer(texts.invalid_input("phone"), reply_markup=contact_keyboard())
        return
    await complete_registration(message, state, phone)


@router.message(RegistrationStates.phone, F.text)
async def process_phone_text(message: types.Message, state: FSMContext):
    phone = clean_phone(message.text)
    if phone is None:
        await message.answer(texts.invalid_input("phone"), reply_markup=contact_keyboard())
        return
    await complete_registration(message, state, phone)


async def complete_registration(message: types.Message, state: FSMContext, phone: str):
    """Сохранение пользователя и возврат в свободное состояние"""
    data = await state.get_data()
    tg_id = str(message.from_user.id)

    async with async_session_maker() as session:
        await upsert_user(session, tg_id, data["first_name"], data["last_name"], phone)

    await state.clear()
    await message.answer(texts.REGISTRATION_DONE, reply_markup=ReplyKeyboardRemove())


@router.message(StateFilter(None), F.text)
async def idle_text(message: types.Message):
    """Любой текст вне диалога — подсказка по командам"""
    await message.answer(texts.HELP)
