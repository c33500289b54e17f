"""
Обработчики прохождения теста
"""

import logging

from aiogram import Router, types, F
from aiogram.exceptions import TelegramBadRequest
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext

from db.database import async_session_maker
from handlers.states import QuizStates, RegistrationStates
from services import texts
from services.quiz import (
    start_session,
    advance_session,
    finalize_session,
    UserNotRegistered,
    EmptyCatalog,
    QuizResult,
)
from services.utils import ANSWER_PREFIX, parse_answer_payload, format_question, answers_keyboard

logger = logging.getLogger(__name__)

router = Router()


@router.message(Command("test"))
async def start_test_command(message: types.Message, state: FSMContext):
    """Начало теста: новая сессия и первый вопрос"""
    tg_id = str(message.from_user.id)

    async with async_session_maker() as session:
        try:
            quiz_session, question = await start_session(session, tg_id)
        except UserNotRegistered:
            await state.clear()
            await state.set_state(RegistrationStates.first_name)
            await message.answer(texts.REGISTER_FIRST)
            return
        except EmptyCatalog:
            logger.warning("Каталог вопросов пуст, тест для %s не начат", tg_id)
            await state.clear()
            await message.answer(texts.NO_QUESTIONS)
            return

    await state.set_state(QuizStates.in_progress)
    await state.set_data({
        "session_id": quiz_session.id,
        "current_order": question.order,
        "scores": {},
    })

    await message.answer(format_question(question), reply_markup=answers_keyboard(question))


@router.callback_query(F.data.startswith(f"{ANSWER_PREFIX}:"))
async def process_answer_callback(callback: types.CallbackQuery, state: FSMContext):
    """Обработка выбранного варианта ответа"""
    answer_id = parse_answer_payload(callback.data)
    data = await state.get_data()

    # Устаревшие и чужие нажатия просто подтверждаем
    if (
        answer_id is None
        or await state.get_state() != QuizStates.in_progress.state
        or not data.get("session_id")
    ):
        await callback.answer()
        return

    session_id = data["session_id"]

    async with async_session_maker() as session:
        step = await advance_session(session, session_id, data["current_order"], answer_id, data.get("scores") or {})
        if step is None:
            await callback.answer()
            return

        if step.finished:
            result = await finalize_session(session, session_id, step.scores)
            await state.clear()
            await show_message(callback, format_result(result))
            await callback.answer()
            return

    question = step.next_question
    await state.update_data(current_order=question.order, scores=step.scores)
    await show_message(callback, format_question(question), reply_markup=answers_keyboard(question))
    await callback.answer()


@router.callback_query()
async def unknown_callback(callback: types.CallbackQuery):
    """Неизвестные кнопки — без действия"""
    await callback.answer()


async def show_message(callback: types.CallbackQuery, text: str, reply_markup=None):
    """Редактирует сообщение с вопросом, а если не получилось — отправляет новое"""
    try:
        await callback.message.edit_text(text, reply_markup=reply_markup)
    except TelegramBadRequest as e:
        logger.debug("Не удалось отредактировать сообщение: %s", e)
        await callback.message.answer(text, reply_markup=reply_markup)


def format_result(result: QuizResult) -> str:
    if result.title:
        return texts.RESULT_TEMPLATE.format(title=result.title, description=result.description or "")
    return texts.RESULT_RAW_TEMPLATE.format(code=result.code or texts.UNDETERMINED)
