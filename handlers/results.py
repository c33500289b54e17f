"""
Обработчик просмотра истории результатов
"""

from aiogram import Router, types
from aiogram.filters import Command

from db.database import async_session_maker
from services import texts
from services.quiz import get_history
from services.utils import format_timestamp

router = Router()


@router.message(Command("history"))
async def show_history(message: types.Message):
    """Последние результаты пользователя (состояние диалога не меняется)"""
    async with async_session_maker() as session:
        entries = await get_history(session, str(message.from_user.id))

    if entries is None:
        await message.answer(texts.HISTORY_NOT_REGISTERED)
        return

    if not entries:
        await message.answer(texts.HISTORY_EMPTY)
        return

    lines = [
        texts.HISTORY_LINE.format(
            started=format_timestamp(entry.started_at),
            title=entry.title,
            status=texts.STATUS_FINISHED if entry.finished else texts.STATUS_IN_PROGRESS
        )
        for entry in entries
    ]
    await message.answer(texts.HISTORY_HEADER + "\n" + "\n".join(lines))
