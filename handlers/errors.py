"""
Общий обработчик ошибок: любое исключение в хендлере не роняет бота
"""

import logging

from aiogram.exceptions import TelegramAPIError
from aiogram.types import ErrorEvent

from services import texts

logger = logging.getLogger(__name__)


async def handle_error(event: ErrorEvent) -> bool:
    """Логирует ошибку и отправляет пользователю общее сообщение"""
    logger.error("Ошибка при обработке update %s", event.update.update_id, exc_info=event.exception)

    update = event.update
    try:
        if update.callback_query is not None:
            await update.callback_query.answer()
            if update.callback_query.message is not None:
                await update.callback_query.message.answer(texts.GENERIC_ERROR)
        elif update.message is not None:
            await update.message.answer(texts.GENERIC_ERROR)
    except TelegramAPIError as e:
        logger.error("Не удалось сообщить пользователю об ошибке: %s", e)

    return True
