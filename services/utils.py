"""
Вспомогательные функции: клавиатуры и форматирование
"""

from datetime import datetime, timezone
from typing import List, Optional

from aiogram.types import (
    InlineKeyboardMarkup,
    InlineKeyboardButton,
    ReplyKeyboardMarkup,
    KeyboardButton,
)

from config import ANSWERS_PER_ROW
from db.models import Question
from services import texts

ANSWER_PREFIX = "ans"


def chunk(items: list, size: int) -> List[list]:
    """Разбивает список на строки по size элементов"""
    return [items[i:i + size] for i in range(0, len(items), size)]


def answer_payload(answer_id: int) -> str:
    return f"{ANSWER_PREFIX}:{answer_id}"


def parse_answer_payload(data: Optional[str]) -> Optional[int]:
    """
    Разбирает callback_data вида "ans:<id>"

    Returns:
        int: ID ответа или None, если формат неизвестен
    """
    kind, _, raw_id = (data or "").partition(":")
    if kind != ANSWER_PREFIX:
        return None
    try:
        return int(raw_id)
    except ValueError:
        return None


def format_question(question: Question) -> str:
    return texts.QUESTION_TEMPLATE.format(order=question.order, text=question.text)


def answers_keyboard(question: Question) -> InlineKeyboardMarkup:
    """Inline кнопки с вариантами ответа, по две в ряд"""
    buttons = [
        InlineKeyboardButton(text=answer.text, callback_data=answer_payload(answer.id))
        for answer in question.answers
    ]
    return InlineKeyboardMarkup(inline_keyboard=chunk(buttons, ANSWERS_PER_ROW))


def contact_keyboard() -> ReplyKeyboardMarkup:
    """Одноразовая клавиатура с запросом контакта"""
    return ReplyKeyboardMarkup(
        keyboard=[[KeyboardButton(text=texts.SHARE_CONTACT_BUTTON, request_contact=True)]],
        resize_keyboard=True,
        one_time_keyboard=True
    )


def format_timestamp(value: Optional[datetime]) -> str:
    """Время из БД (UTC без зоны) в локальном времени сервера"""
    if value is None:
        return "—"
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone().strftime("%d.%m.%Y %H:%M")
