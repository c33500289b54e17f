"""
Проверка ввода при регистрации
"""

from typing import Optional

from config import STRICT_VALIDATION, NAME_MIN_LENGTH, PHONE_MIN_LENGTH


def clean_name(text: Optional[str], strict: bool = STRICT_VALIDATION) -> Optional[str]:
    """Возвращает имя/фамилию без пробелов по краям или None, если ввод не подходит"""
    value = (text or "").strip()
    min_length = NAME_MIN_LENGTH if strict else 1
    if len(value) < min_length:
        return None
    return value


def clean_phone(text: Optional[str], strict: bool = STRICT_VALIDATION) -> Optional[str]:
    """Возвращает телефон, введённый текстом, или None"""
    value = (text or "").strip()
    min_length = PHONE_MIN_LENGTH if strict else 1
    if len(value) < min_length:
        return None
    return value
