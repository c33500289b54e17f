"""
Тексты сообщений бота
"""

from config import STRICT_VALIDATION, NAME_MIN_LENGTH, PHONE_MIN_LENGTH

ASK_FIRST_NAME = "Привет! Давай зарегистрируемся. Как тебя зовут? Введи имя."
ASK_LAST_NAME = "Отлично. Теперь фамилия:"
ASK_PHONE = "Укажи номер телефона (можешь поделиться контактом кнопкой):"
SHARE_CONTACT_BUTTON = "📱 Поделиться контактом"
REGISTRATION_DONE = "✅ Регистрация завершена. Напиши /test чтобы пройти тест."

REGISTER_FIRST = "Сначала зарегистрируйся. Введи имя:"
NO_QUESTIONS = "❌ Вопросы не найдены. Обратись к администратору."
QUESTION_TEMPLATE = "Вопрос {order}:\n{text}"
RESULT_TEMPLATE = "🎉 Готово!\nВам больше всего подходит профессия: {title}\n\n{description}"
RESULT_RAW_TEMPLATE = "🎉 Готово! Итог: {code}"
UNDETERMINED = "не определено"

HISTORY_NOT_REGISTERED = "Сначала зарегистрируйся: /start"
HISTORY_EMPTY = "История пуста."
HISTORY_HEADER = "📋 Последние результаты:"
HISTORY_LINE = "• {started} — {title} ({status})"
STATUS_FINISHED = "завершён"
STATUS_IN_PROGRESS = "в процессе"

HELP = (
    "Доступные команды:\n"
    "/start — регистрация\n"
    "/test — пройти тест\n"
    "/history — история"
)

GENERIC_ERROR = "⚠️ Что-то пошло не так. Попробуй ещё раз чуть позже."

# Подсказки при неверном вводе: строгий и мягкий варианты
_INVALID_STRICT = {
    "first_name": f"Имя должно содержать минимум {NAME_MIN_LENGTH} символа. Введи имя ещё раз:",
    "last_name": f"Фамилия должна содержать минимум {NAME_MIN_LENGTH} символа. Введи фамилию ещё раз:",
    "phone": f"Номер должен содержать минимум {PHONE_MIN_LENGTH} символов. Введи номер или поделись контактом.",
}
_INVALID_LENIENT = {
    "first_name": "Введи имя текстом.",
    "last_name": "Введи фамилию текстом.",
    "phone": "Введи номер текстом или поделись контактом.",
}


def invalid_input(field: str, strict: bool = STRICT_VALIDATION) -> str:
    """Текст повторного запроса для поля регистрации"""
    templates = _INVALID_STRICT if strict else _INVALID_LENIENT
    return templates[field]
