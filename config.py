"""
Конфигурация бота
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# Telegram Bot Token
BOT_TOKEN = os.getenv("BOT_TOKEN", "your-telegram-token")

# Database URL (SQLite для MVP, легко заменить на PostgreSQL)
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./profquiz.db")
DB_ECHO = _env_bool("DB_ECHO", "false")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# HTTP-эндпоинт статистики
STATS_HOST = os.getenv("STATS_HOST", "0.0.0.0")
STATS_PORT = int(os.getenv("STATS_PORT", "3000"))

# Строгая проверка ввода при регистрации (false — принимаем любой непустой ввод)
STRICT_VALIDATION = _env_bool("STRICT_VALIDATION", "true")
NAME_MIN_LENGTH = int(os.getenv("NAME_MIN_LENGTH", "2"))
PHONE_MIN_LENGTH = int(os.getenv("PHONE_MIN_LENGTH", "10"))

# Настройки теста
HISTORY_LIMIT = 10
ANSWERS_PER_ROW = 2
