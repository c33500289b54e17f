"""
Главный файл для запуска Telegram-бота
"""

import asyncio
import logging
from aiogram import Bot, Dispatcher
from aiogram.fsm.storage.memory import MemoryStorage

from config import BOT_TOKEN, LOG_LEVEL, STATS_HOST, STATS_PORT
from db.database import init_db
from handlers import start, quiz, results, registration
from handlers.errors import handle_error
from web import create_server

# Настройка логирования
logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_dispatcher() -> Dispatcher:
    """Диспетчер с роутерами; команды подключаются раньше диалога регистрации"""
    dp = Dispatcher(storage=MemoryStorage())

    dp.include_router(start.router)
    dp.include_router(quiz.router)
    dp.include_router(results.router)
    dp.include_router(registration.router)

    dp.errors.register(handle_error)
    return dp


async def main():
    """Основная функция запуска бота"""
    # Инициализация базы данных
    logger.info("Инициализация базы данных...")
    await init_db()
    logger.info("База данных инициализирована ✓")

    bot = Bot(token=BOT_TOKEN)
    dp = create_dispatcher()
    server = create_server()

    logger.info("Бот запущен ✓ Статистика: http://%s:%s/stats", STATS_HOST, STATS_PORT)

    # Запуск polling и HTTP-сервера
    try:
        await asyncio.gather(
            dp.start_polling(bot, allowed_updates=dp.resolve_used_update_types()),
            server.serve()
        )
    finally:
        await bot.session.close()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Бот остановлен")
