"""
Подключение к базе данных
"""

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool
from .models import Base
from config import DATABASE_URL, DB_ECHO

# Создание асинхронного движка
engine = create_async_engine(
    DATABASE_URL,
    echo=DB_ECHO,
    future=True,
    poolclass=NullPool  # для SQLite
)

# Фабрика сессий
async_session_maker = async_sessionmaker(
    engine,
    expire_on_commit=False,
    class_=AsyncSession
)


async def init_db():
    """Инициализация базы данных (создание таблиц)"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_session() -> AsyncSession:
    """Получение сессии БД (зависимость FastAPI)"""
    async with async_session_maker() as session:
        yield session
