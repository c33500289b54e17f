from unittest.mock import AsyncMock, MagicMock

import pytest
from aiogram.fsm.context import FSMContext
from aiogram.fsm.storage.base import StorageKey
from aiogram.fsm.storage.memory import MemoryStorage
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from db.models import Base
from seed import seed_catalog
import handlers.quiz
import handlers.registration
import handlers.results

USER_ID = 42


@pytest.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine, monkeypatch):
    """Фабрика сессий тестовой БД, подменённая во всех хендлерах"""
    maker = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
    for module in (handlers.quiz, handlers.registration, handlers.results):
        monkeypatch.setattr(module, "async_session_maker", maker)
    return maker


@pytest.fixture
async def session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
async def catalog(session):
    await seed_catalog(session)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def state(storage):
    return FSMContext(storage=storage, key=StorageKey(bot_id=1, chat_id=USER_ID, user_id=USER_ID))


def make_message(text=None, user_id=USER_ID, contact=None):
    message = MagicMock()
    message.text = text
    message.from_user.id = user_id
    message.contact = contact
    message.answer = AsyncMock()
    return message


def make_callback(data, user_id=USER_ID):
    callback = MagicMock()
    callback.data = data
    callback.from_user.id = user_id
    callback.answer = AsyncMock()
    callback.message.edit_text = AsyncMock()
    callback.message.answer = AsyncMock()
    return callback


def make_contact(phone_number):
    contact = MagicMock()
    contact.phone_number = phone_number
    return contact
