"""
Заполнение справочника профессий и вопросов теста

Запуск: python seed.py
"""

import asyncio
import logging

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from db.database import async_session_maker, init_db
from db.models import Profession, Question, Answer, QuizSession, RecordedAnswer

logger = logging.getLogger(__name__)

PROFESSIONS = [
    {"code": "DataAnalyst", "title": "Аналитик данных", "description": "Работает с данными, дашбордами и SQL."},
    {"code": "BackendDev", "title": "Бэкенд-разработчик", "description": "Пишет серверную логику и API."},
    {"code": "FrontendDev", "title": "Фронтенд-разработчик", "description": "Создаёт UI в браузере."},
    {"code": "PM", "title": "Проектный менеджер", "description": "Управляет проектами и коммуникациями."},
]

QUESTIONS = [
    {"text": "Что вам ближе?", "answers": [
        {"text": "Работа с таблицами и метриками", "weights": {"DataAnalyst": 2}},
        {"text": "Проектирование API", "weights": {"BackendDev": 2}},
        {"text": "Создание интерфейсов", "weights": {"FrontendDev": 2}},
        {"text": "Организация людей и процессов", "weights": {"PM": 2}},
    ]},
    {"text": "Какую задачу выберете?", "answers": [
        {"text": "Написать SQL отчёт", "weights": {"DataAnalyst": 2, "BackendDev": 1}},
        {"text": "Сделать REST endpoint", "weights": {"BackendDev": 2}},
        {"text": "Сверстать форму", "weights": {"FrontendDev": 2}},
        {"text": "Составить план релиза", "weights": {"PM": 2}},
    ]},
    {"text": "Что вызывает интерес?", "answers": [
        {"text": "BI и аналитика", "weights": {"DataAnalyst": 2}},
        {"text": "Базы данных и микросервисы", "weights": {"BackendDev": 2}},
        {"text": "UX и компоненты", "weights": {"FrontendDev": 2}},
        {"text": "Коммуникации с командой", "weights": {"PM": 2}},
    ]},
    {"text": "Какие навыки хотите прокачать?", "answers": [
        {"text": "Статистика и SQL", "weights": {"DataAnalyst": 2}},
        {"text": "Архитектура серверов", "weights": {"BackendDev": 2}},
        {"text": "Дизайн-системы", "weights": {"FrontendDev": 2}},
        {"text": "Управление рисками", "weights": {"PM": 2}},
    ]},
    {"text": "В чём комфортнее работать?", "answers": [
        {"text": "Данные и отчёты", "weights": {"DataAnalyst": 2}},
        {"text": "Сервер и логика", "weights": {"BackendDev": 2}},
        {"text": "Браузер и UI", "weights": {"FrontendDev": 2}},
        {"text": "Люди и сроки", "weights": {"PM": 2}},
    ]},
]


async def seed_catalog(session: AsyncSession, professions: list = PROFESSIONS, questions: list = QUESTIONS):
    """
    Профессии добавляются только если их ещё нет (по коду).
    Вопросы, ответы и все сессии каждый раз создаются заново.
    """
    for item in professions:
        existing = await session.execute(select(Profession).where(Profession.code == item["code"]))
        if existing.scalar_one_or_none() is None:
            session.add(Profession(**item))

    await session.execute(delete(RecordedAnswer))
    await session.execute(delete(QuizSession))
    await session.execute(delete(Answer))
    await session.execute(delete(Question))

    for order, item in enumerate(questions, start=1):
        question = Question(order=order, text=item["text"])
        question.answers = [Answer(text=a["text"], weights=a["weights"]) for a in item["answers"]]
        session.add(question)

    await session.commit()
    logger.info("Справочник заполнен: %d профессий, %d вопросов", len(professions), len(questions))


async def main():
    await init_db()
    async with async_session_maker() as session:
        await seed_catalog(session)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    asyncio.run(main())
