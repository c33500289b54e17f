"""Tests for the catalog bootstrap script."""

from sqlalchemy import select, func

from db.models import Profession, Question, Answer, QuizSession, RecordedAnswer
from seed import seed_catalog, PROFESSIONS, QUESTIONS
from services.quiz import upsert_user


async def count(session, model):
    return await session.scalar(select(func.count()).select_from(model))


class TestSeedCatalog:
    async def test_fills_catalog(self, session):
        await seed_catalog(session)

        assert await count(session, Profession) == len(PROFESSIONS)
        assert await count(session, Question) == len(QUESTIONS)
        assert await count(session, Answer) == sum(len(q["answers"]) for q in QUESTIONS)

        orders = (await session.execute(select(Question.order).order_by(Question.order))).scalars().all()
        assert orders == [1, 2, 3, 4, 5]

    async def test_rerun_keeps_professions_and_replaces_questions(self, session):
        await seed_catalog(session)
        profession = (await session.execute(select(Profession).where(Profession.code == "PM"))).scalar_one()
        profession.title = "Менеджер"
        await session.commit()

        user = await upsert_user(session, "42", "Иван", "Петров", "+79991234567")
        session.add(QuizSession(user_id=user.id))
        await session.commit()

        await seed_catalog(session)

        assert await count(session, Profession) == len(PROFESSIONS)
        assert await count(session, Question) == len(QUESTIONS)
        assert await count(session, QuizSession) == 0
        assert await count(session, RecordedAnswer) == 0
        title = await session.scalar(select(Profession.title).where(Profession.code == "PM"))
        assert title == "Менеджер"
