"""
Жизненный цикл сессии теста: старт, ответы, подведение итога, история
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy import select, update, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from config import HISTORY_LIMIT
from db.models import User, Profession, Question, Answer, QuizSession, RecordedAnswer
from services.scoring import add_weights, pick_best_profession
from services import texts

logger = logging.getLogger(__name__)


class QuizError(Exception):
    """Базовая ошибка сценария теста"""


class UserNotRegistered(QuizError):
    """Тест запрошен до регистрации"""


class EmptyCatalog(QuizError):
    """В базе нет ни одного вопроса"""


@dataclass
class Step:
    """Результат обработки ответа"""
    scores: Dict[str, int]
    next_question: Optional[Question] = None

    @property
    def finished(self) -> bool:
        return self.next_question is None


@dataclass
class QuizResult:
    """Итог теста для показа пользователю"""
    code: Optional[str]
    title: Optional[str] = None
    description: Optional[str] = None


@dataclass
class HistoryEntry:
    started_at: datetime
    title: str
    finished: bool


async def get_user(session: AsyncSession, tg_id: str) -> Optional[User]:
    result = await session.execute(select(User).where(User.tg_id == tg_id))
    return result.scalar_one_or_none()


async def upsert_user(session: AsyncSession, tg_id: str, first_name: str, last_name: str, phone: str) -> User:
    """Создаёт пользователя или перезаписывает его контактные данные"""
    user = await get_user(session, tg_id)
    if user is None:
        user = User(tg_id=tg_id, first_name=first_name, last_name=last_name, phone=phone)
        session.add(user)
    else:
        user.first_name = first_name
        user.last_name = last_name
        user.phone = phone
    await session.commit()
    await session.refresh(user)
    logger.info("Пользователь %s зарегистрирован", tg_id)
    return user


async def get_question_after(session: AsyncSession, order: Optional[int]) -> Optional[Question]:
    """Первый вопрос с номером строго больше order (или самый первый, если order=None)"""
    query = select(Question).options(selectinload(Question.answers))
    if order is not None:
        query = query.where(Question.order > order)
    result = await session.execute(query.order_by(Question.order).limit(1))
    return result.scalar_one_or_none()


async def start_session(session: AsyncSession, tg_id: str) -> tuple[QuizSession, Question]:
    """
    Начинает новую попытку теста

    Raises:
        UserNotRegistered: пользователь не найден
        EmptyCatalog: нет ни одного вопроса
    """
    user = await get_user(session, tg_id)
    if user is None:
        raise UserNotRegistered(tg_id)

    first_question = await get_question_after(session, None)
    if first_question is None:
        raise EmptyCatalog()

    quiz_session = QuizSession(user_id=user.id)
    session.add(quiz_session)
    await session.commit()
    await session.refresh(quiz_session)

    logger.info("Сессия %s начата пользователем %s", quiz_session.id, tg_id)
    return quiz_session, first_question


async def advance_session(
    session: AsyncSession,
    session_id: int,
    current_order: int,
    answer_id: int,
    scores: Dict[str, int]
) -> Optional[Step]:
    """
    Записывает ответ и находит следующий вопрос

    Returns:
        Step или None, если ответ не существует или относится не к текущему вопросу
    """
    result = await session.execute(
        select(Answer).options(selectinload(Answer.question)).where(Answer.id == answer_id)
    )
    answer = result.scalar_one_or_none()
    if answer is None or answer.question.order != current_order:
        logger.debug("Ответ %s отклонён для сессии %s", answer_id, session_id)
        return None

    session.add(RecordedAnswer(session_id=session_id, question_id=answer.question_id, answer_id=answer.id))
    await session.commit()

    new_scores = add_weights(scores, answer.weights)
    next_question = await get_question_after(session, current_order)
    return Step(scores=new_scores, next_question=next_question)


async def finalize_session(session: AsyncSession, session_id: int, scores: Dict[str, int]) -> QuizResult:
    """Фиксирует итог сессии (один раз) и возвращает профессию для показа"""
    code = pick_best_profession(scores)

    # Итог записывается только пока сессия не завершена
    await session.execute(
        update(QuizSession)
        .where(QuizSession.id == session_id, QuizSession.finished_at.is_(None))
        .values(finished_at=func.now(), result_profession=code)
    )
    await session.commit()

    stored = await session.execute(
        select(QuizSession.result_profession).where(QuizSession.id == session_id)
    )
    code = stored.scalar_one_or_none()
    logger.info("Сессия %s завершена, результат: %s", session_id, code)

    if code is None:
        return QuizResult(code=None)

    profession = await get_profession(session, code)
    if profession is None:
        return QuizResult(code=code)
    return QuizResult(code=code, title=profession.title, description=profession.description)


async def get_profession(session: AsyncSession, code: str) -> Optional[Profession]:
    result = await session.execute(select(Profession).where(Profession.code == code))
    return result.scalar_one_or_none()


async def get_history(session: AsyncSession, tg_id: str, limit: int = HISTORY_LIMIT) -> Optional[List[HistoryEntry]]:
    """
    Последние сессии пользователя, новые сверху

    Returns:
        list или None, если пользователь не зарегистрирован
    """
    user = await get_user(session, tg_id)
    if user is None:
        return None

    result = await session.execute(
        select(QuizSession, Profession.title)
        .outerjoin(Profession, Profession.code == QuizSession.result_profession)
        .where(QuizSession.user_id == user.id)
        .order_by(QuizSession.started_at.desc(), QuizSession.id.desc())
        .limit(limit)
    )

    entries = []
    for quiz_session, title in result.all():
        entries.append(HistoryEntry(
            started_at=quiz_session.started_at,
            title=title or quiz_session.result_profession or texts.UNDETERMINED,
            finished=quiz_session.finished_at is not None
        ))
    return entries


async def get_stats(session: AsyncSession) -> dict:
    """Агрегаты для эндпоинта /stats"""
    users = await session.scalar(select(func.count()).select_from(User))
    sessions = await session.scalar(select(func.count()).select_from(QuizSession))
    finished = await session.scalar(
        select(func.count()).select_from(QuizSession).where(QuizSession.finished_at.is_not(None))
    )
    completion_rate = (200 * finished + sessions) // (2 * sessions) if sessions else 0
    return {
        "users": users,
        "sessions": sessions,
        "finishedSessions": finished,
        "completionRate": completion_rate,
    }
