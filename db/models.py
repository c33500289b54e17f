"""
SQLAlchemy модели для базы данных
"""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON, func
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class User(Base):
    """Зарегистрированный пользователь"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    tg_id = Column(String, unique=True, nullable=False, index=True)  # Telegram user ID
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    sessions = relationship("QuizSession", back_populates="user")


class Profession(Base):
    """Профессия из справочника (заполняется через seed.py)"""
    __tablename__ = "professions"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String, unique=True, nullable=False)  # DataAnalyst, BackendDev, ...
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")


class Question(Base):
    """Вопрос теста"""
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, index=True)
    order = Column(Integer, unique=True, nullable=False)  # 1, 2, 3, ...
    text = Column(Text, nullable=False)

    answers = relationship(
        "Answer",
        back_populates="question",
        order_by="Answer.id",
        cascade="all, delete-orphan"
    )


class Answer(Base):
    """Вариант ответа на вопрос"""
    __tablename__ = "answers"

    id = Column(Integer, primary_key=True, index=True)
    question_id = Column(Integer, ForeignKey("questions.id"), nullable=False)
    text = Column(String, nullable=False)
    weights = Column(JSON, nullable=False, default=dict)  # {"DataAnalyst": 2, ...}

    question = relationship("Question", back_populates="answers")


class QuizSession(Base):
    """Одна попытка прохождения теста"""
    __tablename__ = "quiz_sessions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    started_at = Column(DateTime, default=func.now())
    finished_at = Column(DateTime, nullable=True)
    result_profession = Column(String, nullable=True)  # код профессии

    user = relationship("User", back_populates="sessions")
    answers = relationship("RecordedAnswer", back_populates="session", cascade="all, delete-orphan")


class RecordedAnswer(Base):
    """Выбранный ответ в рамках сессии"""
    __tablename__ = "recorded_answers"

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(Integer, ForeignKey("quiz_sessions.id"), nullable=False)
    question_id = Column(Integer, ForeignKey("questions.id"), nullable=False)
    answer_id = Column(Integer, ForeignKey("answers.id"), nullable=False)
    created_at = Column(DateTime, default=func.now())

    session = relationship("QuizSession", back_populates="answers")
