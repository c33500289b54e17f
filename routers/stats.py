import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from db.database import get_session
from services.quiz import get_stats

logger = logging.getLogger(__name__)

router = APIRouter(tags=["stats"])


class StatsResponse(BaseModel):
    users: int
    sessions: int
    finishedSessions: int
    completionRate: int = Field(ge=0, le=100)


class HealthResponse(BaseModel):
    status: str
    timestamp: str


@router.get("/stats", response_model=StatsResponse)
async def read_stats(session: AsyncSession = Depends(get_session)):
    """Количество пользователей, сессий и процент завершённых"""
    try:
        return await get_stats(session)
    except SQLAlchemyError as e:
        logger.error(f"Ошибка получения статистики: {e}")
        raise HTTPException(status_code=500, detail="stats unavailable")


@router.get("/health", response_model=HealthResponse)
async def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
