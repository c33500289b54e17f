"""
HTTP-приложение со статистикой бота
"""

import uvicorn
from fastapi import FastAPI

from config import STATS_HOST, STATS_PORT, LOG_LEVEL
from routers import stats


def create_app() -> FastAPI:
    app = FastAPI(title="ProfQuiz Stats")
    app.include_router(stats.router)
    return app


app = create_app()


def create_server() -> uvicorn.Server:
    """Сервер uvicorn для запуска в одном event loop с ботом"""
    config = uvicorn.Config(app, host=STATS_HOST, port=STATS_PORT, log_level=LOG_LEVEL.lower())
    return uvicorn.Server(config)
