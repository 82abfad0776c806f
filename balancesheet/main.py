import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from balancesheet.api import assets, assistant, auth, expenses, goals, incomes, liabilities, users
from balancesheet.core.config import FRONTEND_URL, describe_environment
from balancesheet.core.errors import register_exception_handlers
from balancesheet.core.logging_config import configure_logging, log_requests
from balancesheet.database import build_engine, create_db_and_tables

logger = logging.getLogger(__name__)


def create_app(engine: Optional[Engine] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "engine", None) is None:
            app.state.engine = build_engine()
        create_db_and_tables(app.state.engine)
        logger.info("Environment loaded: %s", describe_environment())
        yield
        logger.info("Shutting down, closing database pool")
        app.state.engine.dispose()

    app = FastAPI(title="Balance Sheet Tracker API", lifespan=lifespan)
    app.state.engine = engine

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[FRONTEND_URL],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)
    register_exception_handlers(app)

    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(incomes.router)
    app.include_router(expenses.router)
    app.include_router(assets.router)
    app.include_router(liabilities.router)
    app.include_router(goals.router)
    app.include_router(assistant.router)

    @app.get("/")
    def root():
        return {"message": "Balance Sheet Tracker API"}

    return app


configure_logging()
app = create_app()
