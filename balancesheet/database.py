from fastapi import Request
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, Session, create_engine

from balancesheet.core.config import DATABASE_URL, SQL_ECHO


def build_engine(database_url: str = DATABASE_URL, echo: bool = SQL_ECHO) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
    return create_engine(database_url, echo=echo, connect_args=connect_args, pool_pre_ping=True)


def create_db_and_tables(engine: Engine) -> None:
    import balancesheet.models  # noqa: F401  registra las tablas en la metadata
    SQLModel.metadata.create_all(engine)


def get_session(request: Request):
    # El engine se crea en el arranque y vive en app.state
    with Session(request.app.state.engine) as session:
        yield session
