"""Database helpers for the API Explorer service."""
from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from . import models  # noqa: F401  # registers table metadata
from .settings import ExplorerSettings
from .utils.paths import ensure_sqlite_path


def create_engine_from_settings(settings: ExplorerSettings) -> Engine:
    """Create a SQLModel engine using explorer settings."""

    ensure_sqlite_path(settings.database_url)
    connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}
    return create_engine(settings.database_url, echo=settings.database_echo, connect_args=connect_args)


def init_database(engine: Engine) -> None:
    """Create tables required by the explorer."""

    SQLModel.metadata.create_all(engine)


def ping(engine: Engine) -> bool:
    """Check whether the database answers a trivial query."""

    try:
        with Session(engine) as session:
            session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        return False
    return True
