"""Shared state container for the API Explorer service."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .db import create_engine_from_settings, init_database
from .services.session import ExplorerSession
from .settings import ExplorerSettings
from .stores.kv_store import SqlKeyValueStorage

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AppState:
    """Encapsulates the explorer session and storage shared across routers."""

    settings: ExplorerSettings
    engine: Engine
    storage: SqlKeyValueStorage
    session: ExplorerSession

    def __init__(self, settings: ExplorerSettings) -> None:
        self.settings = settings
        self.engine = create_engine_from_settings(settings)
        try:
            init_database(self.engine)
        except SQLAlchemyError as exc:
            logger.warning("Bookmark storage unavailable, keeping bookmarks in memory: %s", exc)
        self.storage = SqlKeyValueStorage(self.engine)
        self.session = ExplorerSession(settings, self.storage)
        self.session.start()
