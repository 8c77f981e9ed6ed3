"""Database-backed key-value storage used for bookmark persistence."""
from __future__ import annotations

from datetime import datetime, timezone
from threading import Lock

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from backend.explorer_core.errors import BookmarkPersistenceError

from ..models import KeyValueRecord


class SqlKeyValueStorage:
    """Thread-safe string storage over the ``explorer_kv`` table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._lock = Lock()

    def read(self, key: str) -> str | None:
        """Return the stored value for ``key`` or ``None`` when unset."""

        try:
            with Session(self._engine) as session:
                record = session.get(KeyValueRecord, key)
                return record.value if record else None
        except SQLAlchemyError as exc:
            raise BookmarkPersistenceError(f"Failed to read key {key!r}") from exc

    def write(self, key: str, value: str) -> None:
        """Insert or overwrite the value stored under ``key``."""

        try:
            with self._lock, Session(self._engine) as session:
                record = session.get(KeyValueRecord, key)
                if record is None:
                    record = KeyValueRecord(key=key, value=value)
                else:
                    record.value = value
                    record.updated_at = datetime.now(timezone.utc)
                session.add(record)
                session.commit()
        except SQLAlchemyError as exc:
            raise BookmarkPersistenceError(f"Failed to write key {key!r}") from exc
