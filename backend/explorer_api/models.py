"""Database models for the API Explorer service."""
from __future__ import annotations

from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


class KeyValueRecord(SQLModel, table=True):
    """Single persisted value addressed by a string key."""

    __tablename__ = "explorer_kv"

    key: str = Field(primary_key=True, index=True)
    value: str
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), nullable=False
    )
