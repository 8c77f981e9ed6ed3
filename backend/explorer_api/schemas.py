"""Pydantic models exposed by the API Explorer service."""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from backend.explorer_core.schemas import (
    CategoryCount,
    DegradedState,
    EntryView,
    ExplorerStats,
    FilterCriteria,
    LoadStatus,
)


class StorageHealthStatus(BaseModel):
    """Represents bookmark storage connectivity status."""

    status: Literal["ok", "error"] = Field(default="ok")
    detail: str | None = Field(
        default=None, description="Optional diagnostic message when storage is unavailable."
    )


class HealthStatus(BaseModel):
    """Service health payload."""

    status: Literal["ok"] = Field(default="ok")
    version: str = Field(default="0.1.0", description="Semantic version of the API service.")
    catalog: LoadStatus = Field(description="Catalog load status.")
    storage: StorageHealthStatus = Field(
        default_factory=StorageHealthStatus,
        description="Health information for the bookmark storage.",
    )


class LoadStatusModel(BaseModel):
    """Catalog load status and the degraded-state message when it failed."""

    status: LoadStatus
    error: DegradedState | None = None


class EntryListModel(BaseModel):
    """Visible entries for the current criteria."""

    items: list[EntryView]
    total: int = Field(description="Number of visible entries.")
    empty: bool = Field(description="True when no entry matches the current criteria.")
    criteria: FilterCriteria


class CategoryListModel(BaseModel):
    """Category pills with the synthetic 'All' bucket first."""

    items: list[CategoryCount]


class StatsModel(ExplorerStats):
    """Header counters."""


class CriteriaUpdate(BaseModel):
    """Subset of criteria fields to change; unset fields are kept."""

    category: str | None = Field(default=None)
    query: str | None = Field(default=None)
    bookmarks_only: bool | None = Field(default=None)


class SearchInputRequest(BaseModel):
    """Raw search box content, applied after the debounce delay."""

    text: str = Field(default="", description="Current content of the search box.")


class SearchInputAccepted(BaseModel):
    """Acknowledges a debounced search input."""

    pending: bool = True
    delay_ms: int


class BookmarkListModel(BaseModel):
    """Bookmarked ids in the order they were added."""

    items: list[str]
    total: int
