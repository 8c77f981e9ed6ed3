"""Pydantic models shared by the explorer engine and its adapters."""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


ALL_CATEGORIES = "All"

ERROR_TITLE = "Error Loading APIs"
ERROR_DETAIL = "Please check your connection and try again"

ADD_BOOKMARK_LABEL = "Add to bookmarks"
REMOVE_BOOKMARK_LABEL = "Remove from bookmarks"

LoadStatus = Literal["loading", "loaded", "error"]


class Entry(BaseModel):
    """A single catalog entry describing one public API."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    category: str = ""
    description: str = ""
    url: str = Field(default="", description="Documentation link, displayed as-is.")


class FilterCriteria(BaseModel):
    """Current category, search text and bookmarks-only selection."""

    model_config = ConfigDict(frozen=True)

    active_category: str = Field(
        default=ALL_CATEGORIES,
        description="Either the 'All' sentinel or an exact category name.",
    )
    search_query: str = Field(default="", description="Free text matched case-insensitively.")
    bookmarks_only: bool = Field(default=False)


class CategoryCount(BaseModel):
    """One category pill: its name, entry count and whether it is selected."""

    name: str
    count: int = Field(ge=0)
    active: bool = False


class ExplorerStats(BaseModel):
    """Counters shown in the header of the explorer."""

    total: int = Field(ge=0, description="Number of entries in the catalog.")
    bookmarks: int = Field(ge=0, description="Number of bookmarked ids, including stale ones.")
    visible: int = Field(ge=0, description="Number of entries matching the current criteria.")


class EntryView(BaseModel):
    """An entry paired with its bookmark render state."""

    entry: Entry
    bookmarked: bool
    bookmark_label: str


class DegradedState(BaseModel):
    """Message presented instead of the catalog when loading failed."""

    title: str = ERROR_TITLE
    detail: str = ERROR_DETAIL
    reason: str | None = Field(default=None, description="Underlying failure description.")


class ToggleResult(BaseModel):
    """Outcome of flipping a bookmark."""

    entry_id: str
    bookmarked: bool
    bookmarks: list[str] = Field(default_factory=list)
