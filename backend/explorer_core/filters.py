"""Filter pipeline deriving the visible entries from the catalog."""
from __future__ import annotations

from typing import Collection, Iterable, Sequence

from .schemas import ALL_CATEGORIES, Entry, FilterCriteria


def _norm(s: str | None) -> str:
    return (s or "").strip().lower()


def filter_by_category(entries: Iterable[Entry], category: str) -> list[Entry]:
    """Keep entries whose category equals ``category`` exactly."""

    if category == ALL_CATEGORIES:
        return list(entries)
    return [entry for entry in entries if entry.category == category]


def filter_by_query(entries: Iterable[Entry], query: str) -> list[Entry]:
    """Keep entries whose name, description or category contains ``query``."""

    needle = _norm(query)
    if not needle:
        return list(entries)

    def _matches(entry: Entry) -> bool:
        return (
            needle in entry.name.lower()
            or needle in entry.description.lower()
            or needle in entry.category.lower()
        )

    return [entry for entry in entries if _matches(entry)]


def filter_by_bookmarks(
    entries: Iterable[Entry], bookmarks: Collection[str], bookmarks_only: bool
) -> list[Entry]:
    """Keep bookmarked entries when ``bookmarks_only`` is set."""

    if not bookmarks_only:
        return list(entries)
    return [entry for entry in entries if entry.id in bookmarks]


def apply_filters(
    catalog: Sequence[Entry],
    bookmarks: Collection[str],
    criteria: FilterCriteria,
) -> list[Entry]:
    """Return the entries matching ``criteria`` in catalog order.

    Stages run as category, then search text, then bookmarks. An empty
    result is the regular "no results" state.
    """

    items = filter_by_category(catalog, criteria.active_category)
    items = filter_by_query(items, criteria.search_query)
    return filter_by_bookmarks(items, bookmarks, criteria.bookmarks_only)
