"""Display-ready aggregates derived from the catalog, bookmarks and results."""
from __future__ import annotations

from typing import Collection, Sequence

from .schemas import (
    ADD_BOOKMARK_LABEL,
    ALL_CATEGORIES,
    REMOVE_BOOKMARK_LABEL,
    CategoryCount,
    Entry,
    EntryView,
    ExplorerStats,
)


def category_counts(catalog: Sequence[Entry]) -> dict[str, int]:
    """Return category counts with the synthetic 'All' bucket first.

    Remaining categories follow in lexicographic order. A real category that
    happens to be named 'All' is folded into the synthetic bucket.
    """

    counts: dict[str, int] = {}
    for entry in catalog:
        counts[entry.category] = counts.get(entry.category, 0) + 1
    counts.pop(ALL_CATEGORIES, None)

    summary = {ALL_CATEGORIES: len(catalog)}
    for name in sorted(counts):
        summary[name] = counts[name]
    return summary


def category_summary(catalog: Sequence[Entry], active_category: str) -> list[CategoryCount]:
    """Return category pills, marking the active one."""

    return [
        CategoryCount(name=name, count=count, active=name == active_category)
        for name, count in category_counts(catalog).items()
    ]


def explorer_stats(
    catalog: Sequence[Entry], bookmarks: Collection[str], visible: Sequence[Entry]
) -> ExplorerStats:
    return ExplorerStats(total=len(catalog), bookmarks=len(bookmarks), visible=len(visible))


def bookmark_label(bookmarked: bool) -> str:
    return REMOVE_BOOKMARK_LABEL if bookmarked else ADD_BOOKMARK_LABEL


def entry_view(entry: Entry, bookmarks: Collection[str]) -> EntryView:
    """Pair an entry with its bookmark render flag."""

    bookmarked = entry.id in bookmarks
    return EntryView(entry=entry, bookmarked=bookmarked, bookmark_label=bookmark_label(bookmarked))


def entry_views(visible: Sequence[Entry], bookmarks: Collection[str]) -> list[EntryView]:
    return [entry_view(entry, bookmarks) for entry in visible]
