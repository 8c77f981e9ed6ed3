"""Tests for the category, search and bookmark filter stages."""
from __future__ import annotations

from backend.explorer_core.filters import (
    apply_filters,
    filter_by_bookmarks,
    filter_by_category,
    filter_by_query,
)
from backend.explorer_core.schemas import Entry, FilterCriteria


def _ids(entries: list[Entry]) -> list[str]:
    return [entry.id for entry in entries]


def test_default_criteria_returns_catalog_in_order(sample_entries: list[Entry]) -> None:
    """The default criteria should keep every entry in insertion order."""

    assert apply_filters(sample_entries, set(), FilterCriteria()) == sample_entries


def test_cat_query_matches_name_case_insensitively(sample_entries: list[Entry]) -> None:
    """Searching 'cat' should match 'Cats' but not the weather entry."""

    catalog = sample_entries[:2]
    criteria = FilterCriteria(active_category="All", search_query="cat", bookmarks_only=False)

    assert _ids(apply_filters(catalog, set(), criteria)) == ["b"]


def test_query_matches_description_only(sample_entries: list[Entry]) -> None:
    """A substring present only in the description still matches."""

    result = apply_filters(sample_entries, set(), FilterCriteria(search_query="PROGRAMMING"))

    assert _ids(result) == ["c"]


def test_query_matches_category_field(sample_entries: list[Entry]) -> None:
    """The category name participates in the text search."""

    result = filter_by_query(sample_entries, "geocod")

    assert _ids(result) == ["d"]


def test_query_matches_any_field(sample_entries: list[Entry]) -> None:
    """'weather' matches by name on 'a' and by description on 'd'."""

    assert _ids(filter_by_query(sample_entries, "weather")) == ["a", "d"]


def test_blank_query_is_ignored(sample_entries: list[Entry]) -> None:
    """Whitespace-only queries behave like no search at all."""

    assert filter_by_query(sample_entries, "   \t ") == sample_entries
    assert filter_by_query(sample_entries, "") == sample_entries


def test_query_whitespace_is_trimmed(sample_entries: list[Entry]) -> None:
    assert _ids(filter_by_query(sample_entries, "  jokes  ")) == ["c"]


def test_category_stage_is_exact_and_case_sensitive(sample_entries: list[Entry]) -> None:
    """Category filtering only keeps exact matches."""

    assert _ids(filter_by_category(sample_entries, "Fun")) == ["b", "c"]
    assert filter_by_category(sample_entries, "fun") == []
    assert filter_by_category(sample_entries, "All") == sample_entries


def test_category_result_is_subset_of_category(sample_entries: list[Entry]) -> None:
    for category in {entry.category for entry in sample_entries}:
        result = apply_filters(sample_entries, set(), FilterCriteria(active_category=category))
        assert result
        assert all(entry.category == category for entry in result)


def test_bookmark_stage_keeps_bookmarked_ids(sample_entries: list[Entry]) -> None:
    result = filter_by_bookmarks(sample_entries, {"c", "a", "missing"}, True)

    assert _ids(result) == ["a", "c"]
    assert filter_by_bookmarks(sample_entries, {"c"}, False) == sample_entries


def test_all_stages_combine(sample_entries: list[Entry]) -> None:
    """Category, query and bookmarks narrow the result together."""

    criteria = FilterCriteria(active_category="Fun", search_query="facts", bookmarks_only=True)

    assert _ids(apply_filters(sample_entries, {"b", "c"}, criteria)) == ["b"]
    assert apply_filters(sample_entries, {"c"}, criteria) == []


def test_apply_is_deterministic(sample_entries: list[Entry]) -> None:
    criteria = FilterCriteria(search_query="e", bookmarks_only=True)
    bookmarks = frozenset({"a", "c", "d"})

    first = apply_filters(sample_entries, bookmarks, criteria)
    second = apply_filters(sample_entries, bookmarks, criteria)

    assert first == second
    assert _ids(first) == ["a", "c", "d"]


def test_empty_catalog_yields_empty_result() -> None:
    assert apply_filters([], {"a"}, FilterCriteria(search_query="x", bookmarks_only=True)) == []
