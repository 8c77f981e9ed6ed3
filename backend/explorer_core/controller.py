"""Explorer controller owning the catalog, bookmarks and filter criteria."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from .bookmarks import BookmarkStore
from .catalog import CatalogStore
from .errors import CatalogLoadError
from .filters import apply_filters
from .projection import category_summary, entry_views, explorer_stats
from .schemas import (
    CategoryCount,
    DegradedState,
    Entry,
    EntryView,
    ExplorerStats,
    FilterCriteria,
    LoadStatus,
    ToggleResult,
)

logger = logging.getLogger(__name__)

CatalogLoader = Callable[[], list[Entry]]
Listener = Callable[["ExplorerController"], None]


@dataclass(slots=True)
class ExplorerState:
    """Mutable state of a single explorer session."""

    catalog: CatalogStore = field(default_factory=CatalogStore)
    bookmarks: BookmarkStore = field(default_factory=BookmarkStore)
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    status: LoadStatus = "loading"
    error: DegradedState | None = None


class ExplorerController:
    """Entry point used by presentation adapters to drive the explorer.

    Every mutation replaces one piece of state and notifies subscribers;
    derivations are recomputed from scratch on each call.
    """

    def __init__(self, bookmarks: BookmarkStore | None = None) -> None:
        self._state = ExplorerState(bookmarks=bookmarks if bookmarks is not None else BookmarkStore())
        self._listeners: list[Listener] = []

    @property
    def state(self) -> ExplorerState:
        return self._state

    @property
    def status(self) -> LoadStatus:
        return self._state.status

    @property
    def error(self) -> DegradedState | None:
        return self._state.error

    @property
    def criteria(self) -> FilterCriteria:
        return self._state.criteria

    @property
    def catalog(self) -> CatalogStore:
        return self._state.catalog

    @property
    def bookmarks(self) -> BookmarkStore:
        return self._state.bookmarks

    # ------------------------------------------------------------------
    # Lifecycle

    def restore_bookmarks(self) -> frozenset[str]:
        """Reload bookmarks from storage, falling back to an empty set."""

        restored = self._state.bookmarks.restore()
        self._notify()
        return restored

    def load(self, loader: CatalogLoader) -> LoadStatus:
        """Run the initial catalog load and settle on ``loaded`` or ``error``."""

        if self._state.status != "loading":
            logger.warning("Catalog already settled as %s, ignoring load", self._state.status)
            return self._state.status

        try:
            entries = loader()
        except CatalogLoadError as exc:
            logger.error("Error loading APIs: %s", exc)
            self._state.catalog = CatalogStore()
            self._state.error = DegradedState(reason=str(exc))
            self._state.status = "error"
        else:
            self._state.catalog = CatalogStore.from_entries(entries)
            self._state.status = "loaded"
            logger.info("Loaded %d catalog entries", len(self._state.catalog))

        self._notify()
        return self._state.status

    # ------------------------------------------------------------------
    # Subscriptions

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener and return a callable removing it."""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # ------------------------------------------------------------------
    # Criteria

    def _update_criteria(self, **changes: object) -> FilterCriteria:
        self._state.criteria = self._state.criteria.model_copy(update=changes)
        self._notify()
        return self._state.criteria

    def set_category(self, name: str) -> FilterCriteria:
        return self._update_criteria(active_category=name)

    def set_search_query(self, text: str) -> FilterCriteria:
        return self._update_criteria(search_query=text)

    def clear_search(self) -> FilterCriteria:
        return self._update_criteria(search_query="")

    def set_bookmarks_only(self, flag: bool) -> FilterCriteria:
        return self._update_criteria(bookmarks_only=bool(flag))

    def toggle_bookmark(self, entry_id: str) -> ToggleResult:
        """Flip the bookmark for ``entry_id``; unknown ids are accepted."""

        _, bookmarked = self._state.bookmarks.toggle(entry_id)
        self._notify()
        return ToggleResult(
            entry_id=entry_id,
            bookmarked=bookmarked,
            bookmarks=self._state.bookmarks.ids,
        )

    # ------------------------------------------------------------------
    # Derivations

    def get_visible_entries(self) -> list[Entry]:
        return apply_filters(
            self._state.catalog.all(),
            self._state.bookmarks.snapshot(),
            self._state.criteria,
        )

    def get_entry_views(self) -> list[EntryView]:
        return entry_views(self.get_visible_entries(), self._state.bookmarks.snapshot())

    def get_category_summary(self) -> list[CategoryCount]:
        return category_summary(self._state.catalog.all(), self._state.criteria.active_category)

    def get_stats(self) -> ExplorerStats:
        return explorer_stats(
            self._state.catalog.all(),
            self._state.bookmarks.snapshot(),
            self.get_visible_entries(),
        )
