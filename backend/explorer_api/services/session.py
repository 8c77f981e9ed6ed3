"""Explorer session shared by the HTTP routers."""
from __future__ import annotations

import logging
from threading import RLock
from typing import Callable, TypeVar

from backend.explorer_core import BookmarkStore, ExplorerController, KeyValueStorage, load_catalog
from backend.explorer_core.schemas import FilterCriteria

from ..settings import ExplorerSettings
from .debounce import Debouncer

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ExplorerSession:
    """Serializes access to one ``ExplorerController`` across request threads."""

    def __init__(self, settings: ExplorerSettings, storage: KeyValueStorage) -> None:
        self._settings = settings
        self._lock = RLock()
        self.controller = ExplorerController(
            BookmarkStore(storage, key=settings.bookmark_storage_key)
        )
        self.search_input = Debouncer(
            self._apply_search_input, delay=settings.search_debounce_ms / 1000
        )

    def start(self) -> None:
        """Restore bookmarks, then load the catalog."""

        with self._lock:
            self.controller.restore_bookmarks()
            self.controller.load(
                lambda: load_catalog(
                    self._settings.catalog_source, timeout=self._settings.catalog_timeout
                )
            )

    def run(self, operation: Callable[[ExplorerController], T]) -> T:
        """Execute ``operation`` against the controller while holding the lock."""

        with self._lock:
            return operation(self.controller)

    def _apply_search_input(self, text: str) -> None:
        logger.debug("Applying debounced search input %r", text)
        self.run(lambda controller: controller.set_search_query(text))

    def submit_search_input(self, text: str) -> None:
        """Queue a keystroke-level query update."""

        self.search_input.schedule(text)

    def criteria(self) -> FilterCriteria:
        return self.run(lambda controller: controller.criteria)

    def close(self) -> None:
        self.search_input.cancel()
