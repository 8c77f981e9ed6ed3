"""Catalog, bookmark and filter engine behind the API explorer."""

from .bookmarks import BookmarkStore, KeyValueStorage, MemoryKeyValueStorage
from .catalog import CatalogStore, load_catalog, parse_entries
from .controller import ExplorerController, ExplorerState
from .errors import BookmarkPersistenceError, CatalogLoadError, ExplorerError
from .filters import apply_filters
from .schemas import ALL_CATEGORIES, Entry, FilterCriteria

__all__ = [
    "ALL_CATEGORIES",
    "BookmarkPersistenceError",
    "BookmarkStore",
    "CatalogLoadError",
    "CatalogStore",
    "Entry",
    "ExplorerController",
    "ExplorerError",
    "ExplorerState",
    "FilterCriteria",
    "KeyValueStorage",
    "MemoryKeyValueStorage",
    "apply_filters",
    "load_catalog",
    "parse_entries",
]
