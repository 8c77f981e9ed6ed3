"""Error types raised by the explorer engine."""
from __future__ import annotations


class ExplorerError(RuntimeError):
    """Base class for recoverable explorer failures."""


class CatalogLoadError(ExplorerError):
    """Raised when the catalog source cannot be fetched or decoded."""


class BookmarkPersistenceError(ExplorerError):
    """Raised when bookmarks cannot be written to or read from storage."""
