"""Bookmark set with best-effort persistence to a key-value storage."""
from __future__ import annotations

import json
import logging
from typing import Iterable, Protocol

from .errors import BookmarkPersistenceError

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "bookmarkedAPIs"


class KeyValueStorage(Protocol):
    """Minimal string storage surviving process restarts."""

    def read(self, key: str) -> str | None:
        ...

    def write(self, key: str, value: str) -> None:
        ...


class MemoryKeyValueStorage:
    """Dictionary-backed storage used for embedded sessions and tests."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> str | None:
        return self._values.get(key)

    def write(self, key: str, value: str) -> None:
        self._values[key] = value


def decode_bookmarks(raw: str | None) -> list[str]:
    """Decode a persisted bookmark list, raising on malformed data."""

    if raw is None or not raw.strip():
        return []
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise BookmarkPersistenceError("Persisted bookmarks are not valid JSON") from exc
    if not isinstance(payload, list):
        raise BookmarkPersistenceError("Persisted bookmarks must be a list of ids")
    return [item for item in payload if isinstance(item, str)]


class BookmarkStore:
    """Ordered set of bookmarked entry ids.

    Membership only changes through ``toggle``. Every toggle is followed by a
    write to storage; a failed write is logged and the in-memory state is kept.
    """

    def __init__(
        self,
        storage: KeyValueStorage | None = None,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        ids: Iterable[str] = (),
    ) -> None:
        self._storage = storage if storage is not None else MemoryKeyValueStorage()
        self._key = key
        self._ids: dict[str, None] = dict.fromkeys(ids)

    @property
    def key(self) -> str:
        return self._key

    @property
    def ids(self) -> list[str]:
        """Bookmarked ids in the order they were added."""

        return list(self._ids)

    def snapshot(self) -> frozenset[str]:
        return frozenset(self._ids)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def restore(self) -> frozenset[str]:
        """Replace the in-memory set with the persisted one.

        Unreadable or corrupted data yields an empty set.
        """

        try:
            raw = self._storage.read(self._key)
            ids = decode_bookmarks(raw)
        except Exception as exc:
            logger.warning("Error loading bookmarks, starting empty: %s", exc)
            ids = []
        self._ids = dict.fromkeys(ids)
        return self.snapshot()

    def persist(self, ids: Iterable[str] | None = None) -> None:
        """Serialize the bookmark ids and write them to storage."""

        values = list(self._ids) if ids is None else list(ids)
        try:
            self._storage.write(self._key, json.dumps(values))
        except BookmarkPersistenceError:
            raise
        except Exception as exc:
            raise BookmarkPersistenceError(f"Failed to save bookmarks: {exc}") from exc

    def toggle(self, entry_id: str) -> tuple[frozenset[str], bool]:
        """Flip membership of ``entry_id`` and persist the result.

        Returns the new set and whether the id is now bookmarked.
        """

        if entry_id in self._ids:
            del self._ids[entry_id]
            bookmarked = False
        else:
            self._ids[entry_id] = None
            bookmarked = True

        try:
            self.persist()
        except BookmarkPersistenceError as exc:
            logger.warning("Error saving bookmarks: %s", exc)

        return self.snapshot(), bookmarked
