"""
Helpers for loading the API catalog consumed by the explorer.

The catalog is a JSON array of objects with ``id``, ``name``, ``category``,
``description`` and ``url`` fields. It can be read from a local file or
fetched over HTTP(S). Individual records are accepted field by field: a
missing value renders as an empty string instead of rejecting the catalog.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Sequence

import httpx

from .errors import CatalogLoadError
from .schemas import Entry

logger = logging.getLogger(__name__)

ENTRY_FIELDS = ("id", "name", "category", "description", "url")


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return ""
    return str(value)


def parse_entries(payload: Any) -> list[Entry]:
    """Convert a decoded JSON payload into catalog entries.

    Raises ``CatalogLoadError`` when the payload is not list-shaped. Items
    that are not objects are skipped.
    """

    if not isinstance(payload, list):
        raise CatalogLoadError(
            f"Catalog payload must be a list, got {type(payload).__name__}"
        )

    entries: list[Entry] = []
    for position, item in enumerate(payload):
        if not isinstance(item, dict):
            logger.warning("Skipping catalog item %d: expected an object", position)
            continue
        entries.append(Entry(**{name: _as_text(item.get(name)) for name in ENTRY_FIELDS}))
    return entries


def _read_source(source: str, *, timeout: float) -> str:
    if source.startswith(("http://", "https://")):
        try:
            with httpx.Client(timeout=timeout, follow_redirects=True) as client:
                response = client.get(source)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise CatalogLoadError(
                f"Catalog source responded with HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise CatalogLoadError(f"Failed to fetch catalog: {exc}") from exc
        return response.text

    path = Path(source).expanduser()
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogLoadError(f"Failed to read catalog file {path}: {exc}") from exc


def load_catalog(source: str | Path, *, timeout: float = 10.0) -> list[Entry]:
    """Fetch and decode the catalog from a file path or URL."""

    text = _read_source(str(source), timeout=timeout)
    try:
        payload = json.loads(text)
    except ValueError as exc:
        raise CatalogLoadError("Catalog source returned invalid JSON") from exc
    return parse_entries(payload)


@dataclass(slots=True)
class CatalogStore:
    """Read-only holder for the loaded catalog entries."""

    entries: tuple[Entry, ...] = field(default_factory=tuple)

    @classmethod
    def from_entries(cls, entries: Iterable[Entry]) -> "CatalogStore":
        return cls(entries=tuple(entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def all(self) -> Sequence[Entry]:
        """Return every entry in insertion order."""

        return self.entries

    def get(self, entry_id: str) -> Entry | None:
        """Return the entry with the given id, or ``None`` when absent."""

        return next((entry for entry in self.entries if entry.id == entry_id), None)

    def categories(self) -> list[str]:
        """Return the distinct category names, sorted."""

        return sorted({entry.category for entry in self.entries})
