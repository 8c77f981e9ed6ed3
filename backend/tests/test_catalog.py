"""Tests for catalog loading and the catalog store."""
from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

from backend.explorer_core.catalog import CatalogStore, load_catalog, parse_entries
from backend.explorer_core.errors import CatalogLoadError
from backend.explorer_core.schemas import Entry


def test_load_catalog_reads_entries_from_file(catalog_file: Path) -> None:
    entries = load_catalog(catalog_file)

    assert [entry.id for entry in entries] == ["a", "b", "c", "d"]
    assert entries[1] == Entry(
        id="b",
        name="Cats",
        category="Fun",
        description="Cat facts",
        url="https://cats.example/docs",
    )


def test_missing_fields_render_as_empty_strings() -> None:
    """Partially shaped records are accepted field by field."""

    entries = parse_entries([{"id": "x", "name": "Only Name"}, {"id": 7, "description": None}])

    assert entries[0].category == ""
    assert entries[0].url == ""
    assert entries[1].id == "7"
    assert entries[1].description == ""
    assert entries[1].name == ""


def test_non_object_items_are_skipped() -> None:
    entries = parse_entries([{"id": "x"}, "junk", 3, None, {"id": "y"}])

    assert [entry.id for entry in entries] == ["x", "y"]


@pytest.mark.parametrize("payload", [{"apis": []}, "text", 42, None])
def test_non_list_payload_raises_load_error(payload: object) -> None:
    with pytest.raises(CatalogLoadError):
        parse_entries(payload)


def test_invalid_json_raises_load_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("[{not json", encoding="utf-8")

    with pytest.raises(CatalogLoadError):
        load_catalog(path)


def test_missing_file_raises_load_error(tmp_path: Path) -> None:
    with pytest.raises(CatalogLoadError):
        load_catalog(tmp_path / "absent.json")


def test_url_source_is_fetched_over_http(monkeypatch: pytest.MonkeyPatch) -> None:
    """HTTP sources are fetched through HTTPX."""

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/apis.json"
        return httpx.Response(200, text=json.dumps([{"id": "remote", "name": "Remote"}]))

    _patch_transport(monkeypatch, httpx.MockTransport(handler))

    entries = load_catalog("https://catalog.example/apis.json")

    assert [entry.id for entry in entries] == ["remote"]


def test_url_source_http_error_raises_load_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _patch_transport(monkeypatch, httpx.MockTransport(lambda request: httpx.Response(503)))

    with pytest.raises(CatalogLoadError, match="503"):
        load_catalog("https://catalog.example/apis.json")


def test_url_source_transport_error_raises_load_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    _patch_transport(monkeypatch, httpx.MockTransport(handler))

    with pytest.raises(CatalogLoadError):
        load_catalog("http://catalog.example/apis.json")


def test_catalog_store_lookup_and_categories(sample_entries: list[Entry]) -> None:
    store = CatalogStore.from_entries(sample_entries)

    assert len(store) == 4
    assert store.get("c") == sample_entries[2]
    assert store.get("stale") is None
    assert store.categories() == ["Fun", "Geocoding", "Weather"]
    assert list(store) == sample_entries


def _patch_transport(monkeypatch: pytest.MonkeyPatch, transport: httpx.BaseTransport) -> None:
    original_init = httpx.Client.__init__

    def _init(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        kwargs["transport"] = transport
        original_init(self, *args, **kwargs)

    monkeypatch.setattr(httpx.Client, "__init__", _init)
