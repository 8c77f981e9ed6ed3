"""Shared fixtures for the explorer test suite."""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.explorer_core.schemas import Entry  # noqa: E402


SAMPLE_CATALOG = [
    {
        "id": "a",
        "name": "Weather API",
        "category": "Weather",
        "description": "Current forecasts",
        "url": "https://weather.example/docs",
    },
    {
        "id": "b",
        "name": "Cats",
        "category": "Fun",
        "description": "Cat facts",
        "url": "https://cats.example/docs",
    },
    {
        "id": "c",
        "name": "Jokes",
        "category": "Fun",
        "description": "Random programming jokes",
        "url": "https://jokes.example/docs",
    },
    {
        "id": "d",
        "name": "Geo Lookup",
        "category": "Geocoding",
        "description": "Reverse geocoding for weather stations",
        "url": "https://geo.example/docs",
    },
]


@pytest.fixture()
def sample_entries() -> list[Entry]:
    return [Entry(**item) for item in SAMPLE_CATALOG]


@pytest.fixture()
def catalog_file(tmp_path: Path) -> Path:
    """Write the sample catalog to a temporary JSON file."""

    path = tmp_path / "apis.json"
    path.write_text(json.dumps(SAMPLE_CATALOG), encoding="utf-8")
    return path
