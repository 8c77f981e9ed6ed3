"""HTTP client helpers for the explorer CLI."""
from __future__ import annotations

import httpx

JSON_HEADERS = {"Accept": "application/json"}


def create_client(
    base_url: str, *, timeout: float = 10.0, transport: httpx.BaseTransport | None = None
) -> httpx.Client:
    """Return an HTTPX client bound to the explorer service at ``base_url``."""

    return httpx.Client(
        base_url=base_url.rstrip("/"),
        timeout=timeout,
        transport=transport,
        headers=JSON_HEADERS,
    )
