"""Command line interface for the API Explorer service."""
from __future__ import annotations

import json
from typing import Any, Optional
from urllib.parse import quote

import httpx
import typer

from .client import create_client


DEFAULT_API_BASE = "http://localhost:8000"

app = typer.Typer(help="Browse the API catalog served by the explorer backend.")
entries_app = typer.Typer(help="List catalog entries and categories.")
app.add_typer(entries_app, name="entries")
bookmarks_app = typer.Typer(help="Inspect and toggle bookmarks.")
app.add_typer(bookmarks_app, name="bookmarks")
search_app = typer.Typer(help="Manage the search text.")
app.add_typer(search_app, name="search")


def _api_base_option() -> typer.Option:
    return typer.Option(
        DEFAULT_API_BASE,
        "--api-base",
        help="Base URL for the API Explorer service.",
        show_default=True,
        envvar="API_EXPLORER_API_BASE",
    )


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _request(api_base: str, method: str, path: str, **kwargs: Any) -> Any:
    """Perform a request against the service and return the decoded body."""

    try:
        with create_client(api_base) as client:
            response = client.request(method, path, **kwargs)
            response.raise_for_status()
            return response.json()
    except httpx.HTTPStatusError as exc:
        typer.echo(f"Request failed with HTTP {exc.response.status_code}", err=True)
        raise typer.Exit(code=1) from exc
    except httpx.HTTPError as exc:
        typer.echo(f"Failed to contact explorer service: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def health(api_base: str = _api_base_option()) -> None:
    """Call the /health endpoint and pretty-print the response."""

    _echo_json(_request(api_base, "GET", "/health"))


@app.command()
def status(api_base: str = _api_base_option()) -> None:
    """Show whether the catalog loaded, and why not when it failed."""

    payload = _request(api_base, "GET", "/status")
    _echo_json(payload)
    if payload.get("status") == "error":
        raise typer.Exit(code=1)


@app.command()
def stats(api_base: str = _api_base_option()) -> None:
    """Display total, bookmark and visible counts."""

    _echo_json(_request(api_base, "GET", "/stats"))


@entries_app.command("list")
def list_entries(
    category: Optional[str] = typer.Option(
        None, "--category", "-c", help="Exact category name, or 'All'."
    ),
    query: Optional[str] = typer.Option(
        None, "--query", "-q", help="Case-insensitive search text."
    ),
    bookmarks_only: Optional[bool] = typer.Option(
        None,
        "--bookmarks-only/--all",
        help="Restrict results to bookmarked entries.",
        show_default=False,
    ),
    api_base: str = _api_base_option(),
) -> None:
    """Display the visible entries, updating the criteria first when options are given."""

    update: dict[str, object] = {}
    if category is not None:
        update["category"] = category
    if query is not None:
        update["query"] = query
    if bookmarks_only is not None:
        update["bookmarks_only"] = bookmarks_only

    if update:
        _request(api_base, "PUT", "/criteria", json=update)
    _echo_json(_request(api_base, "GET", "/entries"))


@entries_app.command("categories")
def list_categories(api_base: str = _api_base_option()) -> None:
    """Display category counts with 'All' first."""

    _echo_json(_request(api_base, "GET", "/categories"))


@bookmarks_app.command("list")
def list_bookmarks(api_base: str = _api_base_option()) -> None:
    """Display bookmarked entry ids."""

    _echo_json(_request(api_base, "GET", "/bookmarks"))


@bookmarks_app.command("toggle")
def toggle_bookmark(
    entry_id: str = typer.Argument(..., help="Identifier of the entry to bookmark or unbookmark."),
    api_base: str = _api_base_option(),
) -> None:
    """Add the entry to bookmarks, or remove it when already bookmarked."""

    _echo_json(_request(api_base, "POST", f"/bookmarks/{quote(entry_id, safe='')}/toggle"))


@search_app.command("clear")
def clear_search(api_base: str = _api_base_option()) -> None:
    """Reset the search text."""

    _echo_json(_request(api_base, "DELETE", "/criteria/search"))
