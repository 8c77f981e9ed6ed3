"""CLI entry point for launching the API Explorer with Uvicorn."""
import logging

import uvicorn

from .app import create_app
from .settings import ExplorerSettings


def main() -> None:
    """Start a development server for the API Explorer."""

    settings = ExplorerSettings()
    logging.basicConfig(level=settings.log_level.upper())
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
