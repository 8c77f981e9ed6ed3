"""Console entry point for ``python -m backend.explorer_cli``."""
from __future__ import annotations

from .app import app


def main() -> None:
    app(prog_name="api-explorer-cli")


if __name__ == "__main__":
    main()
