"""HTTP adapter exposing the API Explorer engine."""

from .app import create_app

__all__ = ["create_app"]
