"""Router exports for the API Explorer service."""
from . import bookmarks, catalog, criteria, health

__all__ = ["bookmarks", "catalog", "criteria", "health"]
