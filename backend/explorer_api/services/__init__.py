"""Service layer helpers for the explorer HTTP adapter."""

from .debounce import Debouncer
from .session import ExplorerSession

__all__ = ["Debouncer", "ExplorerSession"]
