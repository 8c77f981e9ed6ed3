"""FastAPI dependencies for the API Explorer service."""
from fastapi import Depends, Request

from .services.session import ExplorerSession
from .state import AppState


def get_app_state(request: Request) -> AppState:
    """Resolve the shared application state from the FastAPI request."""
    return request.app.state.app_state


def get_session(app_state: AppState = Depends(get_app_state)) -> ExplorerSession:
    """Return the explorer session dependency."""
    return app_state.session
