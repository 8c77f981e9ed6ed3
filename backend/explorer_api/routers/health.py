"""Health and load status endpoints."""
from fastapi import APIRouter, Depends

from ..db import ping
from ..dependencies import get_app_state, get_session
from ..schemas import HealthStatus, LoadStatusModel, StorageHealthStatus
from ..services.session import ExplorerSession
from ..state import AppState

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthStatus)
def get_health(app_state: AppState = Depends(get_app_state)) -> HealthStatus:
    """Return service heartbeat information."""

    storage_status = StorageHealthStatus(status="ok")
    if not ping(app_state.engine):
        storage_status = StorageHealthStatus(status="error", detail="storage_unreachable")
    return HealthStatus(catalog=app_state.session.controller.status, storage=storage_status)


@router.get("/status", response_model=LoadStatusModel)
def get_status(session: ExplorerSession = Depends(get_session)) -> LoadStatusModel:
    """Return the catalog load status, including the error message when loading failed."""

    return session.run(
        lambda controller: LoadStatusModel(status=controller.status, error=controller.error)
    )
