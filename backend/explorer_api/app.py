"""Application factory for the API Explorer service."""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routers import bookmarks, catalog, criteria, health
from .settings import ExplorerSettings
from .state import AppState


def create_app(settings: ExplorerSettings | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""

    resolved_settings = settings or ExplorerSettings()
    app_state = AppState(settings=resolved_settings)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        yield
        app_state.session.close()
        app_state.engine.dispose()

    app = FastAPI(title="API Explorer", version="0.1.0", lifespan=lifespan)
    app.state.app_state = app_state
    app.state.settings = app_state.settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router in (
        health.router,
        catalog.router,
        criteria.router,
        bookmarks.router,
    ):
        app.include_router(router)

    return app
