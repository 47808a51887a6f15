"""
Main entrypoint for the Records API.

This module assembles the FastAPI application: it sets up logging,
builds a store and controller for every registered resource,
registers the error handlers and mounts the versioned router under
``/api``.  Run it with uvicorn, e.g.::

    uvicorn records_api.app.main:get_app --factory --reload

The application is not created at import time because that would
open the configured database; tests and embedding applications call
``create_app`` with their own stores.
"""

from typing import Mapping, Optional

from fastapi import FastAPI

from .api.v1.router import build_router
from .core.config import settings
from .core.error_handlers import register_error_handlers
from .core.logging_config import setup_logging
from .resources import ResourceType
from .services.factory import build_controllers, build_stores
from .stores.base import EntityStore


def create_app(stores: Optional[Mapping[ResourceType, EntityStore]] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    stores : Optional[Mapping[ResourceType, EntityStore]]
        One store per registered resource.  When omitted, stores for
        ``settings.storage_backend`` are created (and, for SQLite, the
        tables initialised).

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that store set‑up can
    # log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    if stores is None:
        stores = build_stores()
    controllers = build_controllers(stores)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.controllers = controllers
    register_error_handlers(app)

    app.include_router(build_router(controllers), prefix="/api")

    @app.get("/health", tags=["health"])
    def health() -> dict:
        return {"status": "ok"}

    return app


def get_app() -> FastAPI:
    """Application factory for ``uvicorn --factory``."""
    return create_app()
