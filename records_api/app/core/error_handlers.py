"""
Centralized error handlers for FastAPI.

Maps domain errors raised by the service layer to HTTP responses.
The not‑found envelope is identical for every resource and for every
operation that can raise it.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .errors import AuthorizationDenied, EntityNotFoundException

logger = logging.getLogger(__name__)


def not_found_envelope(exc: EntityNotFoundException) -> dict:
    """Build the wire body for a missing record."""
    return {"type": "EntityNotFoundException", "message": exc.message}


def register_error_handlers(app: FastAPI) -> None:
    """Register domain error handlers on the FastAPI application."""

    @app.exception_handler(EntityNotFoundException)
    async def handle_entity_not_found(
        _request: Request, exc: EntityNotFoundException
    ) -> JSONResponse:
        logger.warning("%s", exc.message)
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=not_found_envelope(exc))

    @app.exception_handler(AuthorizationDenied)
    async def handle_authorization_denied(
        request: Request, exc: AuthorizationDenied
    ) -> JSONResponse:
        logger.warning(
            "Denied %s %s (required role %s)", request.method, request.url.path, exc.required
        )
        if exc.anonymous:
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"detail": str(exc)},
                headers={"WWW-Authenticate": "Bearer"},
            )
        return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"detail": str(exc)})
