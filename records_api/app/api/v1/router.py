"""
Top‑level router for version 1 of the API.

Aggregates one generated router per resource plus the info router.
Resource routers are built from the controllers passed in, so each
application instance serves its own stores.
"""

from typing import Mapping

from fastapi import APIRouter

from records_api.app.resources import ResourceType
from records_api.app.services.resource_controller import ResourceController

from .endpoints import info
from .endpoints.resources import build_resource_router


def build_router(controllers: Mapping[ResourceType, ResourceController]) -> APIRouter:
    router = APIRouter()
    for resource, controller in controllers.items():
        router.include_router(build_resource_router(controller), prefix=resource.prefix, tags=[resource.tag])
    router.include_router(info.router, prefix="/info", tags=["info"])
    return router
