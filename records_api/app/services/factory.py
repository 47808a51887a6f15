"""
Builds stores and controllers for every registered resource.
"""

import logging
from typing import Dict, Mapping, Optional

from records_api.app.core.config import settings
from records_api.app.core.db import init_db
from records_api.app.resources import RESOURCES, ResourceType
from records_api.app.services.resource_controller import ResourceController
from records_api.app.stores import EntityStore, InMemoryEntityStore, SQLiteEntityStore

logger = logging.getLogger(__name__)


def build_stores(
    backend: Optional[str] = None,
    database_url: Optional[str] = None,
) -> Dict[ResourceType, EntityStore]:
    """Create one store per resource for the configured backend.

    ``backend`` defaults to ``settings.storage_backend``.  For the
    SQLite backend the tables are created if needed.
    """
    backend = (backend or settings.storage_backend).lower()
    if backend == "memory":
        return {resource: InMemoryEntityStore(resource) for resource in RESOURCES}
    if backend == "sqlite":
        init_db(database_url)
        return {resource: SQLiteEntityStore(resource, database_url) for resource in RESOURCES}
    raise ValueError(f"Unknown storage backend: {backend!r}")


def build_controllers(stores: Mapping[ResourceType, EntityStore]) -> Dict[ResourceType, ResourceController]:
    controllers = {}
    for resource in RESOURCES:
        if resource not in stores:
            raise ValueError(f"No store configured for {resource.name}")
        controllers[resource] = ResourceController(resource, stores[resource])
        logger.debug("Registered %r", stores[resource])
    return controllers
