"""
Generic CRUD controller.

One ``ResourceController`` is created per resource type and wraps
that type's ``EntityStore``.  Every operation is gated by
``requires_role`` so a denied caller never reaches the store.
``get``, ``update`` and ``delete`` look the record up first and raise
``EntityNotFoundException`` without writing anything when it is
missing.

The controller returns plain JSON‑ready values (dicts and lists), so
the HTTP layer only has to hand them back.
"""

import logging
from typing import Any, Dict, List

from pydantic import BaseModel

from records_api.app.core.authorization import Caller, Role, requires_role
from records_api.app.core.errors import EntityNotFoundException
from records_api.app.resources import ResourceType
from records_api.app.stores.base import EntityStore

logger = logging.getLogger(__name__)


class ResourceController:
    """CRUD operations for one resource type."""

    def __init__(self, resource: ResourceType, store: EntityStore) -> None:
        if store.resource is not resource:
            raise ValueError(f"{store!r} does not store {resource.name} records")
        self.resource = resource
        self.store = store

    def _serialize(self, entity: BaseModel) -> Dict[str, Any]:
        return entity.model_dump()

    def _require(self, key: Any) -> BaseModel:
        entity = self.store.get(key)
        if entity is None:
            raise EntityNotFoundException(self.resource.name, self.resource.render_key(key))
        return entity

    @requires_role(Role.READ)
    def list(self, caller: Caller) -> List[Dict[str, Any]]:
        return [self._serialize(entity) for entity in self.store.list()]

    @requires_role(Role.READ)
    def get(self, caller: Caller, key: Any) -> Dict[str, Any]:
        return self._serialize(self._require(key))

    @requires_role(Role.WRITE)
    def create(self, caller: Caller, fields: BaseModel) -> Dict[str, Any]:
        """Persist a new record.

        There is no existence check: for natural keys an existing record
        with the same key is overwritten by the store.
        """
        saved = self.store.create(fields)
        logger.info(
            "Created %s %s (by %s)",
            self.resource.name,
            self.resource.render_key(self.resource.key_of(saved)),
            caller.subject,
        )
        return self._serialize(saved)

    @requires_role(Role.WRITE)
    def update(self, caller: Caller, key: Any, incoming: BaseModel) -> Dict[str, Any]:
        """Replace every non‑key field of the record under ``key``.

        The key is always the one passed in; a key carried by
        ``incoming`` has no effect.
        """
        existing = self._require(key)
        values = existing.model_dump()
        incoming_values = incoming.model_dump()
        for name in self.resource.fields:
            values[name] = incoming_values[name]
        updated = self.resource.build(self.resource.key_of(existing), values)
        self.store.save(updated)
        logger.info("Updated %s %s (by %s)", self.resource.name, self.resource.render_key(key), caller.subject)
        return self._serialize(updated)

    @requires_role(Role.WRITE)
    def delete(self, caller: Caller, key: Any) -> Dict[str, str]:
        self._require(key)
        self.store.delete(key)
        message = f"{self.resource.name} with id {self.resource.render_key(key)} deleted"
        logger.info("%s (by %s)", message, caller.subject)
        return {"message": message}
