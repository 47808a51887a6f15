"""
Persistence interface for records.

One ``EntityStore`` instance serves exactly one resource type.  The
controller only ever talks to this interface; it never sees SQL or
the in‑memory dict behind it.
"""

import abc
from typing import Any, List, Optional

from pydantic import BaseModel

from records_api.app.resources import ResourceType


class EntityStore(abc.ABC):
    """Abstract store for the records of a single resource type."""

    def __init__(self, resource: ResourceType) -> None:
        self.resource = resource

    @abc.abstractmethod
    def list(self) -> List[BaseModel]:
        """Return every stored record in the store's own iteration order."""

    @abc.abstractmethod
    def get(self, key: Any) -> Optional[BaseModel]:
        """Return the record stored under ``key`` or ``None``."""

    @abc.abstractmethod
    def create(self, fields: BaseModel) -> BaseModel:
        """Persist a new record built from a create model and return it.

        Generated keys are assigned here.  For natural keys the key is
        taken from ``fields``; an existing record with that key is
        overwritten.
        """

    @abc.abstractmethod
    def save(self, entity: BaseModel) -> BaseModel:
        """Overwrite the record stored under the entity's key."""

    @abc.abstractmethod
    def delete(self, key: Any) -> bool:
        """Remove the record under ``key``.  Returns ``False`` if there was none."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.resource.name})"
