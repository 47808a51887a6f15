"""
In‑process store.

Records live in a dict keyed by record key, so iteration follows
insertion order.  Used when ``STORAGE_BACKEND=memory`` and by the
test suite.
"""

import threading
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from records_api.app.resources import KeyKind

from .base import EntityStore


class InMemoryEntityStore(EntityStore):
    def __init__(self, resource, records=()) -> None:
        super().__init__(resource)
        self._records: Dict[Any, BaseModel] = {}
        self._last_id = 0
        self._lock = threading.Lock()
        for record in records:
            self.save(record)

    def list(self) -> List[BaseModel]:
        with self._lock:
            return [record.model_copy() for record in self._records.values()]

    def get(self, key: Any) -> Optional[BaseModel]:
        with self._lock:
            record = self._records.get(self.resource.coerce_key(key))
            return record.model_copy() if record is not None else None

    def create(self, fields: BaseModel) -> BaseModel:
        values = fields.model_dump()
        with self._lock:
            if self.resource.key_kind is KeyKind.GENERATED:
                self._last_id += 1
                key = self._last_id
            else:
                key = values[self.resource.key_field]
            record = self.resource.build(key, values)
            self._records[key] = record
            return record.model_copy()

    def save(self, entity: BaseModel) -> BaseModel:
        key = self.resource.key_of(entity)
        with self._lock:
            self._records[key] = entity.model_copy()
            if self.resource.key_kind is KeyKind.GENERATED and key > self._last_id:
                self._last_id = key
        return entity

    def delete(self, key: Any) -> bool:
        with self._lock:
            return self._records.pop(self.resource.coerce_key(key), None) is not None
