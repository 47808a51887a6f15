"""
SQLite backed store.

Every call opens its own connection through ``core.db`` and closes it
before returning, as the rest of the service does.  SQL is generated
from the resource's table and field names, which come from the
registry and never from request data; values are always bound as
parameters.
"""

import logging
import sqlite3
from typing import Any, List, Optional

from pydantic import BaseModel

from records_api.app.core.db import get_connection
from records_api.app.resources import KeyKind, ResourceType

from .base import EntityStore

logger = logging.getLogger(__name__)


class SQLiteEntityStore(EntityStore):
    def __init__(self, resource: ResourceType, database_url: Optional[str] = None) -> None:
        super().__init__(resource)
        self.database_url = database_url

    def _row_to_entity(self, row: sqlite3.Row) -> BaseModel:
        return self.resource.read_schema(**dict(row))

    def _upsert_sql(self) -> str:
        resource = self.resource
        columns = (resource.key_field,) + resource.fields
        placeholders = ", ".join("?" for _ in columns)
        assignments = ", ".join(f"{name} = excluded.{name}" for name in resource.fields)
        return (
            f"INSERT INTO {resource.table} ({', '.join(columns)}) VALUES ({placeholders}) "
            f"ON CONFLICT({resource.key_field}) DO UPDATE SET {assignments}"
        )

    def list(self) -> List[BaseModel]:
        conn = get_connection(self.database_url)
        try:
            rows = conn.execute(f"SELECT * FROM {self.resource.table} ORDER BY rowid").fetchall()
            return [self._row_to_entity(row) for row in rows]
        finally:
            conn.close()

    def get(self, key: Any) -> Optional[BaseModel]:
        conn = get_connection(self.database_url)
        try:
            row = conn.execute(
                f"SELECT * FROM {self.resource.table} WHERE {self.resource.key_field} = ?",
                (self.resource.coerce_key(key),),
            ).fetchone()
            if not row:
                return None
            return self._row_to_entity(row)
        finally:
            conn.close()

    def create(self, fields: BaseModel) -> BaseModel:
        resource = self.resource
        values = fields.model_dump()
        conn = get_connection(self.database_url)
        try:
            cursor = conn.cursor()
            if resource.key_kind is KeyKind.GENERATED:
                cursor.execute(
                    f"INSERT INTO {resource.table} ({', '.join(resource.fields)}) "
                    f"VALUES ({', '.join('?' for _ in resource.fields)})",
                    tuple(values[name] for name in resource.fields),
                )
                key = cursor.lastrowid
            else:
                key = values[resource.key_field]
                cursor.execute(
                    self._upsert_sql(),
                    (key,) + tuple(values[name] for name in resource.fields),
                )
            conn.commit()
            logger.debug("Inserted %s %s into %s", resource.name, key, resource.table)
            return resource.build(key, values)
        finally:
            conn.close()

    def save(self, entity: BaseModel) -> BaseModel:
        resource = self.resource
        conn = get_connection(self.database_url)
        try:
            conn.execute(
                self._upsert_sql(),
                (resource.key_of(entity),) + tuple(getattr(entity, name) for name in resource.fields),
            )
            conn.commit()
            return entity
        finally:
            conn.close()

    def delete(self, key: Any) -> bool:
        conn = get_connection(self.database_url)
        try:
            cursor = conn.execute(
                f"DELETE FROM {self.resource.table} WHERE {self.resource.key_field} = ?",
                (self.resource.coerce_key(key),),
            )
            affected = cursor.rowcount
            conn.commit()
            return affected > 0
        finally:
            conn.close()
