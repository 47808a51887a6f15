"""
Registry of the record types served by the API.

Each ``ResourceType`` describes one kind of record: its human readable
name (used in messages), how its key is produced, which field holds
the key, the pydantic models used to bind and serialise it, and where
it lives (route prefix and SQLite table).  Stores, controllers and
routers are all generated from this table, so adding a resource means
adding a schema module and one entry to ``RESOURCES``.
"""

import enum
from dataclasses import dataclass
from typing import Any, Dict, Tuple, Type

from pydantic import BaseModel

from .schemas.book import BookCreate, BookRead, BookUpdate
from .schemas.movie import MovieCreate, MovieRead, MovieUpdate
from .schemas.transport import TransportCreate, TransportRead, TransportUpdate
from .schemas.tree import TreeCreate, TreeRead, TreeUpdate


class KeyKind(str, enum.Enum):
    """How a record's key comes into existence.

    ``GENERATED`` keys are integers assigned by the store on create;
    ``NATURAL`` keys are strings supplied by the caller as one of the
    record's own fields.
    """

    GENERATED = "generated"
    NATURAL = "natural"


@dataclass(frozen=True)
class ResourceType:
    name: str
    key_kind: KeyKind
    key_field: str
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]
    read_schema: Type[BaseModel]
    prefix: str
    table: str
    tag: str

    @property
    def key_type(self) -> type:
        return int if self.key_kind is KeyKind.GENERATED else str

    @property
    def fields(self) -> Tuple[str, ...]:
        """Names of the non‑key fields, in declaration order."""
        return tuple(self.update_schema.model_fields)

    def coerce_key(self, key: Any) -> Any:
        return self.key_type(key)

    def render_key(self, key: Any) -> str:
        """Textual form of a key as it appears in messages."""
        return str(self.coerce_key(key))

    def key_of(self, entity: BaseModel) -> Any:
        return getattr(entity, self.key_field)

    def build(self, key: Any, values: Dict[str, Any]) -> BaseModel:
        """Construct a stored record from its key and non‑key field values."""
        data = {name: values[name] for name in self.fields}
        data[self.key_field] = self.coerce_key(key)
        return self.read_schema(**data)


BOOK = ResourceType(
    name="Book",
    key_kind=KeyKind.GENERATED,
    key_field="id",
    create_schema=BookCreate,
    update_schema=BookUpdate,
    read_schema=BookRead,
    prefix="/books",
    table="books",
    tag="books",
)

MOVIE = ResourceType(
    name="Movie",
    key_kind=KeyKind.GENERATED,
    key_field="id",
    create_schema=MovieCreate,
    update_schema=MovieUpdate,
    read_schema=MovieRead,
    prefix="/movies",
    table="movies",
    tag="movies",
)

TREE = ResourceType(
    name="Tree",
    key_kind=KeyKind.GENERATED,
    key_field="id",
    create_schema=TreeCreate,
    update_schema=TreeUpdate,
    read_schema=TreeRead,
    prefix="/tree",
    table="trees",
    tag="trees",
)

TRANSPORT = ResourceType(
    name="Transport",
    key_kind=KeyKind.NATURAL,
    key_field="name",
    create_schema=TransportCreate,
    update_schema=TransportUpdate,
    read_schema=TransportRead,
    prefix="/transport",
    table="transports",
    tag="transport",
)

RESOURCES: Tuple[ResourceType, ...] = (BOOK, MOVIE, TREE, TRANSPORT)


def get_resource(name: str) -> ResourceType:
    """Look up a resource by type name or tag, case insensitively."""
    lowered = name.lower()
    for resource in RESOURCES:
        if lowered in (resource.name.lower(), resource.tag, resource.table):
            return resource
    raise KeyError(name)
