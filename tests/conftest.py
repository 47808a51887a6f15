import pytest
from fastapi.testclient import TestClient

from records_api.app.core.authorization import Caller, Role
from records_api.app.core.security import create_access_token
from records_api.app.main import create_app
from records_api.app.resources import BOOK, MOVIE, RESOURCES, TRANSPORT, TREE
from records_api.app.stores import InMemoryEntityStore


# Valid create parameters for every resource.
SAMPLE_FIELDS = {
    BOOK: {"name": "Dune", "author": "Frank Herbert", "genre": "Science fiction", "wordcount": 188000},
    MOVIE: {"name": "Arrival", "genre": "Drama", "year": 2016},
    TREE: {"name": "Birch", "category": "Decidous"},
    TRANSPORT: {"name": "Lime", "mode": "scooter", "cost": "1.77"},
}

# A key that exists in none of the empty stores.
MISSING_KEYS = {BOOK: 7, MOVIE: 7, TREE: 7, TRANSPORT: "Standard Bike"}


class RecordingStore(InMemoryEntityStore):
    """In-memory store that remembers which operations were called."""

    def __init__(self, resource, records=()):
        self.calls = []
        super().__init__(resource, records)
        # Seeding is not an operation under test.
        self.calls.clear()

    def list(self):
        self.calls.append("list")
        return super().list()

    def get(self, key):
        self.calls.append("get")
        return super().get(key)

    def create(self, fields):
        self.calls.append("create")
        return super().create(fields)

    def save(self, entity):
        self.calls.append("save")
        return super().save(entity)

    def delete(self, key):
        self.calls.append("delete")
        return super().delete(key)


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def stores():
    return {resource: RecordingStore(resource) for resource in RESOURCES}


@pytest.fixture
def client(stores):
    return TestClient(create_app(stores))


@pytest.fixture
def read_headers():
    return bearer(create_access_token("reader@example.com", [Role.READ]))


@pytest.fixture
def write_headers():
    return bearer(create_access_token("admin@example.com", [Role.WRITE]))


@pytest.fixture
def reader():
    return Caller(subject="reader@example.com", roles=frozenset({Role.READ}))


@pytest.fixture
def writer():
    return Caller(subject="admin@example.com", roles=frozenset({Role.WRITE}))


@pytest.fixture
def sample_fields():
    return SAMPLE_FIELDS


@pytest.fixture
def missing_keys():
    return MISSING_KEYS


@pytest.fixture
def seed(stores):
    """Put a record straight into a store, bypassing the API."""

    def _seed(resource, **values):
        entity = resource.read_schema(**values)
        store = stores[resource]
        store.save(entity)
        store.calls.clear()
        return entity

    return _seed


@pytest.fixture
def call(client):
    """Issue one of the five operations against a resource's routes."""

    def _call(resource, operation, headers=None, key=None, fields=None):
        prefix = f"/api{resource.prefix}"
        key_params = {resource.key_field: key}
        if operation == "list":
            return client.get(f"{prefix}/all", headers=headers)
        if operation == "get":
            return client.get(prefix, params=key_params, headers=headers)
        if operation == "create":
            return client.post(f"{prefix}/post", params=fields, headers=headers)
        if operation == "update":
            return client.put(prefix, params=key_params, json=fields, headers=headers)
        if operation == "delete":
            return client.delete(prefix, params=key_params, headers=headers)
        raise ValueError(operation)

    return _call


@pytest.fixture
def make_controller():
    """Build a controller over a fresh ``RecordingStore`` seeded with ``records``."""
    from records_api.app.services.resource_controller import ResourceController

    def _make(resource, *records):
        return ResourceController(resource, RecordingStore(resource, records))

    return _make
