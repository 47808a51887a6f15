import pytest

from records_api.app.core.errors import AuthorizationDenied, EntityNotFoundException
from records_api.app.resources import BOOK, MOVIE, RESOURCES, TRANSPORT, TREE
from records_api.app.schemas.book import BookCreate, BookRead, BookUpdate
from records_api.app.schemas.movie import MovieRead
from records_api.app.schemas.transport import TransportCreate, TransportRead, TransportUpdate
from records_api.app.schemas.tree import TreeRead, TreeUpdate
from records_api.app.services.resource_controller import ResourceController


def test_controller_rejects_store_of_another_resource(make_controller):
    with pytest.raises(ValueError):
        ResourceController(BOOK, make_controller(MOVIE).store)


def test_list_preserves_store_order(make_controller, reader):
    controller = make_controller(
        TREE,
        TreeRead(id=3, name="Oak", category="Deciduous"),
        TreeRead(id=1, name="Pine", category="Conifer"),
        TreeRead(id=2, name="Elm", category="Deciduous"),
    )
    result = controller.list(reader)
    assert [t["id"] for t in result] == [3, 1, 2]
    assert len(result) == len(controller.store.list())


def test_list_of_empty_store(make_controller, reader):
    assert make_controller(MOVIE).list(reader) == []


def test_get_returns_serialized_record(make_controller, reader):
    controller = make_controller(TREE, TreeRead(id=7, name="Birch", category="Decidous"))
    assert controller.get(reader, 7) == {"id": 7, "name": "Birch", "category": "Decidous"}


@pytest.mark.parametrize("resource", RESOURCES, ids=lambda r: r.name)
@pytest.mark.parametrize("operation", ["get", "update", "delete"])
def test_missing_key_raises_not_found_without_writing(make_controller, writer, resource, operation, missing_keys, sample_fields):
    controller = make_controller(resource)
    key = missing_keys[resource]
    args = (key,)
    if operation == "update":
        args = (key, resource.update_schema(**sample_fields[resource]))
    with pytest.raises(EntityNotFoundException) as excinfo:
        getattr(controller, operation)(writer, *args)
    assert excinfo.value.message == f"{resource.name} with id {key} not found"
    assert controller.store.calls == ["get"]


def test_create_assigns_generated_key_and_round_trips(make_controller, writer):
    controller = make_controller(BOOK)
    created = controller.create(
        writer, BookCreate(name="Dune", author="Frank Herbert", genre="Science fiction", wordcount=188000)
    )
    assert created["id"] == 1
    assert controller.get(writer, created["id"]) == created


def test_create_with_natural_key_overwrites(make_controller, writer):
    controller = make_controller(TRANSPORT, TransportRead(name="Lime", mode="bike", cost="3.00"))
    created = controller.create(writer, TransportCreate(name="Lime", mode="scooter", cost="1.77"))
    assert created == {"name": "Lime", "mode": "scooter", "cost": "1.77"}
    assert controller.list(writer) == [created]
    assert "get" not in controller.store.calls


def test_update_replaces_fields_and_keeps_key(make_controller, writer):
    controller = make_controller(TREE, TreeRead(id=67, name="Birch", category="Decidous"))
    result = controller.update(writer, 67, TreeUpdate(name="Maple", category="Decidous"))
    assert result == {"id": 67, "name": "Maple", "category": "Decidous"}
    assert controller.store.calls == ["get", "save"]
    assert controller.get(writer, 67) == result


def test_update_ignores_key_embedded_in_body(make_controller, writer):
    controller = make_controller(
        BOOK, BookRead(id=5, name="Emma", author="Jane Austen", genre="Novel", wordcount=160000)
    )
    incoming = BookUpdate(id=99, name="Persuasion", author="Jane Austen", genre="Novel", wordcount=83000)
    result = controller.update(writer, 5, incoming)
    assert result["id"] == 5
    assert result["name"] == "Persuasion"
    assert controller.store.get(99) is None


def test_update_natural_key_ignores_name_in_body(make_controller, writer):
    controller = make_controller(TRANSPORT, TransportRead(name="Car", mode="car", cost="11000"))
    incoming = TransportUpdate(name="Truck", mode="truck", cost="20000")
    result = controller.update(writer, "Car", incoming)
    assert result == {"name": "Car", "mode": "truck", "cost": "20000"}
    assert controller.store.get("Truck") is None


def test_delete_returns_message_and_removes(make_controller, writer):
    controller = make_controller(MOVIE, MovieRead(id=15, name="Heat", genre="Crime", year=1995))
    assert controller.delete(writer, 15) == {"message": "Movie with id 15 deleted"}
    assert controller.store.calls == ["get", "delete"]
    with pytest.raises(EntityNotFoundException):
        controller.get(writer, 15)


@pytest.mark.parametrize("operation", ["create", "update", "delete"])
def test_reader_cannot_write_through_controller(make_controller, reader, operation):
    controller = make_controller(TREE, TreeRead(id=1, name="Oak", category="Deciduous"))
    args = {
        "create": (TreeUpdate(name="Ash", category="Deciduous"),),
        "update": (1, TreeUpdate(name="Ash", category="Deciduous")),
        "delete": (1,),
    }[operation]
    with pytest.raises(AuthorizationDenied):
        getattr(controller, operation)(reader, *args)
    assert controller.store.calls == []
