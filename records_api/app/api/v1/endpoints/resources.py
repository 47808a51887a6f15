"""
CRUD endpoints generated for a registered resource.

``build_resource_router`` turns a ``ResourceController`` into an
``APIRouter`` exposing five routes:

* ``GET /all`` lists every record (READ).
* ``GET ?<key>=`` returns one record (READ).
* ``POST /post?<field>=...`` creates a record from query parameters (WRITE).
* ``PUT ?<key>=`` replaces the non‑key fields from a JSON body (WRITE).
* ``DELETE ?<key>=`` removes a record (WRITE).

The key parameter is ``id`` for resources with generated keys and the
key field's own name (``name`` for transport items) otherwise.  Generated
keys are bounded to the int64 range.  The role check is the first
dependency of every route, so a denied caller is rejected before query
parameters and body fields are validated.  A body that is not JSON at
all is still refused with 422 first, since FastAPI decodes the body
before it solves dependencies.
"""

from typing import Annotated, Any, Dict, List

from fastapi import APIRouter, Depends, Query

from records_api.app.core.authorization import Caller, Role
from records_api.app.core.security import require_role
from records_api.app.resources import KeyKind
from records_api.app.schemas.book import INT64_MAX, INT64_MIN
from records_api.app.schemas.common import EntityNotFoundResponse, MessageResponse
from records_api.app.services.resource_controller import ResourceController

NOT_FOUND = {404: {"model": EntityNotFoundResponse, "description": "No record with this key"}}


def build_resource_router(controller: ResourceController) -> APIRouter:
    resource = controller.resource
    key_type = resource.key_type
    create_schema = resource.create_schema
    update_schema = resource.update_schema
    read_schema = resource.read_schema

    def key_query() -> Any:
        description = f"{resource.key_field} of the {resource.name}"
        if resource.key_kind is KeyKind.GENERATED:
            return Query(..., alias=resource.key_field, ge=INT64_MIN, le=INT64_MAX, description=description)
        return Query(..., alias=resource.key_field, description=description)

    router = APIRouter()

    @router.get("/all", response_model=List[read_schema], summary=f"List all {resource.tag}")
    def list_records(caller: Caller = Depends(require_role(Role.READ))) -> List[Dict[str, Any]]:
        return controller.list(caller)

    @router.get("", response_model=read_schema, responses=NOT_FOUND, summary=f"Get a single {resource.name}")
    def get_record(
        caller: Caller = Depends(require_role(Role.READ)),
        key: key_type = key_query(),
    ) -> Dict[str, Any]:
        return controller.get(caller, key)

    @router.post("/post", response_model=read_schema, summary=f"Create a new {resource.name}")
    def create_record(
        fields: Annotated[create_schema, Query()],
        caller: Caller = Depends(require_role(Role.WRITE)),
    ) -> Dict[str, Any]:
        return controller.create(caller, fields)

    @router.put("", response_model=read_schema, responses=NOT_FOUND, summary=f"Update a single {resource.name}")
    def update_record(
        incoming: update_schema,
        caller: Caller = Depends(require_role(Role.WRITE)),
        key: key_type = key_query(),
    ) -> Dict[str, Any]:
        return controller.update(caller, key, incoming)

    @router.delete("", response_model=MessageResponse, responses=NOT_FOUND, summary=f"Delete a {resource.name}")
    def delete_record(
        caller: Caller = Depends(require_role(Role.WRITE)),
        key: key_type = key_query(),
    ) -> Dict[str, str]:
        return controller.delete(caller, key)

    return router
