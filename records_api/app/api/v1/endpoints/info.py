"""
Information endpoint for API v1.

Describes the resources registered on this application (see
``app.state.controllers``) so clients can discover the available
paths, key parameters and fields.  Requires READ.
"""

from typing import List

from fastapi import APIRouter, Depends, Request

from records_api.app.core.authorization import Caller, Role
from records_api.app.core.security import require_role
from records_api.app.schemas.common import ResourceInfo

router = APIRouter()


@router.get("", response_model=List[ResourceInfo])
def get_info(request: Request, caller: Caller = Depends(require_role(Role.READ))) -> List[ResourceInfo]:
    """Return one entry per registered resource."""
    return [
        ResourceInfo(
            name=resource.name,
            path=f"/api{resource.prefix}",
            key_field=resource.key_field,
            key_kind=resource.key_kind.value,
            fields=list(resource.fields),
        )
        for resource in request.app.state.controllers
    ]
