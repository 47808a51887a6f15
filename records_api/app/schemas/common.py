"""
Response shapes shared by every resource.
"""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Confirmation returned by a successful delete."""

    message: str = Field(..., examples=["Book with id 1 deleted"])


class EntityNotFoundResponse(BaseModel):
    """Body of every 404 raised for a missing record."""

    type: str = Field("EntityNotFoundException", examples=["EntityNotFoundException"])
    message: str = Field(..., examples=["Book with id 1 not found"])


class ResourceInfo(BaseModel):
    name: str
    path: str
    key_field: str
    key_kind: str
    fields: list[str]
