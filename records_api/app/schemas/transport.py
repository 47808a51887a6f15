"""
Pydantic models for transport items.

Transport items have no generated id: the caller supplied ``name``
is the key.  It is therefore part of ``TransportCreate`` and
``TransportRead`` but not of ``TransportUpdate``; a ``name`` sent in
an update body is ignored.
"""

from pydantic import BaseModel, Field


class TransportFields(BaseModel):
    mode: str = Field(..., examples=["scooter"])
    # Cost is kept as text, exactly as supplied.
    cost: str = Field(..., examples=["1.77"])


class TransportCreate(TransportFields):
    """Parameters for creating a transport item."""

    name: str = Field(..., min_length=1, examples=["Lime"])


class TransportUpdate(TransportFields):
    """Body for updating a transport item."""
    pass


class TransportRead(TransportFields):
    """A stored transport item."""

    name: str

    model_config = {
        "from_attributes": True,
    }
