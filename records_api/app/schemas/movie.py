"""
Pydantic models for movies.

``year`` is range checked against a signed 32‑bit integer.
"""

from pydantic import BaseModel, Field

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


class MovieFields(BaseModel):
    name: str = Field(..., examples=["Arrival"])
    genre: str = Field(..., examples=["Drama"])
    year: int = Field(..., ge=INT32_MIN, le=INT32_MAX, examples=[2016])


class MovieCreate(MovieFields):
    """Parameters for creating a movie."""
    pass


class MovieUpdate(MovieFields):
    """Body for updating a movie; an embedded ``id`` is ignored."""
    pass


class MovieRead(MovieFields):
    """A stored movie."""

    id: int

    model_config = {
        "from_attributes": True,
    }
