"""
Pydantic models for books.

``BookFields`` holds every non‑key field; ``BookCreate`` binds the
create parameters, ``BookUpdate`` the update body and ``BookRead``
adds the store assigned ``id`` for responses.
"""

from pydantic import BaseModel, Field

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class BookFields(BaseModel):
    name: str = Field(..., examples=["Dune"])
    author: str = Field(..., examples=["Frank Herbert"])
    genre: str = Field(..., examples=["Science fiction"])
    wordcount: int = Field(..., ge=INT64_MIN, le=INT64_MAX, examples=[188000])


class BookCreate(BookFields):
    """Parameters for creating a book."""
    pass


class BookUpdate(BookFields):
    """Body for updating a book.

    All fields are required; the update replaces every one of them.
    An ``id`` in the body is ignored.
    """
    pass


class BookRead(BookFields):
    """A stored book."""

    id: int

    model_config = {
        "from_attributes": True,
    }
