"""Pydantic models for trees."""

from pydantic import BaseModel, Field


class TreeFields(BaseModel):
    name: str = Field(..., examples=["Birch"])
    category: str = Field(..., examples=["Deciduous"])


class TreeCreate(TreeFields):
    pass


class TreeUpdate(TreeFields):
    pass


class TreeRead(TreeFields):
    id: int

    model_config = {
        "from_attributes": True,
    }
