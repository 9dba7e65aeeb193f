"""Pydantic schemas for the WineMaker resource."""

from pydantic import Field

from winecollection.schemas._common import CamelModel
from winecollection.schemas.wine_bottle import WineBottleResponse


class WineMakerCreate(CamelModel):
    """Schema for creating a wine maker."""

    name: str = Field(..., min_length=1, max_length=100)
    address: str | None = Field(None, max_length=200)


class WineMakerResponse(CamelModel):
    """Wine maker with its bottles."""

    id: int
    name: str
    address: str | None = None
    bottles: list[WineBottleResponse] = []
