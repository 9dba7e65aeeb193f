"""Pydantic schemas for the WineBottle resource."""

from pydantic import Field

from winecollection.schemas._common import CamelModel, RowId, UrlString


class WineBottleBase(CamelModel):
    """Fields shared by bottle create and update requests."""

    name: str = Field(..., min_length=1, max_length=100)
    year: int = Field(..., ge=1900, le=2024)
    size: int = Field(..., ge=50, le=2000, description="Size in milliliters")
    count_in_wine_cellar: int = Field(..., ge=0, le=3000)
    style: str | None = Field(None, max_length=50)
    taste: str | None = Field(None, max_length=500, description="Text description of taste")
    description: str | None = Field(None, max_length=1000)
    food_pairing: str | None = Field(None, max_length=500)
    link: UrlString | None = None
    image: UrlString | None = Field(None, description="URL to image")
    wine_maker_id: RowId


class WineBottleCreate(WineBottleBase):
    """Schema for creating a wine bottle."""

    pass


class WineBottleUpdate(WineBottleBase):
    """Schema for replacing a wine bottle; id must match the path."""

    id: RowId


class WineBottleResponse(CamelModel):
    """Wine bottle with its maker's name flattened in."""

    id: int
    name: str
    year: int
    size: int
    count_in_wine_cellar: int
    style: str | None = None
    taste: str | None = None
    description: str | None = None
    food_pairing: str | None = None
    link: str | None = None
    image: str | None = None
    wine_maker_id: int
    wine_maker_name: str | None = None
