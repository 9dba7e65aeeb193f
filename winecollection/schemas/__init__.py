"""Pydantic schemas for Wine Collection API."""

from winecollection.schemas.wine_bottle import (
    WineBottleCreate,
    WineBottleResponse,
    WineBottleUpdate,
)
from winecollection.schemas.wine_maker import WineMakerCreate, WineMakerResponse

__all__ = [
    "WineBottleCreate",
    "WineBottleResponse",
    "WineBottleUpdate",
    "WineMakerCreate",
    "WineMakerResponse",
]
