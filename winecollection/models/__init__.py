"""SQLAlchemy models for Wine Collection."""

from winecollection.models.wine_bottle import WineBottle
from winecollection.models.wine_maker import WineMaker

__all__ = [
    "WineBottle",
    "WineMaker",
]
