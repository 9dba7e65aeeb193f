"""API routers for Wine Collection."""

from winecollection.routers import wine_bottles, wine_makers

__all__ = ["wine_bottles", "wine_makers"]
