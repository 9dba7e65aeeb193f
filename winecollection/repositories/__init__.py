"""Data access for Wine Collection entities.

Each repository wraps a request-scoped AsyncSession. Repositories flush
but never commit; the request handler owns the transaction.
"""

from winecollection.repositories.wine_bottles import WineBottleRepository
from winecollection.repositories.wine_makers import WineMakerRepository

__all__ = [
    "WineBottleRepository",
    "WineMakerRepository",
]
