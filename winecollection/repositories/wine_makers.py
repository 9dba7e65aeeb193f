"""Wine maker persistence."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from winecollection.models import WineBottle, WineMaker


class WineMakerRepository:
    """Query and mutate the WineMakers table."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list(self) -> list[WineMaker]:
        """Return all wine makers with their bottles loaded."""
        result = await self.session.execute(
            select(WineMaker)
            .options(selectinload(WineMaker.bottles))
            .order_by(WineMaker.id)
        )
        return list(result.scalars().all())

    async def get_by_id(self, wine_maker_id: int, with_bottles: bool = True) -> WineMaker | None:
        """Return one wine maker, or None if no row matches."""
        query = select(WineMaker).where(WineMaker.id == wine_maker_id)
        if with_bottles:
            query = query.options(selectinload(WineMaker.bottles))
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def exists(self, wine_maker_id: int) -> bool:
        """Whether a wine maker with this id exists."""
        result = await self.session.execute(
            select(WineMaker.id).where(WineMaker.id == wine_maker_id).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def exists_with_name(self, name: str) -> bool:
        """Exact, case-sensitive name match."""
        result = await self.session.execute(
            select(WineMaker.id).where(WineMaker.name == name).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def has_bottles(self, wine_maker_id: int) -> bool:
        """Whether any bottle still references this wine maker."""
        result = await self.session.execute(
            select(WineBottle.id).where(WineBottle.wine_maker_id == wine_maker_id).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def insert(self, wine_maker: WineMaker) -> WineMaker:
        """Add a new wine maker and flush to assign its id."""
        self.session.add(wine_maker)
        await self.session.flush()
        return wine_maker

    async def delete(self, wine_maker: WineMaker) -> None:
        """Remove a wine maker; its bottles must already be gone."""
        await self.session.delete(wine_maker)
        await self.session.flush()
