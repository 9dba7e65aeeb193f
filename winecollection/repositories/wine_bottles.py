"""Wine bottle persistence."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from winecollection.models import WineBottle


class WineBottleRepository:
    """Query and mutate the WineBottles table.

    Bottles are always returned with their wine maker joined in.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list(
        self,
        *,
        name: str | None = None,
        year: int | None = None,
        style: str | None = None,
        taste: str | None = None,
        min_count: int | None = None,
        max_count: int | None = None,
    ) -> list[WineBottle]:
        """Return bottles matching every given filter.

        Args:
            name: Substring of the bottle name.
            year: Exact vintage year.
            style: Substring of the style.
            taste: Substring of the taste description.
            min_count: Inclusive lower bound on the cellar count.
            max_count: Inclusive upper bound on the cellar count.

        Empty strings and None impose no constraint.
        """
        query = select(WineBottle).options(joinedload(WineBottle.wine_maker))

        if name:
            query = query.where(WineBottle.name.contains(name, autoescape=True))
        if year is not None:
            query = query.where(WineBottle.year == year)
        if style:
            query = query.where(WineBottle.style.contains(style, autoescape=True))
        if taste:
            query = query.where(WineBottle.taste.contains(taste, autoescape=True))
        if min_count is not None:
            query = query.where(WineBottle.count_in_wine_cellar >= min_count)
        if max_count is not None:
            query = query.where(WineBottle.count_in_wine_cellar <= max_count)

        result = await self.session.execute(query.order_by(WineBottle.id))
        return list(result.scalars().all())

    async def get_by_id(self, bottle_id: int) -> WineBottle | None:
        """Return one bottle with its maker, or None if no row matches."""
        result = await self.session.execute(
            select(WineBottle)
            .options(joinedload(WineBottle.wine_maker))
            .where(WineBottle.id == bottle_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def insert(self, bottle: WineBottle) -> WineBottle:
        """Add a new bottle and flush to assign its id."""
        self.session.add(bottle)
        await self.session.flush()
        return bottle

    async def update(self, bottle: WineBottle) -> WineBottle:
        """Flush field changes already applied to a loaded bottle."""
        await self.session.flush()
        return bottle

    async def delete(self, bottle: WineBottle) -> None:
        """Remove a bottle."""
        await self.session.delete(bottle)
        await self.session.flush()
