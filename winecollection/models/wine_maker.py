"""Wine maker model."""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from winecollection.database import Base

if TYPE_CHECKING:
    from winecollection.models.wine_bottle import WineBottle


class WineMaker(Base):
    """A producer owning zero or more wine bottles."""

    __tablename__ = "WineMakers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Unique constraint backs the duplicate-name check in the handler
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    address: Mapped[str | None] = mapped_column(String(200), nullable=True)

    # Relationships
    bottles: Mapped[list["WineBottle"]] = relationship(
        "WineBottle",
        back_populates="wine_maker",
        passive_deletes="all",
        order_by="WineBottle.id",
    )

    def __repr__(self) -> str:
        return f"<WineMaker(id={self.id}, name='{self.name}')>"
