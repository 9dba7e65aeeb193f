"""Wine bottle model."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from winecollection.database import Base

if TYPE_CHECKING:
    from winecollection.models.wine_maker import WineMaker


class WineBottle(Base):
    """A catalogued wine with cellar count and tasting metadata."""

    __tablename__ = "WineBottles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    year: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    size: Mapped[int] = mapped_column(Integer, nullable=False)  # milliliters
    count_in_wine_cellar: Mapped[int] = mapped_column(
        "countInWineCellar", Integer, nullable=False, default=0
    )
    style: Mapped[str | None] = mapped_column(String(50), nullable=True)
    taste: Mapped[str | None] = mapped_column(String(500), nullable=True)
    description: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    food_pairing: Mapped[str | None] = mapped_column("foodPairing", String(500), nullable=True)
    link: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    image: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    wine_maker_id: Mapped[int] = mapped_column(
        "wineMakerId",
        Integer,
        ForeignKey("WineMakers.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    # Relationships
    wine_maker: Mapped["WineMaker"] = relationship("WineMaker", back_populates="bottles")

    def __repr__(self) -> str:
        return f"<WineBottle(id={self.id}, name='{self.name}', year={self.year})>"
