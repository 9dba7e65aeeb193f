"""Conversions between ORM entities and API schemas."""

from winecollection.models import WineBottle, WineMaker
from winecollection.schemas import (
    WineBottleCreate,
    WineBottleResponse,
    WineBottleUpdate,
    WineMakerCreate,
    WineMakerResponse,
)


def wine_maker_from_create(payload: WineMakerCreate) -> WineMaker:
    """Build a new, unsaved wine maker with an empty bottle collection."""
    return WineMaker(name=payload.name, address=payload.address, bottles=[])


def wine_maker_to_response(wine_maker: WineMaker) -> WineMakerResponse:
    """Map a wine maker whose bottles are loaded."""
    return WineMakerResponse(
        id=wine_maker.id,
        name=wine_maker.name,
        address=wine_maker.address,
        bottles=[
            wine_bottle_to_response(bottle, wine_maker_name=wine_maker.name)
            for bottle in wine_maker.bottles
        ],
    )


def wine_bottle_from_create(payload: WineBottleCreate) -> WineBottle:
    """Build a new, unsaved wine bottle."""
    bottle = WineBottle()
    _copy_bottle_fields(bottle, payload)
    return bottle


def apply_wine_bottle_update(bottle: WineBottle, payload: WineBottleUpdate) -> None:
    """Overwrite every mutable field of bottle with the payload's values."""
    _copy_bottle_fields(bottle, payload)


def _copy_bottle_fields(bottle: WineBottle, payload: WineBottleCreate | WineBottleUpdate) -> None:
    bottle.name = payload.name
    bottle.year = payload.year
    bottle.size = payload.size
    bottle.count_in_wine_cellar = payload.count_in_wine_cellar
    bottle.style = payload.style
    bottle.taste = payload.taste
    bottle.description = payload.description
    bottle.food_pairing = payload.food_pairing
    bottle.link = payload.link
    bottle.image = payload.image
    bottle.wine_maker_id = payload.wine_maker_id


def wine_bottle_to_response(
    bottle: WineBottle,
    wine_maker_name: str | None = None,
) -> WineBottleResponse:
    """Map a wine bottle, flattening its maker's name.

    Args:
        bottle: The bottle. Its wine_maker must be loaded unless
            wine_maker_name is given.
        wine_maker_name: Maker name when the caller already has it.
    """
    if wine_maker_name is None and bottle.wine_maker is not None:
        wine_maker_name = bottle.wine_maker.name

    return WineBottleResponse(
        id=bottle.id,
        name=bottle.name,
        year=bottle.year,
        size=bottle.size,
        count_in_wine_cellar=bottle.count_in_wine_cellar,
        style=bottle.style,
        taste=bottle.taste,
        description=bottle.description,
        food_pairing=bottle.food_pairing,
        link=bottle.link,
        image=bottle.image,
        wine_maker_id=bottle.wine_maker_id,
        wine_maker_name=wine_maker_name,
    )
