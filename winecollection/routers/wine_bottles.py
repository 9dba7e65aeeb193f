"""Wine bottle endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from winecollection.database import get_db
from winecollection.repositories import WineBottleRepository, WineMakerRepository
from winecollection.routers._common import OptionalInt, PathId, int_query
from winecollection.schemas import WineBottleCreate, WineBottleResponse, WineBottleUpdate
from winecollection.services.mapping import (
    apply_wine_bottle_update,
    wine_bottle_from_create,
    wine_bottle_to_response,
)

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_WINE_MAKER = "Invalid WineMakerId."


def _not_found(bottle_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Wine bottle with ID {bottle_id} not found",
    )


async def _get_bottle(db: AsyncSession, bottle_id: int) -> WineBottleResponse:
    bottle = await WineBottleRepository(db).get_by_id(bottle_id)
    if not bottle:
        raise _not_found(bottle_id)
    return wine_bottle_to_response(bottle)


async def _delete_bottle(db: AsyncSession, bottle_id: int) -> None:
    repository = WineBottleRepository(db)
    bottle = await repository.get_by_id(bottle_id)
    if not bottle:
        raise _not_found(bottle_id)

    await repository.delete(bottle)
    await db.commit()
    logger.info("Deleted wine bottle %d", bottle_id)


@router.get("", response_model=list[WineBottleResponse] | WineBottleResponse)
async def list_wine_bottles(
    db: Annotated[AsyncSession, Depends(get_db)],
    name: str | None = None,
    year: Annotated[OptionalInt, int_query()] = None,
    style: str | None = None,
    taste: str | None = None,
    min_count: Annotated[OptionalInt, int_query("minCount")] = None,
    max_count: Annotated[OptionalInt, int_query("maxCount")] = None,
    bottle_id: Annotated[OptionalInt, int_query("id")] = None,
) -> list[WineBottleResponse] | WineBottleResponse:
    """List wine bottles matching all given filters.

    ``name``, ``style`` and ``taste`` are substring matches on their own
    fields, ``year`` is exact, and ``minCount``/``maxCount`` bound the
    cellar count inclusively. Empty values are ignored. Passing ``id``
    fetches that single bottle.
    """
    if bottle_id is not None:
        return await _get_bottle(db, bottle_id)

    bottles = await WineBottleRepository(db).list(
        name=name,
        year=year,
        style=style,
        taste=taste,
        min_count=min_count,
        max_count=max_count,
    )
    return [wine_bottle_to_response(bottle) for bottle in bottles]


@router.get("/{bottle_id}", response_model=WineBottleResponse)
async def get_wine_bottle(
    bottle_id: PathId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> WineBottleResponse:
    """Get one wine bottle with its maker's name."""
    return await _get_bottle(db, bottle_id)


@router.post("", response_model=WineBottleResponse, status_code=status.HTTP_201_CREATED)
async def create_wine_bottle(
    request: Request,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
    payload: Annotated[WineBottleCreate | None, Body()] = None,
) -> WineBottleResponse:
    """Create a wine bottle for an existing wine maker.

    The Location header points at the new resource.
    """
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="WineBottle data is null.",
        )

    if not await WineMakerRepository(db).exists(payload.wine_maker_id):
        logger.info("Rejected bottle for unknown wine maker %d", payload.wine_maker_id)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=INVALID_WINE_MAKER,
        )

    repository = WineBottleRepository(db)
    bottle = wine_bottle_from_create(payload)
    try:
        await repository.insert(bottle)
        await db.commit()
    except IntegrityError:
        # The wine maker was deleted after our check
        await db.rollback()
        logger.warning("Foreign key rejected bottle for wine maker %d", payload.wine_maker_id)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=INVALID_WINE_MAKER,
        )

    logger.info("Created wine bottle %d (%s)", bottle.id, bottle.name)
    response.headers["Location"] = str(request.url_for("get_wine_bottle", bottle_id=bottle.id))

    # Re-query with eager loading for the maker name
    return await _get_bottle(db, bottle.id)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_wine_bottle_by_query(
    bottle_id: Annotated[int, int_query("id")],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """Delete a wine bottle given as ``?id=``."""
    await _delete_bottle(db, bottle_id)


@router.delete("/{bottle_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_wine_bottle(
    bottle_id: PathId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """Delete a wine bottle."""
    await _delete_bottle(db, bottle_id)


@router.put("/{bottle_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_wine_bottle(
    bottle_id: PathId,
    db: Annotated[AsyncSession, Depends(get_db)],
    payload: Annotated[WineBottleUpdate | None, Body()] = None,
) -> None:
    """Replace every mutable field of a wine bottle.

    The body id must match the path id. Changing the wine maker requires
    the new maker to exist.
    """
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="WineBottle data is null.",
        )

    if payload.id != bottle_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="The wine bottle you requested to update does not match the id in param.",
        )

    repository = WineBottleRepository(db)
    bottle = await repository.get_by_id(bottle_id)
    if not bottle:
        raise _not_found(bottle_id)

    if bottle.wine_maker_id != payload.wine_maker_id:
        if not await WineMakerRepository(db).exists(payload.wine_maker_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="The wine maker of this wine bottle does not exist.",
            )

    apply_wine_bottle_update(bottle, payload)
    try:
        await repository.update(bottle)
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.warning("Foreign key rejected update of wine bottle %d", bottle_id)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="The wine maker of this wine bottle does not exist.",
        )

    logger.info("Updated wine bottle %d", bottle_id)
