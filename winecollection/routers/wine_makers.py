"""Wine maker endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from winecollection.database import get_db
from winecollection.repositories import WineMakerRepository
from winecollection.routers._common import PathId
from winecollection.schemas import WineMakerCreate, WineMakerResponse
from winecollection.services.mapping import wine_maker_from_create, wine_maker_to_response

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list[WineMakerResponse])
async def list_wine_makers(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[WineMakerResponse]:
    """List all wine makers with their bottles."""
    wine_makers = await WineMakerRepository(db).list()
    return [wine_maker_to_response(wine_maker) for wine_maker in wine_makers]


@router.get("/{wine_maker_id}", response_model=WineMakerResponse)
async def get_wine_maker(
    wine_maker_id: PathId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> WineMakerResponse:
    """Get one wine maker with its bottles."""
    wine_maker = await WineMakerRepository(db).get_by_id(wine_maker_id)

    if not wine_maker:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Wine maker with ID {wine_maker_id} not found",
        )

    return wine_maker_to_response(wine_maker)


@router.post("", response_model=WineMakerResponse, status_code=status.HTTP_201_CREATED)
async def create_wine_maker(
    request: Request,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
    payload: Annotated[WineMakerCreate | None, Body()] = None,
) -> WineMakerResponse:
    """Create a wine maker.

    Names are unique. The Location header points at the new resource.
    """
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Wine maker is empty",
        )

    repository = WineMakerRepository(db)
    if await repository.exists_with_name(payload.name):
        logger.info("Rejected duplicate wine maker name %r", payload.name)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Wine maker already exists",
        )

    wine_maker = wine_maker_from_create(payload)
    try:
        await repository.insert(wine_maker)
        await db.commit()
    except IntegrityError:
        # A concurrent request inserted the same name after our check
        await db.rollback()
        logger.warning("Unique constraint rejected wine maker name %r", payload.name)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Wine maker already exists",
        )

    logger.info("Created wine maker %d (%s)", wine_maker.id, wine_maker.name)
    response.headers["Location"] = str(
        request.url_for("get_wine_maker", wine_maker_id=wine_maker.id)
    )
    return wine_maker_to_response(wine_maker)


@router.delete("/{wine_maker_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_wine_maker(
    wine_maker_id: PathId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> None:
    """Delete a wine maker that owns no bottles."""
    repository = WineMakerRepository(db)
    wine_maker = await repository.get_by_id(wine_maker_id, with_bottles=False)

    if not wine_maker:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Wine maker with ID {wine_maker_id} not found",
        )

    if await repository.has_bottles(wine_maker_id):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Wine maker still has wine bottles; delete them first",
        )

    try:
        await repository.delete(wine_maker)
        await db.commit()
    except IntegrityError:
        # A bottle was added after our check; the foreign key restricts the delete
        await db.rollback()
        logger.warning("Foreign key blocked delete of wine maker %d", wine_maker_id)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Wine maker still has wine bottles; delete them first",
        )

    logger.info("Deleted wine maker %d", wine_maker_id)
