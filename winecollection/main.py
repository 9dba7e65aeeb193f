"""FastAPI application entry point for Wine Collection."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from winecollection import __version__
from winecollection.config import settings
from winecollection.database import close_db, init_db

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure the root logger from settings."""
    logging.basicConfig(level=settings.log_level, format=settings.log_format)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    configure_logging()

    # Ensure data directory exists for the default SQLite file
    settings.data_dir.mkdir(parents=True, exist_ok=True)

    await init_db()
    logger.info("%s %s started", settings.app_name, __version__)

    yield

    await close_db()
    logger.info("%s stopped", settings.app_name)


app = FastAPI(
    title=settings.app_name,
    description="Wine maker and wine bottle catalogue",
    version=__version__,
    lifespan=lifespan,
)

if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type"],
        max_age=600,
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed input as 400 rather than FastAPI's default 422."""
    logger.info("Invalid request to %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.get("/health", tags=["Health"])
async def health_check() -> JSONResponse:
    """Health check endpoint."""
    return JSONResponse(
        content={
            "status": "healthy",
            "version": __version__,
            "app_name": settings.app_name,
        }
    )


# Import and include routers
from winecollection.routers import wine_bottles, wine_makers  # noqa: E402

app.include_router(wine_makers.router, prefix="/api/winemakers", tags=["Wine Makers"])
app.include_router(wine_bottles.router, prefix="/api/winebottles", tags=["Wine Bottles"])
