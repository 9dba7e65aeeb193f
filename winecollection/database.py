"""Relational database setup with SQLAlchemy async sessions."""

import logging
from collections.abc import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from winecollection.config import settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


# Process-wide engine and session factory; sessions themselves are per request
engine: AsyncEngine | None = None
async_session_maker: async_sessionmaker[AsyncSession] | None = None


def _enable_sqlite_foreign_keys(sync_engine: Engine) -> None:
    """Turn on foreign key enforcement for every new SQLite connection."""

    @event.listens_for(sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for the given URL.

    Args:
        database_url: SQLAlchemy async connection URL.
        echo: Log every SQL statement.

    Returns:
        The configured AsyncEngine.
    """
    new_engine = create_async_engine(database_url, echo=echo)
    if new_engine.dialect.name == "sqlite":
        _enable_sqlite_foreign_keys(new_engine.sync_engine)
    return new_engine


def create_session_maker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to an engine."""
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


async def create_tables(bind: AsyncEngine) -> None:
    """Create all tables that do not exist yet."""
    from winecollection import models  # noqa: F401  (registers the mappers)

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def init_db(
    database_url: str | None = None,
    create_all: bool | None = None,
) -> None:
    """Initialize the database engine and session factory.

    Args:
        database_url: Optional connection URL. Defaults to settings.
        create_all: Create missing tables. Defaults to settings.
    """
    global engine, async_session_maker

    url = database_url or settings.database_url
    engine = create_engine(url, echo=settings.database_echo)
    async_session_maker = create_session_maker(engine)
    logger.info("Database engine created for dialect %s", engine.dialect.name)

    if create_all if create_all is not None else settings.create_tables:
        await create_tables(engine)


async def close_db() -> None:
    """Dispose of the engine and its connection pool."""
    global engine, async_session_maker

    if engine is not None:
        await engine.dispose()
        engine = None
        async_session_maker = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session scoped to one request.

    The session is rolled back if the request fails and closed on every
    exit path.

    Raises:
        RuntimeError: If the database is not initialized.
    """
    if async_session_maker is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")

    async with async_session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
