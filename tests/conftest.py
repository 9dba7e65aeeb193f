"""Pytest configuration and fixtures for Wine Collection tests with SQLite."""

from collections.abc import AsyncGenerator, Awaitable, Callable
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from winecollection.database import create_engine, create_session_maker, create_tables, get_db
from winecollection.main import app


@pytest_asyncio.fixture(scope="function")
async def db_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh SQLite database file for each test."""
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test database."""
    return create_session_maker(db_engine)


@pytest_asyncio.fixture(scope="function")
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """A session for inspecting the database directly."""
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(session_maker) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client wired to the test database."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def create_wine_maker(client: AsyncClient) -> Callable[..., Awaitable[dict[str, Any]]]:
    """Factory that creates a wine maker through the API and returns its JSON."""

    async def _create(name: str = "Penfolds", address: str | None = "Magill, South Australia") -> dict[str, Any]:
        response = await client.post("/api/winemakers", json={"name": name, "address": address})
        assert response.status_code == 201, response.text
        return response.json()

    return _create


def bottle_payload(wine_maker_id: int, **overrides: Any) -> dict[str, Any]:
    """Build a valid bottle request body."""
    payload = {
        "name": "Grange",
        "year": 2010,
        "size": 750,
        "countInWineCellar": 6,
        "style": "Full-bodied red",
        "taste": "Dark plum, mocha and spice",
        "description": "Flagship Shiraz blend",
        "foodPairing": "Roast lamb",
        "link": "https://www.penfolds.com/grange",
        "image": "https://images.example.com/grange.png",
        "wineMakerId": wine_maker_id,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def create_wine_bottle(client: AsyncClient) -> Callable[..., Awaitable[dict[str, Any]]]:
    """Factory that creates a wine bottle through the API and returns its JSON."""

    async def _create(wine_maker_id: int, **overrides: Any) -> dict[str, Any]:
        response = await client.post(
            "/api/winebottles", json=bottle_payload(wine_maker_id, **overrides)
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def make_bottle_payload() -> Callable[..., dict[str, Any]]:
    """Expose bottle_payload to tests."""
    return bottle_payload
