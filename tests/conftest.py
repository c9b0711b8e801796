"""Shared fixtures: a file-backed SQLite database reached through aiosqlite.

DATABASE_URL must be set before ``hero_api`` is imported, because the engine
is created when ``hero_api.database.database`` is first loaded.
"""

import os
import tempfile
from collections.abc import AsyncIterator, Callable
from pathlib import Path

_DATABASE_DIR = Path(tempfile.mkdtemp(prefix="hero_api_tests_"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DATABASE_DIR / 'heroes.db'}"

import httpx  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

from hero_api.database.database import async_engine  # noqa: E402
from hero_api.database.model import NewHero  # noqa: E402
from hero_api.database.repository import HeroRepository  # noqa: E402
from hero_api.main import app  # noqa: E402


@pytest_asyncio.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    """Engine with an empty ``heroes`` table."""
    async with async_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    yield async_engine
    await async_engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    async with AsyncSession(engine) as session:
        yield session


@pytest_asyncio.fixture
async def repo(session: AsyncSession) -> HeroRepository:
    return HeroRepository(session)


@pytest_asyncio.fixture
async def client(engine: AsyncEngine) -> AsyncIterator[httpx.AsyncClient]:
    """HTTP client talking to the app in-process (lifespan is not run)."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://test"
    ) as client:
        yield client


@pytest.fixture
def make_hero() -> Callable[..., NewHero]:
    """Factory for NewHero payloads; keyword arguments override fields."""

    def _make(**overrides: object) -> NewHero:
        fields: dict[str, object] = {
            "name": "Clark Kent",
            "identity": "Superman",
            "hometown": "Smallville",
            "age": 35,
        }
        fields.update(overrides)
        return NewHero.model_validate(fields)

    return _make
