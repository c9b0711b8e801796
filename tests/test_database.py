"""Tests for engine lifecycle and application startup."""

from pathlib import Path

import httpx
import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlmodel import SQLModel

from hero_api.database import database
from hero_api.main import app, lifespan
from hero_api.settings.settings import Settings


class TestStartup:
    @pytest.mark.asyncio
    async def test_lifespan_creates_heroes_table(
        self, engine: AsyncEngine
    ) -> None:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.drop_all)

        async with lifespan(app):
            async with engine.connect() as conn:
                tables = await conn.run_sync(
                    lambda sync_conn: inspect(sync_conn).get_table_names()
                )

        assert "heroes" in tables

    @pytest.mark.asyncio
    async def test_create_tables_keeps_existing_rows(
        self, engine: AsyncEngine, client: httpx.AsyncClient
    ) -> None:
        await client.post(
            "/hero/",
            json={"name": "a", "identity": "b", "hometown": "c", "age": 1},
        )

        await database.create_tables()

        assert len((await client.get("/hero/")).json()) == 1

    @pytest.mark.asyncio
    async def test_unreachable_database_aborts_startup(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        missing = tmp_path / "no-such-dir" / "heroes.db"
        broken = create_async_engine(f"sqlite+aiosqlite:///{missing}")
        monkeypatch.setattr(database, "async_engine", broken)

        with pytest.raises(OperationalError):
            async with lifespan(app):
                pass

        await broken.dispose()


class TestCreateEngineFromSettings:
    @pytest.mark.asyncio
    async def test_in_memory_sqlite_skips_pool_sizing(self) -> None:
        settings = Settings(
            database_url="sqlite+aiosqlite:///:memory:",
            _env_file=None,  # type: ignore[call-arg]
        )

        engine = database.create_engine_from_settings(settings)

        assert isinstance(engine.pool, StaticPool)
        await engine.dispose()

    @pytest.mark.asyncio
    async def test_file_database_uses_configured_pool_size(
        self, tmp_path: Path
    ) -> None:
        settings = Settings(
            database_url=f"sqlite+aiosqlite:///{tmp_path / 'heroes.db'}",
            db_pool_size=3,
            _env_file=None,  # type: ignore[call-arg]
        )

        engine = database.create_engine_from_settings(settings)

        assert engine.pool.size() == 3  # type: ignore[attr-defined]
        await engine.dispose()
