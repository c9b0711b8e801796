"""データベース接続とセッション管理を提供するモジュール."""

import logging
from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from hero_api.common.log_prefix import LogPrefix
from hero_api.database.model import Hero
from hero_api.settings.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """設定から非同期エンジンを生成する.

    インメモリSQLiteはStaticPoolとなりプールサイズを指定できないため、
    その場合のみ pool_size / max_overflow を渡さない。

    Args:
    ----
        settings: アプリケーション設定

    Returns:
    -------
        AsyncEngine: 非同期エンジン

    """
    url = make_url(settings.database_driver_url)
    options: dict[str, Any] = {"echo": settings.sql_log, "pool_pre_ping": True}
    if not (
        url.get_backend_name() == "sqlite"
        and url.database in (None, "", ":memory:")
    ):
        options["pool_size"] = settings.db_pool_size
        options["max_overflow"] = settings.db_max_overflow
    return create_async_engine(url, **options)


async_engine = create_engine_from_settings(get_settings())


async def get_async_db_session() -> AsyncGenerator[AsyncSession]:
    """非同期データベースセッションを生成する.

    FastAPIの依存性注入で使用されるジェネレーター関数。
    リクエストごとにプールから接続を借り受け、
    リクエスト終了時にセッションをクローズして接続をプールへ返却する。

    Yields
    ------
        AsyncSession: 非同期データベースセッション

    """
    async with AsyncSession(async_engine) as session:
        yield session


async def verify_connection() -> None:
    """データベースへ接続できることを確認する.

    Raises
    ------
        Exception: 接続に失敗した場合(起動を中止させる)

    """
    try:
        async with async_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception:
        logger.critical(
            f"{LogPrefix.DATABASE} could not connect to database",
            exc_info=True,
        )
        raise
    logger.info(f"{LogPrefix.DATABASE} connection verified")


async def create_tables() -> None:
    """herosテーブルが存在しない場合に作成する."""
    async with async_engine.begin() as conn:
        await conn.run_sync(
            SQLModel.metadata.create_all,
            tables=[Hero.__table__],  # type: ignore[attr-defined]
        )


async def dispose_engine() -> None:
    """プール内の接続をすべてクローズする."""
    await async_engine.dispose()
    logger.info(f"{LogPrefix.DATABASE} connections closed")
