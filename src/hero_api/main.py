"""FastAPIアプリケーションのメインエントリーポイント."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from hero_api.common.log_prefix import LogPrefix
from hero_api.database.database import (
    create_tables,
    dispose_engine,
    verify_connection,
)
from hero_api.hero.router import router as hero_router
from hero_api.settings.settings import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """アプリケーションのライフサイクルを管理する.

    起動時にDB接続を確認してテーブルを用意し、終了時に接続を解放する。
    DBに接続できない場合は例外が伝播し、サーバーは起動しない。

    Args:
        app: FastAPIアプリケーション

    """
    logger.info(
        f"{LogPrefix.SERVER} starting environment={get_settings().environment}"
    )
    await verify_connection()
    await create_tables()
    yield
    await dispose_engine()


app = FastAPI(title="Hero API", lifespan=lifespan)
app.include_router(hero_router)
