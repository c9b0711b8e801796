"""Hero APIサーバーの起動コマンド.

ログを設定し、uvicornでFastAPIアプリケーションを起動する。
"""

import logging

import typer
import uvicorn

from hero_api.common.log_prefix import LogPrefix
from hero_api.settings.settings import get_settings

app = typer.Typer()

settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@app.command()
def main() -> None:
    """Hero APIサーバーを起動する."""
    logger.info(f"{LogPrefix.SERVER} listening on {settings.host}:{settings.port}")
    uvicorn.run(
        "hero_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    app()
