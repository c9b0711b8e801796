"""アプリケーション設定を管理するモジュール."""

from functools import lru_cache

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url

# ドライバ指定のない接続文字列をasyncpg用に読み替える
_PLAIN_POSTGRES_DRIVERNAMES = ("postgres", "postgresql")
ASYNC_POSTGRES_DRIVERNAME = "postgresql+asyncpg"


class Settings(BaseSettings):
    """アプリケーション全体の設定を管理するクラス.

    環境変数(および存在すれば .env ファイル)から設定値を読み込み、
    データベース接続情報などを提供する。

    Attributes
    ----------
        database_url: データベース接続文字列(必須)
        environment: 実行環境(development, production等)
        sql_log: SQLログの出力有無(デフォルト: False)
        log_level: ログレベル(デフォルト: INFO)
        db_pool_size: コネクションプールに保持する接続数
        db_max_overflow: プールを超えて許可する追加接続数
        host: 待ち受けアドレス
        port: 待ち受けポート

    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str
    environment: str = "development"

    sql_log: bool = False
    log_level: str = "INFO"

    db_pool_size: int = 5
    db_max_overflow: int = 0

    host: str = "0.0.0.0"
    port: int = 8000

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_driver_url(self) -> str:
        """非同期ドライバ付きの接続URLを返す.

        `postgres://` や `postgresql://` はasyncpg用のスキームに変換し、
        既にドライバを指定しているURLはそのまま返す。

        Returns
        -------
            str: SQLAlchemyの非同期エンジン用接続URL

        """
        url = make_url(self.database_url)
        if url.drivername in _PLAIN_POSTGRES_DRIVERNAMES:
            url = url.set(drivername=ASYNC_POSTGRES_DRIVERNAME)
        return url.render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    """アプリケーション設定のシングルトンインスタンスを取得する.

    LRUキャッシュにより同一インスタンスを再利用し、
    環境変数の読み込みコストを削減する。
    DATABASE_URL が未設定の場合は ValidationError となり起動できない。

    Returns
    -------
        Settings: アプリケーション設定オブジェクト

    """
    return Settings()  # type: ignore[call-arg]
