"""ログプレフィックス定数."""


class LogPrefix:
    """ロギング用プレフィックス定数."""

    SERVER = "[SERVER]"
    DATABASE = "[DATABASE]"
    HERO_API = "[HERO_API]"
