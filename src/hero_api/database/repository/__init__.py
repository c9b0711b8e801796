"""リポジトリモジュール."""

from .hero_repository import (
    HeroRepository,
    get_hero_repository,
)

__all__ = [
    "HeroRepository",
    "get_hero_repository",
]
