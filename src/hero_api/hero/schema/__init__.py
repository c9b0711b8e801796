"""ヒーローAPIのスキーマ."""

from .hero import HeroResponse

__all__ = ["HeroResponse"]
