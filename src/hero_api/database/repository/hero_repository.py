"""Heroテーブルのリポジトリモジュール."""

import logging
from collections.abc import Sequence
from typing import Annotated

from fastapi import Depends
from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from hero_api.common.exceptions import HeroNotFoundError
from hero_api.common.log_prefix import LogPrefix
from hero_api.database.database import get_async_db_session
from hero_api.database.model.hero import Hero, NewHero

logger = logging.getLogger(__name__)


class HeroRepository:
    """Heroテーブルへのデータアクセスを提供するリポジトリ.

    各操作はSQL文を1つだけ実行する。

    Attributes
    ----------
        session: 非同期DBセッション

    """

    def __init__(self, session: AsyncSession) -> None:
        """HeroRepositoryを初期化.

        Args:
        ----
            session: 非同期DBセッション

        """
        self.session = session

    async def fetch(self, hero_id: int) -> Hero:
        """IDを指定してヒーローを1件取得.

        Args:
        ----
            hero_id: ヒーローID

        Returns:
        -------
            Heroオブジェクト

        Raises:
        ------
            HeroNotFoundError: 該当するヒーローが存在しない場合

        """
        result = await self.session.exec(
            select(Hero).where(col(Hero.id) == hero_id)
        )
        hero = result.first()
        if hero is None:
            raise HeroNotFoundError(hero_id)
        return hero

    async def create(self, new_hero: NewHero) -> NewHero:
        """ヒーローを登録.

        IDはDBが採番する。戻り値は入力をそのまま返すため、
        採番されたIDは含まれない。

        Args:
        ----
            new_hero: 登録するヒーロー

        Returns:
        -------
            入力されたNewHero

        Raises:
        ------
            SQLAlchemyError: DB登録エラー時

        """
        try:
            self.session.add(Hero.model_validate(new_hero))
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            logger.error(
                f"{LogPrefix.DATABASE} error creating hero: %s",
                new_hero.model_dump(),
                exc_info=True,
            )
            raise
        return new_hero

    async def update(self, hero_id: int, new_hero: NewHero) -> bool:
        """IDを指定してヒーローの全項目を上書き.

        該当行が存在しない場合もSQL文が成功すればTrueを返す。

        Args:
        ----
            hero_id: ヒーローID
            new_hero: 上書きする内容

        Returns:
        -------
            SQL文の実行に成功した場合True

        """
        stmt = (
            update(Hero)
            .where(col(Hero.id) == hero_id)
            .values(**new_hero.model_dump())
        )
        return await self._execute_mutation(stmt, action="update", hero_id=hero_id)

    async def delete(self, hero_id: int) -> bool:
        """IDを指定してヒーローを削除.

        該当行が存在しない場合もSQL文が成功すればTrueを返す。

        Args:
        ----
            hero_id: ヒーローID

        Returns:
        -------
            SQL文の実行に成功した場合True

        """
        stmt = delete(Hero).where(col(Hero.id) == hero_id)
        return await self._execute_mutation(stmt, action="delete", hero_id=hero_id)

    async def list(self) -> Sequence[Hero]:
        """全ヒーローをID昇順で取得.

        Returns
        -------
            Heroオブジェクトのリスト(0件の場合は空)

        """
        result = await self.session.exec(select(Hero).order_by(col(Hero.id).asc()))
        return result.all()

    async def _execute_mutation(
        self,
        stmt: object,
        *,
        action: str,
        hero_id: int,
    ) -> bool:
        """更新系SQL文を実行し、成否を真偽値で返す."""
        try:
            await self.session.exec(stmt)  # type: ignore[call-overload]
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            logger.error(
                f"{LogPrefix.DATABASE} error context=%s hero_id=%s",
                action,
                hero_id,
                exc_info=True,
            )
            return False
        return True


async def get_hero_repository(
    session: Annotated[AsyncSession, Depends(get_async_db_session)],
) -> HeroRepository:
    """FastAPI DI用のHeroRepositoryファクトリ.

    Returns
    -------
        HeroRepository

    """
    return HeroRepository(session)
