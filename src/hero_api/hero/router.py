"""ヒーローAPIのルーター定義."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from hero_api.common.exceptions import HeroNotFoundError
from hero_api.common.log_prefix import LogPrefix
from hero_api.database.model.hero import NewHero
from hero_api.database.repository.hero_repository import (
    HeroRepository,
    get_hero_repository,
)
from hero_api.hero.schema import HeroResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hero", tags=["hero"])

Repository = Annotated[HeroRepository, Depends(get_hero_repository)]


@router.get("/{hero_id}", response_model=HeroResponse)
async def fetch_hero(hero_id: int, repo: Repository) -> HeroResponse:
    """IDを指定してヒーローを返す.

    該当するヒーローが存在しない場合は404を返す。
    """
    logger.info(f"{LogPrefix.HERO_API} fetch hero_id={hero_id}")
    try:
        hero = await repo.fetch(hero_id)
    except HeroNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    return HeroResponse.model_validate(hero)


@router.post("/", response_model=NewHero)
async def create_hero(hero: NewHero, repo: Repository) -> NewHero:
    """ヒーローを登録し、受け取った内容をそのまま返す(IDは含まない)."""
    logger.info(f"{LogPrefix.HERO_API} create name={hero.name}")
    return await repo.create(hero)


@router.get("/", response_model=list[HeroResponse])
async def list_heroes(repo: Repository) -> list[HeroResponse]:
    """登録済みのヒーロー一覧をID昇順で返す."""
    logger.info(f"{LogPrefix.HERO_API} list")
    heroes = await repo.list()
    return [HeroResponse.model_validate(h) for h in heroes]


@router.put("/{hero_id}", response_class=Response)
async def update_hero(hero_id: int, hero: NewHero, repo: Repository) -> Response:
    """ヒーローの全項目を上書きする.

    更新の成否は呼び出し元に返さない。
    """
    logger.info(f"{LogPrefix.HERO_API} update hero_id={hero_id}")
    await repo.update(hero_id, hero)
    return Response()


@router.delete("/{hero_id}", response_class=Response)
async def delete_hero(hero_id: int, repo: Repository) -> Response:
    """ヒーローを削除する.

    削除の成否は呼び出し元に返さない。
    """
    logger.info(f"{LogPrefix.HERO_API} delete hero_id={hero_id}")
    await repo.delete(hero_id)
    return Response()
