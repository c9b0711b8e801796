"""ヒーローレスポンススキーマ."""

from pydantic import BaseModel, ConfigDict


class HeroResponse(BaseModel):
    """ヒーローレスポンススキーマ."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    identity: str
    hometown: str
    age: int
