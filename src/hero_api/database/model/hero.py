"""ヒーローのデータモデルを定義するモジュール."""

from sqlmodel import Field, SQLModel


class NewHero(SQLModel):
    """登録・更新リクエストで受け取るヒーロー.

    IDを持たず、更新時はこの4項目すべてで既存行を上書きする。

    Attributes
    ----------
        name: ヒーローの名前
        identity: ヒーローの正体
        hometown: 出身地
        age: 年齢

    """

    name: str
    identity: str
    hometown: str
    age: int


class Hero(NewHero, table=True):
    """ヒーローを表すデータベースモデル.

    Attributes
    ----------
        id: ヒーローの一意識別子(主キー、登録時にDBが採番)

    """

    __tablename__ = "heroes"

    id: int | None = Field(default=None, primary_key=True)
