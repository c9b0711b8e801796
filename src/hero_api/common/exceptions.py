"""アプリケーション固有の例外定義."""


class HeroNotFoundError(Exception):
    """指定IDのヒーローが存在しない場合に送出される例外.

    Attributes
    ----------
        hero_id: 見つからなかったヒーローのID

    """

    def __init__(self, hero_id: int) -> None:
        self.hero_id = hero_id
        super().__init__(f"Hero not found: id={hero_id}")
