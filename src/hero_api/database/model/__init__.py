"""データベースモデルを一括エクスポートするモジュール.

新しいモデルを追加する際は、ここにインポート文を1行追加する。

Example:
-------
    新しいモデル `Villain` を追加した場合:
    ```python
    from .villain import Villain
    ```

"""

from .hero import Hero, NewHero

__all__ = ["Hero", "NewHero"]
