"""
どこで: `polywire.engine.core` の更新インターフェース。
何を: 1 フレーム更新 `tick(dt)` を持つ `Tickable` Protocol を定義。
なぜ: 外部ループから「変換 → 描画」を駆動するオブジェクトを一様に扱うため。
"""

from typing import Protocol


class Tickable(Protocol):
    """1 フレーム分の処理を行うインターフェース。"""

    def tick(self, dt: float) -> None:
        """内部状態を `dt` 秒ぶん進め、必要なら描画まで行う。"""
