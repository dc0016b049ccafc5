"""
どこで: `polywire.engine.render.canvas`。
何を: 描画バックエンド契約 `Canvas`（clear/stroke_line/fill_circle/size の 4 操作）と、
      描画呼び出しを順に記録するヘッドレス実装 `RecordingCanvas`。
なぜ: レンダエンジンを GUI から切り離し、描画順や色をテストで直接検査できるようにするため。

座標系:
- 原点は左上、y は下向き（画面座標）。バックエンドごとの座標変換は実装側の責務。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from polywire.common.types import Color


@runtime_checkable
class Canvas(Protocol):
    """レンダエンジンが使う唯一の描画インターフェース。"""

    @property
    def size(self) -> tuple[int, int]:
        """描画面の (幅, 高さ)。"""
        ...

    def clear(self, color: Color | None) -> None:
        """描画面を単色で塗りつぶす。`None` は完全透明でのクリア。"""
        ...

    def stroke_line(self, x0: float, y0: float, x1: float, y1: float, color: Color, width: float) -> None:
        ...

    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        ...


@dataclass(frozen=True)
class DrawCall:
    """記録された 1 回の描画呼び出し。

    - `op`: "clear" / "line" / "circle"
    - `points`: line は (x0, y0, x1, y1)、circle は (x, y)、clear は空
    - `color`: 指定色（透明クリアは None）
    - `size`: line は線幅、circle は半径、clear は 0
    """

    op: str
    points: tuple[float, ...]
    color: Color | None
    size: float = 0.0


class RecordingCanvas:
    """描画呼び出しを発行順に記録するだけの Canvas 実装。"""

    def __init__(self, width: int = 800, height: int = 600):
        self._size = (int(width), int(height))
        self.calls: list[DrawCall] = []

    @property
    def size(self) -> tuple[int, int]:
        return self._size

    def clear(self, color: Color | None) -> None:
        # 前フレームの記録は破棄する（1 フレーム = clear 以降の呼び出し列）
        self.calls = [DrawCall("clear", (), color)]

    def stroke_line(self, x0: float, y0: float, x1: float, y1: float, color: Color, width: float) -> None:
        self.calls.append(
            DrawCall("line", (float(x0), float(y0), float(x1), float(y1)), color, float(width))
        )

    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        self.calls.append(DrawCall("circle", (float(x), float(y)), color, float(radius)))

    # ---- helpers ----
    def lines(self) -> list[DrawCall]:
        return [c for c in self.calls if c.op == "line"]

    def circles(self) -> list[DrawCall]:
        return [c for c in self.calls if c.op == "circle"]


__all__ = ["Canvas", "DrawCall", "RecordingCanvas"]
