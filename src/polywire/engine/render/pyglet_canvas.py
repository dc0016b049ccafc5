"""
どこで: `polywire.engine.render.pyglet_canvas`。
何を: `Canvas` 契約を pyglet の `shapes` + `Batch` で実装する `PygletCanvas`。
なぜ: レンダエンジンの描画呼び出しをそのままウィンドウ表示へ流すため。

座標系:
- エンジンは左上原点・y 下向きで呼び出す。pyglet は左下原点なので y を反転して渡す。
- 非有限座標（投影の分母 0 付近）はこの層で読み飛ばす。
"""

from __future__ import annotations

import math

import pyglet
from pyglet import shapes

from polywire.common.types import RGBA, Color
from polywire.util.color import normalize_color, to_u8_rgba


class PygletCanvas:
    """1 フレーム分の図形を Batch に溜め、`draw()` でまとめて描く。"""

    def __init__(self, width: int, height: int):
        self._size = (int(width), int(height))
        self._batch = pyglet.graphics.Batch()
        # shapes は参照を保持しないと GC で消える
        self._shapes: list[shapes.ShapeBase] = []
        self.clear_color: RGBA = (0.0, 0.0, 0.0, 0.0)

    @property
    def size(self) -> tuple[int, int]:
        return self._size

    def resize(self, width: int, height: int) -> None:
        self._size = (int(width), int(height))

    def _flip(self, y: float) -> float:
        return self._size[1] - y

    def clear(self, color: Color | None) -> None:
        for s in self._shapes:
            s.delete()
        self._shapes = []
        self._batch = pyglet.graphics.Batch()
        self.clear_color = (0.0, 0.0, 0.0, 0.0) if color is None else normalize_color(color)

    def stroke_line(self, x0: float, y0: float, x1: float, y1: float, color: Color, width: float) -> None:
        if not all(math.isfinite(v) for v in (x0, y0, x1, y1)):
            return
        # 太さは位置引数で渡す（pyglet 2.0 の width / 2.1 の thickness の双方で通る）
        line = shapes.Line(
            x0, self._flip(y0), x1, self._flip(y1), float(width),
            color=to_u8_rgba(color), batch=self._batch,
        )
        self._shapes.append(line)

    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        if not all(math.isfinite(v) for v in (x, y, radius)):
            return
        circle = shapes.Circle(x, self._flip(y), radius, color=to_u8_rgba(color), batch=self._batch)
        self._shapes.append(circle)

    def draw(self) -> None:
        """溜めた図形を現在の GL コンテキストへ描く。"""
        self._batch.draw()


__all__ = ["PygletCanvas"]
