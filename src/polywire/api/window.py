"""
どこで: `polywire.api` の描画ウィンドウ薄ラッパ。
何を: Pyglet Window（MSAA/背景クリア）と描画コールバック登録を提供。
なぜ: レンダエンジンから GUI 依存を切り離し、最小インターフェイスで統一するため。

使用例:
    canvas = PygletCanvas(800, 600)
    win = RenderWindow(800, 600, canvas=canvas)
    win.add_draw_callback(canvas.draw)
    pyglet.app.run()
"""

from __future__ import annotations

from typing import Callable

import pyglet
from pyglet.gl import Config, glClearColor

from polywire.engine.render.pyglet_canvas import PygletCanvas


class RenderWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        canvas: PygletCanvas,
        caption: str = "polywire",
    ):
        """ウィンドウを生成する。

        引数:
            width: ウィンドウ幅（ピクセル）。
            height: ウィンドウ高さ（ピクセル）。
            canvas: 背景色と図形を保持する描画先。
        """
        # 線描画を滑らかにするために MSAA を有効化
        config = Config(double_buffer=True, sample_buffers=1, samples=4, vsync=True)
        super().__init__(width=width, height=height, caption=caption, config=config, resizable=True)
        self._canvas = canvas
        self._draw_callbacks: list[Callable[[], None]] = []

    def add_draw_callback(self, func: Callable[[], None]) -> None:
        """
        `on_draw` 中に呼び出す描画関数を登録する。

        - 関数は引数を取らず、副作用で描画を行うこと。
        - 登録順に呼び出される。
        """
        self._draw_callbacks.append(func)

    def on_draw(self):  # Pyglet 既定のイベント名
        """ウィンドウ描画イベントハンドラ。直近の clear 色で塗り、登録された描画関数を呼ぶ。"""
        r, g, b, a = self._canvas.clear_color
        glClearColor(r, g, b, a)
        self.clear()
        for cb in self._draw_callbacks:
            cb()

    def on_resize(self, width, height):
        self._canvas.resize(width, height)
        return super().on_resize(width, height)


__all__ = ["RenderWindow"]
