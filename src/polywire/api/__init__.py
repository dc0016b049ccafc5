"""
どこで: `polywire.api` パッケージ。
何を: 対話ビューア（`run_viewer`）と CLI の入口。
なぜ: pyglet への依存をこの層（と `engine.render.pyglet_canvas`）に閉じ込めるため。
      ウィンドウ関連の import は `run_viewer()` 内で遅延させる。
"""

from .viewer import SpinDriver, build_engine, run_viewer

__all__ = ["SpinDriver", "build_engine", "run_viewer"]
