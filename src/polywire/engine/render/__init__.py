"""
どこで: `polywire.engine.render` サブパッケージ。
何を: 投影・深度ソート・Canvas 契約と、Mesh を描画呼び出しへ変換する RenderEngine を提供。
なぜ: 計算（core/shapes）と描画の責務を分離し、GUI 依存（pyglet）を `pyglet_canvas` に局所化するため。
"""

from .canvas import Canvas, DrawCall, RecordingCanvas
from .projection import project_points
from .renderer import RenderEngine
from .settings import RenderSettings

__all__ = [
    "Canvas",
    "DrawCall",
    "RecordingCanvas",
    "project_points",
    "RenderEngine",
    "RenderSettings",
]
