"""
polywire: 3D ワイヤーフレームの変換・透視投影・深度順描画。

主な入口:
- `RenderEngine`: 形状の保持と transform → render の 2 フェーズ
- `RenderSettings` / `RecordingCanvas`: 描画オプションとヘッドレス描画先
- `parse_shape` / `generate`: 形状名 → variant → Mesh
- `TransformParameters`: 回転（度）/平行移動/スケール
"""

from polywire.engine.core import Matrix4, Mesh, TransformParameters, Vector3
from polywire.engine.render import RecordingCanvas, RenderEngine, RenderSettings
from polywire.shapes import generate, list_shapes, parse_shape

__version__ = "0.1.0"

__all__ = [
    "Vector3",
    "Matrix4",
    "Mesh",
    "TransformParameters",
    "RenderEngine",
    "RenderSettings",
    "RecordingCanvas",
    "generate",
    "parse_shape",
    "list_shapes",
]
