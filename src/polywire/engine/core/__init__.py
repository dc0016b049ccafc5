"""
どこで: `polywire.engine.core` サブパッケージ。
何を: Vector3/Matrix4・Mesh・変換合成ユーティリティ・フレーム駆動（Tickable/FrameClock）を提供。
なぜ: 計算の基盤を描画層から切り離し、上位層（shapes/render/api）から再利用可能にするため。
"""

from .matrix import Matrix4, multiply_rows
from .mesh import Mesh
from .transform_utils import TransformParameters, apply_transform, compose_matrix
from .vector import Vector3

__all__ = [
    "Vector3",
    "Matrix4",
    "multiply_rows",
    "Mesh",
    "TransformParameters",
    "compose_matrix",
    "apply_transform",
]
