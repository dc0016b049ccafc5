"""
どこで: `polywire.engine.core` の変換ユーティリティ。
何を: 変換パラメータ `TransformParameters` と、複合行列 `compose_matrix()` / 頂点適用 `apply_transform()`。
なぜ: レンダエンジンが使う合成順（Scale·RotZ·RotY·RotX → 平行移動）を一箇所で固定するため。

合成順:
- 行列は `S @ Rz @ Ry @ Rx`（列ベクトル規約のため X→Y→Z 回転の後にスケール）。
- 平行移動は行列に焼き込まず、変換後の頂点へベクトルとして加算する。
- 順序を入れ替えると見た目が変わるため、互換性のためこの順を保つ。
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Mapping

import numpy as np

from polywire.common.base_registry import BaseRegistry

from .matrix import Matrix4


@dataclass(frozen=True)
class TransformParameters:
    """1 回の `transform` 呼び出しで与える変換量。

    - 回転は度（軸ごと、無制限）。
    - 平行移動はシーン単位。
    - スケールは軸ごとの係数（既定 1、0 や負値も可）。
    """

    rotation_x: float = 0.0
    rotation_y: float = 0.0
    rotation_z: float = 0.0
    translate_x: float = 0.0
    translate_y: float = 0.0
    translate_z: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0
    scale_z: float = 1.0

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None = None, **kwargs: Any) -> "TransformParameters":
        """`{"rotationY": 90}` / `{"rotation_y": 90}` の双方から生成する。

        未知のキーは呼び出し側の誤りとして TypeError。
        """
        merged: dict[str, Any] = dict(values or {})
        merged.update(kwargs)
        known = {f.name for f in fields(cls)}
        resolved: dict[str, float] = {}
        for key, value in merged.items():
            norm = BaseRegistry.normalize_key(key)
            if norm not in known:
                raise TypeError(f"未知の変換パラメータです: {key!r}")
            resolved[norm] = float(value)
        return cls(**resolved)

    @property
    def rotation_rad(self) -> tuple[float, float, float]:
        return (
            math.radians(self.rotation_x),
            math.radians(self.rotation_y),
            math.radians(self.rotation_z),
        )

    @property
    def translation(self) -> tuple[float, float, float]:
        return (self.translate_x, self.translate_y, self.translate_z)

    @property
    def scale(self) -> tuple[float, float, float]:
        return (self.scale_x, self.scale_y, self.scale_z)


def compose_matrix(params: TransformParameters) -> Matrix4:
    """`Scale · RotZ · RotY · RotX` を返す（平行移動は含まない）。"""
    rx, ry, rz = params.rotation_rad
    sx, sy, sz = params.scale
    return (
        Matrix4.scaling(sx, sy, sz)
        @ Matrix4.rotation_z(rz)
        @ Matrix4.rotation_y(ry)
        @ Matrix4.rotation_x(rx)
    )


def apply_transform(vertices: np.ndarray, params: TransformParameters) -> np.ndarray:
    """複合変換：行列を全頂点へ適用し、その後で平行移動を加算する。

    引数:
        vertices: `(N, 3)` の元頂点
        params: 変換パラメータ

    返り値:
        変換後の新しい `(N, 3) float64` 配列
    """
    out = compose_matrix(params).transform_points(vertices)
    out += np.asarray(params.translation, dtype=np.float64)
    return out


__all__ = ["TransformParameters", "compose_matrix", "apply_transform"]
