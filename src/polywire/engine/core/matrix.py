"""
どこで: `polywire.engine.core.matrix`。
何を: 4x4 同次変換行列 `Matrix4`（単位・平行移動・軸回転・非一様スケール・積・点変換）と、
      入れ子リスト向けの汎用行列積 `multiply_rows`。
なぜ: 頂点変換の合成順を行列積で明示し、値を返すだけの純関数的 API に統一するため。

データモデル（不変条件）:
- 要素は row-major の `float64 ndarray (4, 4)`（読み取り専用）で保持する。
- `identity/translation/rotation_*/scaling` が返す行列の最下行は常に `[0, 0, 0, 1]`（アフィン）。
- どの操作も自身を変更しない。`translate()` も平行移動列を設定した複製を返す。

合成順:
- `a.multiply(b)`（= `a @ b`）は `a × b`。可換ではなく、積の順序が変換の適用順を表す。
- 列ベクトル規約 `v' = M v` を採用するため、`S @ Rz @ Ry @ Rx` は X 回転が最初に効く。

    # 例: Y 軸 90° 回転で (1, 0, 0) → (0, 0, -1)
    Matrix4.rotation_y(math.pi / 2).transform_vector(Vector3(1, 0, 0))
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .vector import Vector3

_AFFINE_ROW = np.array([0.0, 0.0, 0.0, 1.0])


def multiply_rows(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> list[list[float]]:
    """入れ子リストの行列積（行 × 列の総和）。

    任意サイズの `(n, k) × (k, m)` を受け付ける。内側の次元が一致しない場合は
    呼び出し側の契約違反として即座に `ValueError` を送出する。
    """
    if not a or not b:
        raise ValueError("空の行列は乗算できません")
    inner = len(a[0])
    if inner != len(b):
        raise ValueError(
            f"行列積の次元が不整合です: ({len(a)}x{inner}) × ({len(b)}x{len(b[0])})"
        )
    if any(len(row) != inner for row in a) or any(len(row) != len(b[0]) for row in b):
        raise ValueError("行ごとの列数が揃っていません")

    cols = len(b[0])
    result: list[list[float]] = []
    for i in range(len(a)):
        row: list[float] = []
        for j in range(cols):
            total = 0.0
            for k in range(inner):
                total += a[i][k] * b[k][j]
            row.append(total)
        result.append(row)
    return result


class Matrix4:
    """4x4 同次変換行列（不変）。"""

    __slots__ = ("_m",)

    _m: np.ndarray

    def __init__(self, data: np.ndarray | Sequence[Sequence[float]] | None = None) -> None:
        if data is None:
            m = np.eye(4, dtype=np.float64)
        else:
            m = np.array(data, dtype=np.float64)
            if m.shape != (4, 4):
                raise ValueError(f"Matrix4 は形状 (4, 4) である必要があります: got {m.shape}")
        m.setflags(write=False)
        self._m = m

    # ── ファクトリ ───────────────────
    @classmethod
    def identity(cls) -> "Matrix4":
        return cls()

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix4":
        """行のリストから生成する（形状が (4, 4) でなければ ValueError）。"""
        return cls(rows)

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> "Matrix4":
        m = np.eye(4, dtype=np.float64)
        m[0, 3] = x
        m[1, 3] = y
        m[2, 3] = z
        return cls(m)

    @classmethod
    def scaling(cls, sx: float, sy: float, sz: float) -> "Matrix4":
        """対角スケール。0（軸の潰れ）や負値（鏡映）も許容する。"""
        m = np.eye(4, dtype=np.float64)
        m[0, 0] = sx
        m[1, 1] = sy
        m[2, 2] = sz
        return cls(m)

    @classmethod
    def rotation_x(cls, angle_rad: float) -> "Matrix4":
        c, s = math.cos(angle_rad), math.sin(angle_rad)
        m = np.eye(4, dtype=np.float64)
        m[1, 1] = c
        m[1, 2] = -s
        m[2, 1] = s
        m[2, 2] = c
        return cls(m)

    @classmethod
    def rotation_y(cls, angle_rad: float) -> "Matrix4":
        c, s = math.cos(angle_rad), math.sin(angle_rad)
        m = np.eye(4, dtype=np.float64)
        m[0, 0] = c
        m[0, 2] = s
        m[2, 0] = -s
        m[2, 2] = c
        return cls(m)

    @classmethod
    def rotation_z(cls, angle_rad: float) -> "Matrix4":
        c, s = math.cos(angle_rad), math.sin(angle_rad)
        m = np.eye(4, dtype=np.float64)
        m[0, 0] = c
        m[0, 1] = -s
        m[1, 0] = s
        m[1, 1] = c
        return cls(m)

    # ── 基本操作（すべて純粋） ────────
    def translate(self, x: float, y: float, z: float) -> "Matrix4":
        """平行移動列を `(x, y, z)` に置き換えた複製を返す。

        回転/スケール成分はそのまま残る。既存の変換と「合成」したい場合は
        `Matrix4.translation(x, y, z) @ self` のように積で明示すること。
        """
        m = self._m.copy()
        m[0, 3] = x
        m[1, 3] = y
        m[2, 3] = z
        return Matrix4(m)

    def multiply(self, other: "Matrix4") -> "Matrix4":
        """`self × other` を返す。"""
        return Matrix4(self._m @ other._m)

    def __matmul__(self, other: "Matrix4") -> "Matrix4":
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self.multiply(other)

    def transform_vector(self, v: Vector3) -> Vector3:
        """点として変換（w=1）。アフィン前提のため同次除算は行わない。"""
        m = self._m
        return Vector3(
            m[0, 0] * v.x + m[0, 1] * v.y + m[0, 2] * v.z + m[0, 3],
            m[1, 0] * v.x + m[1, 1] * v.y + m[1, 2] * v.z + m[1, 3],
            m[2, 0] * v.x + m[2, 1] * v.y + m[2, 2] * v.z + m[2, 3],
        )

    def transform_points(self, points: np.ndarray) -> np.ndarray:
        """`(N, 3)` の点群をまとめて変換し、新しい `(N, 3) float64` 配列を返す。"""
        pts = np.asarray(points, dtype=np.float64)
        if pts.ndim != 2 or pts.shape[1] != 3:
            raise ValueError(f"points は形状 (N, 3) である必要があります: got {pts.shape}")
        return pts @ self._m[:3, :3].T + self._m[:3, 3]

    def is_affine(self) -> bool:
        return bool(np.array_equal(self._m[3], _AFFINE_ROW))

    def to_array(self, *, copy: bool = True) -> np.ndarray:
        """要素配列 `(4, 4)` を返す。`copy=False` は読み取り専用ビュー。"""
        return self._m.copy() if copy else self._m

    @property
    def elements(self) -> tuple[float, ...]:
        """16 要素（row-major）のタプル。"""
        return tuple(float(v) for v in self._m.ravel())

    def allclose(self, other: "Matrix4", *, atol: float = 1e-9) -> bool:
        return bool(np.allclose(self._m, other._m, rtol=0.0, atol=atol))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        rows = ", ".join("[" + ", ".join(f"{v:.4g}" for v in row) + "]" for row in self._m)
        return f"Matrix4({rows})"


__all__ = ["Matrix4", "multiply_rows"]
