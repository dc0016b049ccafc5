"""
どこで: `polywire.engine.core.vector`。
何を: 3 成分ベクトルの不変値型 `Vector3` と代数演算（加減算・スカラー倍・内積・外積・
      ノルム・正規化・距離・線形補間）。
なぜ: 点と方向の両方に使う最小の値型を、共有可変状態なしで提供するため。

規約:
- すべての演算は新しい `Vector3` を返す（frozen dataclass）。
- 数値の退化ケースは例外にしない。ゼロベクトルの正規化はゼロベクトルを返す。
- `lerp` の `t` はクランプしない（外挿を許容）。

使用例:
    a = Vector3(1.0, 0.0, 0.0)
    b = Vector3(0.0, 1.0, 0.0)
    a.cross(b)            # Vector3(0, 0, 1)
    (a + b).normalize()   # 長さ 1
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np


@dataclass(frozen=True)
class Vector3:
    """不変の 3 成分ベクトル。"""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        # np.float64 等を素の float に揃え、等価比較/表示を安定させる
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    # ── 生成 ───────────────────
    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, values: Sequence[float] | np.ndarray) -> "Vector3":
        """`(x, y, z)` の並びから生成する（長さ 3 以外は ValueError）。"""
        if len(values) != 3:
            raise ValueError(f"Vector3 には 3 成分が必要です: got {len(values)}")
        return cls(values[0], values[1], values[2])

    def to_array(self) -> np.ndarray:
        """`[x, y, z]` の float64 配列を返す（成分順を保持）。"""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    # ── 代数 ───────────────────
    def add(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, s: float) -> "Vector3":
        return Vector3(self.x * s, self.y * s, self.z * s)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        """右手系の外積。平行な入力ではゼロベクトル。"""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> "Vector3":
        """単位ベクトルを返す。長さ 0 の場合はゼロベクトル（例外にしない）。"""
        m = self.magnitude()
        if m == 0:
            return Vector3.zero()
        return Vector3(self.x / m, self.y / m, self.z / m)

    def distance_to(self, other: "Vector3") -> float:
        return self.subtract(other).magnitude()

    def lerp(self, other: "Vector3", t: float) -> "Vector3":
        """成分ごとのアフィン補間。`t` は [0, 1] 外も許容。"""
        return Vector3(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
            self.z + (other.z - self.z) * t,
        )

    # 演算子糖衣
    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, s: float) -> "Vector3":
        if isinstance(s, Vector3):
            return NotImplemented
        return self.scale(s)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"Vector3({self.x:.4g}, {self.y:.4g}, {self.z:.4g})"


__all__ = ["Vector3"]
