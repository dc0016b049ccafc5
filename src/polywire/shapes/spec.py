"""
どこで: `polywire.shapes.spec`。
何を: 固定のシェイプ集合を表す variant 型（形状ごとの frozen dataclass）と、
      variant → Mesh の `generate()`、文字列境界の `parse_shape()`。
なぜ: 形状の選択を型で閉じ、未知の名前という実行時状態を外部境界だけに押し込めるため。

設計:
- 各 variant は自分の生成パラメータだけを持つ（`Cube(size)`, `Torus(major_radius, ...)` など）。
- `ShapeSpec` はそれらの Union。`generate()` は `match` で全 variant を網羅する。
- 文字列名（大文字小文字不問）+ 位置パラメータ列は `parse_shape()` で variant に変換する。
  未登録名は `KeyError`、パラメータ数の不一致は `TypeError`。

使用例:
    spec = parse_shape("TORUS", 120, 30, 24, 12)
    mesh = generate(spec)       # Mesh("torus", V=288, E=576)
    generate(Cube(size=50))     # 名前を経由しない直接指定
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from polywire.engine.core.mesh import Mesh

from .axes import axes
from .grid import grid
from .polyhedron import cube, dodecahedron, octahedron, prism, pyramid, tetrahedron
from .registry import get_shape, shape
from .sphere import sphere
from .torus import torus


@shape
@dataclass(frozen=True)
class Cube:
    size: float = 100.0


@shape
@dataclass(frozen=True)
class Tetrahedron:
    size: float = 100.0


@shape
@dataclass(frozen=True)
class Octahedron:
    size: float = 100.0


@shape
@dataclass(frozen=True)
class Pyramid:
    base: float = 100.0
    height: float = 150.0


@shape
@dataclass(frozen=True)
class Prism:
    size: float = 100.0
    height: float = 150.0


@shape
@dataclass(frozen=True)
class Dodecahedron:
    size: float = 100.0


@shape
@dataclass(frozen=True)
class Torus:
    major_radius: float = 100.0
    minor_radius: float = 40.0
    major_segments: int = 16
    minor_segments: int = 8


@shape
@dataclass(frozen=True)
class Sphere:
    radius: float = 100.0
    segments: int = 12


@shape
@dataclass(frozen=True)
class Axes:
    length: float = 150.0


@shape
@dataclass(frozen=True)
class Grid:
    size: float = 400.0
    divisions: int = 10


ShapeSpec = Union[Cube, Tetrahedron, Octahedron, Pyramid, Prism, Dodecahedron, Torus, Sphere, Axes, Grid]


def generate(spec: ShapeSpec) -> Mesh:
    """variant から新しい Mesh を生成する（呼び出しごとに新規）。"""
    match spec:
        case Cube(size=size):
            return cube(size)
        case Tetrahedron(size=size):
            return tetrahedron(size)
        case Octahedron(size=size):
            return octahedron(size)
        case Pyramid(base=base, height=height):
            return pyramid(base, height)
        case Prism(size=size, height=height):
            return prism(size, height)
        case Dodecahedron(size=size):
            return dodecahedron(size)
        case Torus(major_radius=R, minor_radius=r, major_segments=M, minor_segments=m):
            return torus(R, r, M, m)
        case Sphere(radius=radius, segments=segments):
            return sphere(radius, segments)
        case Axes(length=length):
            return axes(length)
        case Grid(size=size, divisions=divisions):
            return grid(size, divisions)
        case _:
            raise TypeError(f"未知のシェイプ variant です: {spec!r}")


def parse_shape(name: str, *params: Any) -> ShapeSpec:
    """外部境界: 名前 + 位置パラメータ列を variant に変換する。

    例外:
        KeyError: 未登録の名前
        TypeError: パラメータ数がその形状の生成シグネチャと合わない場合
    """
    variant = get_shape(name)
    return variant(*params)


def shape_name(spec: ShapeSpec) -> str:
    """variant のレジストリ名（"cube" など）を返す。"""
    return type(spec).__name__.lower()


__all__ = [
    "Cube",
    "Tetrahedron",
    "Octahedron",
    "Pyramid",
    "Prism",
    "Dodecahedron",
    "Torus",
    "Sphere",
    "Axes",
    "Grid",
    "ShapeSpec",
    "generate",
    "parse_shape",
    "shape_name",
]
