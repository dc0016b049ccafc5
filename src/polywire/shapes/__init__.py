"""
どこで: `polywire.shapes` パッケージ。
何を: 形状生成関数（純関数 → Mesh）と、variant 型/名前レジストリを再公開する。
なぜ: レンダエンジンと CLI/ビューアが同じ入口から形状を選べるようにするため。
"""

from .axes import axes
from .grid import grid
from .polyhedron import cube, dodecahedron, octahedron, prism, pyramid, tetrahedron
from .registry import get_shape, is_shape_registered, list_shapes
from .spec import (
    Axes,
    Cube,
    Dodecahedron,
    Grid,
    Octahedron,
    Prism,
    Pyramid,
    ShapeSpec,
    Sphere,
    Tetrahedron,
    Torus,
    generate,
    parse_shape,
    shape_name,
)
from .sphere import sphere
from .torus import torus

__all__ = [
    "cube",
    "tetrahedron",
    "octahedron",
    "pyramid",
    "prism",
    "dodecahedron",
    "torus",
    "sphere",
    "axes",
    "grid",
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
    "get_shape",
    "list_shapes",
    "is_shape_registered",
]
