"""
どこで: `polywire.shapes.polyhedron`。
何を: 頂点座標と辺/面 index を構成的に持つ多面体（立方体・正四面体・正八面体・四角錐・三角柱・
      正十二面体）の生成関数。
なぜ: 形状ごとのトポロジを固定表で持ち、生成を決定的な純関数にするため。

座標系:
- 原点中心。画面は y 下向きなので、錐/柱の「上」は -y 側に置く。
- `size` は中心から頂点方向への半幅（立方体 size=100 → 頂点 (±100, ±100, ±100)）。
"""

from __future__ import annotations

import math

import numpy as np

from polywire.engine.core.mesh import Mesh

PHI = (1.0 + math.sqrt(5.0)) / 2.0

# 頂点順は a..h（a=(+,+,+), b=(-,+,+), c=(-,-,+), d=(+,-,+), e..h は z 反転）
_CUBE_EDGES = [
    (0, 1), (1, 2), (2, 3), (3, 0),
    (0, 4), (1, 5), (2, 6), (3, 7),
    (4, 5), (5, 6), (6, 7), (7, 4),
]  # fmt: skip
_CUBE_FACES = [
    (0, 1, 2, 3),  # +z
    (4, 7, 6, 5),  # -z
    (0, 4, 5, 1),  # +y
    (3, 2, 6, 7),  # -y
    (0, 3, 7, 4),  # +x
    (1, 5, 6, 2),  # -x
]

# 立方体角 8 点 + 長方形 3 組（(0,±b,±c), (±b,±c,0), (±c,0,±b)）
_DODECAHEDRON_EDGES = [
    # 長方形の短辺
    (8, 10), (9, 11), (12, 14), (13, 15), (16, 17), (18, 19),
    # 立方体角 → 各長方形の最近点
    (0, 8), (0, 12), (0, 16),
    (1, 9), (1, 12), (1, 17),
    (2, 10), (2, 13), (2, 16),
    (3, 11), (3, 13), (3, 17),
    (4, 8), (4, 14), (4, 18),
    (5, 9), (5, 14), (5, 19),
    (6, 10), (6, 15), (6, 18),
    (7, 11), (7, 15), (7, 19),
]  # fmt: skip


def cube(size: float = 100.0) -> Mesh:
    """立方体（8 頂点・12 辺・6 面）。"""
    s = float(size)
    vertices = [
        [s, s, s], [-s, s, s], [-s, -s, s], [s, -s, s],
        [s, s, -s], [-s, s, -s], [-s, -s, -s], [s, -s, -s],
    ]  # fmt: skip
    return Mesh("cube", vertices, _CUBE_EDGES, _CUBE_FACES)


def tetrahedron(size: float = 100.0) -> Mesh:
    """正四面体（立方体の交互の角 4 点）。"""
    s = float(size)
    vertices = [[s, s, s], [s, -s, -s], [-s, s, -s], [-s, -s, s]]
    edges = [(0, 1), (0, 2), (0, 3), (1, 2), (2, 3), (3, 1)]
    faces = [(0, 1, 2), (0, 3, 1), (0, 2, 3), (1, 3, 2)]
    return Mesh("tetrahedron", vertices, edges, faces)


def octahedron(size: float = 100.0) -> Mesh:
    """正八面体（各軸上の ±size）。"""
    s = float(size)
    vertices = [[s, 0, 0], [-s, 0, 0], [0, s, 0], [0, -s, 0], [0, 0, s], [0, 0, -s]]
    # 対向する頂点（0-1, 2-3, 4-5）以外をすべて結ぶ
    edges = [
        (0, 2), (0, 3), (0, 4), (0, 5),
        (1, 2), (1, 3), (1, 4), (1, 5),
        (2, 4), (2, 5), (3, 4), (3, 5),
    ]  # fmt: skip
    faces = [(x, y, z) for x in (0, 1) for y in (2, 3) for z in (4, 5)]
    return Mesh("octahedron", vertices, edges, faces)


def pyramid(base: float = 100.0, height: float = 150.0) -> Mesh:
    """正方形底面の四角錐（底面半幅 `base`、高さ `height`）。"""
    b = float(base)
    h = float(height) / 2.0
    vertices = [[-b, h, -b], [b, h, -b], [b, h, b], [-b, h, b], [0.0, -h, 0.0]]
    edges = [(0, 1), (1, 2), (2, 3), (3, 0), (0, 4), (1, 4), (2, 4), (3, 4)]
    faces = [(0, 1, 2, 3), (0, 1, 4), (1, 2, 4), (2, 3, 4), (3, 0, 4)]
    return Mesh("pyramid", vertices, edges, faces)


def prism(size: float = 100.0, height: float = 150.0) -> Mesh:
    """三角柱（XZ 平面の正三角形を y 方向に押し出し）。"""
    r = float(size)
    h = float(height) / 2.0
    angles = [math.radians(a) for a in (90.0, 210.0, 330.0)]
    top = [[r * math.cos(a), -h, r * math.sin(a)] for a in angles]
    bottom = [[r * math.cos(a), h, r * math.sin(a)] for a in angles]
    edges = [
        (0, 1), (1, 2), (2, 0),
        (3, 4), (4, 5), (5, 3),
        (0, 3), (1, 4), (2, 5),
    ]  # fmt: skip
    faces = [(0, 1, 2), (5, 4, 3), (0, 3, 4, 1), (1, 4, 5, 2), (2, 5, 3, 0)]
    return Mesh("prism", top + bottom, edges, faces)


def dodecahedron(size: float = 100.0) -> Mesh:
    """正十二面体（20 頂点・30 辺）。

    黄金比 `φ` から `a = size`, `b = size/φ`, `c = size·φ` を作り、
    立方体角 `(±a, ±a, ±a)` と 3 組の長方形 `(0, ±b, ±c)`, `(±b, ±c, 0)`, `(±c, 0, ±b)` に配置する。
    面はワイヤーフレームでは不要なので空のまま。
    """
    a = float(size)
    b = a / PHI
    c = a * PHI
    signs = (-1.0, 1.0)
    corners = [[sx * a, sy * a, sz * a] for sx in signs for sy in signs for sz in signs]
    rect_x = [[0.0, sy * b, sz * c] for sy in signs for sz in signs]
    rect_y = [[sx * b, sy * c, 0.0] for sx in signs for sy in signs]
    rect_z = [[sx * c, 0.0, sz * b] for sx in signs for sz in signs]
    vertices = np.array(corners + rect_x + rect_y + rect_z, dtype=np.float64)
    return Mesh("dodecahedron", vertices, _DODECAHEDRON_EDGES)


__all__ = ["PHI", "cube", "tetrahedron", "octahedron", "pyramid", "prism", "dodecahedron"]
