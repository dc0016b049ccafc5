from __future__ import annotations

from polywire.engine.core.mesh import Mesh

# X/Y/Z の表示色（深度着色より優先される固定色）
AXIS_COLORS = ("#ff0000", "#00ff00", "#0000ff")


def axes(length: float = 150.0) -> Mesh:
    """原点から +X/+Y/+Z へ伸びる 3 本の軸を生成します（辺ごとに固定色付き）。"""
    L = float(length)
    vertices = [[0.0, 0.0, 0.0], [L, 0.0, 0.0], [0.0, L, 0.0], [0.0, 0.0, L]]
    edges = [(0, 1), (0, 2), (0, 3)]
    return Mesh("axes", vertices, edges, edge_colors=AXIS_COLORS)
