from __future__ import annotations

import numpy as np

from polywire.engine.core.mesh import Mesh


def _grid_positions(size: float, divisions: int) -> np.ndarray:
    """`[-size/2, size/2]` を `divisions` 等分した線の位置（`divisions + 1` 個）。"""
    half = float(size) / 2.0
    return np.linspace(-half, half, divisions + 1)


def grid(size: float = 400.0, divisions: int = 10) -> Mesh:
    """XZ 平面（y=0）の正方形グリッドを生成します。

    引数:
        size: 一辺の長さ
        divisions: 分割数（各方向 `divisions + 1` 本の線）

    返り値:
        2 頂点 1 辺の線分を `2 * (divisions + 1)` 本持つ Mesh
    """
    divisions = int(divisions)
    if divisions < 1:
        raise ValueError("grid の分割数は 1 以上である必要があります")

    half = float(size) / 2.0
    pos = _grid_positions(size, divisions)
    n = pos.shape[0]

    # X 方向の線（z 固定）
    along_x = np.zeros((n, 2, 3), dtype=np.float64)
    along_x[:, 0, 0] = -half
    along_x[:, 1, 0] = half
    along_x[:, :, 2] = pos[:, np.newaxis]

    # Z 方向の線（x 固定）
    along_z = np.zeros((n, 2, 3), dtype=np.float64)
    along_z[:, :, 0] = pos[:, np.newaxis]
    along_z[:, 0, 2] = -half
    along_z[:, 1, 2] = half

    vertices = np.concatenate([along_x, along_z], axis=0).reshape(-1, 3)
    edges = np.arange(vertices.shape[0], dtype=np.int32).reshape(-1, 2)
    return Mesh("grid", vertices, edges)
