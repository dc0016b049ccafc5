from __future__ import annotations

import numpy as np
from numba import njit

from polywire.engine.core.mesh import Mesh


@njit(cache=True)
def _sphere_edges(segments: int) -> np.ndarray:
    """経度方向の隣（周回で閉じる）と、1 つ下の緯度リングの同じ経度への辺を生成します。"""
    rings = segments + 1
    n_edges = rings * segments + segments * segments
    edges = np.empty((n_edges, 2), dtype=np.int32)
    k = 0
    for i in range(rings):
        for j in range(segments):
            idx = i * segments + j
            edges[k, 0] = idx
            edges[k, 1] = i * segments + (j + 1) % segments
            k += 1
            if i < segments:
                edges[k, 0] = idx
                edges[k, 1] = (i + 1) * segments + j
                k += 1
    return edges


def sphere(radius: float = 100.0, segments: int = 12) -> Mesh:
    """UV 球を生成します。

    緯度 `segments + 1` リング × 経度 `segments` サンプルを球座標から直交座標へ変換する。
    極は特別扱いせず、lat=0 / lat=segments のリングは 1 点に縮退したまま残す。
    """
    segments = int(segments)
    if segments < 1:
        raise ValueError("sphere の分割数は 1 以上である必要があります")

    lat = np.pi * np.arange(segments + 1) / segments
    lon = 2 * np.pi * np.arange(segments) / segments
    sin_lat = np.sin(lat)[:, np.newaxis]
    cos_lat = np.cos(lat)[:, np.newaxis]

    vertices = np.empty((segments + 1, segments, 3), dtype=np.float64)
    vertices[:, :, 0] = radius * sin_lat * np.cos(lon)[np.newaxis, :]
    vertices[:, :, 1] = radius * cos_lat
    vertices[:, :, 2] = radius * sin_lat * np.sin(lon)[np.newaxis, :]

    return Mesh("sphere", vertices.reshape(-1, 3), _sphere_edges(segments))
