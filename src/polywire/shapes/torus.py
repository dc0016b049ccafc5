from __future__ import annotations

import numpy as np
from numba import njit

from polywire.engine.core.mesh import Mesh


@njit(cache=True)
def _torus_edges(major_segments: int, minor_segments: int) -> np.ndarray:
    """各サンプルから「次の小円サンプル」「次の大円リング」への 2 辺を生成します。"""
    n = major_segments * minor_segments
    edges = np.empty((2 * n, 2), dtype=np.int32)
    k = 0
    for i in range(major_segments):
        for j in range(minor_segments):
            idx = i * minor_segments + j
            edges[k, 0] = idx
            edges[k, 1] = i * minor_segments + (j + 1) % minor_segments
            edges[k + 1, 0] = idx
            edges[k + 1, 1] = ((i + 1) % major_segments) * minor_segments + j
            k += 2
    return edges


def torus(
    major_radius: float = 100.0,
    minor_radius: float = 40.0,
    major_segments: int = 16,
    minor_segments: int = 8,
) -> Mesh:
    """トーラスを生成します。

    `(θ, φ)` を `[0, 2π)` で `major_segments × minor_segments` 点サンプルし、
    index は `i * minor_segments + j`。継ぎ目の頂点は複製せず、辺の index を剰余で閉じる。
    """
    major_segments = int(major_segments)
    minor_segments = int(minor_segments)
    if major_segments < 1 or minor_segments < 1:
        raise ValueError("torus の分割数は 1 以上である必要があります")

    theta = 2 * np.pi * np.arange(major_segments) / major_segments
    phi = 2 * np.pi * np.arange(minor_segments) / minor_segments
    cos_theta = np.cos(theta)[:, np.newaxis]
    sin_theta = np.sin(theta)[:, np.newaxis]
    cos_phi = np.cos(phi)[np.newaxis, :]
    sin_phi = np.sin(phi)[np.newaxis, :]

    r = major_radius + minor_radius * cos_phi
    vertices = np.empty((major_segments, minor_segments, 3), dtype=np.float64)
    vertices[:, :, 0] = r * cos_theta
    vertices[:, :, 1] = r * sin_theta
    vertices[:, :, 2] = minor_radius * np.broadcast_to(sin_phi, (major_segments, minor_segments))

    edges = _torus_edges(major_segments, minor_segments)
    return Mesh("torus", vertices.reshape(-1, 3), edges)
