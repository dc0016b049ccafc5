"""
どこで: `polywire.engine.render.projection`。
何を: 3D 点列の簡易透視投影 `project_points()`。
なぜ: 描画位置と頂点円の半径で同じ縮尺係数を使うため、係数も一緒に返す。

式:
    f = max(focal_length, MIN_FOCAL_LENGTH)
    s = f / (f + z)
    (x', y') = (x * s, y * s)

`f + z == 0` では inf/nan をそのまま返す（警告も例外も出さない）。
"""

from __future__ import annotations

import numpy as np

from polywire.common.settings import get as _get_settings


def effective_focal_length(focal_length: float) -> float:
    """下限（既定 1、`PW_MIN_FOCAL_LENGTH`）で丸めた焦点距離。"""
    return max(float(focal_length), float(_get_settings().MIN_FOCAL_LENGTH))


def project_points(points: np.ndarray, focal_length: float) -> tuple[np.ndarray, np.ndarray]:
    """`(N, 3)` の点列を投影する。

    返り値:
        `(xy (N, 2), scale (N,))`。xy は原点中心の平面座標（画面中心へのオフセットは呼び出し側）。
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
    f = effective_focal_length(focal_length)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        scale = f / (f + pts[:, 2])
        xy = pts[:, :2] * scale[:, np.newaxis]
    return xy, scale


__all__ = ["project_points", "effective_focal_length"]
