"""共通フィクスチャ。

- 乱数シード固定
- 環境変数由来の設定を既定に戻す
- ヘッドレス描画先と、深度の異なる 3 辺を持つ小さな Mesh
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from polywire.common import settings as settings_mod
from polywire.engine.core.mesh import Mesh
from polywire.engine.render.canvas import RecordingCanvas
from polywire.engine.render.renderer import RenderEngine


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("PW_LOG_LEVEL", "PW_MIN_FOCAL_LENGTH", "PW_DEBUG_DRAW_ORDER", "PW_DEFAULT_FPS"):
        monkeypatch.delenv(name, raising=False)
    settings_mod.reload_from_env()
    yield
    settings_mod.reload_from_env()


@pytest.fixture()
def canvas() -> RecordingCanvas:
    return RecordingCanvas(800, 600)


@pytest.fixture()
def engine(canvas: RecordingCanvas) -> RenderEngine:
    return RenderEngine(canvas)


@pytest.fixture()
def mesh_three_depths() -> Mesh:
    """平均深度が 10 / -50 / 30 の 3 辺（元の辺順と深度順が異なる）。"""
    vertices = [
        [0.0, 0.0, 0.0], [10.0, 0.0, 20.0],
        [20.0, 0.0, -60.0], [30.0, 0.0, -40.0],
        [40.0, 0.0, 20.0], [50.0, 0.0, 40.0],
    ]  # fmt: skip
    edges = [(0, 1), (2, 3), (4, 5)]
    return Mesh("three", vertices, edges)
