"""
どこで: `polywire.engine.render` の高レベル描画。
何を: 現在の Mesh を保持し、`transform()`（変換 → キャッシュ）と `render()`（投影 → 深度順描画）の
      2 フェーズでワイヤーフレームを Canvas へ描く `RenderEngine`。
なぜ: 状態（メッシュ/変換キャッシュ/設定）の寿命を 1 オブジェクトに閉じ込め、
      フレームループ側は「transform → render」を呼ぶだけにするため。

描画手順（1 フレーム）:
1. clear（`background_color`。"none"/空なら透明）
2. グリッド（`show_grid`）: 直近の平行移動 + 固定の下方オフセット。回転/スケール/深度着色なし
3. 軸（`show_axes`）: 直近の平行移動のみ。辺ごとの固定色、太さ `line_width + 1`
4. 変換キャッシュを投影
5. 辺の深度 = 両端 z の平均（投影前）で安定昇順ソート（奥 → 手前）
6. 辺を描画（固定色 > 深度着色 > `wireframe_color`）
7. 頂点円（`show_vertices`）: 半径 `max(vertex_size * s_i, min_vertex_radius)`

補足:
- `set_shape()` 後、次の `transform()` までは変換キャッシュが無く、手順 4–7 は省略される。
- 描画先未接続/未知のシェイプ名は WARNING ログを出して `False` を返し、状態は変えない。
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Mapping

import numpy as np

from polywire.common.settings import get as _get_settings
from polywire.common.types import Color
from polywire.engine.core.mesh import Mesh
from polywire.engine.core.transform_utils import TransformParameters, apply_transform
from polywire.engine.core.vector import Vector3
from polywire.shapes.axes import axes
from polywire.shapes.grid import grid
from polywire.shapes.spec import Cube, ShapeSpec, generate, parse_shape
from polywire.util.color import depth_color

from .canvas import Canvas
from .projection import project_points
from .settings import RenderSettings


def edge_depths(vertices: np.ndarray, edges: np.ndarray) -> np.ndarray:
    """各辺の深度（両端点 z の平均）を返す。"""
    if edges.shape[0] == 0:
        return np.zeros(0, dtype=np.float64)
    z = vertices[:, 2]
    return (z[edges[:, 0]] + z[edges[:, 1]]) / 2.0


def depth_order(depths: np.ndarray) -> np.ndarray:
    """奥（小さい z）から手前への描画順。同じ深度は元の辺順を保つ。"""
    return np.argsort(depths, kind="stable")


class RenderEngine:
    """1 つのメッシュを変換・投影して Canvas へ描くエンジン。

    フィールド:
    - `canvas`: 描画先（未接続なら None）
    - `settings`: 描画オプション（呼び出し側がフレーム間に書き換える）
    - `mesh`: 現在の形状（初期値は既定サイズの立方体）
    """

    def __init__(self, canvas: Canvas | None = None, settings: RenderSettings | None = None):
        self.canvas = canvas
        self.settings = settings if settings is not None else RenderSettings()
        self._logger = logging.getLogger(__name__)
        self._mesh: Mesh = generate(Cube())
        self._transformed: np.ndarray | None = None
        self._last_params = TransformParameters()

    # ── 参照 ───────────────────
    @property
    def mesh(self) -> Mesh:
        return self._mesh

    @property
    def last_params(self) -> TransformParameters:
        """直近の `transform()` に渡された変換量（未呼び出しなら恒等）。"""
        return self._last_params

    @property
    def transformed_vertices(self) -> tuple[Vector3, ...]:
        """変換キャッシュ（`set_shape()` 直後は空）。"""
        if self._transformed is None:
            return ()
        return tuple(Vector3.from_array(row) for row in self._transformed)

    @property
    def has_transform_cache(self) -> bool:
        return self._transformed is not None

    # ── 形状 ───────────────────
    def set_shape(self, shape: ShapeSpec | str, *params: Any) -> bool:
        """形状を差し替える。

        `shape` は variant（`Cube(50)` など）または大文字小文字不問の名前。
        名前の場合は `params` を生成パラメータとして位置順に渡す。

        返り値:
            成功なら True。未知の名前は WARNING を出して False（メッシュ/キャッシュは不変）。

        例外:
            TypeError: パラメータ数が形状と合わない、または variant に `params` を併用した場合
            ValueError: 分割数が 1 未満など、生成器が受け付けない値
        """
        if isinstance(shape, str):
            try:
                spec = parse_shape(shape, *params)
            except KeyError:
                self._logger.warning("未知のシェイプ名です: %r（現在の形状 %r を維持）", shape, self._mesh.name)
                return False
        else:
            if params:
                raise TypeError("variant 指定時は追加パラメータを渡せません")
            spec = shape
        self.set_mesh(generate(spec))
        return True

    def set_mesh(self, mesh: Mesh) -> None:
        """任意の Mesh を現在の形状にする（変換キャッシュは破棄）。"""
        self._mesh = mesh
        self._transformed = None
        self._logger.debug("形状を差し替えました: %r", mesh)

    # ── Transform フェーズ ───────────
    def transform(
        self,
        params: TransformParameters | Mapping[str, Any] | None = None,
        **fields: Any,
    ) -> None:
        """現在のメッシュへ変換を適用し、結果をキャッシュする。

        `params` は `TransformParameters` か `{"rotationY": 90}` 形式のマッピング。
        キーワード引数（`rotation_y=90` / `rotationY=90`）は `params` を上書きする。
        値域の検証は行わない（スケール 0 はその軸を潰す）。
        """
        if isinstance(params, TransformParameters):
            base: dict[str, Any] = dataclasses.asdict(params)
        else:
            base = dict(params or {})
        p = TransformParameters.from_mapping(base, **fields)
        self._transformed = apply_transform(self._mesh.vertices, p)
        self._last_params = p

    # ── Render フェーズ ─────────────
    def render(self) -> bool:
        """1 フレームを描画する。描画先が無ければ WARNING を出して False。"""
        canvas = self.canvas
        if canvas is None:
            self._logger.warning("描画先（canvas）が接続されていないため描画をスキップします")
            return False

        s = self.settings
        width, height = canvas.size
        center = np.array([width / 2.0, height / 2.0], dtype=np.float64)

        canvas.clear(None if s.transparent_background else s.background_color)

        tx, ty, tz = self._last_params.translation
        if s.show_grid:
            g = grid(s.grid_size, s.grid_divisions).translate(tx, ty + s.grid_drop, tz)
            self._stroke_mesh(canvas, g.vertices, g.edges, center, s.grid_color, 1.0)
        if s.show_axes:
            a = axes(s.axes_length).translate(tx, ty, tz)
            self._stroke_mesh(canvas, a.vertices, a.edges, center, None, s.line_width + 1, a.edge_colors)

        if self._transformed is None:
            self._logger.debug("変換キャッシュがありません（transform() 前）: 形状 %r の描画を省略", self._mesh.name)
            return True

        verts = self._transformed
        edges = self._mesh.edges
        xy, scale = project_points(verts, s.focal_length)
        xy = xy + center

        depths = edge_depths(verts, edges)
        order = depth_order(depths)
        if _get_settings().DEBUG_DRAW_ORDER:
            self._logger.debug("描画順の深度: %s", depths[order].round(3).tolist())

        lo, hi = s.depth_range
        for i in order:
            a_idx, b_idx = edges[i]
            color = self._mesh.edge_color(int(i))
            if color is None:
                color = depth_color(float(depths[i]), lo, hi) if s.depth_coloring else s.wireframe_color
            x0, y0 = xy[a_idx]
            x1, y1 = xy[b_idx]
            canvas.stroke_line(float(x0), float(y0), float(x1), float(y1), color, s.line_width)

        if s.show_vertices:
            base = max(float(s.vertex_size), 0.0)
            radii = np.maximum(base * scale, float(s.min_vertex_radius))
            for (x, y), r in zip(xy, radii):
                canvas.fill_circle(float(x), float(y), float(r), s.vertex_color)
        return True

    def _stroke_mesh(
        self,
        canvas: Canvas,
        vertices: np.ndarray,
        edges: np.ndarray,
        center: np.ndarray,
        color: Color | None,
        width: float,
        edge_colors: tuple[Color, ...] | None = None,
    ) -> None:
        """補助メッシュ（グリッド/軸）を投影して辺の順に描く（深度ソートなし）。"""
        xy, _ = project_points(vertices, self.settings.focal_length)
        xy = xy + center
        for i, (a_idx, b_idx) in enumerate(edges):
            c = edge_colors[i] if edge_colors is not None else color
            x0, y0 = xy[a_idx]
            x1, y1 = xy[b_idx]
            canvas.stroke_line(float(x0), float(y0), float(x1), float(y1), c, width)


__all__ = ["RenderEngine", "edge_depths", "depth_order"]
