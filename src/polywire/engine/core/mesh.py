"""
メッシュ型（ワイヤーフレーム描画の中核データ）

本モジュールは、シェイプ生成器が返し、レンダエンジンが保持する唯一の形状表現 `Mesh` を提供する。
生成（shapes）、変換（engine.core.transform_utils）、描画（engine.render）の境界で
同じ型だけを受け渡し、形状の差し替えは常に「新しい Mesh を丸ごと作る」ことで行う。

データモデル（不変条件）:
- `vertices: float64 ndarray (N, 3)`: 頂点座標。行 index が頂点の同一性。
- `edges: int32 ndarray (E, 2)`: 頂点 index の無向ペア。全 index は `[0, N)`。
- `faces: tuple[tuple[int, ...], ...]`: 3 頂点以上の index 列（任意。ワイヤーフレーム描画では未使用）。
- `edge_colors: tuple[str, ...] | None`: 辺ごとの固定色（軸メッシュ用）。指定時は長さ E。
- 配列は読み取り専用。変換系メソッドは新しいインスタンスを返す。

直感図:

    # 例: 1 本の辺を持つ 2 頂点メッシュ
    # vertices (N=2)        edges (E=1)
    #   0 [0, 0, 0]           [[0, 1]]
    #   1 [1, 0, 0]

補足:
- 空メッシュは `vertices.shape == (0, 3)`, `edges.shape == (0, 2)`。
- 不正な形状/範囲外 index は `ValueError`（呼び出し側の契約違反）。
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from polywire.common.types import Color, Edge, Face

from .vector import Vector3


def _normalize_mesh_input(
    vertices: np.ndarray | Sequence[Sequence[float]],
    edges: np.ndarray | Sequence[Edge],
) -> tuple[np.ndarray, np.ndarray]:
    """`Mesh` 生成時の内部正規化ヘルパ。"""

    verts = np.array(vertices, dtype=np.float64)
    if verts.size == 0:
        verts = verts.reshape(0, 3)
    if verts.ndim != 2 or verts.shape[1] != 3:
        raise ValueError("vertices は形状 (N, 3) の配列である必要があります。")

    edge_arr = np.array(edges, dtype=np.int32)
    if edge_arr.size == 0:
        edge_arr = edge_arr.reshape(0, 2)
    if edge_arr.ndim != 2 or edge_arr.shape[1] != 2:
        raise ValueError("edges は形状 (E, 2) の配列である必要があります。")
    if edge_arr.size and (edge_arr.min() < 0 or edge_arr.max() >= verts.shape[0]):
        raise ValueError("edges が範囲外の頂点 index を参照しています。")

    verts.setflags(write=False)
    edge_arr.setflags(write=False)
    return verts, edge_arr


class Mesh:
    """名前付きワイヤーフレーム形状。

    フィールド:
    - `name`: 形状名（"cube" など。表示/ログ用）。
    - `vertices (N,3) float64` / `edges (E,2) int32`。
    - `faces`: 面の index 列（任意）。
    - `edge_colors`: 辺ごとの固定色（任意）。

    設計意図:
    - 形状変更は常に新規生成（差分編集しない）。レンダエンジンは前の Mesh を丸ごと破棄する。
    - 生成時に dtype/形状/index 範囲を検証し、正規化済み状態だけを許容する。
    """

    __slots__ = ("name", "vertices", "edges", "faces", "edge_colors")

    name: str
    vertices: np.ndarray
    edges: np.ndarray
    faces: tuple[Face, ...]
    edge_colors: tuple[Color, ...] | None

    def __init__(
        self,
        name: str,
        vertices: np.ndarray | Sequence[Sequence[float]],
        edges: np.ndarray | Sequence[Edge],
        faces: Iterable[Sequence[int]] = (),
        edge_colors: Sequence[Color] | None = None,
    ) -> None:
        verts, edge_arr = _normalize_mesh_input(vertices, edges)
        n = verts.shape[0]

        face_list: list[Face] = []
        for face in faces:
            f = tuple(int(i) for i in face)
            if len(f) < 3:
                raise ValueError(f"面は 3 頂点以上が必要です: {f}")
            if any(i < 0 or i >= n for i in f):
                raise ValueError(f"面が範囲外の頂点 index を参照しています: {f}")
            face_list.append(f)

        colors: tuple[Color, ...] | None = None
        if edge_colors is not None:
            colors = tuple(str(c) for c in edge_colors)
            if len(colors) != edge_arr.shape[0]:
                raise ValueError("edge_colors の長さは辺の本数と一致する必要があります。")

        self.name = str(name)
        self.vertices = verts
        self.edges = edge_arr
        self.faces = tuple(face_list)
        self.edge_colors = colors

    # ── 参照 ───────────────────
    @property
    def n_vertices(self) -> int:
        """頂点数 `N` を返す。"""
        return int(self.vertices.shape[0])

    @property
    def n_edges(self) -> int:
        """辺数 `E` を返す。"""
        return int(self.edges.shape[0])

    @property
    def is_empty(self) -> bool:
        return self.n_vertices == 0

    def vertex(self, index: int) -> Vector3:
        return Vector3.from_array(self.vertices[index])

    def vertex_list(self) -> list[Vector3]:
        """頂点を `Vector3` の列として返す（index 順）。"""
        return [Vector3.from_array(row) for row in self.vertices]

    def edge_list(self) -> list[Edge]:
        return [(int(a), int(b)) for a, b in self.edges]

    def edge_color(self, index: int) -> Color | None:
        """辺の固定色（未指定なら None）。"""
        if self.edge_colors is None:
            return None
        return self.edge_colors[index]

    # ── 変換（純粋） ─────────────────
    def with_vertices(self, vertices: np.ndarray) -> "Mesh":
        """トポロジを共有し、頂点だけ差し替えた新しい `Mesh` を返す。"""
        return Mesh(self.name, vertices, self.edges, self.faces, self.edge_colors)

    def translate(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> "Mesh":
        """平行移動（純関数）。"""
        offset = np.array([dx, dy, dz], dtype=np.float64)
        return self.with_vertices(self.vertices + offset)

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"Mesh({self.name!r}, V={self.n_vertices}, E={self.n_edges}, F={len(self.faces)})"


__all__ = ["Mesh"]
