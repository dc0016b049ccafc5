"""
形状生成関数の出力テスト（頂点/辺の数とトポロジの性質）
"""

import math

import numpy as np
import pytest

from polywire.shapes import axes, cube, dodecahedron, grid, octahedron, prism, pyramid, sphere, tetrahedron, torus
from polywire.shapes.axes import AXIS_COLORS


def _edge_lengths(mesh):
    v = mesh.vertices
    e = mesh.edges
    return np.linalg.norm(v[e[:, 0]] - v[e[:, 1]], axis=1)


def _degrees(mesh):
    return np.bincount(mesh.edges.ravel(), minlength=mesh.n_vertices)


@pytest.mark.parametrize(
    "mesh, n_vertices, n_edges",
    [
        (cube(100), 8, 12),
        (tetrahedron(), 4, 6),
        (octahedron(), 6, 12),
        (pyramid(), 5, 8),
        (prism(), 6, 9),
        (dodecahedron(100), 20, 30),
        (torus(100, 40, 16, 8), 128, 256),
        (sphere(100, 12), 13 * 12, 13 * 12 + 12 * 12),
        (axes(), 4, 3),
        (grid(400, 10), 44, 22),
    ],
)
def test_counts(mesh, n_vertices, n_edges):
    assert mesh.n_vertices == n_vertices
    assert mesh.n_edges == n_edges


def test_cube_vertex_table():
    m = cube(100)
    assert m.vertex(0).to_array().tolist() == [100, 100, 100]
    assert m.vertex(6).to_array().tolist() == [-100, -100, -100]
    assert np.all(np.abs(m.vertices) == 100)
    np.testing.assert_allclose(_edge_lengths(m), 200.0)
    assert len(m.faces) == 6


def test_dodecahedron_regular():
    m = dodecahedron(100)
    lengths = _edge_lengths(m)
    np.testing.assert_allclose(lengths, lengths[0])
    np.testing.assert_allclose(lengths[0], 2 * 100 / ((1 + math.sqrt(5)) / 2))
    assert set(_degrees(m).tolist()) == {3}
    # 全頂点が同じ球面上
    radii = np.linalg.norm(m.vertices, axis=1)
    np.testing.assert_allclose(radii, 100 * math.sqrt(3))


def test_tetrahedron_and_octahedron_regular():
    for m in (tetrahedron(50), octahedron(50)):
        lengths = _edge_lengths(m)
        np.testing.assert_allclose(lengths, lengths[0])


def test_pyramid_apex_up():
    m = pyramid(100, 150)
    apex = m.vertex(4)
    assert apex.y == pytest.approx(-75.0)
    assert set(_degrees(m).tolist()) == {3, 4}


def test_prism_triangle_in_xz():
    m = prism(100, 150)
    top_y = m.vertices[:3, 1]
    np.testing.assert_allclose(top_y, -75.0)
    np.testing.assert_allclose(np.linalg.norm(m.vertices[:3, [0, 2]], axis=1), 100.0)


def test_torus_geometry():
    m = torus(100, 40, 16, 8)
    # 中心軸（z 軸）からの距離は R ± r の範囲
    d = np.linalg.norm(m.vertices[:, :2], axis=1)
    assert d.min() >= 60 - 1e-9 and d.max() <= 140 + 1e-9
    assert np.abs(m.vertices[:, 2]).max() <= 40 + 1e-9
    assert set(_degrees(m).tolist()) == {4}


def test_sphere_on_radius():
    m = sphere(100, 12)
    np.testing.assert_allclose(np.linalg.norm(m.vertices, axis=1), 100.0)
    # 極は y 軸上
    np.testing.assert_allclose(m.vertices[0], [0, 100, 0], atol=1e-9)


@pytest.mark.parametrize("gen, kwargs", [
    (torus, {"major_segments": 0}),
    (sphere, {"segments": 0}),
    (grid, {"divisions": 0}),
])
def test_segment_counts_must_be_positive(gen, kwargs):
    with pytest.raises(ValueError):
        gen(**kwargs)


def test_grid_in_xz_plane():
    m = grid(400, 10)
    np.testing.assert_allclose(m.vertices[:, 1], 0.0)
    assert m.vertices[:, 0].min() == -200 and m.vertices[:, 0].max() == 200
    np.testing.assert_allclose(_edge_lengths(m), 400.0)


def test_axes_colors():
    m = axes(150)
    assert m.edge_colors == AXIS_COLORS
    np.testing.assert_allclose(_edge_lengths(m), 150.0)


def test_each_call_is_fresh():
    a = cube()
    b = cube()
    assert a is not b
    np.testing.assert_array_equal(a.vertices, b.vertices)
