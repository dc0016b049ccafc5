"""
Mesh データモデルのテスト
"""

import numpy as np
import pytest

from polywire.engine.core.mesh import Mesh
from polywire.engine.core.vector import Vector3


def test_normalized_dtypes_and_readonly():
    m = Mesh("seg", [[0, 0, 0], [1, 0, 0]], [(0, 1)])
    assert m.vertices.dtype == np.float64
    assert m.edges.dtype == np.int32
    assert m.n_vertices == 2 and m.n_edges == 1
    with pytest.raises(ValueError):
        m.vertices[0, 0] = 1.0


def test_empty_mesh():
    m = Mesh("empty", [], [])
    assert m.is_empty
    assert m.vertices.shape == (0, 3)
    assert m.edges.shape == (0, 2)


def test_edge_index_out_of_range():
    with pytest.raises(ValueError):
        Mesh("bad", [[0, 0, 0]], [(0, 1)])


def test_bad_vertex_shape():
    with pytest.raises(ValueError):
        Mesh("bad", [[0, 0], [1, 1]], [])


def test_face_needs_three_vertices():
    with pytest.raises(ValueError):
        Mesh("bad", [[0, 0, 0], [1, 0, 0]], [(0, 1)], faces=[(0, 1)])


def test_edge_colors_length():
    with pytest.raises(ValueError):
        Mesh("bad", [[0, 0, 0], [1, 0, 0]], [(0, 1)], edge_colors=["#ff0000", "#00ff00"])
    m = Mesh("ok", [[0, 0, 0], [1, 0, 0]], [(0, 1)], edge_colors=["#ff0000"])
    assert m.edge_color(0) == "#ff0000"


def test_translate_is_pure():
    m = Mesh("seg", [[0, 0, 0], [1, 0, 0]], [(0, 1)])
    t = m.translate(1, 2, 3)
    assert m.vertex(0) == Vector3(0, 0, 0)
    assert t.vertex(0) == Vector3(1, 2, 3)
    assert t.edge_list() == m.edge_list() == [(0, 1)]
    assert t.name == "seg"
