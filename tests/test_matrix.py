"""
Matrix4 / multiply_rows のテスト
"""

import math

import numpy as np
import pytest

from polywire.engine.core.matrix import Matrix4, multiply_rows
from polywire.engine.core.vector import Vector3


def test_identity_leaves_vector():
    v = Vector3(1, 2, 3)
    assert Matrix4.identity().transform_vector(v) == v


def test_constructors_are_affine():
    for m in (
        Matrix4.identity(),
        Matrix4.translation(1, 2, 3),
        Matrix4.scaling(2, 0, -1),
        Matrix4.rotation_x(0.3),
        Matrix4.rotation_y(1.2),
        Matrix4.rotation_z(-2.0),
    ):
        assert m.is_affine()
        np.testing.assert_array_equal(m.to_array()[3], [0, 0, 0, 1])


def test_translation_moves_point():
    m = Matrix4.translation(10, -5, 2)
    assert m.transform_vector(Vector3(1, 1, 1)) == Vector3(11, -4, 3)


def test_rotation_y_quarter_turn():
    r = Matrix4.rotation_y(math.pi / 2)
    out = r.transform_vector(Vector3(1, 0, 0))
    np.testing.assert_allclose(out.to_array(), [0, 0, -1], atol=1e-12)


def test_rotation_z_quarter_turn():
    r = Matrix4.rotation_z(math.pi / 2)
    out = r.transform_vector(Vector3(1, 0, 0))
    np.testing.assert_allclose(out.to_array(), [0, 1, 0], atol=1e-12)


def test_rotation_preserves_magnitude():
    v = Vector3(3, -4, 12)
    for m in (Matrix4.rotation_x(0.7), Matrix4.rotation_y(-1.9), Matrix4.rotation_z(4.0)):
        assert m.transform_vector(v).magnitude() == pytest.approx(v.magnitude())


def test_multiply_associative_not_commutative():
    a = Matrix4.rotation_x(0.4)
    b = Matrix4.rotation_y(1.1)
    c = Matrix4.translation(1, 2, 3)
    assert ((a @ b) @ c).allclose(a @ (b @ c))
    assert not (a @ b).allclose(b @ a)
    assert a.multiply(b) == a @ b


def test_translate_returns_copy():
    base = Matrix4.rotation_z(0.5)
    moved = base.translate(1, 2, 3)
    assert base.to_array()[0, 3] == 0.0
    np.testing.assert_array_equal(moved.to_array()[:3, 3], [1, 2, 3])
    np.testing.assert_array_equal(moved.to_array()[:3, :3], base.to_array()[:3, :3])


def test_elements_row_major():
    e = Matrix4.translation(7, 8, 9).elements
    assert len(e) == 16
    assert (e[3], e[7], e[11], e[15]) == (7.0, 8.0, 9.0, 1.0)


def test_readonly_storage():
    m = Matrix4.identity()
    view = m.to_array(copy=False)
    with pytest.raises(ValueError):
        view[0, 0] = 5.0


def test_transform_points_matches_vector():
    m = Matrix4.translation(1, 0, 0) @ Matrix4.rotation_x(0.3)
    pts = np.array([[1.0, 2.0, 3.0], [-4.0, 0.5, 2.0]])
    out = m.transform_points(pts)
    for row, p in zip(out, pts):
        np.testing.assert_allclose(row, m.transform_vector(Vector3.from_array(p)).to_array())


def test_bad_shape_rejected():
    with pytest.raises(ValueError):
        Matrix4.from_rows([[1, 0], [0, 1]])
    with pytest.raises(ValueError):
        Matrix4.identity().transform_points(np.zeros((3, 2)))


def test_multiply_rows_generic():
    a = [[1, 2, 3], [4, 5, 6]]
    b = [[1], [0], [-1]]
    assert multiply_rows(a, b) == [[-2.0], [-2.0]]


def test_multiply_rows_dimension_mismatch():
    with pytest.raises(ValueError):
        multiply_rows([[1, 2]], [[1, 2]])
