"""
TransformParameters / compose_matrix / apply_transform のテスト
"""

import numpy as np
import pytest

from polywire.engine.core.matrix import Matrix4
from polywire.engine.core.transform_utils import TransformParameters, apply_transform, compose_matrix


def test_from_mapping_accepts_camel_and_snake():
    a = TransformParameters.from_mapping({"rotationY": 90, "translateX": 5})
    b = TransformParameters.from_mapping(rotation_y=90, translate_x=5)
    assert a == b
    assert a.scale == (1.0, 1.0, 1.0)


def test_from_mapping_unknown_key():
    with pytest.raises(TypeError):
        TransformParameters.from_mapping({"spin": 1})


def test_compose_order_scale_rz_ry_rx():
    p = TransformParameters(rotation_x=30, rotation_y=45, rotation_z=60, scale_x=2, scale_y=3, scale_z=4)
    rx, ry, rz = p.rotation_rad
    expected = Matrix4.scaling(2, 3, 4) @ Matrix4.rotation_z(rz) @ Matrix4.rotation_y(ry) @ Matrix4.rotation_x(rx)
    assert compose_matrix(p).allclose(expected)


def test_identity_params_leave_vertices():
    verts = np.array([[1.0, 2.0, 3.0], [-4.0, 5.0, -6.0]])
    np.testing.assert_allclose(apply_transform(verts, TransformParameters()), verts)


def test_translation_added_after_matrix():
    verts = np.array([[1.0, 0.0, 0.0]])
    p = TransformParameters(rotation_z=90, scale_x=2, translate_x=10)
    out = apply_transform(verts, p)
    # Z 回転で (0, 1, 0)、x スケールは効かず、その後に +10
    np.testing.assert_allclose(out, [[10.0, 1.0, 0.0]], atol=1e-12)


def test_zero_scale_collapses_axis():
    verts = np.array([[1.0, 2.0, 3.0]])
    out = apply_transform(verts, TransformParameters(scale_y=0))
    np.testing.assert_allclose(out, [[1.0, 0.0, 3.0]])
