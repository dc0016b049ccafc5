"""
シェイプ variant（parse_shape / generate / レジストリ）のテスト
"""

import pytest

from polywire.shapes import Cube, Grid, Torus, generate, list_shapes, parse_shape, shape_name
from polywire.shapes.registry import is_shape_registered, shape

ALL_SHAPES = [
    "axes", "cube", "dodecahedron", "grid", "octahedron",
    "prism", "pyramid", "sphere", "tetrahedron", "torus",
]  # fmt: skip


def test_fixed_name_set():
    assert list_shapes() == ALL_SHAPES


@pytest.mark.parametrize("name", ALL_SHAPES)
def test_every_name_generates_with_defaults(name):
    spec = parse_shape(name)
    mesh = generate(spec)
    assert mesh.name == name == shape_name(spec)
    assert mesh.n_edges > 0


@pytest.mark.parametrize("name", ["CUBE", "Cube", " cube ", "CuBe", "cUBE"])
def test_case_insensitive(name):
    assert parse_shape(name, 50) == Cube(50)


@pytest.mark.parametrize("name", ["sPHERE", "TeTrAhEdRoN", "DoDeCaHeDrOn", "tORUS"])
def test_mixed_case_names_resolve(name):
    assert is_shape_registered(name)
    assert shape_name(parse_shape(name)) == name.lower()


def test_params_positional():
    assert parse_shape("torus", 120, 30, 24, 12) == Torus(120, 30, 24, 12)
    mesh = generate(parse_shape("torus", 120, 30, 24, 12))
    assert mesh.n_vertices == 24 * 12


def test_unknown_name():
    with pytest.raises(KeyError):
        parse_shape("icosahedron")
    assert not is_shape_registered("icosahedron")


def test_too_many_params():
    with pytest.raises(TypeError):
        parse_shape("cube", 1, 2)


def test_generate_rejects_non_variant():
    with pytest.raises(TypeError):
        generate("cube")  # type: ignore[arg-type]


def test_variants_are_frozen():
    g = Grid()
    with pytest.raises(AttributeError):
        g.size = 10  # type: ignore[misc]


def test_shape_decorator_rejects_functions():
    with pytest.raises(TypeError):

        @shape
        def not_a_class():  # pragma: no cover
            pass
