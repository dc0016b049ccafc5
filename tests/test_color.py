"""
util.color のテスト（HSL 変換・深度着色・補間・正規化）
"""

import pytest

from polywire.util.color import (
    depth_color,
    hsl_to_hex,
    lerp_color,
    normalize_color,
    parse_hex_color_str,
    to_u8_rgb,
    to_u8_rgba,
)


@pytest.mark.parametrize(
    "h, s, l, expected",
    [
        (0, 100, 50, "#ff0000"),
        (120, 100, 50, "#00ff00"),
        (240, 100, 50, "#0000ff"),
        (360, 100, 50, "#ff0000"),
        (-120, 100, 50, "#0000ff"),
        (0, 0, 100, "#ffffff"),
        (0, 0, 0, "#000000"),
    ],
)
def test_hsl_to_hex_primaries(h, s, l, expected):  # noqa: E741
    assert hsl_to_hex(h, s, l) == expected


def test_hsl_to_hex_format():
    out = hsl_to_hex(200, 80, 30)
    assert out.startswith("#") and len(out) == 7
    int(out[1:], 16)


def test_depth_color_midpoint():
    assert depth_color(0, -200, 200) == hsl_to_hex(230, 80, 50)


def test_depth_color_endpoints():
    assert depth_color(-200, -200, 200) == hsl_to_hex(200, 80, 30)
    assert depth_color(200, -200, 200) == hsl_to_hex(260, 80, 70)


def test_depth_color_not_clamped():
    assert depth_color(400, -200, 200) == hsl_to_hex(290, 80, 90)
    assert depth_color(400, -200, 200) != depth_color(200, -200, 200)


def test_depth_color_empty_range():
    assert depth_color(5, 10, 10) == hsl_to_hex(230, 80, 50)


def test_lerp_color():
    assert lerp_color("#000000", "#ffffff", 0.0) == "#000000"
    assert lerp_color("#000000", "#ffffff", 1.0) == "#ffffff"
    assert lerp_color("#000000", "#ffffff", 0.5) == "#808080"
    # 範囲外の t も受け付ける
    assert lerp_color("#000000", "#102030", 2.0) == "#204060"


def test_parse_hex_variants():
    assert parse_hex_color_str("#ff0000") == (1.0, 0.0, 0.0, 1.0)
    assert parse_hex_color_str("0x00FF00") == (0.0, 1.0, 0.0, 1.0)
    r, g, b, a = parse_hex_color_str("8080804d")
    assert a == pytest.approx(0x4D / 255)
    with pytest.raises(ValueError):
        parse_hex_color_str("#fff")
    with pytest.raises(ValueError):
        parse_hex_color_str("#gg0000")


def test_normalize_color_tuples():
    assert normalize_color((1.0, 0.5, 0.0)) == (1.0, 0.5, 0.0, 1.0)
    assert normalize_color((255, 0, 0)) == (1.0, 0.0, 0.0, 1.0)
    assert to_u8_rgba("#8080804d") == (128, 128, 128, 77)
    assert to_u8_rgb((0.0, 1.0, 0.0, 0.5)) == (0, 255, 0)
    with pytest.raises(ValueError):
        normalize_color(42)
