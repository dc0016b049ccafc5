"""
どこで: `polywire.util.color`。
何を: 色指定の正規化/変換（Hex, RGBA 0–1, RGBA 0–255）と、深度着色用の HSL → Hex 変換・補間。
なぜ: レンダエンジンと描画バックエンドで同一の受理仕様とエラーメッセージを提供するため。
"""

from __future__ import annotations

from typing import Sequence

# 深度着色の彩度（%）。色相と明度だけを深度で動かす。
DEPTH_SATURATION = 80.0


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def _clamp_u8(x: float) -> int:
    return max(0, min(255, int(round(x))))


def parse_hex_color_str(s: str) -> tuple[float, float, float, float]:
    """Hex 文字列から RGBA(0–1) を返す。

    受理形式: "#RRGGBB", "#RRGGBBAA", "0xRRGGBB", "0xRRGGBBAA", "RRGGBB", "RRGGBBAA"。
    大文字/小文字は不問。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        r = int(t[0:2], 16)
        g = int(t[2:4], 16)
        b = int(t[4:6], 16)
        a = int(t[6:8], 16) if len(t) == 8 else 255
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def _as_sequence(value: object) -> Sequence[float | int] | None:
    if isinstance(value, (list, tuple)):
        return value  # type: ignore[return-value]
    return None


def normalize_color(value: object) -> tuple[float, float, float, float]:
    """色を RGBA(0–1) へ正規化する。

    - 受理: Hex 文字列, (r,g,b[,a]) （0–1 または 0–255）
    - 返値: (r,g,b,a) （0–1）
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    seq = _as_sequence(value)
    if seq is None:
        raise ValueError(f"unsupported color type: {type(value)!r}")
    if len(seq) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    try:
        chans = [float(x) for x in seq]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if len(chans) == 3:
        chans.append(1.0 if all(0.0 <= x <= 1.0 for x in chans) else 255.0)
    # 全要素が 0..1 なら float 指定、それ以外は 0–255 とみなす
    if all(0.0 <= x <= 1.0 for x in chans):
        r, g, b, a = chans
        return (_clamp01(r), _clamp01(g), _clamp01(b), _clamp01(a))
    r, g, b, a = (_clamp_u8(x) for x in chans)
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def to_u8_rgba(value: object) -> tuple[int, int, int, int]:
    """色を RGBA(0–255) へ変換する。"""
    r, g, b, a = normalize_color(value)
    return (_clamp_u8(r * 255), _clamp_u8(g * 255), _clamp_u8(b * 255), _clamp_u8(a * 255))


def to_u8_rgb(value: object) -> tuple[int, int, int]:
    """色を RGB(0–255) へ変換する。"""
    r, g, b, _a = to_u8_rgba(value)
    return (r, g, b)


def _to_hex(r: float, g: float, b: float) -> str:
    return f"#{_clamp_u8(r):02x}{_clamp_u8(g):02x}{_clamp_u8(b):02x}"


def hsl_to_hex(h: float, s: float, l: float) -> str:  # noqa: E741
    """HSL を `#rrggbb` へ変換する。

    引数:
        h: 色相（度、周期的。負値や 360 超も可）
        s: 彩度（%）
        l: 明度（%）

    各チャンネルは `f(n) = l - a·max(-1, min(k-3, 9-k, 1))`,
    `k = (n + h/30) mod 12`, `a = s·min(l, 1-l)` で求め、丸めて 0..255 に収める。
    """
    s = float(s) / 100.0
    l = float(l) / 100.0  # noqa: E741
    a = s * min(l, 1.0 - l)

    def f(n: int) -> float:
        k = (n + float(h) / 30.0) % 12.0
        return l - a * max(-1.0, min(k - 3.0, 9.0 - k, 1.0))

    return _to_hex(f(0) * 255.0, f(8) * 255.0, f(4) * 255.0)


def depth_color(z: float, min_z: float, max_z: float) -> str:
    """深度 `z` を奥（青寄り・暗い）→ 手前（緑寄り・明るい）の色へ写像する。

    `t = (z - min_z) / (max_z - min_z)` はクランプしない（範囲外は色相/明度が外挿される）。
    範囲が空（`max_z == min_z`）のときは中間色（t=0.5）。
    """
    span = float(max_z) - float(min_z)
    t = 0.5 if span == 0.0 else (float(z) - float(min_z)) / span
    return hsl_to_hex(200.0 + 60.0 * t, DEPTH_SATURATION, 30.0 + 40.0 * t)


def lerp_color(a: str, b: str, t: float) -> str:
    """2 色の Hex をチャンネルごとに線形補間する（`t` は範囲外も許容）。"""
    ra, ga, ba, _ = parse_hex_color_str(a)
    rb, gb, bb, _ = parse_hex_color_str(b)
    t = float(t)
    return _to_hex(
        (ra + (rb - ra) * t) * 255.0,
        (ga + (gb - ga) * t) * 255.0,
        (ba + (bb - ba) * t) * 255.0,
    )


__all__ = [
    "DEPTH_SATURATION",
    "parse_hex_color_str",
    "normalize_color",
    "to_u8_rgba",
    "to_u8_rgb",
    "hsl_to_hex",
    "depth_color",
    "lerp_color",
]
