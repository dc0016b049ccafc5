"""
どこで: `polywire.util` パッケージ。
何を: 色変換と構成読み込みの小さなユーティリティ群。
"""

from .color import depth_color, hsl_to_hex, lerp_color, normalize_color, parse_hex_color_str
from .config import load_config

__all__ = [
    "depth_color",
    "hsl_to_hex",
    "lerp_color",
    "normalize_color",
    "parse_hex_color_str",
    "load_config",
]
