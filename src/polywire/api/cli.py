"""
どこで: `polywire.api.cli`（コンソールスクリプト `polywire` / `python -m polywire`）。
何を: 引数（形状名・生成パラメータ・表示切替・FPS・ログレベル）を解釈してビューアを起動する。
なぜ: 文字列の外部入力を variant と RenderSettings へ変換する境界を 1 箇所にまとめるため。

使用例:
    polywire torus 120 30 24 12 --depth-coloring --axes
    polywire cube --init-only --log-level DEBUG
"""

from __future__ import annotations

import argparse
from typing import Sequence

from polywire.common.logging import setup_default_logging
from polywire.engine.render.settings import RenderSettings
from polywire.shapes.registry import list_shapes
from polywire.shapes.spec import parse_shape
from polywire.util.config import load_config

from .viewer import run_viewer


def _number(text: str) -> float | int:
    """整数表記は int（分割数用）、それ以外は float として解釈する。"""
    try:
        return int(text)
    except ValueError:
        return float(text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polywire",
        description="3D ワイヤーフレームを透視投影・深度順で描画するビューア",
    )
    parser.add_argument(
        "shape",
        nargs="?",
        default="cube",
        help=f"形状名（{', '.join(list_shapes())}）。大文字小文字は不問",
    )
    parser.add_argument("params", nargs="*", type=_number, help="形状の生成パラメータ（位置順）")
    parser.add_argument("--vertices", action="store_true", help="頂点を円で表示")
    parser.add_argument("--axes", action="store_true", help="XYZ 軸を表示")
    parser.add_argument("--grid", action="store_true", help="床グリッドを表示")
    parser.add_argument("--depth-coloring", action="store_true", help="辺を深度で着色")
    parser.add_argument("--color", default=None, help="線色（#RRGGBB）")
    parser.add_argument("--background", default=None, help='背景色（#RRGGBB または "none"）')
    parser.add_argument("--focal-length", type=float, default=None, help="焦点距離")
    parser.add_argument("--fps", type=int, default=None, help="更新レート（既定は構成/PW_DEFAULT_FPS）")
    parser.add_argument("--size", type=int, nargs=2, metavar=("W", "H"), default=None, help="ウィンドウサイズ")
    parser.add_argument("--log-level", default=None, help="ログレベル（既定は PW_LOG_LEVEL）")
    parser.add_argument("--init-only", action="store_true", help="ウィンドウを開かず 1 フレームだけ描いて終了")
    return parser


def settings_from_args(args: argparse.Namespace) -> RenderSettings:
    """構成ファイルの `render:` を基に、明示された引数だけを上書きする。"""
    settings = RenderSettings.from_config(load_config())
    overrides: dict[str, object] = {}
    if args.vertices:
        overrides["show_vertices"] = True
    if args.axes:
        overrides["show_axes"] = True
    if args.grid:
        overrides["show_grid"] = True
    if args.depth_coloring:
        overrides["depth_coloring"] = True
    if args.color is not None:
        overrides["wireframe_color"] = args.color
    if args.background is not None:
        overrides["background_color"] = args.background
    if args.focal_length is not None:
        overrides["focal_length"] = args.focal_length
    settings.update(overrides)
    return settings


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_default_logging(args.log_level)

    try:
        spec = parse_shape(args.shape, *args.params)
    except KeyError:
        parser.error(f"未知の形状名です: {args.shape!r}（利用可能: {', '.join(list_shapes())}）")
    except TypeError as e:
        parser.error(f"{args.shape} のパラメータが不正です: {e}")

    width, height = args.size if args.size is not None else (None, None)
    run_viewer(
        spec,
        width=width,
        height=height,
        fps=args.fps,
        settings=settings_from_args(args),
        init_only=args.init_only,
    )
    return 0


__all__ = ["main", "build_parser", "settings_from_args"]
