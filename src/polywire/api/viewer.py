"""
どこで: `polywire.api.viewer`。
何を: pyglet ウィンドウ上で RenderEngine を一定間隔で「transform → render」駆動する対話ビューア。
なぜ: エンジン自体はループを持たないため、外部ループ（FrameClock + pyglet.clock）をここで組み立てる。

処理の流れ:
1) FPS/設定解決: `fps is None` なら `load_config()` の `viewer.fps`、無ければ `PW_DEFAULT_FPS`（既定 60）。
2) 形状解決: 名前 + パラメータを variant へ（未知の名前は KeyError）。
3) `init_only=True` なら `RecordingCanvas` で 1 フレームだけ描いて返す（pyglet を読み込まない）。
4) それ以外は `RenderWindow` + `PygletCanvas` を作り、`SpinDriver` を `FrameClock` 経由で
   `pyglet.clock.schedule_interval` に登録して `pyglet.app.run()`。

キー操作:
- V: 頂点表示 / A: 軸 / G: グリッド / D: 深度着色 / Space: 回転の一時停止 / ESC: 終了
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Mapping

from polywire.common.settings import get as _get_settings
from polywire.engine.core.frame_clock import FrameClock
from polywire.engine.core.transform_utils import TransformParameters
from polywire.engine.render.canvas import Canvas, RecordingCanvas
from polywire.engine.render.renderer import RenderEngine
from polywire.engine.render.settings import RenderSettings
from polywire.shapes.spec import ShapeSpec, parse_shape
from polywire.util.config import load_config

logger = logging.getLogger(__name__)

Spin = tuple[float, float, float]


def _viewer_section(cfg: Mapping[str, Any] | None) -> Mapping[str, Any]:
    section = (cfg or {}).get("viewer") or {}
    return section if isinstance(section, Mapping) else {}


def resolve_fps(requested_fps: int | None, cfg: Mapping[str, Any] | None = None) -> int:
    """FPS を解決して 1 以上の int を返す。

    - 明示指定があればそれを優先（<=0 は 1 に丸める）。
    - それ以外は構成 `viewer.fps`、無ければ `PW_DEFAULT_FPS`。
    """
    default = _get_settings().DEFAULT_FPS
    if requested_fps is not None:
        return max(1, int(requested_fps))
    try:
        return max(1, int(_viewer_section(cfg).get("fps", default)))
    except (TypeError, ValueError):
        logger.warning("viewer.fps が数値ではありません。既定値 %d を使用します", default)
        return max(1, int(default))


def resolve_spin(requested: Spin | None, cfg: Mapping[str, Any] | None = None) -> Spin:
    """自動回転の角速度（度/秒）を解決する。"""
    if requested is not None:
        sx, sy, sz = requested
        return (float(sx), float(sy), float(sz))
    section = _viewer_section(cfg)
    return (
        float(section.get("spin_x", 20.0)),
        float(section.get("spin_y", 30.0)),
        float(section.get("spin_z", 0.0)),
    )


class SpinDriver:
    """毎フレーム回転角を進め、エンジンへ transform → render を発行する Tickable。

    `base` の回転に経過分の角度を足し、平行移動/スケールは `base` のまま渡す。
    """

    def __init__(
        self,
        engine: RenderEngine,
        *,
        spin: Spin = (20.0, 30.0, 0.0),
        base: TransformParameters | None = None,
    ):
        self.engine = engine
        self.spin = spin
        self.base = base if base is not None else TransformParameters()
        self.angles = [0.0, 0.0, 0.0]
        self.paused = False

    def current_params(self) -> TransformParameters:
        ax, ay, az = self.angles
        return dataclasses.replace(
            self.base,
            rotation_x=self.base.rotation_x + ax,
            rotation_y=self.base.rotation_y + ay,
            rotation_z=self.base.rotation_z + az,
        )

    def tick(self, dt: float) -> None:
        if not self.paused:
            for i, rate in enumerate(self.spin):
                self.angles[i] = (self.angles[i] + rate * dt) % 360.0
        self.engine.transform(self.current_params())
        self.engine.render()


def build_engine(
    shape: ShapeSpec | str,
    *params: Any,
    canvas: Canvas | None = None,
    settings: RenderSettings | None = None,
) -> RenderEngine:
    """形状を設定済みの RenderEngine を返す。

    例外:
        KeyError: 未登録のシェイプ名
        TypeError: パラメータ数の不一致
    """
    spec = parse_shape(shape, *params) if isinstance(shape, str) else shape
    engine = RenderEngine(canvas, settings)
    engine.set_shape(spec)
    return engine


def run_viewer(
    shape: ShapeSpec | str = "cube",
    *params: Any,
    width: int | None = None,
    height: int | None = None,
    fps: int | None = None,
    settings: RenderSettings | None = None,
    spin: Spin | None = None,
    init_only: bool = False,
) -> RenderEngine:
    """ビューアを起動する（ウィンドウを閉じるまで戻らない）。

    引数:
        shape: variant または名前
        params: 名前指定時の生成パラメータ
        width/height: ウィンドウサイズ（None で構成 `viewer.width/height`、既定 800x600）
        fps: 更新レート（None で構成/環境変数）
        settings: 描画設定（None で構成 `render:` から生成）
        spin: 自動回転の角速度（度/秒）
        init_only: True でウィンドウを作らず 1 フレームだけ RecordingCanvas に描いて返す

    返り値:
        駆動に使った RenderEngine
    """
    cfg = load_config()
    fps = resolve_fps(fps, cfg)
    section = _viewer_section(cfg)
    w = int(width if width is not None else section.get("width", 800))
    h = int(height if height is not None else section.get("height", 600))
    render_settings = settings if settings is not None else RenderSettings.from_config(cfg)

    if init_only:
        engine = build_engine(shape, *params, canvas=RecordingCanvas(w, h), settings=render_settings)
        SpinDriver(engine, spin=resolve_spin(spin, cfg)).tick(0.0)
        logger.info("init_only: %r を 1 フレーム描画しました", engine.mesh)
        return engine

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import pyglet
    from pyglet.window import key

    from polywire.engine.render.pyglet_canvas import PygletCanvas

    from .window import RenderWindow

    canvas = PygletCanvas(w, h)
    engine = build_engine(shape, *params, canvas=canvas, settings=render_settings)
    window = RenderWindow(w, h, canvas=canvas, caption=f"polywire - {engine.mesh.name}")
    window.add_draw_callback(canvas.draw)

    driver = SpinDriver(engine, spin=resolve_spin(spin, cfg))
    frame_clock = FrameClock([driver])
    pyglet.clock.schedule_interval(frame_clock.tick, 1 / fps)

    toggles = {
        key.V: "show_vertices",
        key.A: "show_axes",
        key.G: "show_grid",
        key.D: "depth_coloring",
    }

    @window.event
    def on_key_press(symbol, modifiers):  # noqa: ANN001
        if symbol == key.SPACE:
            driver.paused = not driver.paused
            return None
        name = toggles.get(symbol)
        if name is not None:
            engine.settings.update({name: not getattr(engine.settings, name)})
            logger.debug("%s = %s", name, getattr(engine.settings, name))
        return None

    logger.info("viewer: %r を %dx%d @ %d fps で表示します", engine.mesh, w, h, fps)
    pyglet.app.run()
    pyglet.clock.unschedule(frame_clock.tick)
    return engine


__all__ = ["SpinDriver", "build_engine", "run_viewer", "resolve_fps", "resolve_spin"]
