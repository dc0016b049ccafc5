"""
どこで: `polywire.engine.render.settings`。
何を: 描画オプション `RenderSettings`（表示切替・色・太さ・投影・グリッド/軸の配置）。
なぜ: 呼び出し側がフレーム間に自由に書き換え、次の `render()` で反映させるため。

補足:
- 値の検証は行わず、使用時に下限だけ丸める（`vertex_size >= 0`, `focal_length >= 1`）。
- `update()` / `from_config()` は `showGrid` と `show_grid` の双方を受け付ける。
- `background_color` が `"none"` または空文字なら透明クリア。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Any, Mapping

from polywire.common.base_registry import BaseRegistry
from polywire.common.types import Color

logger = logging.getLogger(__name__)


@dataclass
class RenderSettings:
    show_vertices: bool = False
    show_axes: bool = False
    show_grid: bool = False
    depth_coloring: bool = False
    wireframe_color: Color = "#00ff00"
    vertex_color: Color = "#ffffff"
    vertex_size: float = 3.0
    line_width: float = 1.0
    background_color: Color = "#000000"
    # 現状どこからも参照されない受け渡し専用の値
    scale: float = 1.0

    focal_length: float = 1000.0
    depth_range: tuple[float, float] = (-200.0, 200.0)
    grid_color: Color = "#8080804d"
    grid_drop: float = 150.0
    grid_size: float = 400.0
    grid_divisions: int = 10
    axes_length: float = 150.0
    min_vertex_radius: float = 1.0

    extras: dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def transparent_background(self) -> bool:
        bg = (self.background_color or "").strip().lower()
        return bg in ("", "none")

    def update(self, values: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """キー名（camelCase / snake_case）で値を上書きする。

        未知のキーは TypeError（呼び出し側の誤り）。
        """
        merged: dict[str, Any] = dict(values or {})
        merged.update(kwargs)
        known = {f.name for f in fields(self)} - {"extras"}
        for key, value in merged.items():
            norm = BaseRegistry.normalize_key(key)
            if norm not in known:
                raise TypeError(f"未知の描画設定です: {key!r}")
            if norm == "depth_range":
                lo, hi = value
                value = (float(lo), float(hi))
            setattr(self, norm, value)

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any] | None) -> "RenderSettings":
        """構成辞書の `render:` セクションから生成する。

        未知のキーは警告して `extras` に退避する（構成ファイルの誤記で起動を止めない）。
        """
        settings = cls()
        section = (cfg or {}).get("render") or {}
        if not isinstance(section, Mapping):
            logger.warning("render 構成がマッピングではありません: %r", section)
            return settings
        known = {f.name for f in fields(cls)} - {"extras"}
        for key, value in section.items():
            norm = BaseRegistry.normalize_key(str(key))
            if norm in known:
                settings.update({norm: value})
            else:
                logger.warning("未知の描画設定を無視しました: %s", key)
                settings.extras[str(key)] = value
        return settings


__all__ = ["RenderSettings"]
