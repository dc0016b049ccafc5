"""
環境変数設定 / YAML 構成 / RenderSettings のテスト
"""

import logging

import pytest

from polywire.common import settings as settings_mod
from polywire.common.env import env_bool, env_float, env_int, env_str
from polywire.common.logging import resolve_level
from polywire.engine.render.settings import RenderSettings
from polywire.util.config import load_config


class TestEnv:
    def test_env_int(self, monkeypatch):
        monkeypatch.setenv("PW_X", "7")
        assert env_int("PW_X", 1) == 7
        monkeypatch.setenv("PW_X", "abc")
        assert env_int("PW_X", 1) == 1
        monkeypatch.setenv("PW_X", "-3")
        assert env_int("PW_X", 1, min_value=0) == 0

    def test_env_float_and_str(self, monkeypatch):
        monkeypatch.setenv("PW_Y", "2.5")
        assert env_float("PW_Y", 0.0) == 2.5
        monkeypatch.setenv("PW_Y", "  ")
        assert env_str("PW_Y", "dflt") == "dflt"

    @pytest.mark.parametrize("raw, expected", [("1", True), ("0", False), ("yes", True), ("off", False), ("??", False)])
    def test_env_bool(self, monkeypatch, raw, expected):
        monkeypatch.setenv("PW_Z", raw)
        assert env_bool("PW_Z", False) is expected


def test_settings_reload(monkeypatch):
    monkeypatch.setenv("PW_LOG_LEVEL", "debug")
    monkeypatch.setenv("PW_DEFAULT_FPS", "0")
    monkeypatch.setenv("PW_DEBUG_DRAW_ORDER", "true")
    settings_mod.reload_from_env()
    s = settings_mod.get()
    assert s.LOG_LEVEL == "DEBUG"
    assert s.DEFAULT_FPS == 1
    assert s.DEBUG_DRAW_ORDER is True
    assert resolve_level(None) == logging.DEBUG


def test_resolve_level():
    assert resolve_level("warning") == logging.WARNING
    assert resolve_level("nonsense") == logging.INFO
    assert resolve_level(10) == 10


class TestRenderSettings:
    def test_defaults(self):
        s = RenderSettings()
        assert s.focal_length == 1000.0
        assert s.depth_range == (-200.0, 200.0)
        assert not s.transparent_background

    def test_update_camel_and_snake(self):
        s = RenderSettings()
        s.update({"showGrid": True, "wireframeColor": "#123456"}, line_width=4)
        assert s.show_grid is True
        assert s.wireframe_color == "#123456"
        assert s.line_width == 4

    def test_update_unknown(self):
        with pytest.raises(TypeError):
            RenderSettings().update(opacity=0.5)

    @pytest.mark.parametrize("bg", ["none", "NONE", ""])
    def test_transparent(self, bg):
        assert RenderSettings(background_color=bg).transparent_background

    def test_from_config(self, caplog):
        cfg = {"render": {"depthColoring": True, "depth_range": [-50, 50], "mystery": 1}}
        with caplog.at_level(logging.WARNING):
            s = RenderSettings.from_config(cfg)
        assert s.depth_coloring is True
        assert s.depth_range == (-50.0, 50.0)
        assert s.extras == {"mystery": 1}
        assert any("mystery" in r.getMessage() for r in caplog.records)

    def test_from_config_empty(self):
        assert RenderSettings.from_config({}) == RenderSettings()
        assert RenderSettings.from_config(None) == RenderSettings()


class TestLoadConfig:
    def test_default_then_root_overlay(self, tmp_path):
        (tmp_path / "configs").mkdir()
        (tmp_path / "configs" / "default.yaml").write_text(
            "render:\n  show_grid: true\nviewer:\n  fps: 30\n", encoding="utf-8"
        )
        (tmp_path / "config.yaml").write_text("viewer:\n  width: 640\n", encoding="utf-8")
        cfg = load_config(tmp_path)
        assert cfg["render"] == {"show_grid": True}
        # トップレベルのみ上書き（viewer は丸ごと置き換わる）
        assert cfg["viewer"] == {"width": 640}

    def test_missing_files(self, tmp_path):
        assert load_config(tmp_path) == {}

    def test_invalid_yaml_is_soft(self, tmp_path, caplog):
        (tmp_path / "config.yaml").write_text("render: [unclosed\n", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            assert load_config(tmp_path) == {}

    def test_non_mapping_yaml(self, tmp_path):
        (tmp_path / "config.yaml").write_text("- a\n- b\n", encoding="utf-8")
        assert load_config(tmp_path) == {}

    def test_bundled_default_is_valid(self):
        cfg = load_config()
        if cfg:
            s = RenderSettings.from_config(cfg)
            assert s.extras == {}
