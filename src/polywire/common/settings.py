"""
どこで: `polywire.common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_float, env_int, env_str


@dataclass
class _Settings:
    # Logging
    LOG_LEVEL: str = "INFO"

    # Projection
    MIN_FOCAL_LENGTH: float = 1.0

    # Renderer diagnostics
    DEBUG_DRAW_ORDER: bool = False

    # Viewer
    DEFAULT_FPS: int = 60


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - bool は `env_bool`、int は `env_int`、float は `env_float` を使用。
    - 一部は下限丸めを適用。
    """
    _settings.LOG_LEVEL = env_str("PW_LOG_LEVEL", "INFO").upper()

    # 焦点距離の下限は 1 未満にしない（f + z の分母崩壊を避けるための最小値）
    _settings.MIN_FOCAL_LENGTH = env_float("PW_MIN_FOCAL_LENGTH", 1.0, min_value=1.0) or 1.0

    _settings.DEBUG_DRAW_ORDER = env_bool("PW_DEBUG_DRAW_ORDER", False)
    _settings.DEFAULT_FPS = env_int("PW_DEFAULT_FPS", 60, min_value=1) or 60


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
