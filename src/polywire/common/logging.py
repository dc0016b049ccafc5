"""
どこで: `polywire.common.logging`。
何を: プロジェクト向けの軽量ロギング初期化ヘルパ。
なぜ: 各モジュールは `logging.getLogger(__name__)` で診断を出すだけにし、
      ハンドラ構成は CLI/ビューア側で 1 度だけ決めるため。

要点:
- 既定では各モジュールが `logging.getLogger(__name__)` でロガーを取得する。
- 未知のシェイプ名や描画先未接続などの非致命的な構成エラーは WARNING で通知される。
- アプリ側で設定が無い場合でも、妥当な最小構成を 1 度だけ適用する。
"""

from __future__ import annotations

import logging

from .settings import get as _get_settings

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: int | str | None) -> int:
    """ログレベル指定（名前/数値/None）を `logging` の数値へ解決する。

    - None の場合は設定 `LOG_LEVEL`（環境変数 `PW_LOG_LEVEL`）を使う。
    - 未知の名前は INFO に丸める。
    """
    if level is None:
        level = _get_settings().LOG_LEVEL
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return int(level)


def setup_default_logging(level: int | str | None = None) -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - ルートロガーにハンドラが既にあれば何もしない（no-op）
    - 上位のランナー/CLI から呼び出す想定
    """
    lvl = resolve_level(level)

    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(level=lvl, format=_FORMAT)


__all__ = ["setup_default_logging", "resolve_level"]
