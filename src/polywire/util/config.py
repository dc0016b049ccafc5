"""
どこで: `polywire.util.config`。
何を: YAML 構成（`configs/default.yaml` + ルート `config.yaml`）の読み込み。
なぜ: 描画設定やビューア既定値をコード外で差し替えられるようにするため。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("構成ファイルを読み込めませんでした: %s (%s)", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def find_project_root(start: Path) -> Path:
    """プロジェクトルートを推定して返す。

    - `src/polywire/util/` から上位へ辿り、`.git` / `pyproject.toml` / `configs/` がある
      もっとも近いディレクトリを返す。
    - 見つからない場合は `start` 自身を返す。
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if (
            (parent / ".git").exists()
            or (parent / "pyproject.toml").exists()
            or (parent / "configs").exists()
        ):
            return parent
    return cur


def load_config(root: Path | None = None) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す（フェイルソフト）。

    優先順:
    1) `configs/default.yaml`（ベース）
    2) ルート `config.yaml`（ベースに上書き）

    - いずれも存在しない/不正な場合は空辞書を返す。
    - ネストした辞書のディープマージは行わず、トップレベルのみ上書き。
    """
    project_root = root if root is not None else find_project_root(Path(__file__).parent)
    base: Dict[str, Any] = {}

    default_path = project_root / "configs" / "default.yaml"
    if default_path.exists():
        base.update(_safe_load_yaml(default_path))

    root_config_path = project_root / "config.yaml"
    if root_config_path.exists():
        base.update(_safe_load_yaml(root_config_path))

    return base


__all__ = ["load_config", "find_project_root"]
