"""
どこで: `polywire.shapes` のレジストリ層（外部境界の名前解決専用）。
何を: `@shape` デコレータでシェイプ variant クラスを登録し、取得/一覧/検査を提供。
なぜ: UI/CLI から届く文字列名（大文字小文字不問）を、型付きの variant へ一度だけ変換するため。

概要:
- 登録対象は `polywire.shapes.spec` の frozen dataclass（variant）のみ。
- デコレータは名前省略可（`@shape` / `@shape()`）と明示名指定をサポート。
- 名前は前後空白を除いて casefold する（"Cube" / "CuBe" / "CUBE" → "cube"）。
- 形状生成の分岐自体は `spec.generate()` の `match` が担い、ここは名前表だけを持つ。
"""

from __future__ import annotations

import inspect
from typing import Any

from polywire.common.base_registry import BaseRegistry


class _ShapeNameRegistry(BaseRegistry):
    """シェイプ名専用の名前表。語区切りを持たないため大文字小文字だけを畳み込む。"""

    @classmethod
    def normalize_key(cls, name: str) -> str:
        if not isinstance(name, str):
            raise TypeError("シェイプ名は str である必要があります")
        key = name.strip().casefold()
        if not key:
            raise ValueError("シェイプ名は空であってはなりません")
        return key


_shape_registry = _ShapeNameRegistry()


def shape(arg: Any | None = None, /, name: str | None = None):
    """シェイプ variant クラスをレジストリに登録するデコレータ。

    使用例:
    - `@shape` / `@shape()`                      → クラス名から自動推論。
    - `@shape("custom")` / `@shape(name="custom")` → 明示名で登録。

    例外:
    - TypeError: クラス以外を登録しようとした場合。
    """

    def _register_checked(obj: Any, resolved_name: str | None = None):
        if not inspect.isclass(obj):
            raise TypeError(f"@shape は variant クラスのみ登録可能です: got {obj!r}")
        return _shape_registry.register(resolved_name)(obj)

    # 直付け (@shape)。クラス以外はここで弾く
    if arg is not None and not isinstance(arg, str):
        return _register_checked(arg, name)

    # 位置引数で名前を渡した (@shape("name"))
    if isinstance(arg, str) and name is None:

        def _decorator_named(obj: Any):
            return _register_checked(obj, arg)

        return _decorator_named

    # name キーワード引数、または引数なし
    def _decorator_generic(obj: Any):
        return _register_checked(obj, name)

    return _decorator_generic


def get_shape(name: str) -> type:
    """登録された variant クラスを取得。

    例外:
        KeyError: シェイプが登録されていない場合
    """
    return _shape_registry.get(name)


def list_shapes() -> list[str]:
    """登録されているシェイプ名の一覧（ソート済み）。"""
    return sorted(_shape_registry.list_all())


def is_shape_registered(name: str) -> bool:
    """シェイプが登録されているかチェック。"""
    return _shape_registry.is_registered(name)


__all__ = [
    "shape",
    "get_shape",
    "list_shapes",
    "is_shape_registered",
]
