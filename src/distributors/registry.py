"""
どこで: `distributors` のレジストリ層（関数専用）。
何を: `@distributor` デコレータで配置戦略関数を登録し、取得/一覧/検査を提供。
なぜ: 生成サービスがリクエストの戦略名から実装を引けるようにし、戦略の追加を一貫 API で管理するため。

概要:
- 登録対象は「関数」のみ（`(bounds, colors, *, rng, **params) -> list[Shape]`）。
- デコレータは名前省略可（`@distributor` / `@distributor()`）と明示名指定をサポート。
- `validate=` で乱数を引く前に呼ぶパラメータ検証関数を添付できる（`__validate__` 属性）。
  検証関数はキーワード `bounds`（キャンバス）と戦略パラメータを受け取り、正規化済みパラメータを返す。
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Mapping

from common.base_registry import BaseRegistry

DistributorFn = Callable[..., Any]
ValidateFn = Callable[..., dict[str, Any]]

_distributor_registry = BaseRegistry()


def _no_validation(*, bounds: Any = None, **params: Any) -> dict[str, Any]:
    return dict(params)


def distributor(
    arg: Any | None = None, /, name: str | None = None, validate: ValidateFn | None = None
):
    """配置戦略関数をレジストリに登録するデコレータ。

    使用例:
    - `@distributor` / `@distributor()`                → 関数名から自動推論。
    - `@distributor("grid")` / `@distributor(name="grid")` → 明示名で登録。
    - `@distributor("grid", validate=fn)`              → 事前検証関数を添付。

    例外:
    - TypeError: 関数以外を登録しようとした場合。
    """

    def _register_checked(obj: Any, resolved_name: str | None = None):
        if not inspect.isfunction(obj):
            raise TypeError(f"@distributor は関数のみ登録可能です: got {obj!r}")
        obj.__validate__ = validate or _no_validation
        return _distributor_registry.register(resolved_name)(obj)

    # 直付け (@distributor)
    if inspect.isfunction(arg) and name is None:
        return _register_checked(arg, None)

    # 位置引数で名前を渡した (@distributor("name"))
    if isinstance(arg, str) and name is None:

        def _decorator_named(obj: Any):
            return _register_checked(obj, arg)

        return _decorator_named

    # name キーワード引数、または引数なし
    def _decorator_generic(obj: Any):
        return _register_checked(obj, name)

    return _decorator_generic


def get_distributor(name: str) -> DistributorFn:
    """登録された配置戦略関数を取得。

    例外:
        KeyError: 登録されていない場合
    """
    return _distributor_registry.get(name)


def list_distributors() -> list[str]:
    """登録されている配置戦略名をソートして返す。"""
    return sorted(_distributor_registry.list_all())


def is_distributor_registered(name: str) -> bool:
    """配置戦略が登録されているかチェック。"""
    return _distributor_registry.is_registered(name)


def unregister(name: str) -> None:
    """名前を指定して登録を解除（存在しない場合は無視）。"""
    _distributor_registry.unregister(name)


def get_registry() -> Mapping[str, Any]:
    """読み取り専用ビューとしてレジストリ辞書を返す。"""
    return _distributor_registry.registry


__all__ = [
    "distributor",
    "get_distributor",
    "list_distributors",
    "is_distributor_registered",
    "unregister",
    "get_registry",
]
