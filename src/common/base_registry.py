"""
どこで: `common.base_registry`。
何を: 名前 → 実装の対応表。キーは正規化して保持する（"NoiseGrid" / "noise-grid" / "noise_grid" は同一）。
なぜ: リクエストに書かれた戦略名を表記揺れなく実装へ解決するため（`distributors.registry` が利用）。
"""

from __future__ import annotations

import re
from typing import Any, Callable

_CAMEL_HEAD = re.compile(r"([^_])([A-Z][a-z]+)")
_CAMEL_TAIL = re.compile(r"([a-z0-9])([A-Z])")


def normalize_key(name: str) -> str:
    """レジストリキーを snake_case へ正規化する。

    Raises
    ------
    TypeError
        `name` が str でない場合。
    ValueError
        空白を除いて空の場合。
    """
    if not isinstance(name, str):
        raise TypeError(f"registry key must be a str: got {type(name).__name__}")
    key = name.strip().replace("-", "_")
    if not key:
        raise ValueError("registry key must not be empty")
    if not any(c.isupper() for c in key):
        return key
    return _CAMEL_TAIL.sub(r"\1_\2", _CAMEL_HEAD.sub(r"\1_\2", key)).lower()


class BaseRegistry:
    """正規化キーで実装を引く登録表。

    - `register(name)` はデコレータを返す。名前省略時は `obj.__name__` を使う。
    - 同じキーへ別の実装を登録すると `ValueError`（同一オブジェクトの再登録は許す）。
    """

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}

    def register(self, name: str | None = None) -> Callable[[Any], Any]:
        def decorator(obj: Any) -> Any:
            key = normalize_key(name if name else obj.__name__)
            current = self._entries.get(key)
            if current is not None and current is not obj:
                raise ValueError(f"'{key}' is already registered")
            self._entries[key] = obj
            return obj

        return decorator

    def get(self, name: str) -> Any:
        """登録済みの実装を返す。未登録は `KeyError`。"""
        key = normalize_key(name)
        try:
            return self._entries[key]
        except KeyError:
            raise KeyError(f"'{name}' is not registered") from None

    def list_all(self) -> list[str]:
        return list(self._entries)

    def is_registered(self, name: str) -> bool:
        try:
            return normalize_key(name) in self._entries
        except (TypeError, ValueError):
            return False

    def unregister(self, name: str) -> None:
        """登録を外す（未登録なら何もしない）。"""
        self._entries.pop(normalize_key(name), None)

    @property
    def registry(self) -> dict[str, Any]:
        """登録表のコピー。"""
        return dict(self._entries)


__all__ = ["BaseRegistry", "normalize_key"]
