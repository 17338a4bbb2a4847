"""
どこで: `common.env`
何を: `PXG_*` 環境変数を型付きで読むヘルパ（未設定・空文字・不正値はすべて既定値）。
なぜ: `common.settings` の読み込みを「キー名 + 既定値 + 値域」の宣言だけで書けるようにするため。
"""

from __future__ import annotations

import math
import os
from typing import Optional

_TRUE = frozenset({"1", "true", "t", "yes", "y", "on"})
_FALSE = frozenset({"0", "false", "f", "no", "n", "off"})


def _raw(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def env_int(
    name: str,
    default: int,
    *,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> int:
    """整数を読む。値域指定時は範囲外を端へ丸める。

    Parameters
    ----------
    name : str
        環境変数名。
    default : int
        未設定/不正値のときの値（丸めは適用しない）。
    min_value, max_value : Optional[int]
        丸め先の下限/上限。
    """
    raw = _raw(name)
    if raw is None:
        return default
    try:
        val = int(raw)
    except ValueError:
        return default
    if min_value is not None:
        val = max(val, min_value)
    if max_value is not None:
        val = min(val, max_value)
    return val


def env_float(name: str, default: float) -> float:
    """有限の実数を読む（nan/inf は既定値扱い）。"""
    raw = _raw(name)
    if raw is None:
        return float(default)
    try:
        val = float(raw)
    except ValueError:
        return float(default)
    return val if math.isfinite(val) else float(default)


def env_bool(name: str, default: bool = False) -> bool:
    """真偽値を読む（1/0, true/false, on/off など。整数は非 0 を真）。"""
    raw = _raw(name)
    if raw is None:
        return bool(default)
    s = raw.lower()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    try:
        return int(s) != 0
    except ValueError:
        return bool(default)


def env_str(name: str, default: str) -> str:
    """文字列を読む（前後の空白は除去）。"""
    raw = _raw(name)
    return default if raw is None else raw


__all__ = ["env_int", "env_float", "env_bool", "env_str"]
