"""
どこで: `common` のパラメータ正規化ユーティリティ。
何を: 区間の線形写像（`lerp`）と、[min, max] ペア/数値パラメータの検証・正規化。
なぜ: 分布戦略とリクエスト層が同じ受理仕様・同じ例外で値を扱えるようにするため。
"""

from __future__ import annotations

import math
from typing import Iterable

from .errors import DegenerateRange, InvalidRange
from .types import Range


def clamp01(x: float) -> float:
    return 0.0 if x <= 0.0 else 1.0 if x >= 1.0 else x


def lerp(
    value: float,
    source_min: float,
    source_max: float,
    target_min: float,
    target_max: float,
) -> float:
    """`value` を [source_min, source_max] から [target_min, target_max] へ線形に写す。

    区間外の値はクランプせずに外挿する（確率が 0 未満/1 超になり得る）。

    Raises
    ------
    DegenerateRange
        `source_min == source_max` の場合。
    """
    span = source_max - source_min
    if span == 0:
        raise DegenerateRange(f"source range is empty: [{source_min}, {source_max}]")
    return target_min + (value - source_min) / span * (target_max - target_min)


def norm_to_range(x: float, lo: float, hi: float) -> float:
    """0..1 の値を [lo, hi] へ（クランプ付き）。"""
    x = clamp01(float(x))
    return lo + (hi - lo) * x


def ensure_range(
    v: float | Iterable[float],
    name: str,
    *,
    positive: bool = False,
) -> Range:
    """[min, max] ペアを正規化して返す。

    - 数値単体は (v, v) に拡張する。
    - 2 要素以外、非有限値、min > max は `InvalidRange`。
    - `positive=True` では min > 0 を要求する。
    """
    if isinstance(v, (int, float)):
        t = (float(v), float(v))
    else:
        try:
            t = tuple(float(x) for x in v)
        except (TypeError, ValueError) as exc:
            raise InvalidRange(f"{name} must be a [min, max] pair of numbers: got {v!r}") from exc
    if len(t) != 2:
        raise InvalidRange(f"{name} must have exactly 2 elements: got {v!r}")
    lo, hi = t
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise InvalidRange(f"{name} must be finite: got {v!r}")
    if lo > hi:
        raise InvalidRange(f"{name} min must not exceed max: got {v!r}")
    if positive and lo <= 0.0:
        raise InvalidRange(f"{name} must be positive: got {v!r}")
    return (lo, hi)


__all__ = [
    "clamp01",
    "lerp",
    "norm_to_range",
    "ensure_range",
]
