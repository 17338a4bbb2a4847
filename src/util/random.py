"""
どこで: `util.random`。
何を: 一様乱数（実数/整数）と列からのランダム選択を提供する `RandomSource`。
なぜ: パレット・図形・ノイズ種の乱数を 1 本のストリームにまとめ、シード固定で再現できるようにするため。

設計メモ:
- 実体は `numpy.random.Generator`（PCG64）。`random()` は 53bit 精度の [0, 1) 実数で、
  キャンバス解像度での縞（banding）が出ない十分な分解能を持つ。
- 引く順序は呼び出し順そのもの。分布戦略側は引く順序を固定しておくことでシード再現性を保つ。
- インスタンスはスレッド間で共有しない（リクエストごと/スレッドごとに用意する）。
"""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

import numpy as np

from common.errors import DegenerateRange, EmptySequence

T = TypeVar("T")


class RandomSource:
    """シード可能な一様乱数源。"""

    __slots__ = ("_rng", "_seed")

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def uniform(self, lo: float, hi: float) -> float:
        """[lo, hi) の一様実数。"""
        return float(self._rng.random()) * (hi - lo) + lo

    def uniform_int(self, lo: float, hi: float) -> int:
        """`floor(uniform(lo, hi))`。整数境界なら [lo, hi-1] の整数（添字用）。"""
        if not hi > lo:
            raise DegenerateRange(f"uniform_int requires hi > lo: got [{lo}, {hi})")
        return int(math.floor(self.uniform(lo, hi)))

    def pick_element(self, seq: Sequence[T]) -> T:
        """列から一様に 1 要素を選ぶ。

        Raises
        ------
        EmptySequence
            `seq` が空の場合（呼び出し側で防ぐべき不変条件違反）。
        """
        n = len(seq)
        if n == 0:
            raise EmptySequence("cannot pick an element from an empty sequence")
        return seq[self.uniform_int(0, n)]

    def spawn_seed(self) -> int:
        """ノイズ生成器などへ渡す 32bit 整数シードを 1 つ引く。"""
        return int(self._rng.integers(0, 2**32, dtype=np.uint64))

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"RandomSource(seed={self._seed!r})"


__all__ = ["RandomSource"]
