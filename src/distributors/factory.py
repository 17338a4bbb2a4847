"""
どこで: `distributors.factory`。
何を: 図形（位置・サイズ・色）1 つを作る `make_shape` と、幅を決めるサイズポリシー。
なぜ: 一様配置とノイズ配置で同じ図形生成規則（座標・skew・色選択）を共有するため。

乱数を引く順序（シード再現性のため固定）:
    x → y → 幅（`FixedSize` のみ）→ skew 係数 → 色

サイズポリシー:
- `FixedSize(lo, hi)`: 幅 = `uniform(lo, hi)`（一様配置、既定 20–80）
- `ScoredSize(score, size_range)`: 幅 = `lerp(score, 0, 1, *size_range)`（ノイズ配置。乱数は引かない）
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Sequence, Union

from common.param_utils import lerp
from common.types import Bounds, Range
from util.random import RandomSource

DEFAULT_SKEW: Range = (0.8, 1.2)
DEFAULT_SIZE: Range = (20.0, 80.0)


@dataclass(frozen=True)
class Shape:
    """装飾図形 1 つ分の値オブジェクト。

    `height = width * skew`（skew は生成時の帯域から引いた係数）。
    """

    x: float
    y: float
    width: float
    height: float
    color: str

    def to_dict(self) -> dict[str, float | str]:
        return asdict(self)


@dataclass(frozen=True)
class FixedSize:
    """幅を固定区間から一様に引く。"""

    lo: float = DEFAULT_SIZE[0]
    hi: float = DEFAULT_SIZE[1]

    def width(self, rng: RandomSource) -> float:
        return rng.uniform(self.lo, self.hi)


@dataclass(frozen=True)
class ScoredSize:
    """確率スコア（0..1）をサイズ範囲へ線形に写して幅とする。"""

    score: float
    size_range: Range = DEFAULT_SIZE

    def width(self, rng: RandomSource) -> float:
        lo, hi = self.size_range
        return lerp(self.score, 0.0, 1.0, lo, hi)


SizePolicy = Union[FixedSize, ScoredSize]


def make_shape(
    bounds: Bounds,
    colors: Sequence[str],
    size_policy: SizePolicy,
    skew: Range = DEFAULT_SKEW,
    *,
    rng: RandomSource,
    at: tuple[float, float] | None = None,
) -> Shape:
    """図形を 1 つ生成する。

    Parameters
    ----------
    bounds : Bounds
        キャンバス寸法。x, y はそれぞれ [0, width), [0, height) から引く。
    colors : Sequence[str]
        色列（空であってはならない。空なら `EmptySequence`）。
    size_policy : FixedSize | ScoredSize
        幅の決め方。
    skew : tuple[float, float], default (0.8, 1.2)
        縦横比の揺らぎ帯域。height = width * uniform(*skew)。
    rng : RandomSource
        乱数源。
    at : tuple[float, float] | None
        既に引いた座標を使う場合に指定（ノイズ配置）。None なら x, y をここで引く。
    """
    if at is None:
        x = rng.uniform(0.0, bounds.width)
        y = rng.uniform(0.0, bounds.height)
    else:
        x, y = at
    width = size_policy.width(rng)
    height = width * rng.uniform(skew[0], skew[1])
    color = rng.pick_element(colors)
    return Shape(x=x, y=y, width=width, height=height, color=color)


__all__ = [
    "Shape",
    "FixedSize",
    "ScoredSize",
    "SizePolicy",
    "make_shape",
    "DEFAULT_SKEW",
    "DEFAULT_SIZE",
]
