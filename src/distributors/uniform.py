"""
uniform 配置戦略（独立同分布のランダム配置）

- キャンバス全体に `count` 個の図形を互いに独立に置く。
- 幅は固定区間 20–80 から一様、高さは幅 × skew 帯域の係数。
- 返す順序は生成順。空間的な偏りの制御は行わない。

主なパラメータ:
- count: 図形数（0 なら空、負は `InvalidCount`）。既定 20。
- skew: 縦横比の揺らぎ帯域 [min, max]。既定 (0.8, 1.2)。
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from common.errors import InvalidCount
from common.param_utils import ensure_range
from common.types import Bounds, Range
from util.random import RandomSource

from .factory import DEFAULT_SKEW, FixedSize, Shape, make_shape
from .registry import distributor

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 20


def validate_uniform_params(
    *,
    bounds: Bounds | None = None,
    count: int | None = DEFAULT_COUNT,
    skew: Any = DEFAULT_SKEW,
    **extra: Any,
) -> dict[str, Any]:
    """uniform 戦略のパラメータを検証・正規化する（乱数は引かない。`bounds` は使わない）。"""
    if extra:
        logger.debug("uniform: ignoring unknown params %s", sorted(extra))
    if count is None:
        count = DEFAULT_COUNT
    if isinstance(count, bool) or not isinstance(count, int):
        if isinstance(count, float) and count.is_integer():
            count = int(count)
        else:
            raise InvalidCount(f"count must be an integer: got {count!r}")
    if count < 0:
        raise InvalidCount(f"count must be >= 0: got {count}")
    return {"count": count, "skew": ensure_range(skew, "skew", positive=True)}


@distributor("uniform", validate=validate_uniform_params)
def uniform(
    bounds: Bounds,
    colors: Sequence[str],
    *,
    rng: RandomSource,
    count: int = DEFAULT_COUNT,
    skew: Range = DEFAULT_SKEW,
) -> list[Shape]:
    """キャンバス全体に `count` 個の図形を一様ランダムに配置する。

    Parameters
    ----------
    bounds : Bounds
        キャンバス寸法。
    colors : Sequence[str]
        図形色の候補（空でないこと）。
    rng : RandomSource
        乱数源。
    count : int, default 20
        生成する図形数。
    skew : tuple[float, float], default (0.8, 1.2)
        縦横比の揺らぎ帯域。

    Returns
    -------
    list[Shape]
        生成順の図形リスト（長さはちょうど `count`）。
    """
    params = validate_uniform_params(count=count, skew=skew)
    size = FixedSize()
    return [
        make_shape(bounds, colors, size, params["skew"], rng=rng) for _ in range(params["count"])
    ]


uniform.__param_meta__ = {
    "count": {"type": "integer", "min": 0, "max": 500, "step": 1},
    "skew": {"type": "number", "min": (0.1, 0.1), "max": (4.0, 4.0), "step": (0.05, 0.05)},
}
