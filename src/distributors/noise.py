"""
noise 配置戦略（Perlin ノイズで変調したグリッド走査）

- キャンバスを刻み `step` のグリッドで走査し（x 外側・y 内側）、各セルで 1 回だけ配置を試みる。
- グリッドは「試行回数（サンプリング密度）」を決めるだけで、座標そのものは毎回キャンバス全体から引く。
- 引いた座標をノイズ空間へ写し、ノイズ値と `sparsity` から配置確率を求め、一様乱数と比較して出す/出さないを決める。
- 出す場合の幅は確率をサイズ範囲へ線形に写した値（確率が高いほど大きい）。

主なパラメータ:
- step: グリッド刻み（> 0。0 以下は `InvalidStep`）。
- sparsity: この値以下のノイズでは確率が 0 以下になるしきい値（< 1。1 以上は `DegenerateRange`）。
- skew: 縦横比の揺らぎ帯域 [min, max]。
- size_range: 幅の範囲 [min, max]。

実装メモ:
- ノイズ生成器はリクエストごとに新しいシードで作り直す（リクエスト内でのみ安定）。
- ノイズ空間への写像は x, y ともにキャンバス「幅」基準で [0, NOISE_EXTENT] へ写す。
  y も幅で割るため、縦長キャンバスでは y 側のノイズ座標が NOISE_EXTENT を超える。既存の見た目を保つため意図的に維持。
- 乱数は 2 系統に分ける。`rng` からノイズのシード・図形属性用のシードを順に引き、以後 `rng` は
  各セルの x → y → r だけに使う。skew 係数と色は図形属性用の系統から引く。
  これにより、同じシードなら sparsity を上げても各セルの x, y, r は変わらず、出る図形の集合は単調に減る。
"""

from __future__ import annotations

import logging
import math
from typing import Any, Sequence

import numpy as np

from common import settings
from common.errors import DegenerateRange, InvalidStep
from common.param_utils import ensure_range, lerp
from common.types import Bounds, Range
from util.noise import PerlinNoise2D
from util.random import RandomSource

from .factory import DEFAULT_SIZE, DEFAULT_SKEW, ScoredSize, Shape, make_shape
from .registry import distributor

logger = logging.getLogger(__name__)

DEFAULT_STEP = 50.0
DEFAULT_SPARSITY = 0.0
# ノイズ値 1.0 が写る確率
DENSITY = 1.0
# 1 リクエストで走査するセル数の上限（1920x1080 を刻み 1 で走査できる程度）
MAX_GRID_CELLS = 4_000_000


def validate_noise_params(
    *,
    bounds: Bounds | None = None,
    step: Any = DEFAULT_STEP,
    sparsity: Any = DEFAULT_SPARSITY,
    skew: Any = DEFAULT_SKEW,
    size_range: Any = DEFAULT_SIZE,
    **extra: Any,
) -> dict[str, Any]:
    """noise 戦略のパラメータを検証・正規化する（乱数は引かない）。

    `bounds` を渡すとグリッドのセル数も検査し、`MAX_GRID_CELLS` を超える刻みは `InvalidStep`。
    """
    if extra:
        logger.debug("noise: ignoring unknown params %s", sorted(extra))
    try:
        step_f = float(step)
    except (TypeError, ValueError) as exc:
        raise InvalidStep(f"step must be a number: got {step!r}") from exc
    if not step_f > 0.0 or step_f == float("inf"):
        raise InvalidStep(f"step must be > 0: got {step!r}")
    try:
        sparsity_f = float(sparsity)
    except (TypeError, ValueError) as exc:
        raise DegenerateRange(f"sparsity must be a number: got {sparsity!r}") from exc
    if not (math.isfinite(sparsity_f) and sparsity_f < 1.0):
        # [sparsity, 1] が空（または逆向き）で確率へ写せない
        raise DegenerateRange(f"sparsity must be finite and < 1: got {sparsity!r}")
    if bounds is not None:
        # 極小の刻みでも溢れないよう浮動小数で数える
        cells = float(np.ceil(bounds.width / step_f)) * float(np.ceil(bounds.height / step_f))
        if cells > MAX_GRID_CELLS:
            raise InvalidStep(
                f"step {step_f:g} gives {cells:g} grid cells on a "
                f"{bounds.width:g}x{bounds.height:g} canvas (max {MAX_GRID_CELLS})"
            )
    return {
        "step": step_f,
        "sparsity": sparsity_f,
        "skew": ensure_range(skew, "skew", positive=True),
        "size_range": ensure_range(size_range, "size_range", positive=True),
    }


def grid_axes(bounds: Bounds, step: float) -> tuple[np.ndarray, np.ndarray]:
    """走査するグリッドの x 軸・y 軸（各 [0, 寸法) を刻み `step`）。"""
    return np.arange(0.0, bounds.width, step), np.arange(0.0, bounds.height, step)


def placement_probability(noise_value: float, sparsity: float) -> float:
    """ノイズ値 [-1, 1] を配置確率へ写す（[sparsity, 1] → [0, DENSITY]、外挿あり）。"""
    return lerp(noise_value, sparsity, 1.0, 0.0, DENSITY)


@distributor("noise", validate=validate_noise_params)
def noise(
    bounds: Bounds,
    colors: Sequence[str],
    *,
    rng: RandomSource,
    step: float = DEFAULT_STEP,
    sparsity: float = DEFAULT_SPARSITY,
    skew: Range = DEFAULT_SKEW,
    size_range: Range = DEFAULT_SIZE,
) -> list[Shape]:
    """ノイズで間引いたグリッド走査で図形を配置する。

    Parameters
    ----------
    bounds : Bounds
        キャンバス寸法。
    colors : Sequence[str]
        図形色の候補（空でないこと）。
    rng : RandomSource
        乱数源。ノイズ生成器のシードもここから引く。
    step : float, default 50
        グリッド刻み。候補セル数は ceil(W/step) * ceil(H/step)。
    sparsity : float, default 0.0
        配置確率が 0 になるノイズ値。大きいほど疎になる。
    skew : tuple[float, float], default (0.8, 1.2)
        縦横比の揺らぎ帯域。
    size_range : tuple[float, float], default (20, 80)
        幅の範囲（確率 0 → min, 確率 1 → max）。

    Returns
    -------
    list[Shape]
        走査順（x 外側・y 内側）の図形リスト。空もあり得る。
    """
    params = validate_noise_params(
        bounds=bounds, step=step, sparsity=sparsity, skew=skew, size_range=size_range
    )
    extent = settings.get().NOISE_EXTENT
    field = PerlinNoise2D(rng.spawn_seed())
    styling = RandomSource(rng.spawn_seed())
    xs, ys = grid_axes(bounds, params["step"])

    shapes: list[Shape] = []
    for _gx in xs:
        for _gy in ys:
            x = rng.uniform(0.0, bounds.width)
            y = rng.uniform(0.0, bounds.height)
            nx = lerp(x, 0.0, bounds.width, 0.0, extent)
            ny = lerp(y, 0.0, bounds.width, 0.0, extent)
            prob = placement_probability(field.sample2d(nx, ny), params["sparsity"])
            if prob > rng.uniform(0.0, 1.0):
                shapes.append(
                    make_shape(
                        bounds,
                        colors,
                        ScoredSize(prob, params["size_range"]),
                        params["skew"],
                        rng=styling,
                        at=(x, y),
                    )
                )

    logger.debug(
        "noise: seed=%s cells=%d emitted=%d", field.seed, xs.size * ys.size, len(shapes)
    )
    return shapes


noise.__param_meta__ = {
    "step": {"type": "number", "min": 5.0, "max": 400.0, "step": 5.0},
    "sparsity": {"type": "number", "min": -1.0, "max": 0.95, "step": 0.05},
    "skew": {"type": "number", "min": (0.1, 0.1), "max": (4.0, 4.0), "step": (0.05, 0.05)},
    "size_range": {"type": "number", "min": (1.0, 1.0), "max": (400.0, 400.0), "step": (1.0, 1.0)},
}
