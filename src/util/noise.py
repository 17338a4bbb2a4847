"""
どこで: `util.noise`。
何を: シード付き 2D Perlin ノイズ（`PerlinNoise2D`）。値域は [-1, 1]。
なぜ: ノイズ分布戦略が「シード → 2D ノイズ関数」という最小の契約だけに依存できるようにするため。

実装メモ:
- カーネルは Numba 最適化（`@njit`）。`PXG_USE_NUMBA=0` のときは外側のカーネルだけを `py_func` 経由で
  Python として実行する（デバッガで追える。結果は同一）。
- Permutation はシードから `numpy.random.default_rng(seed).permutation(256)` で作り、2 回連結する。
- 勾配は 8 方向（軸 4 + 対角 4）。対角勾配 (±1, ±1) の寄与でちょうど ±1 に届くため、
  念のため出力は [-1, 1] にクリップする。
"""

from __future__ import annotations

import numpy as np
from numba import njit  # type: ignore[attr-defined]

from common import settings

NOISE_GRADIENTS_2D = np.array(
    [
        [1.0, 1.0],
        [-1.0, 1.0],
        [1.0, -1.0],
        [-1.0, -1.0],
        [1.0, 0.0],
        [-1.0, 0.0],
        [0.0, 1.0],
        [0.0, -1.0],
    ],
    dtype=np.float64,
)


@njit(fastmath=True, cache=True)
def fade(t):
    """Perlin のフェード関数 6t^5 - 15t^4 + 10t^3。"""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


@njit(fastmath=True, cache=True)
def _mix(a, b, t):
    return a + t * (b - a)


@njit(fastmath=True, cache=True)
def _grad(hash_val, x, y, grad2_array):
    idx = int(hash_val) & 7
    return grad2_array[idx, 0] * x + grad2_array[idx, 1] * y


@njit(fastmath=True, cache=True)
def perlin_noise_2d(x, y, perm_table, grad2_array):
    """2 次元 Perlin ノイズ（[-1, 1] にクリップ済み）。"""
    xf = np.floor(x)
    yf = np.floor(y)
    X = int(xf) & 255
    Y = int(yf) & 255

    # 内部点（小数部分）
    x -= xf
    y -= yf

    u = fade(x)
    v = fade(y)

    A = perm_table[X] + Y
    B = perm_table[X + 1] + Y

    gAA = _grad(perm_table[A & 511], x, y, grad2_array)
    gBA = _grad(perm_table[B & 511], x - 1.0, y, grad2_array)
    gAB = _grad(perm_table[(A + 1) & 511], x, y - 1.0, grad2_array)
    gBB = _grad(perm_table[(B + 1) & 511], x - 1.0, y - 1.0, grad2_array)

    value = _mix(_mix(gAA, gBA, u), _mix(gAB, gBB, u), v)
    if value > 1.0:
        return 1.0
    if value < -1.0:
        return -1.0
    return value


@njit(cache=True)
def _sample_many(xs, ys, perm_table, grad2_array):
    n = xs.shape[0]
    out = np.empty(n, dtype=np.float64)
    for i in range(n):
        out[i] = perlin_noise_2d(xs[i], ys[i], perm_table, grad2_array)
    return out


def make_permutation(seed: int) -> np.ndarray:
    """シードから 512 要素（0..255 を 2 回連結）の置換表を作る。"""
    base = np.random.default_rng(int(seed)).permutation(256).astype(np.int64)
    return np.concatenate([base, base])


def _normalize_seed(seed: int | float) -> int:
    # [0, 1) の実数シード（Math.random() 風）も受け付け、32bit 整数へ写す
    if isinstance(seed, float):
        if 0.0 <= seed < 1.0:
            return int(seed * 2**32)
        return int(seed) & 0xFFFFFFFF
    return int(seed) & 0xFFFFFFFF


class PerlinNoise2D:
    """シード付き 2D ノイズ関数。

    同じシードなら同じ値を返す（インスタンス内/間とも）。インスタンスは 1 リクエスト内でのみ使い、
    並列実行時に共有しないこと。
    """

    __slots__ = ("seed", "_perm", "_use_numba")

    def __init__(self, seed: int | float) -> None:
        self.seed = _normalize_seed(seed)
        self._perm = make_permutation(self.seed)
        self._use_numba = settings.get().USE_NUMBA

    def sample2d(self, x: float, y: float) -> float:
        """(x, y) でのノイズ値を [-1, 1] で返す。"""
        kernel = perlin_noise_2d if self._use_numba else perlin_noise_2d.py_func
        return float(kernel(float(x), float(y), self._perm, NOISE_GRADIENTS_2D))

    def sample_many(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        """座標配列をまとめて評価する（可視化/テスト用）。"""
        xs = np.ascontiguousarray(xs, dtype=np.float64).ravel()
        ys = np.ascontiguousarray(ys, dtype=np.float64).ravel()
        if xs.shape != ys.shape:
            raise ValueError("xs and ys must have the same length")
        if not self._use_numba:
            return np.array([self.sample2d(x, y) for x, y in zip(xs, ys)], dtype=np.float64)
        return _sample_many(xs, ys, self._perm, NOISE_GRADIENTS_2D)


__all__ = ["PerlinNoise2D", "perlin_noise_2d", "make_permutation", "NOISE_GRADIENTS_2D"]
