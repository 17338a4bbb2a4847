from __future__ import annotations

import math

import pytest

from common.errors import DegenerateRange, InvalidRange
from common.param_utils import clamp01, ensure_range, lerp, norm_to_range


def test_lerp_maps_endpoints_and_midpoint() -> None:
    assert lerp(0.0, 0.0, 10.0, 100.0, 200.0) == 100.0
    assert lerp(10.0, 0.0, 10.0, 100.0, 200.0) == 200.0
    assert lerp(5.0, 0.0, 10.0, 100.0, 200.0) == 150.0


def test_lerp_extrapolates_outside_source() -> None:
    # 確率の写像はクランプしない（負/1 超もそのまま）
    assert lerp(-1.0, 0.0, 1.0, 0.0, 1.0) == -1.0
    assert lerp(2.0, 0.0, 1.0, 0.0, 1.0) == 2.0


def test_lerp_reversed_target() -> None:
    assert lerp(0.25, 0.0, 1.0, 1.0, 0.0) == pytest.approx(0.75)


def test_lerp_empty_source_raises() -> None:
    with pytest.raises(DegenerateRange):
        lerp(0.5, 1.0, 1.0, 0.0, 1.0)


def test_clamp_and_norm() -> None:
    assert clamp01(-0.5) == 0.0
    assert clamp01(1.5) == 1.0
    assert clamp01(0.25) == 0.25
    assert norm_to_range(0.5, 20.0, 80.0) == 50.0
    assert norm_to_range(2.0, 20.0, 80.0) == 80.0


def test_ensure_range_accepts_pairs_and_scalars() -> None:
    assert ensure_range([0.8, 1.2], "skew") == (0.8, 1.2)
    assert ensure_range((20, 80), "size_range") == (20.0, 80.0)
    assert ensure_range(1.0, "skew") == (1.0, 1.0)


@pytest.mark.parametrize(
    "value",
    [
        (1.0,),
        (1.0, 2.0, 3.0),
        (2.0, 1.0),
        (math.nan, 1.0),
        (1.0, math.inf),
        "ab",
        None,
    ],
)
def test_ensure_range_rejects_malformed(value) -> None:
    with pytest.raises(InvalidRange):
        ensure_range(value, "skew")


def test_ensure_range_positive() -> None:
    assert ensure_range((0.5, 1.0), "skew", positive=True) == (0.5, 1.0)
    with pytest.raises(InvalidRange):
        ensure_range((0.0, 1.0), "skew", positive=True)
    with pytest.raises(InvalidRange):
        ensure_range((-3.0, 1.0), "size_range", positive=True)
