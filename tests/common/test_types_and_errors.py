from __future__ import annotations

import math

import pytest

from common.errors import (
    DegenerateRange,
    EmptyPalette,
    GenerationError,
    InvalidBounds,
    InvalidCount,
    InvalidRequest,
)
from common.types import Bounds


def test_bounds_coerces_to_float() -> None:
    b = Bounds(800, 600)
    assert b.width == 800.0 and isinstance(b.width, float)
    assert b.height == 600.0


@pytest.mark.parametrize("w,h", [(0, 10), (10, 0), (-1, 10), (math.inf, 10), (math.nan, 10)])
def test_bounds_rejects_non_positive(w, h) -> None:
    with pytest.raises(InvalidBounds):
        Bounds(w, h)


def test_bounds_contains_is_half_open() -> None:
    b = Bounds(10, 5)
    assert b.contains(0.0, 0.0)
    assert b.contains(9.999, 4.999)
    assert not b.contains(10.0, 1.0)
    assert not b.contains(1.0, 5.0)
    assert not b.contains(-0.1, 1.0)


def test_error_hierarchy_is_value_error() -> None:
    for cls in (EmptyPalette, InvalidCount, InvalidRequest, DegenerateRange, InvalidBounds):
        assert issubclass(cls, GenerationError)
        assert issubclass(cls, ValueError)
