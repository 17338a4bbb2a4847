import math

import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import assume, given, settings, strategies as st  # type: ignore

from common.param_utils import lerp
from common.types import Bounds
from distributors.uniform import uniform
from util.random import RandomSource

_finite = st.floats(-1e3, 1e3, allow_nan=False, allow_infinity=False)


@given(v=_finite, a=_finite, b=_finite, c=_finite, d=_finite)
def test_lerp_round_trip(v, a, b, c, d):
    assume(abs(b - a) >= 1.0 and abs(d - c) >= 1.0)
    back = lerp(lerp(v, a, b, c, d), c, d, a, b)
    assert math.isclose(back, v, rel_tol=1e-9, abs_tol=1e-6)


@given(lo=st.floats(-1e3, 1e3), span=st.floats(0.0, 1e3), seed=st.integers(0, 2**32 - 1))
def test_uniform_stays_in_interval(lo, span, seed):
    v = RandomSource(seed).uniform(lo, lo + span)
    assert lo <= v <= lo + span


@settings(max_examples=30, deadline=None)
@given(
    w=st.floats(1.0, 2000.0),
    h=st.floats(1.0, 2000.0),
    count=st.integers(0, 40),
    skew_lo=st.floats(0.1, 2.0),
    skew_span=st.floats(0.0, 2.0),
    seed=st.integers(0, 2**32 - 1),
)
def test_uniform_shapes_respect_bounds(w, h, count, skew_lo, skew_span, seed):
    bounds = Bounds(w, h)
    skew = (skew_lo, skew_lo + skew_span)
    shapes = uniform(bounds, ["#000000ff"], rng=RandomSource(seed), count=count, skew=skew)
    assert len(shapes) == count
    for s in shapes:
        assert bounds.contains(s.x, s.y)
        assert 20.0 <= s.width < 80.0
        assert s.width * skew[0] * (1 - 1e-12) <= s.height <= s.width * skew[1] * (1 + 1e-12)
