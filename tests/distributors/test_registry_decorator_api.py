from __future__ import annotations

from typing import Iterator

import pytest

from distributors import get_distributor, is_distributor_registered, list_distributors
from distributors.registry import distributor, get_registry, unregister


@pytest.fixture()
def _cleanup() -> Iterator[list[str]]:
    """テスト内で登録した名前を後始末する（ビルトインには触れない）。"""
    names: list[str] = []
    yield names
    for n in names:
        unregister(n)


def test_builtins_are_registered() -> None:
    assert {"noise", "uniform"} <= set(list_distributors())
    assert callable(get_distributor("Uniform"))
    assert hasattr(get_distributor("noise"), "__param_meta__")


def test_decorator_supports_bare_named_and_keyword(_cleanup: list[str]) -> None:
    @distributor
    def spiral_scatter(bounds, colors, *, rng):  # noqa: ANN001 - テスト用
        return []

    @distributor("ring")
    def _ring(bounds, colors, *, rng):  # noqa: ANN001 - テスト用
        return []

    @distributor(name="grid_fill")
    def _grid(bounds, colors, *, rng):  # noqa: ANN001 - テスト用
        return []

    _cleanup.extend(["spiral_scatter", "ring", "grid_fill"])
    assert is_distributor_registered("spiral_scatter")
    assert get_distributor("ring") is _ring
    assert get_distributor("grid-fill") is _grid


def test_validate_hook_is_attached(_cleanup: list[str]) -> None:
    def _check(*, count: int = 1) -> dict:
        return {"count": int(count) * 2}

    @distributor("doubled", validate=_check)
    def _doubled(bounds, colors, *, rng, count):  # noqa: ANN001 - テスト用
        return []

    @distributor("passthrough")
    def _plain(bounds, colors, *, rng, **kw):  # noqa: ANN001 - テスト用
        return []

    _cleanup.extend(["doubled", "passthrough"])
    assert _doubled.__validate__(count=3) == {"count": 6}
    assert _plain.__validate__(a=1) == {"a": 1}
    assert _plain.__validate__(bounds=object(), a=1) == {"a": 1}


def test_non_function_rejected() -> None:
    with pytest.raises(TypeError):
        distributor("bad")(object())


def test_get_unknown_raises_key_error() -> None:
    with pytest.raises(KeyError):
        get_distributor("voronoi")
    assert not is_distributor_registered("voronoi")


def test_get_registry_is_a_copy() -> None:
    snap = dict(get_registry())
    snap.pop("uniform")
    assert is_distributor_registered("uniform")
