"""共通フィクスチャ。

- 乱数シード固定
- 小さなキャンバス/色列の試料
- 環境変数由来の設定の後始末
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from common import settings
from common.types import Bounds
from util.random import RandomSource


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy のグローバル乱数を固定（RandomSource は独立だが念のため）。"""
    np.random.seed(12345)


@pytest.fixture()
def rng() -> RandomSource:
    return RandomSource(1234)


@pytest.fixture()
def canvas() -> Bounds:
    return Bounds(800.0, 600.0)


@pytest.fixture()
def colors() -> tuple[str, ...]:
    return ("#112233aa", "#445566bb", "#778899cc")


@pytest.fixture()
def reload_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """環境変数を差し替えて設定を読み直し、終了時に元へ戻す。"""
    yield monkeypatch
    monkeypatch.undo()
    settings.reload_from_env()
