"""
どこで: `engine.generation.palette_builder`。
何を: 基準色相を引き、パレットライブラリで色列を作り、各色にアルファを付け、背景色を 1 つ選ぶ。
なぜ: 色の導出規則（色相の区間・アルファの区間・背景の選び方）を配置戦略から切り離すため。

乱数を引く順序: 色相 → 各色のアルファ（色順）→ 背景。
パレットライブラリは `build(hue, scheme, distance, complement, variation) -> Sequence[str]`
（"#rrggbb"）という契約だけで扱い、差し替え可能にしている。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

import palette
from common import settings as _settings_mod
from common.errors import EmptyPalette, InvalidVariation
from palette import Variation
from util.color import with_alpha
from util.random import RandomSource

from .request import PaletteConfig

logger = logging.getLogger(__name__)

PaletteFn = Callable[..., Sequence[str]]


@dataclass(frozen=True)
class BuiltPalette:
    """1 リクエスト分の色。`colors` は "#rrggbbaa"、`background` はその要素。"""

    hue: float
    colors: tuple[str, ...]
    background: str


class PaletteBuilder:
    """色相・アルファ・背景をまとめて導出する。

    Parameters
    ----------
    build_fn : PaletteFn | None
        パレットライブラリの呼び出し口。None なら `palette.build`。
    """

    def __init__(self, build_fn: PaletteFn | None = None) -> None:
        self._build_fn = build_fn or palette.build

    def build(
        self, config: PaletteConfig, variation: Variation | str, rng: RandomSource
    ) -> BuiltPalette:
        """色相を引いて色列・背景を導出する。

        スキーム・distance は `PaletteConfig` が、バリエーション名はここで（乱数を引く前に）検証する。
        パレットライブラリ自身の例外は読み替えずにそのまま伝える。
        """
        try:
            variation = Variation.from_value(variation)
        except ValueError as exc:
            raise InvalidVariation(str(exc)) from exc
        s = _settings_mod.get()
        hue = rng.uniform(s.HUE_MIN, s.HUE_MAX)
        base = self._build_fn(
            hue, config.scheme_kind, config.distance, config.complemented, variation
        )
        if not base:
            raise EmptyPalette(
                f"palette library returned no colors for scheme={config.scheme_kind.value!r}"
            )
        colors = tuple(with_alpha(c, rng.uniform_int(s.ALPHA_MIN, s.ALPHA_MAX)) for c in base)
        background = rng.pick_element(colors)
        logger.debug("palette: hue=%.2f colors=%d background=%s", hue, len(colors), background)
        return BuiltPalette(hue=hue, colors=colors, background=background)


__all__ = ["BuiltPalette", "PaletteBuilder"]
