from __future__ import annotations

"""Helper utilities for integrating the color scheme builder into external UIs.

This module exposes label/enum pairs for scheme kinds and variations, plus
:func:`scheme_color_count`, so a frontend can populate its pickers and
anticipate how many colors a choice will yield.
"""

from typing import List

from .harmony import SchemeKind, scheme_hue_count
from .variation import SHADES_PER_HUE, Variation

# Label/Enum pairs for UI choices
SCHEME_OPTIONS: List[tuple[str, SchemeKind]] = [
    ("Mono", SchemeKind.MONO),
    ("Contrast", SchemeKind.CONTRAST),
    ("Triade", SchemeKind.TRIADE),
    ("Tetrade", SchemeKind.TETRADE),
    ("Analogic", SchemeKind.ANALOGIC),
]
VARIATION_OPTIONS: List[tuple[str, Variation]] = [
    ("Default", Variation.DEFAULT),
    ("Pastel", Variation.PASTEL),
    ("Soft", Variation.SOFT),
    ("Light", Variation.LIGHT),
    ("Hard", Variation.HARD),
    ("Pale", Variation.PALE),
]


def scheme_color_count(kind: SchemeKind | str, complement: bool = False) -> int:
    """Number of colors :func:`palette.build` returns for a scheme."""
    return scheme_hue_count(SchemeKind.from_value(kind), complement) * SHADES_PER_HUE


__all__ = [
    "SCHEME_OPTIONS",
    "VARIATION_OPTIONS",
    "scheme_color_count",
]
