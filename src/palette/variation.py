from __future__ import annotations

"""Variations controlling the lightness/chroma of each hue's shades.

Each hue of a scheme is expanded into :data:`SHADES_PER_HUE` shades. A
:class:`Variation` fixes, for every shade, a target OKLCH lightness and a
chroma factor applied to :data:`BASE_CHROMA`.
"""

from enum import Enum
from typing import Dict, List, Tuple

from .color_space import OKLCH

SHADES_PER_HUE = 4
BASE_CHROMA = 0.15

# (L, chroma factor) per shade: base, dark, light, mid.
ShadeRecipe = Tuple[Tuple[float, float], ...]


class Variation(Enum):
    """Named shade recipes."""

    DEFAULT = "default"
    PASTEL = "pastel"
    SOFT = "soft"
    LIGHT = "light"
    HARD = "hard"
    PALE = "pale"

    @classmethod
    def from_value(cls, value: "Variation | str") -> "Variation":
        if isinstance(value, Variation):
            return value
        key = str(value).strip().lower()
        for v in cls:
            if v.value == key:
                return v
        raise ValueError(f"Unknown variation: {value!r}")


_RECIPES: Dict[Variation, ShadeRecipe] = {
    Variation.DEFAULT: ((62.0, 1.0), (42.0, 0.85), (80.0, 0.55), (55.0, 0.7)),
    Variation.PASTEL: ((85.0, 0.35), (70.0, 0.3), (92.0, 0.2), (78.0, 0.45)),
    Variation.SOFT: ((68.0, 0.5), (50.0, 0.4), (82.0, 0.3), (60.0, 0.55)),
    Variation.LIGHT: ((88.0, 0.45), (78.0, 0.55), (95.0, 0.25), (83.0, 0.65)),
    Variation.HARD: ((58.0, 1.2), (38.0, 1.0), (72.0, 0.9), (50.0, 1.3)),
    Variation.PALE: ((90.0, 0.12), (75.0, 0.1), (96.0, 0.06), (82.0, 0.15)),
}


def expand_hue(hue: float, variation: Variation) -> List[OKLCH]:
    """Expand one hue into its shades as raw (pre-gamut) OKLCH colors."""
    recipe = _RECIPES[variation]
    return [(L, BASE_CHROMA * factor, hue) for L, factor in recipe]
