from __future__ import annotations

"""Container type for a generated color scheme.

This module defines the :class:`Palette` dataclass, which groups the base
hue, the scheme options and the list of generated ``#rrggbb`` colors.
"""

from dataclasses import dataclass
from typing import Tuple

from .harmony import SchemeKind
from .variation import SHADES_PER_HUE, Variation


@dataclass(frozen=True)
class Palette:
    """Generated color scheme.

    Attributes
    ----------
    hue:
        Base hue in degrees, normalized to [0, 360).
    kind:
        Scheme kind (mono, contrast, ...).
    variation:
        Shade recipe applied to every hue.
    hues:
        Hues the scheme was expanded from, in output order.
    colors:
        ``#rrggbb`` strings, :data:`SHADES_PER_HUE` consecutive entries per hue.
    """

    hue: float
    kind: SchemeKind
    variation: Variation
    hues: Tuple[float, ...]
    colors: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.colors)

    def shades_of(self, index: int) -> Tuple[str, ...]:
        """Return the shades generated for ``hues[index]``."""
        start = index * SHADES_PER_HUE
        if not 0 <= index < len(self.hues):
            raise IndexError("hue index out of range")
        return self.colors[start : start + SHADES_PER_HUE]
