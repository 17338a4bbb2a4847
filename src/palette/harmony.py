from __future__ import annotations

"""Scheme kinds and the hue sets they produce.

This module defines :class:`SchemeKind` and :func:`compute_scheme_hues`,
which turns a base hue plus ``distance`` / ``complement`` options into the
ordered list of hues a scheme is built from. Every hue later expands into
four shades (see :mod:`palette.variation`).
"""

from enum import Enum
from typing import List

from .color_space import normalize_hue


class SchemeKind(Enum):
    """Hue relationships used to build a color scheme."""

    MONO = "mono"
    CONTRAST = "contrast"
    TRIADE = "triade"
    TETRADE = "tetrade"
    ANALOGIC = "analogic"

    @classmethod
    def from_value(cls, value: "SchemeKind | str") -> "SchemeKind":
        if isinstance(value, SchemeKind):
            return value
        key = str(value).strip().lower()
        for kind in cls:
            if kind.value == key:
                return kind
        raise ValueError(f"Unknown scheme kind: {value!r}")


# Spread (in degrees) reached at distance=1.
_TRIADE_SPREAD = 60.0
_TETRADE_SPREAD = 90.0
_ANALOGIC_SPREAD = 60.0


def compute_scheme_hues(
    kind: SchemeKind,
    hue: float,
    distance: float = 0.0,
    complement: bool = False,
) -> List[float]:
    """Return the hues (degrees, normalized to [0, 360)) for a scheme.

    ``distance`` must be in [0, 1] and only affects triade, tetrade and
    analogic. ``complement`` only affects analogic, where it appends the
    opposite hue.
    """
    if not 0.0 <= distance <= 1.0:
        raise ValueError("distance must be in [0, 1].")

    if kind is SchemeKind.MONO:
        hues = [hue]
    elif kind is SchemeKind.CONTRAST:
        hues = [hue, hue + 180.0]
    elif kind is SchemeKind.TRIADE:
        dif = _TRIADE_SPREAD * distance
        hues = [hue, hue + 180.0 - dif, hue + 180.0 + dif]
    elif kind is SchemeKind.TETRADE:
        dif = _TETRADE_SPREAD * distance
        hues = [hue, hue + 180.0, hue + 180.0 + dif, hue + dif]
    elif kind is SchemeKind.ANALOGIC:
        dif = _ANALOGIC_SPREAD * distance
        hues = [hue, hue + dif, hue - dif]
        if complement:
            hues.append(hue + 180.0)
    else:
        raise ValueError(f"Unsupported SchemeKind: {kind}")

    return [normalize_hue(h) for h in hues]


def scheme_hue_count(kind: SchemeKind, complement: bool = False) -> int:
    """Number of hues a scheme produces (independent of the base hue)."""
    return len(compute_scheme_hues(kind, 0.0, 0.0, complement))
