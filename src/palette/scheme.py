from __future__ import annotations

"""High-level API for building color schemes.

Two entry points are provided:

- :class:`ColorScheme`, a small chainable builder
  (``ColorScheme().from_hue(120).scheme("triade").distance(0.5).colors()``)
- :func:`build`, the one-call form used by the generation engine.

Both coordinate hue selection (:mod:`palette.harmony`), shade expansion
(:mod:`palette.variation`) and sRGB gamut mapping
(:mod:`palette.color_space`).
"""

from typing import List, Tuple

from .color_space import normalize_hue, srgb_to_hex, to_srgb_gamut_safe
from .harmony import SchemeKind, compute_scheme_hues
from .palette import Palette
from .variation import Variation, expand_hue


class ColorScheme:
    """Chainable color scheme builder.

    Setters validate eagerly and return ``self``; :meth:`colors` and
    :meth:`palette` compute the result from the current options.
    """

    def __init__(self) -> None:
        self._hue = 0.0
        self._kind = SchemeKind.MONO
        self._distance = 0.0
        self._complement = False
        self._variation = Variation.DEFAULT

    def from_hue(self, hue: float) -> "ColorScheme":
        self._hue = normalize_hue(float(hue))
        return self

    def scheme(self, kind: SchemeKind | str) -> "ColorScheme":
        self._kind = SchemeKind.from_value(kind)
        return self

    def distance(self, value: float) -> "ColorScheme":
        d = float(value)
        if not 0.0 <= d <= 1.0:
            raise ValueError("distance must be in [0, 1].")
        self._distance = d
        return self

    def add_complement(self, flag: bool) -> "ColorScheme":
        self._complement = bool(flag)
        return self

    def variation(self, value: Variation | str) -> "ColorScheme":
        self._variation = Variation.from_value(value)
        return self

    def palette(self) -> Palette:
        """Compute the scheme as a :class:`Palette`."""
        hues = compute_scheme_hues(self._kind, self._hue, self._distance, self._complement)
        colors: List[str] = []
        for h in hues:
            for L, C, h_i in expand_hue(h, self._variation):
                rgb, _ = to_srgb_gamut_safe(L, C, h_i)
                colors.append(srgb_to_hex(rgb))
        return Palette(
            hue=self._hue,
            kind=self._kind,
            variation=self._variation,
            hues=tuple(hues),
            colors=tuple(colors),
        )

    def colors(self) -> List[str]:
        """Compute the scheme as a list of ``#rrggbb`` strings."""
        return list(self.palette().colors)


def build(
    hue: float,
    scheme: SchemeKind | str,
    distance: float = 0.0,
    complement: bool = False,
    variation: Variation | str = Variation.DEFAULT,
) -> Tuple[str, ...]:
    """Build a color scheme and return its ``#rrggbb`` colors.

    Parameters
    ----------
    hue:
        Base hue in degrees (any real value; normalized internally).
    scheme:
        Scheme kind or its name (``"mono"``, ``"contrast"``, ``"triade"``,
        ``"tetrade"``, ``"analogic"``).
    distance:
        Spread in [0, 1] for triade/tetrade/analogic; ignored otherwise.
    complement:
        Append the complementary hue (analogic only).
    variation:
        Shade recipe or its name.

    Raises
    ------
    ValueError
        On unknown scheme/variation names or ``distance`` outside [0, 1].
    """
    return (
        ColorScheme()
        .from_hue(hue)
        .scheme(scheme)
        .distance(distance)
        .add_complement(complement)
        .variation(variation)
        .palette()
        .colors
    )
