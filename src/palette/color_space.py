from __future__ import annotations

"""OKLCH <-> sRGB conversion and gamut mapping.

Colors are handled as ``(L, C, h)`` with ``L`` in [0, 100], ``C >= 0`` and
``h`` in degrees. Conversions go through OKLab and linear sRGB (D65) using
the published OKLab matrices, applied with numpy.
"""

import math
from typing import Tuple

import numpy as np


OKLCH = Tuple[float, float, float]
SRGB = Tuple[float, float, float]

# linear sRGB -> LMS
_RGB_TO_LMS = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ]
)
# cube-rooted LMS -> OKLab
_LMS_TO_LAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ]
)
_LAB_TO_LMS = np.linalg.inv(_LMS_TO_LAB)
_LMS_TO_RGB = np.linalg.inv(_RGB_TO_LMS)


def normalize_hue(h: float) -> float:
    """Normalize a hue angle into [0, 360)."""
    return (h % 360.0 + 360.0) % 360.0


def _srgb_to_linear(c: np.ndarray) -> np.ndarray:
    return np.where(c <= 0.04045, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)


def _linear_to_srgb(c: np.ndarray) -> np.ndarray:
    c = np.clip(c, 0.0, 1.0)
    return np.where(c <= 0.0031308, 12.92 * c, 1.055 * np.power(c, 1 / 2.4) - 0.055)


def srgb_to_oklch(r: float, g: float, b: float) -> OKLCH:
    """Convert sRGB in [0, 1] to OKLCH."""
    linear = _srgb_to_linear(np.array([r, g, b], dtype=np.float64))
    lms = np.cbrt(_RGB_TO_LMS @ linear)
    L, a, b_ = _LMS_TO_LAB @ lms
    C = math.hypot(a, b_)
    h = 0.0 if C < 1e-12 else normalize_hue(math.degrees(math.atan2(b_, a)))
    return (max(0.0, min(100.0, float(L) * 100.0)), C, h)


def oklch_to_linear_rgb(L: float, C: float, h: float) -> np.ndarray:
    """Convert OKLCH to *unclipped* linear sRGB (may leave [0, 1])."""
    h_rad = math.radians(normalize_hue(h))
    lab = np.array(
        [max(0.0, min(100.0, L)) / 100.0, C * math.cos(h_rad), C * math.sin(h_rad)],
        dtype=np.float64,
    )
    lms = (_LAB_TO_LMS @ lab) ** 3
    return _LMS_TO_RGB @ lms


def oklch_to_srgb(L: float, C: float, h: float) -> SRGB:
    """Convert OKLCH to gamma-encoded sRGB clipped to [0, 1]."""
    r, g, b = _linear_to_srgb(oklch_to_linear_rgb(L, max(0.0, C), h))
    return (float(r), float(g), float(b))


def to_srgb_gamut_safe(
    L: float,
    C: float,
    h: float,
    max_iter: int = 24,
    reduction_factor: float = 0.9,
) -> Tuple[SRGB, OKLCH]:
    """Map OKLCH into the sRGB gamut by shrinking chroma.

    Returns ``((r, g, b), (L, C_adj, h))``. When the loop runs out the last
    candidate is clipped channel-wise.
    """
    L = max(0.0, min(100.0, L))
    C_curr = max(0.0, C)
    h = normalize_hue(h)
    eps = 1e-9
    for _ in range(max_iter):
        linear = oklch_to_linear_rgb(L, C_curr, h)
        if np.all(linear >= -eps) and np.all(linear <= 1.0 + eps):
            break
        C_curr *= reduction_factor
    return oklch_to_srgb(L, C_curr, h), (L, C_curr, h)


def srgb_to_hex(rgb: SRGB) -> str:
    """Format sRGB in [0, 1] as ``#rrggbb``."""
    r, g, b = (int(round(max(0.0, min(1.0, v)) * 255)) for v in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


__all__ = [
    "OKLCH",
    "SRGB",
    "normalize_hue",
    "srgb_to_oklch",
    "oklch_to_srgb",
    "to_srgb_gamut_safe",
    "srgb_to_hex",
]
