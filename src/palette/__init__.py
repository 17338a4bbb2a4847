"""Public entrypoint for the color scheme library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``palette`` instead of individual
submodules.
"""

from .harmony import SchemeKind
from .palette import Palette
from .scheme import ColorScheme, build
from .ui_helpers import (
    SCHEME_OPTIONS,
    VARIATION_OPTIONS,
    scheme_color_count,
)
from .variation import Variation

__all__ = [
    "ColorScheme",
    "Palette",
    "SchemeKind",
    "Variation",
    "build",
    "scheme_color_count",
    "SCHEME_OPTIONS",
    "VARIATION_OPTIONS",
]
