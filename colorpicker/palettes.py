"""Palette generation from a base color.

Each scheme has its own producer working in HSL space. Producers receive the
base color and its HSL form and return RGB colors in display order.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from .conversions import HSLColor, RGBColor, hsl_to_rgb, rgb_to_hsl

logger = logging.getLogger(__name__)

LIGHTNESS_STEP = 15
ANALOGOUS_STEP = 30
TRIADIC_STEP = 120


class PaletteScheme(Enum):
    MONOCHROMATIC = 'monochromatic'
    ANALOGOUS = 'analogous'
    COMPLEMENTARY = 'complementary'
    TRIADIC = 'triadic'


def _monochromatic(base: RGBColor, hsl: HSLColor) -> List[RGBColor]:
    """Nine shades and tints, lightness -60..+60 in steps of 15."""
    palette = []
    for i in range(-4, 5):
        lightness = max(0, min(100, hsl.l + i * LIGHTNESS_STEP))
        palette.append(hsl_to_rgb(hsl.h, hsl.s, lightness))
    return palette


def _analogous(base: RGBColor, hsl: HSLColor) -> List[RGBColor]:
    return [
        hsl_to_rgb((hsl.h + i * ANALOGOUS_STEP) % 360, hsl.s, hsl.l)
        for i in range(-2, 3)
    ]


def _complementary(base: RGBColor, hsl: HSLColor) -> List[RGBColor]:
    # the base is kept as given, not re-derived from its rounded HSL
    return [base, hsl_to_rgb((hsl.h + 180) % 360, hsl.s, hsl.l)]


def _triadic(base: RGBColor, hsl: HSLColor) -> List[RGBColor]:
    return [
        hsl_to_rgb((hsl.h + i * TRIADIC_STEP) % 360, hsl.s, hsl.l)
        for i in range(3)
    ]


PRODUCERS: Dict[PaletteScheme, Callable[[RGBColor, HSLColor], List[RGBColor]]] = {
    PaletteScheme.MONOCHROMATIC: _monochromatic,
    PaletteScheme.ANALOGOUS: _analogous,
    PaletteScheme.COMPLEMENTARY: _complementary,
    PaletteScheme.TRIADIC: _triadic,
}


def resolve_scheme(scheme: Union[PaletteScheme, str]) -> Optional[PaletteScheme]:
    """Map a scheme or its name to a member, or None when it is not one of ours."""
    if isinstance(scheme, PaletteScheme):
        return scheme
    try:
        return PaletteScheme(scheme)
    except ValueError:
        return None


def generate_palette(r, g, b, scheme: Union[PaletteScheme, str] = PaletteScheme.MONOCHROMATIC) -> List[RGBColor]:
    """Build a palette around ``(r, g, b)``; an unknown scheme gives ``[]``."""
    resolved = resolve_scheme(scheme)
    if resolved is None:
        logger.debug("Unknown palette scheme %r, returning an empty palette", scheme)
        return []
    return PRODUCERS[resolved](RGBColor(r, g, b), rgb_to_hsl(r, g, b))
