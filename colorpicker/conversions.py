"""RGB, HSL and HSV value types plus the conversions between them.

Every derived value is rounded half-up to an integer, so HSL/HSV are reported
as whole degrees and whole percents. Hue is kept in [0, 360). Hue comes from
the six-sector formula evaluated in a fixed order, so colors whose exact hue
ends in .5 degrees always round the same way.
"""
from __future__ import annotations

import colorsys
import math
from dataclasses import asdict, dataclass
from typing import Tuple

import webcolors


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return int(math.floor(value + 0.5))


def _to_tuple(rgb) -> Tuple[int, int, int]:
    """Convert webcolors RGB to a plain tuple."""
    try:
        return (rgb.red, rgb.green, rgb.blue)
    except AttributeError:
        return tuple(rgb)


def _channel(label: str, value) -> int:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Channel {label} must be a number, got {value!r}.") from None
    if not number.is_integer():
        raise ValueError(f"Channel {label} must be a whole number, got {value!r}.")
    if not 0 <= number <= 255:
        raise ValueError(f"Channel {label} out of range [0, 255]: {value!r}.")
    return int(number)


@dataclass(frozen=True, slots=True)
class RGBColor:
    r: int
    g: int
    b: int

    @classmethod
    def from_values(cls, r, g, b) -> 'RGBColor':
        """Build a color from untrusted input, rejecting anything outside [0, 255]."""
        return cls(_channel('r', r), _channel('g', g), _channel('b', b))

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class HSLColor:
    h: int
    s: int
    l: int

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class HSVColor:
    h: int
    s: int
    v: int

    def as_dict(self) -> dict:
        return asdict(self)


def _sector_hue(r: float, g: float, b: float, maxc: float, delta: float) -> float:
    """Hue as a fraction of a turn from the six-sector formula (delta > 0).

    The red branch is checked first, then green, then blue, so a tie on the
    maximum channel always resolves the same way.
    """
    if maxc == r:
        hue = (g - b) / delta + (6 if g < b else 0)
    elif maxc == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4
    return hue / 6


def _hue_degrees(hue: float) -> int:
    # 359.6 rounds up to 360, which wraps to 0
    return round_half_up(hue * 360) % 360


def rgb_to_hex(r, g, b) -> str:
    """Format an RGB triple as ``#rrggbb`` with lowercase digits."""
    return f"#{round_half_up(r):02x}{round_half_up(g):02x}{round_half_up(b):02x}"


def hex_to_rgb(value: str) -> RGBColor:
    """Parse ``#rgb`` or ``#rrggbb`` (the ``#`` is optional)."""
    text = value.strip()
    if not text.startswith('#'):
        text = f"#{text}"
    # webcolors raises ValueError for anything that is not a 3 or 6 digit hex string
    return RGBColor(*_to_tuple(webcolors.hex_to_rgb(text)))


def name_to_rgb(name: str) -> RGBColor:
    """Resolve a CSS3 color name, case-insensitively."""
    return RGBColor(*_to_tuple(webcolors.name_to_rgb(name.strip().lower())))


def rgb_to_hsl(r, g, b) -> HSLColor:
    r, g, b = r / 255, g / 255, b / 255
    maxc = max(r, g, b)
    minc = min(r, g, b)
    light = (maxc + minc) / 2
    if maxc == minc:
        # achromatic
        return HSLColor(0, 0, round_half_up(light * 100))
    delta = maxc - minc
    sat = delta / (2 - maxc - minc) if light > 0.5 else delta / (maxc + minc)
    hue = _sector_hue(r, g, b, maxc, delta)
    return HSLColor(_hue_degrees(hue), round_half_up(sat * 100), round_half_up(light * 100))


def rgb_to_hsv(r, g, b) -> HSVColor:
    r, g, b = r / 255, g / 255, b / 255
    maxc = max(r, g, b)
    minc = min(r, g, b)
    delta = maxc - minc
    sat = 0 if maxc == 0 else delta / maxc
    hue = 0 if maxc == minc else _sector_hue(r, g, b, maxc, delta)
    return HSVColor(_hue_degrees(hue), round_half_up(sat * 100), round_half_up(maxc * 100))


def hsl_to_rgb(h, s, l) -> RGBColor:
    """Inverse of :func:`rgb_to_hsl` for degrees and percents.

    Each stage rounds independently, so a round trip through integer HSL can
    drift from the source channels.
    """
    r, g, b = colorsys.hls_to_rgb(h / 360.0, l / 100.0, s / 100.0)
    return RGBColor(round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255))
