"""Brightness, relative luminance and temperature of an RGB color."""
from __future__ import annotations

from typing import Sequence

from .conversions import rgb_to_hsl, round_half_up

# Upper (inclusive) hue bound of each band, in degrees.
TEMPERATURE_BANDS = (
    (60, 'Warm (Red-Yellow)'),
    (120, 'Neutral (Yellow-Green)'),
    (180, 'Cool (Green-Cyan)'),
    (240, 'Cool (Cyan-Blue)'),
    (300, 'Cool (Blue-Magenta)'),
    (360, 'Warm (Magenta-Red)'),
)
NEUTRAL_TEMPERATURE = 'Neutral'


def calculate_brightness(r, g, b) -> int:
    """Perceived brightness as a percentage (ITU-R BT.601 weights)."""
    brightness = (r * 299 + g * 587 + b * 114) / 1000
    return round_half_up(brightness / 255 * 100)


def _srgb_to_linear(channel: float) -> float:
    """Convert sRGB channel (0-255) to linear RGB (0-1), WCAG 2.x threshold."""
    channel /= 255.0
    if channel <= 0.03928:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def calculate_luminance(r, g, b) -> float:
    """WCAG relative luminance in [0, 1]."""
    return 0.2126 * _srgb_to_linear(r) + 0.7152 * _srgb_to_linear(g) + 0.0722 * _srgb_to_linear(b)


def contrast_ratio(first: Sequence[int], second: Sequence[int]) -> float:
    """WCAG contrast ratio between two RGB colors, from 1.0 to 21.0."""
    l1 = calculate_luminance(*first)
    l2 = calculate_luminance(*second)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def temperature_for_hue(hue: float) -> str:
    if hue < 0 or hue > 360:
        return NEUTRAL_TEMPERATURE
    for upper, label in TEMPERATURE_BANDS:
        if hue <= upper:
            return label
    return NEUTRAL_TEMPERATURE


def get_color_temperature(r, g, b) -> str:
    # achromatic colors have hue 0 and land in the first band
    return temperature_for_hue(rgb_to_hsl(r, g, b).h)
