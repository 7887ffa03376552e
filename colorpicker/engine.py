"""Color analysis engine.

``ColorEngine`` owns one named-color dataset for its whole lifetime. The
dataset is handed in at construction, so every query sees a fully loaded,
read-only reference list.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

from .analysis import calculate_brightness, calculate_luminance, get_color_temperature
from .conversions import HSLColor, HSVColor, RGBColor, rgb_to_hex, rgb_to_hsl, rgb_to_hsv
from .matching import NamedColorMatch, confidence_level, find_closest_named_color
from .named_colors import NamedColorDataset, load_dataset
from .palettes import PaletteScheme, generate_palette


@dataclass(frozen=True, slots=True)
class ColorInfo:
    """Everything the picker reports about one color."""

    rgb: RGBColor
    hex: str
    hsl: HSLColor
    hsv: HSVColor
    named_color: NamedColorMatch
    brightness: int
    luminance: float
    temperature: str

    def as_dict(self) -> dict:
        return {
            'rgb': self.rgb.as_dict(),
            'hex': self.hex,
            'hsl': self.hsl.as_dict(),
            'hsv': self.hsv.as_dict(),
            'named_color': self.named_color.as_dict(),
            'brightness': self.brightness,
            'luminance': self.luminance,
            'temperature': self.temperature,
        }


class ColorEngine:
    def __init__(self, dataset: NamedColorDataset) -> None:
        if not isinstance(dataset, NamedColorDataset):
            raise TypeError(f"dataset must be a NamedColorDataset, got {type(dataset).__name__}")
        self._dataset = dataset

    @classmethod
    def from_path(cls, path: Optional[Union[str, Path]] = None) -> 'ColorEngine':
        """Load a dataset (or the fallback list) and build an engine around it."""
        return cls(load_dataset(path))

    @property
    def dataset(self) -> NamedColorDataset:
        return self._dataset

    def find_closest_named_color(self, r, g, b) -> NamedColorMatch:
        return find_closest_named_color(r, g, b, self._dataset)

    def get_color_info(self, r, g, b) -> ColorInfo:
        return ColorInfo(
            rgb=RGBColor(r, g, b),
            hex=rgb_to_hex(r, g, b),
            hsl=rgb_to_hsl(r, g, b),
            hsv=rgb_to_hsv(r, g, b),
            named_color=self.find_closest_named_color(r, g, b),
            brightness=calculate_brightness(r, g, b),
            luminance=calculate_luminance(r, g, b),
            temperature=get_color_temperature(r, g, b),
        )

    def generate_palette(self, r, g, b, scheme: Union[PaletteScheme, str] = PaletteScheme.MONOCHROMATIC) -> List[RGBColor]:
        return generate_palette(r, g, b, scheme)


def format_color_values(info: ColorInfo) -> Dict[str, Union[str, int]]:
    """Display strings for every field of ``info``."""
    rgb, hsl, hsv = info.rgb, info.hsl, info.hsv
    return {
        'rgb': f"rgb({rgb.r}, {rgb.g}, {rgb.b})",
        'hex': info.hex,
        'hsl': f"hsl({hsl.h}, {hsl.s}%, {hsl.l}%)",
        'hsv': f"hsv({hsv.h}, {hsv.s}%, {hsv.v}%)",
        'named_color': info.named_color.name,
        'confidence': info.named_color.confidence,
        'confidence_level': confidence_level(info.named_color.confidence),
        'brightness': f"{info.brightness}%",
        'luminance': f"{info.luminance:.3f}",
        'temperature': info.temperature,
    }
