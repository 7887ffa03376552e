"""Color picker: color conversions, named color matching and palettes."""
from .analysis import calculate_brightness, calculate_luminance, contrast_ratio, get_color_temperature
from .conversions import HSLColor, HSVColor, RGBColor, hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl, rgb_to_hsv
from .engine import ColorEngine, ColorInfo, format_color_values
from .matching import NamedColorMatch, find_closest_named_color
from .named_colors import NamedColorDataset, NamedColorEntry, css_fallback_dataset, load_dataset
from .palettes import PaletteScheme, generate_palette

__all__ = [
    'ColorEngine', 'ColorInfo', 'HSLColor', 'HSVColor', 'NamedColorDataset',
    'NamedColorEntry', 'NamedColorMatch', 'PaletteScheme', 'RGBColor',
    'calculate_brightness', 'calculate_luminance', 'contrast_ratio',
    'css_fallback_dataset', 'find_closest_named_color', 'format_color_values',
    'generate_palette', 'get_color_temperature', 'hex_to_rgb', 'hsl_to_rgb',
    'load_dataset', 'rgb_to_hex', 'rgb_to_hsl', 'rgb_to_hsv',
]
