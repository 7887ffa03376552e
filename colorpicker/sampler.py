"""Image loading and pixel sampling.

Images are validated (suffix, size), decoded with Pillow, shrunk so their
longest side fits ``max_image_size``, and then read pixel by pixel.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

import numpy as np
from PIL import Image

from .config import MAX_FILE_SIZE, MAX_IMAGE_SIZE, SUPPORTED_SUFFIXES, PickerConfig
from .conversions import RGBColor, round_half_up

logger = logging.getLogger(__name__)


def validate_image_file(
    path: Path,
    max_file_size: int = MAX_FILE_SIZE,
    suffixes: Iterable[str] = SUPPORTED_SUFFIXES,
) -> List[str]:
    """Return every problem with ``path``; an empty list means it can be opened."""
    errors: List[str] = []
    allowed = sorted(suffixes)
    if path.suffix.lower() not in allowed:
        errors.append(f"Unsupported file format. Supported: {', '.join(allowed)}")
    size = path.stat().st_size
    if size > max_file_size:
        errors.append(f"File too large. Maximum size: {max_file_size / (1024 * 1024):g}MB")
    return errors


def calculate_optimal_size(width: int, height: int, max_side: int = MAX_IMAGE_SIZE) -> Tuple[int, int]:
    """Scale ``(width, height)`` down so neither side exceeds ``max_side``."""
    if width <= max_side and height <= max_side:
        return width, height
    aspect_ratio = width / height
    if width > height:
        return max_side, max(1, round_half_up(max_side / aspect_ratio))
    return max(1, round_half_up(max_side * aspect_ratio)), max_side


@dataclass(frozen=True, slots=True)
class SampledPixel:
    r: int
    g: int
    b: int
    a: int
    x: int
    y: int

    @property
    def rgb(self) -> RGBColor:
        return RGBColor(self.r, self.g, self.b)


class ImageSampler:
    def __init__(
        self,
        image: Image.Image,
        *,
        source: Optional[Path] = None,
        file_size: Optional[int] = None,
        original_size: Optional[Tuple[int, int]] = None,
        image_format: Optional[str] = None,
    ) -> None:
        rgba = image.convert('RGBA')
        self._pixels = np.asarray(rgba)  # (height, width, 4)
        self.source = source
        self.file_size = file_size
        self.original_size = original_size or rgba.size
        self.image_format = image_format or image.format

    @classmethod
    def open(cls, path: Union[str, Path], config: Optional[PickerConfig] = None) -> 'ImageSampler':
        config = config or PickerConfig()
        image_path = Path(path).expanduser()
        if not image_path.is_file():
            raise FileNotFoundError(f"Image not found: {image_path}")
        errors = validate_image_file(image_path, config.max_file_size, config.supported_suffixes)
        if errors:
            raise ValueError(', '.join(errors))

        try:
            with Image.open(image_path) as img:
                img.load()
                image_format = img.format
                original_size = img.size
                rgba = img.convert('RGBA')
        except OSError as exc:
            raise ValueError('Failed to load image. The file may be corrupted.') from exc

        width, height = calculate_optimal_size(*original_size, config.max_image_size)
        if (width, height) != original_size:
            logger.debug("Resizing %s from %dx%d to %dx%d", image_path, *original_size, width, height)
            rgba = rgba.resize((width, height), Image.Resampling.LANCZOS)

        return cls(
            rgba,
            source=image_path,
            file_size=image_path.stat().st_size,
            original_size=original_size,
            image_format=image_format,
        )

    @property
    def size(self) -> Tuple[int, int]:
        """Sampling grid as (width, height), after any resize."""
        height, width = self._pixels.shape[:2]
        return width, height

    def get_pixel_color(self, x: float, y: float) -> SampledPixel:
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"Coordinates must be finite numbers, got ({x}, {y})")
        px, py = math.floor(x), math.floor(y)
        width, height = self.size
        if px < 0 or px >= width or py < 0 or py >= height:
            raise ValueError(f"Coordinates out of bounds: ({x}, {y}) not inside {width}x{height}")
        r, g, b, a = (int(channel) for channel in self._pixels[py, px])
        return SampledPixel(r, g, b, a, px, py)

    def describe(self) -> str:
        """One-line summary such as ``640 × 480 • 12.3KB • PNG``."""
        width, height = self.original_size
        parts = [f"{width} × {height}"]
        if self.file_size is not None:
            parts.append(f"{self.file_size / 1024:.1f}KB")
        if self.image_format:
            parts.append(self.image_format.upper())
        return ' • '.join(parts)
