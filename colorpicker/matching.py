"""Nearest named color search with a confidence score."""
from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Optional, Sequence

import numpy as np

from .conversions import round_half_up
from .named_colors import NamedColorDataset

# Normalisation constant for confidence. Slightly below sqrt(3) * 255 (~441.67),
# so the farthest possible match scores 0 after clamping.
MAX_RGB_DISTANCE = 441
UNKNOWN_COLOR_NAME = 'Unknown'

HIGH_CONFIDENCE = 80
MEDIUM_CONFIDENCE = 60


@dataclass(frozen=True, slots=True)
class NamedColorMatch:
    name: str
    confidence: int
    distance: Optional[float] = None  # None when there was nothing to compare against

    def as_dict(self) -> dict:
        return asdict(self)


def color_distance(c1: Sequence[float], c2: Sequence[float]) -> float:
    """Euclidean distance between two RGB colors."""
    return math.sqrt((c1[0] - c2[0]) ** 2 + (c1[1] - c2[1]) ** 2 + (c1[2] - c2[2]) ** 2)


def confidence_for_distance(distance: float) -> int:
    return max(0, round_half_up((1 - distance / MAX_RGB_DISTANCE) * 100))


def confidence_level(confidence: int) -> str:
    """Bucket a confidence percentage into high, medium or low."""
    if confidence >= HIGH_CONFIDENCE:
        return 'high'
    if confidence >= MEDIUM_CONFIDENCE:
        return 'medium'
    return 'low'


def find_closest_named_color(r, g, b, dataset: NamedColorDataset) -> NamedColorMatch:
    """Scan the whole dataset for the smallest Euclidean RGB distance.

    Ties resolve to the entry that appears first in the dataset.
    """
    if len(dataset) == 0:
        return NamedColorMatch(UNKNOWN_COLOR_NAME, 0)

    diffs = dataset.rgb_array - np.array([r, g, b], dtype=np.float64)
    distances = np.sqrt(np.sum(diffs * diffs, axis=1))
    best = int(np.argmin(distances))  # argmin returns the first minimum
    distance = float(distances[best])
    return NamedColorMatch(dataset[best].name, confidence_for_distance(distance), distance)
