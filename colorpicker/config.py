"""Runtime settings shared by the sampler, history store and CLI."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Optional

DEFAULT_HISTORY_FILE = '.color_picker_history.json'
MAX_HISTORY_SIZE = 10
MAX_IMAGE_SIZE = 2000  # longest side kept after loading
MAX_FILE_SIZE = 10 * 1024 * 1024
SUPPORTED_SUFFIXES: FrozenSet[str] = frozenset({'.png', '.jpg', '.jpeg', '.gif', '.webp', '.bmp'})


def default_history_path() -> Path:
    return Path.home() / DEFAULT_HISTORY_FILE


@dataclass(slots=True)
class PickerConfig:
    """Configuration bundle for a picker session."""

    dataset_path: Optional[Path] = None  # None uses the bundled colors.json
    history_path: Path = field(default_factory=default_history_path)
    history_size: int = MAX_HISTORY_SIZE
    max_image_size: int = MAX_IMAGE_SIZE
    max_file_size: int = MAX_FILE_SIZE
    supported_suffixes: FrozenSet[str] = SUPPORTED_SUFFIXES

    def __post_init__(self) -> None:
        if self.history_size < 1:
            raise ValueError(f"history_size must be at least 1, got {self.history_size}.")
        if self.max_image_size < 1:
            raise ValueError(f"max_image_size must be at least 1, got {self.max_image_size}.")
