"""Recent color history and palette export.

History is newest first, holds at most ``max_size`` colors and never two
entries with the same hex. It is persisted as a JSON list so it survives
between runs.
"""
from __future__ import annotations

import json
import logging
import time
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from .config import MAX_HISTORY_SIZE
from .conversions import RGBColor, rgb_to_hex, rgb_to_hsl
from .matching import find_closest_named_color
from .named_colors import NamedColorDataset

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    r: int
    g: int
    b: int
    hex: str
    timestamp: int  # milliseconds since the epoch

    @classmethod
    def from_record(cls, record) -> 'HistoryEntry':
        try:
            color = RGBColor.from_values(record['r'], record['g'], record['b'])
            timestamp = int(record.get('timestamp', 0))
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise ValueError(f"Invalid history record {record!r}: {exc}") from None
        return cls(color.r, color.g, color.b, rgb_to_hex(*color.as_tuple()), timestamp)

    def as_dict(self) -> dict:
        return asdict(self)


def _now_ms() -> int:
    return int(time.time() * 1000)


class ColorHistory:
    def __init__(
        self,
        path: Optional[Path] = None,
        max_size: int = MAX_HISTORY_SIZE,
        entries: Sequence[HistoryEntry] = (),
    ) -> None:
        self.path = path
        self.max_size = max_size
        self._entries: List[HistoryEntry] = list(entries)[:max_size]

    @classmethod
    def load(cls, path: Union[str, Path], max_size: int = MAX_HISTORY_SIZE) -> 'ColorHistory':
        """Read history from ``path``; a missing or unreadable file starts empty."""
        history_path = Path(path).expanduser()
        if not history_path.exists():
            return cls(history_path, max_size)
        try:
            with history_path.open('r', encoding='utf-8') as handle:
                data = json.load(handle)
            if not isinstance(data, list):
                raise ValueError('expected a JSON list')
            entries = [HistoryEntry.from_record(record) for record in data]
        except (OSError, ValueError) as exc:
            logger.warning("Could not load color history from %s: %s", history_path, exc)
            return cls(history_path, max_size)
        return cls(history_path, max_size, entries)

    @property
    def entries(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self._entries)

    def add(self, r: int, g: int, b: int, timestamp: Optional[int] = None) -> HistoryEntry:
        hex_value = rgb_to_hex(r, g, b)
        entry = HistoryEntry(r, g, b, hex_value, _now_ms() if timestamp is None else timestamp)
        self._entries = [e for e in self._entries if e.hex != hex_value]
        self._entries.insert(0, entry)
        del self._entries[self.max_size:]
        self.save()
        return entry

    def find(self, hex_value: str) -> Optional[HistoryEntry]:
        wanted = hex_value.lower()
        if not wanted.startswith('#'):
            wanted = f"#{wanted}"
        for entry in self._entries:
            if entry.hex == wanted:
                return entry
        return None

    def clear(self) -> bool:
        """Drop every entry. Returns False when there was nothing to clear."""
        if not self._entries:
            return False
        self._entries = []
        self.save()
        return True

    def save(self) -> None:
        if self.path is None:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open('w', encoding='utf-8') as handle:
                json.dump([entry.as_dict() for entry in self._entries], handle, indent=2)
        except OSError as exc:
            logger.warning("Could not save color history to %s: %s", self.path, exc)


def build_palette_export(
    entries: Sequence[HistoryEntry],
    dataset: NamedColorDataset,
    created: Optional[datetime] = None,
) -> dict:
    created = created or datetime.now()
    colors = []
    for entry in entries:
        hsl = rgb_to_hsl(entry.r, entry.g, entry.b)
        colors.append({
            'name': find_closest_named_color(entry.r, entry.g, entry.b, dataset).name,
            'hex': entry.hex,
            'rgb': f"rgb({entry.r}, {entry.g}, {entry.b})",
            'hsl': f"hsl({hsl.h}, {hsl.s}%, {hsl.l}%)",
        })
    return {
        'name': f"Color Palette {created.strftime('%Y-%m-%d')}",
        'colors': colors,
        'created': created.isoformat(timespec='seconds'),
    }


def export_palette(
    history: ColorHistory,
    dataset: NamedColorDataset,
    output_path: Union[str, Path],
    created: Optional[datetime] = None,
) -> Path:
    """Write the history as a named palette JSON file."""
    if not len(history):
        raise ValueError('No colors in history to save')
    path = Path(output_path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open('w', encoding='utf-8') as handle:
        json.dump(build_palette_export(history.entries, dataset, created), handle, indent=2)
    return path
