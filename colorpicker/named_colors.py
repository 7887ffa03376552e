"""Named color reference data.

The dataset is an ordered, read-only list of ``{name, r, g, b}`` records. It is
normally read from a JSON array; when that is unavailable the 140 CSS3 named
colors are built from webcolors instead.
"""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np

from .conversions import name_to_rgb

logger = logging.getLogger(__name__)

DEFAULT_DATASET_PATH = Path(__file__).resolve().parent / 'data' / 'colors.json'

# CSS3 named colors, display spelling. grey aliases are left out so each RGB
# value that appears twice (Aqua/Cyan, Fuchsia/Magenta) keeps a fixed order.
CSS_COLOR_NAMES = (
    'AliceBlue', 'AntiqueWhite', 'Aqua', 'Aquamarine', 'Azure', 'Beige', 'Bisque',
    'Black', 'BlanchedAlmond', 'Blue', 'BlueViolet', 'Brown', 'BurlyWood',
    'CadetBlue', 'Chartreuse', 'Chocolate', 'Coral', 'CornflowerBlue', 'Cornsilk',
    'Crimson', 'Cyan', 'DarkBlue', 'DarkCyan', 'DarkGoldenRod', 'DarkGray',
    'DarkGreen', 'DarkKhaki', 'DarkMagenta', 'DarkOliveGreen', 'DarkOrange',
    'DarkOrchid', 'DarkRed', 'DarkSalmon', 'DarkSeaGreen', 'DarkSlateBlue',
    'DarkSlateGray', 'DarkTurquoise', 'DarkViolet', 'DeepPink', 'DeepSkyBlue',
    'DimGray', 'DodgerBlue', 'FireBrick', 'FloralWhite', 'ForestGreen', 'Fuchsia',
    'Gainsboro', 'GhostWhite', 'Gold', 'GoldenRod', 'Gray', 'Green', 'GreenYellow',
    'HoneyDew', 'HotPink', 'IndianRed', 'Indigo', 'Ivory', 'Khaki', 'Lavender',
    'LavenderBlush', 'LawnGreen', 'LemonChiffon', 'LightBlue', 'LightCoral',
    'LightCyan', 'LightGoldenRodYellow', 'LightGray', 'LightGreen', 'LightPink',
    'LightSalmon', 'LightSeaGreen', 'LightSkyBlue', 'LightSlateGray',
    'LightSteelBlue', 'LightYellow', 'Lime', 'LimeGreen', 'Linen', 'Magenta',
    'Maroon', 'MediumAquaMarine', 'MediumBlue', 'MediumOrchid', 'MediumPurple',
    'MediumSeaGreen', 'MediumSlateBlue', 'MediumSpringGreen', 'MediumTurquoise',
    'MediumVioletRed', 'MidnightBlue', 'MintCream', 'MistyRose', 'Moccasin',
    'NavajoWhite', 'Navy', 'OldLace', 'Olive', 'OliveDrab', 'Orange', 'OrangeRed',
    'Orchid', 'PaleGoldenRod', 'PaleGreen', 'PaleTurquoise', 'PaleVioletRed',
    'PapayaWhip', 'PeachPuff', 'Peru', 'Pink', 'Plum', 'PowderBlue', 'Purple',
    'Red', 'RosyBrown', 'RoyalBlue', 'SaddleBrown', 'Salmon', 'SandyBrown',
    'SeaGreen', 'SeaShell', 'Sienna', 'Silver', 'SkyBlue', 'SlateBlue', 'SlateGray',
    'Snow', 'SpringGreen', 'SteelBlue', 'Tan', 'Teal', 'Thistle', 'Tomato',
    'Turquoise', 'Violet', 'Wheat', 'White', 'WhiteSmoke', 'Yellow', 'YellowGreen',
)


@dataclass(frozen=True, slots=True)
class NamedColorEntry:
    name: str
    r: int
    g: int
    b: int

    @classmethod
    def from_record(cls, record) -> 'NamedColorEntry':
        """Validate one ``{name, r, g, b}`` mapping from a dataset file."""
        if not isinstance(record, dict):
            raise ValueError(f"Color record must be an object, got {type(record).__name__}.")
        try:
            name = record['name']
            channels = [record[key] for key in ('r', 'g', 'b')]
        except KeyError as exc:
            raise ValueError(f"Color record is missing {exc.args[0]!r}: {record!r}") from None
        if not isinstance(name, str) or not name:
            raise ValueError(f"Color record needs a non-empty name: {record!r}")
        for value in channels:
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"Color record {name!r} has an invalid channel: {value!r}")
        return cls(name, *channels)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def as_dict(self) -> dict:
        return asdict(self)


class NamedColorDataset:
    """Immutable, ordered collection of named colors.

    Order matters: when two entries are equally close to a query, the one that
    comes first wins.
    """

    __slots__ = ('_entries', '_rgb')

    def __init__(self, entries: Iterable[NamedColorEntry] = ()) -> None:
        self._entries: Tuple[NamedColorEntry, ...] = tuple(entries)
        rgb = np.array([entry.rgb for entry in self._entries], dtype=np.int64).reshape(-1, 3)
        rgb.setflags(write=False)
        self._rgb = rgb

    @classmethod
    def from_records(cls, records) -> 'NamedColorDataset':
        if not isinstance(records, list):
            raise ValueError(f"Color data must be a JSON array, got {type(records).__name__}.")
        return cls(NamedColorEntry.from_record(record) for record in records)

    @property
    def entries(self) -> Tuple[NamedColorEntry, ...]:
        return self._entries

    @property
    def rgb_array(self) -> np.ndarray:
        """(N, 3) read-only array of channels, row i matching entry i."""
        return self._rgb

    def names(self) -> List[str]:
        return [entry.name for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[NamedColorEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> NamedColorEntry:
        return self._entries[index]

    def __repr__(self) -> str:
        return f"NamedColorDataset({len(self._entries)} colors)"


def css_fallback_dataset() -> NamedColorDataset:
    """The CSS3 named colors, resolved through webcolors."""
    return NamedColorDataset(
        NamedColorEntry(name, *name_to_rgb(name).as_tuple())
        for name in CSS_COLOR_NAMES
    )


def load_dataset(path: Optional[Union[str, Path]] = None) -> NamedColorDataset:
    """Read a dataset from JSON, falling back to the CSS3 list on any failure.

    A readable file holding an empty array gives an empty dataset; matching
    against it reports ``Unknown``.
    """
    dataset_path = Path(path) if path is not None else DEFAULT_DATASET_PATH
    try:
        with dataset_path.open('r', encoding='utf-8') as handle:
            records = json.load(handle)
        dataset = NamedColorDataset.from_records(records)
    except (OSError, ValueError) as exc:
        logger.warning("Could not load color data from %s (%s), using fallback colors", dataset_path, exc)
        return css_fallback_dataset()
    logger.debug("Loaded %d named colors from %s", len(dataset), dataset_path)
    return dataset
