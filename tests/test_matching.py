"""
Named color dataset and nearest-match tests.
Run from project root: python -m pytest tests/ -v
"""
import json
import os
import tempfile
import unittest

from colorpicker.matching import (
    UNKNOWN_COLOR_NAME,
    color_distance,
    confidence_for_distance,
    confidence_level,
    find_closest_named_color,
)
from colorpicker.named_colors import (
    CSS_COLOR_NAMES,
    DEFAULT_DATASET_PATH,
    NamedColorDataset,
    NamedColorEntry,
    css_fallback_dataset,
    load_dataset,
)


def _dataset(*entries):
    return NamedColorDataset(NamedColorEntry(*entry) for entry in entries)


class TestFindClosestNamedColor(unittest.TestCase):
    def test_exact_match_is_full_confidence(self):
        match = find_closest_named_color(255, 0, 0, _dataset(('Red', 255, 0, 0)))
        self.assertEqual(match.name, 'Red')
        self.assertEqual(match.confidence, 100)
        self.assertEqual(match.distance, 0.0)

    def test_empty_dataset_reports_unknown(self):
        match = find_closest_named_color(12, 34, 56, NamedColorDataset())
        self.assertEqual(match.name, UNKNOWN_COLOR_NAME)
        self.assertEqual(match.confidence, 0)
        self.assertIsNone(match.distance)

    def test_ties_go_to_first_entry(self):
        dataset = _dataset(('Dark', 0, 0, 0), ('Darker', 10, 0, 0))
        self.assertEqual(find_closest_named_color(5, 0, 0, dataset).name, 'Dark')

    def test_duplicate_css_values_keep_list_order(self):
        """Aqua precedes Cyan and Fuchsia precedes Magenta."""
        dataset = css_fallback_dataset()
        self.assertEqual(find_closest_named_color(0, 255, 255, dataset).name, 'Aqua')
        self.assertEqual(find_closest_named_color(255, 0, 255, dataset).name, 'Fuchsia')

    def test_near_match_confidence(self):
        match = find_closest_named_color(250, 0, 0, _dataset(('Red', 255, 0, 0)))
        self.assertEqual(match.distance, 5.0)
        self.assertEqual(match.confidence, 99)

    def test_far_match_clamps_to_zero(self):
        match = find_closest_named_color(0, 0, 0, _dataset(('White', 255, 255, 255)))
        self.assertEqual(match.name, 'White')
        self.assertEqual(match.confidence, 0)

    def test_picks_nearest_of_several(self):
        dataset = _dataset(('Black', 0, 0, 0), ('Gray', 128, 128, 128), ('White', 255, 255, 255))
        self.assertEqual(find_closest_named_color(100, 110, 120, dataset).name, 'Gray')


class TestConfidence(unittest.TestCase):
    def test_confidence_for_distance(self):
        self.assertEqual(confidence_for_distance(0), 100)
        self.assertEqual(confidence_for_distance(220.5), 50)
        self.assertEqual(confidence_for_distance(441), 0)
        self.assertEqual(confidence_for_distance(500), 0)

    def test_confidence_levels(self):
        self.assertEqual(confidence_level(100), 'high')
        self.assertEqual(confidence_level(80), 'high')
        self.assertEqual(confidence_level(79), 'medium')
        self.assertEqual(confidence_level(60), 'medium')
        self.assertEqual(confidence_level(59), 'low')
        self.assertEqual(confidence_level(0), 'low')

    def test_color_distance(self):
        self.assertEqual(color_distance((0, 0, 0), (3, 4, 0)), 5.0)
        self.assertEqual(color_distance((10, 20, 30), (10, 20, 30)), 0.0)


class TestDataset(unittest.TestCase):
    def test_bundled_file_matches_css_fallback(self):
        """colors.json and the webcolors fallback hold the same 140 colors."""
        bundled = load_dataset()
        fallback = css_fallback_dataset()
        self.assertEqual(len(bundled), 140)
        self.assertEqual(bundled.entries, fallback.entries)
        self.assertEqual(bundled.names(), list(CSS_COLOR_NAMES))

    def test_default_path_is_bundled(self):
        self.assertTrue(DEFAULT_DATASET_PATH.is_file())

    def test_rgb_array_is_read_only(self):
        dataset = _dataset(('Red', 255, 0, 0))
        self.assertEqual(dataset.rgb_array.shape, (1, 3))
        with self.assertRaises(ValueError):
            dataset.rgb_array[0, 0] = 1

    def test_missing_file_falls_back(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertLogs('colorpicker.named_colors', level='WARNING'):
                dataset = load_dataset(os.path.join(tmp, 'missing.json'))
        self.assertEqual(len(dataset), 140)
        self.assertEqual(dataset[0].name, 'AliceBlue')

    def test_invalid_json_falls_back(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'broken.json')
            with open(path, 'w', encoding='utf-8') as handle:
                handle.write('{not json')
            with self.assertLogs('colorpicker.named_colors', level='WARNING'):
                dataset = load_dataset(path)
        self.assertEqual(len(dataset), 140)

    def test_bad_record_falls_back(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'bad.json')
            with open(path, 'w', encoding='utf-8') as handle:
                json.dump([{'name': 'Red', 'r': 300, 'g': 0, 'b': 0}], handle)
            with self.assertLogs('colorpicker.named_colors', level='WARNING'):
                dataset = load_dataset(path)
        self.assertEqual(len(dataset), 140)

    def test_empty_array_gives_empty_dataset(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'empty.json')
            with open(path, 'w', encoding='utf-8') as handle:
                json.dump([], handle)
            dataset = load_dataset(path)
        self.assertEqual(len(dataset), 0)
        self.assertEqual(find_closest_named_color(1, 2, 3, dataset).name, UNKNOWN_COLOR_NAME)

    def test_custom_file_is_used(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'custom.json')
            with open(path, 'w', encoding='utf-8') as handle:
                json.dump([{'name': 'Brand Blue', 'r': 10, 'g': 80, 'b': 200}], handle)
            dataset = load_dataset(path)
        self.assertEqual(dataset.names(), ['Brand Blue'])
        self.assertEqual(find_closest_named_color(12, 80, 199, dataset).name, 'Brand Blue')

    def test_record_validation(self):
        with self.assertRaises(ValueError):
            NamedColorEntry.from_record({'name': 'Red', 'r': 255, 'g': 0})
        with self.assertRaises(ValueError):
            NamedColorEntry.from_record({'name': '', 'r': 1, 'g': 2, 'b': 3})
        with self.assertRaises(ValueError):
            NamedColorEntry.from_record({'name': 'Red', 'r': True, 'g': 0, 'b': 0})
        with self.assertRaises(ValueError):
            NamedColorDataset.from_records({'name': 'Red'})
        entry = NamedColorEntry.from_record({'name': 'Red', 'r': 255, 'g': 0, 'b': 0})
        self.assertEqual(entry.rgb, (255, 0, 0))


if __name__ == '__main__':
    unittest.main()
