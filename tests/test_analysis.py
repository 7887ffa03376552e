"""
Brightness, luminance, contrast and temperature tests.
Run from project root: python -m pytest tests/ -v
"""
import unittest

from colorpicker.analysis import (
    NEUTRAL_TEMPERATURE,
    calculate_brightness,
    calculate_luminance,
    contrast_ratio,
    get_color_temperature,
    temperature_for_hue,
)


class TestBrightness(unittest.TestCase):
    def test_extremes(self):
        self.assertEqual(calculate_brightness(0, 0, 0), 0)
        self.assertEqual(calculate_brightness(255, 255, 255), 100)

    def test_primaries_use_weighted_channels(self):
        self.assertEqual(calculate_brightness(255, 0, 0), 30)
        self.assertEqual(calculate_brightness(0, 255, 0), 59)
        self.assertEqual(calculate_brightness(0, 0, 255), 11)


class TestLuminance(unittest.TestCase):
    def test_extremes(self):
        self.assertEqual(calculate_luminance(0, 0, 0), 0.0)
        self.assertAlmostEqual(calculate_luminance(255, 255, 255), 1.0)

    def test_red(self):
        self.assertAlmostEqual(calculate_luminance(255, 0, 0), 0.2126)

    def test_linear_segment_below_threshold(self):
        """Channel 10 (0.0392) sits under the 0.03928 cutoff, channel 11 above it."""
        self.assertAlmostEqual(calculate_luminance(10, 10, 10), 10 / 255 / 12.92)
        self.assertAlmostEqual(calculate_luminance(11, 11, 11), ((11 / 255 + 0.055) / 1.055) ** 2.4)

    def test_stays_in_unit_range(self):
        for value in range(0, 256, 5):
            luminance = calculate_luminance(value, 255 - value, value // 2)
            self.assertGreaterEqual(luminance, 0.0)
            self.assertLessEqual(luminance, 1.0 + 1e-9)


class TestContrastRatio(unittest.TestCase):
    def test_black_on_white(self):
        self.assertAlmostEqual(contrast_ratio((0, 0, 0), (255, 255, 255)), 21.0)

    def test_order_does_not_matter(self):
        self.assertAlmostEqual(
            contrast_ratio((255, 0, 0), (0, 0, 255)),
            contrast_ratio((0, 0, 255), (255, 0, 0)),
        )

    def test_same_color(self):
        self.assertAlmostEqual(contrast_ratio((40, 80, 120), (40, 80, 120)), 1.0)


class TestTemperature(unittest.TestCase):
    def test_band_boundaries_are_inclusive(self):
        cases = {
            0: 'Warm (Red-Yellow)',
            60: 'Warm (Red-Yellow)',
            61: 'Neutral (Yellow-Green)',
            120: 'Neutral (Yellow-Green)',
            121: 'Cool (Green-Cyan)',
            180: 'Cool (Green-Cyan)',
            200: 'Cool (Cyan-Blue)',
            240: 'Cool (Cyan-Blue)',
            300: 'Cool (Blue-Magenta)',
            301: 'Warm (Magenta-Red)',
            360: 'Warm (Magenta-Red)',
        }
        for hue, label in cases.items():
            self.assertEqual(temperature_for_hue(hue), label, msg=f"hue {hue}")

    def test_out_of_range_is_neutral(self):
        self.assertEqual(temperature_for_hue(-1), NEUTRAL_TEMPERATURE)
        self.assertEqual(temperature_for_hue(361), NEUTRAL_TEMPERATURE)

    def test_from_rgb(self):
        self.assertEqual(get_color_temperature(255, 0, 0), 'Warm (Red-Yellow)')
        self.assertEqual(get_color_temperature(0, 170, 255), 'Cool (Cyan-Blue)')
        self.assertEqual(get_color_temperature(0, 255, 0), 'Neutral (Yellow-Green)')

    def test_gray_reads_as_warm(self):
        """Achromatic colors carry hue 0."""
        self.assertEqual(get_color_temperature(128, 128, 128), 'Warm (Red-Yellow)')


if __name__ == '__main__':
    unittest.main()
