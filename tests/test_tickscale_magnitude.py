from __future__ import annotations

import unittest

from tickscale.candidates import candidate_tick_counts
from tickscale.config import TickLayoutConfig
from tickscale.magnitude import (
    apply_magnitude,
    find_magnitude_multiplier,
    make_integer_type_info,
    restore_magnitude,
)
from tickscale.types import AxisOptions, ChartDimension, Scale, TickInfo


class MagnitudeNormalizerTests(unittest.TestCase):
    def test_multiplier_lifts_smallest_bound_above_one(self) -> None:
        self.assertEqual(find_magnitude_multiplier(0.001, 0.009), 1000)
        self.assertEqual(find_magnitude_multiplier(0, 0.05), 100)
        self.assertEqual(find_magnitude_multiplier(-0.002, 0.3), 1000)

    def test_multiplier_is_noop_for_unit_magnitudes(self) -> None:
        self.assertEqual(find_magnitude_multiplier(0.5, 5), 1)
        self.assertEqual(find_magnitude_multiplier(-3, 0.1), 1)
        self.assertEqual(find_magnitude_multiplier(0, 0), 1)

    def test_integer_type_info_scales_overrides(self) -> None:
        info = make_integer_type_info(0.001, 0.009, AxisOptions(max=0.02))
        self.assertEqual(info.multiplier, 1000)
        self.assertEqual((info.min, info.max), (1.0, 9.0))
        self.assertEqual(info.options.max, 20.0)
        self.assertIsNone(info.options.min)

    def test_integer_type_info_passes_through_large_ranges(self) -> None:
        options = AxisOptions(min=0)
        info = make_integer_type_info(10, 90, options)
        self.assertEqual(info.multiplier, 1)
        self.assertIs(info.options, options)

    def test_round_trip_recovers_original_values(self) -> None:
        labels = (0.0, 0.002, 0.004, 0.006, 0.008, 0.01)
        original = TickInfo(scale=Scale(min=0.0, max=0.01), step=0.002, tick_count=6, labels=labels)
        scaled = apply_magnitude(original, 1000)
        self.assertEqual(scaled.step, 2.0)
        restored = restore_magnitude(scaled, 1000)
        self.assertAlmostEqual(restored.step, original.step, delta=1e-9)
        self.assertAlmostEqual(restored.scale.min, original.scale.min, delta=1e-9)
        self.assertAlmostEqual(restored.scale.max, original.scale.max, delta=1e-9)
        for got, want in zip(restored.labels, original.labels, strict=True):
            self.assertAlmostEqual(got, want, delta=1e-9)

    def test_identity_multiplier_returns_same_instance(self) -> None:
        info = TickInfo(scale=Scale(min=0.0, max=4.0), step=2.0, tick_count=3, labels=(0.0, 2.0, 4.0))
        self.assertIs(restore_magnitude(info, 1), info)


class TickCandidateGeneratorTests(unittest.TestCase):
    def test_vertical_axis_uses_height_minus_title(self) -> None:
        counts = candidate_tick_counts(ChartDimension(width=1000, height=500), is_vertical=True)
        self.assertEqual(counts, [7, 8, 9, 10])

    def test_horizontal_axis_uses_width_minus_chrome(self) -> None:
        counts = candidate_tick_counts(ChartDimension(width=1000, height=500), is_vertical=False)
        self.assertEqual(counts, list(range(13, 21)))

    def test_explicit_tick_count_is_the_only_candidate(self) -> None:
        counts = candidate_tick_counts(ChartDimension(width=1000, height=500), is_vertical=True, tick_count=5)
        self.assertEqual(counts, [5])

    def test_tiny_dimension_falls_back_to_single_tick(self) -> None:
        for height in (100, 50):
            with self.subTest(height=height):
                counts = candidate_tick_counts(ChartDimension(width=300, height=height), is_vertical=True)
                self.assertEqual(counts, [1])

    def test_custom_pixel_band(self) -> None:
        config = TickLayoutConfig(min_pixel_step=20, max_pixel_step=30)
        counts = candidate_tick_counts(ChartDimension(width=300, height=200), is_vertical=True, config=config)
        self.assertEqual(counts, [4, 5, 6])


if __name__ == "__main__":
    unittest.main()
