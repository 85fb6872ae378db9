from __future__ import annotations

import unittest

from tickscale.math_utils import (
    addition,
    ceil_steps,
    decimal_places,
    division,
    find_multiple_num,
    floor_to_step,
    mod,
    step_count,
)
from tickscale.steps import next_nice_step, normalize_min, normalize_step


class MathUtilsTests(unittest.TestCase):
    def test_decimal_places_uses_shortest_repr(self) -> None:
        self.assertEqual(decimal_places(5000.0), 0)
        self.assertEqual(decimal_places(0.25), 2)
        self.assertEqual(decimal_places(1e-07), 7)
        self.assertEqual(decimal_places(0), 0)

    def test_find_multiple_num_covers_most_precise_value(self) -> None:
        self.assertEqual(find_multiple_num(0.5, 0.25), 100)
        self.assertEqual(find_multiple_num(3, 40), 1)

    def test_decimal_arithmetic_avoids_binary_drift(self) -> None:
        self.assertEqual(addition(0.1, 0.2), 0.3)
        self.assertEqual(division(0.3, 3), 0.1)

    def test_mod_follows_sign_of_dividend(self) -> None:
        self.assertEqual(mod(-7, 3), -1.0)
        self.assertEqual(mod(7, 3), 1.0)

    def test_floor_to_step_moves_toward_negative_infinity(self) -> None:
        self.assertEqual(floor_to_step(7, 5), 5.0)
        self.assertEqual(floor_to_step(-8350, 1000), -9000.0)
        self.assertEqual(floor_to_step(-0.5, 0.2), -0.6)

    def test_step_counting_helpers(self) -> None:
        self.assertEqual(ceil_steps(1, 5), 1)
        self.assertEqual(ceil_steps(10, 5), 2)
        self.assertEqual(ceil_steps(-1, 5), 0)
        self.assertEqual(step_count(0, 10000, 2000), 5)
        self.assertEqual(step_count(0.1, 0.5, 0.1), 4)

    def test_step_counting_snaps_bounds_an_ulp_off_the_grid(self) -> None:
        self.assertEqual(step_count(-16.740000000000002, 33.25999999999999, 50), 1)
        self.assertEqual(step_count(0, 99.99999999999999, 50), 2)
        self.assertEqual(ceil_steps(50.00000000000001, 50), 1)
        self.assertEqual(step_count(0, 99.9, 50), 1)
        self.assertEqual(ceil_steps(50.1, 50), 2)


class StepNormalizerTests(unittest.TestCase):
    def test_rounds_up_to_nice_ladder(self) -> None:
        cases = {
            1: 1.0,
            1.5: 2.0,
            2: 2.0,
            2.1: 5.0,
            5: 5.0,
            7: 10.0,
            10: 10.0,
            11: 20.0,
            927.78: 1000.0,
            1391.67: 2000.0,
            2087.5: 5000.0,
        }
        for raw, expected in cases.items():
            with self.subTest(raw=raw):
                self.assertEqual(normalize_step(raw), expected)

    def test_sub_unit_steps_stay_exact(self) -> None:
        self.assertEqual(normalize_step(0.3), 0.5)
        self.assertEqual(normalize_step(0.15), 0.2)
        self.assertEqual(normalize_step(0.07), 0.1)
        self.assertEqual(normalize_step(0.0012), 0.002)

    def test_zero_step_is_unchanged(self) -> None:
        self.assertEqual(normalize_step(0), 0.0)

    def test_negative_step_rejected(self) -> None:
        with self.assertRaises(ValueError):
            normalize_step(-1)

    def test_normalize_step_is_idempotent(self) -> None:
        for raw in (0, 0.00037, 0.04, 0.3, 1, 3.3, 9.99, 42, 1234.5, 98765):
            with self.subTest(raw=raw):
                once = normalize_step(raw)
                self.assertEqual(normalize_step(once), once)

    def test_next_nice_step_climbs_ladder(self) -> None:
        self.assertEqual(next_nice_step(1), 2.0)
        self.assertEqual(next_nice_step(2), 5.0)
        self.assertEqual(next_nice_step(5), 10.0)
        self.assertEqual(next_nice_step(10), 20.0)
        self.assertEqual(next_nice_step(3), 10.0)
        self.assertEqual(next_nice_step(0.2), 0.5)

    def test_normalize_min_floors_to_step_multiple(self) -> None:
        self.assertEqual(normalize_min(1234, 100), 1200.0)
        self.assertEqual(normalize_min(-8350, 1000), -9000.0)
        self.assertEqual(normalize_min(0, 5), 0.0)
        self.assertEqual(normalize_min(3.5, 0), 3.5)


if __name__ == "__main__":
    unittest.main()
