# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from weightcut.errors import InvalidInputError
from weightcut.nutrition.adjuster import (
    AdjusterPolicy,
    Goal,
    Intensity,
    competition_adjustment,
    walk_around_weight,
)

CLASS = 150.0


class TestCompetitionAdjustment(unittest.TestCase):
    def test_water_load_at_walk_around(self) -> None:
        result = competition_adjustment(151.5, CLASS, 4)
        self.assertEqual(result.calorie_adjustment, -250)
        self.assertIs(result.goal, Goal.LOSE)
        self.assertIs(result.intensity, Intensity.LEAN)
        self.assertEqual(result.reason, "Water load: balanced portions, peak hydration")

    def test_fixed_periods(self) -> None:
        self.assertEqual(competition_adjustment(151.5, CLASS, 0).calorie_adjustment, 250)
        for days in (1, 2):
            with self.subTest(days=days):
                result = competition_adjustment(151.5, CLASS, days)
                self.assertEqual(result.calorie_adjustment, -500)
                self.assertIs(result.intensity, Intensity.AGGRESSIVE)
        recovery = competition_adjustment(151.5, CLASS, -1)
        self.assertEqual(recovery.calorie_adjustment, 500)
        self.assertIs(recovery.goal, Goal.GAIN)

    def test_fixed_periods_ignore_weight(self) -> None:
        light = competition_adjustment(148.0, CLASS, 1)
        heavy = competition_adjustment(175.0, CLASS, 1)
        self.assertEqual(light.calorie_adjustment, heavy.calorie_adjustment)

    def test_training_scales_with_lbs_over(self) -> None:
        result = competition_adjustment(162.5, CLASS, 10)
        self.assertEqual(result.calorie_adjustment, -300)
        self.assertIs(result.intensity, Intensity.LEAN)
        self.assertEqual(result.reason, "Training: 2.0 lbs over walk-around (300 cal deficit)")

        result = competition_adjustment(164.0, CLASS, 10)
        self.assertEqual(result.calorie_adjustment, -525)
        self.assertIs(result.intensity, Intensity.AGGRESSIVE)

    def test_deficit_is_clamped(self) -> None:
        self.assertEqual(competition_adjustment(161.0, CLASS, 10).calorie_adjustment, -250)
        self.assertEqual(competition_adjustment(170.0, CLASS, 10).calorie_adjustment, -750)
        self.assertEqual(competition_adjustment(170.0, CLASS, 4).calorie_adjustment, -750)

    def test_training_at_walk_around_maintains(self) -> None:
        result = competition_adjustment(158.0, CLASS, 10)
        self.assertEqual(result.calorie_adjustment, 0)
        self.assertIs(result.goal, Goal.MAINTAIN)

    def test_custom_policy(self) -> None:
        policy = AdjusterPolicy(cal_per_lb_over=100.0)
        self.assertEqual(competition_adjustment(164.0, CLASS, 10, policy).calorie_adjustment, -350)

    def test_over_walk_around_stays_in_bounds(self) -> None:
        policy = AdjusterPolicy()
        for days in (3, 4, 5, 6, 10, 30):
            for tenth in range(1, 200):
                weight = walk_around_weight(CLASS, policy) + tenth / 10
                value = competition_adjustment(weight, CLASS, days, policy).calorie_adjustment
                with self.subTest(days=days, weight=weight):
                    self.assertGreaterEqual(value, policy.max_deficit)
                    self.assertLessEqual(value, policy.min_deficit)

    def test_invalid_weights_raise(self) -> None:
        with self.assertRaises(InvalidInputError):
            competition_adjustment(None, CLASS, 4)
        with self.assertRaises(InvalidInputError):
            competition_adjustment(160.0, float("nan"), 4)


if __name__ == "__main__":
    unittest.main()
