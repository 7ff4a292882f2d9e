# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import datetime, timezone

from weightcut.errors import ConfigurationError
from weightcut.nutrition.adjuster import Goal
from weightcut.protocol.models import Protocol
from weightcut.tracking.models import LogType, WeightLog
from weightcut.tracking.trend import (
    DEFAULT_OVERNIGHT_DRIFT,
    DEFAULT_SESSION_LOSS,
    drift_metrics,
    has_reached_goal,
    project_weigh_in,
    projection_recommendation,
    seven_day_average,
    should_recalculate,
)


def _log(day: int, hour: int, log_type: LogType, weight: float) -> WeightLog:
    return WeightLog(date=datetime(2026, 3, day, hour), type=log_type, weight=weight)


def _drift_logs(offset: float = 0.0):
    return [
        _log(8, 22, LogType.before_bed, 160.0 + offset),
        _log(9, 7, LogType.morning, 158.5 + offset),
        _log(9, 15, LogType.pre_practice, 159.5 + offset),
        _log(9, 17, LogType.post_practice, 157.0 + offset),
        _log(9, 22, LogType.before_bed, 158.0 + offset),
        _log(10, 7, LogType.morning, 156.5 + offset),
    ]


class TestDrift(unittest.TestCase):
    def test_overnight_and_session_means(self) -> None:
        drift = drift_metrics(_drift_logs())
        self.assertAlmostEqual(drift.overnight, -1.5)
        self.assertAlmostEqual(drift.session, -2.5)

    def test_input_order_does_not_matter(self) -> None:
        drift = drift_metrics(list(reversed(_drift_logs())))
        self.assertAlmostEqual(drift.overnight, -1.5)

    def test_pairs_outside_time_windows_are_ignored(self) -> None:
        logs = [
            _log(9, 3, LogType.before_bed, 160.0),
            _log(9, 7, LogType.morning, 158.0),  # only 4h later
            _log(9, 10, LogType.pre_practice, 159.0),
            _log(9, 16, LogType.post_practice, 156.0),  # 6h session
        ]
        drift = drift_metrics(logs)
        self.assertIsNone(drift.overnight)
        self.assertIsNone(drift.session)

    def test_too_few_logs(self) -> None:
        drift = drift_metrics([_log(10, 7, LogType.morning, 156.5)])
        self.assertIsNone(drift.overnight)
        self.assertIsNone(drift.session)


class TestProjection(unittest.TestCase):
    def test_project_weigh_in(self) -> None:
        projected = project_weigh_in(
            _drift_logs(offset=13.0), datetime(2026, 3, 10, 20, 0), datetime(2026, 3, 13, 7, 0)
        )
        self.assertAlmostEqual(projected, 157.5)

    def test_projection_uses_typical_drift_without_pairs(self) -> None:
        projected = project_weigh_in(
            [_log(10, 7, LogType.morning, 160.0)],
            datetime(2026, 3, 10, 9, 0),
            datetime(2026, 3, 12, 7, 0),
        )
        expected = 160.0 - (abs(DEFAULT_OVERNIGHT_DRIFT) + abs(DEFAULT_SESSION_LOSS)) * 2
        self.assertAlmostEqual(projected, expected)

    def test_projection_ignores_future_logs(self) -> None:
        self.assertIsNone(project_weigh_in(
            [_log(12, 7, LogType.morning, 160.0)],
            datetime(2026, 3, 10, 9, 0),
            datetime(2026, 3, 13, 7, 0),
        ))

    def test_recommendation_urgency(self) -> None:
        rec = projection_recommendation(157.5, 150.0, 3, Protocol.OPTIMAL_CUT)
        self.assertTrue(rec.switch_protocol)
        self.assertEqual(rec.urgency, "high")
        self.assertIs(rec.protocol, Protocol.EXTREME_CUT)
        self.assertIn("7.5 lbs over", rec.message)
        self.assertEqual(projection_recommendation(157.5, 150.0, 2, Protocol.RAPID_CUT).urgency, "critical")

    def test_no_recommendation(self) -> None:
        self.assertIsNone(projection_recommendation(None, 150.0, 3, Protocol.OPTIMAL_CUT))
        self.assertIsNone(projection_recommendation(150.8, 150.0, 3, Protocol.OPTIMAL_CUT))
        self.assertIsNone(projection_recommendation(157.5, 150.0, -1, Protocol.OPTIMAL_CUT))
        self.assertIsNone(projection_recommendation(157.5, 150.0, 3, Protocol.EXTREME_CUT))


class TestAverages(unittest.TestCase):
    def test_seven_day_average(self) -> None:
        logs = [
            _log(1, 7, LogType.morning, 170.0),  # outside the window
            _log(5, 7, LogType.morning, 160.0),
            _log(9, 7, LogType.morning, 158.0),
        ]
        self.assertAlmostEqual(seven_day_average(logs, datetime(2026, 3, 10, 8, 0)), 159.0)
        self.assertIsNone(seven_day_average([], datetime(2026, 3, 10, 8, 0)))

    def test_should_recalculate(self) -> None:
        self.assertTrue(should_recalculate(160.0, 157.5))
        self.assertFalse(should_recalculate(160.0, 159.0))
        self.assertTrue(should_recalculate(160.0, 159.0, threshold_lbs=1.0))

    def test_has_reached_goal(self) -> None:
        self.assertTrue(has_reached_goal(Goal.LOSE, 150.0, 149.5))
        self.assertFalse(has_reached_goal(Goal.LOSE, 150.0, 151.0))
        self.assertTrue(has_reached_goal(Goal.GAIN, 150.0, 151.0))
        self.assertFalse(has_reached_goal(Goal.MAINTAIN, 150.0, 150.0))


class TestTimestampKinds(unittest.TestCase):
    def _aware_logs(self):
        return [
            WeightLog(date=datetime(2026, 3, 9, 7, tzinfo=timezone.utc), type=LogType.morning, weight=158.0),
            WeightLog(date=datetime(2026, 3, 10, 7, tzinfo=timezone.utc), type=LogType.morning, weight=157.0),
        ]

    def test_aware_logs_with_aware_now(self) -> None:
        now = datetime(2026, 3, 10, 8, 0, tzinfo=timezone.utc)
        self.assertAlmostEqual(seven_day_average(self._aware_logs(), now), 157.5)

    def test_naive_now_against_aware_logs(self) -> None:
        with self.assertRaises(ConfigurationError):
            seven_day_average(self._aware_logs(), datetime(2026, 3, 10, 8, 0))
        with self.assertRaises(ConfigurationError):
            project_weigh_in(
                self._aware_logs(), datetime(2026, 3, 10, 8, 0), datetime(2026, 3, 12, 7, 0)
            )

    def test_mixed_logs(self) -> None:
        logs = [*self._aware_logs(), _log(10, 22, LogType.before_bed, 157.5)]
        with self.assertRaises(ConfigurationError):
            drift_metrics(logs)


if __name__ == "__main__":
    unittest.main()
