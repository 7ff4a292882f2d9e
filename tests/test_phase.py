# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from weightcut.errors import ConfigurationError, UnknownProtocolError
from weightcut.protocol.models import Phase, Protocol
from weightcut.protocol.phase import (
    classify_phase,
    days_until_weigh_in,
    describe_phase,
    effective_now,
)

CUT_PROTOCOLS = (Protocol.EXTREME_CUT, Protocol.RAPID_CUT, Protocol.OPTIMAL_CUT, Protocol.GAIN)


class TestClassifyPhase(unittest.TestCase):
    def test_band_boundaries(self) -> None:
        expected = {
            -3: Phase.RECOVER,
            -1: Phase.RECOVER,
            0: Phase.COMPETE,
            1: Phase.CUT,
            2: Phase.CUT,
            3: Phase.LOAD,
            5: Phase.LOAD,
            6: Phase.TRAIN,
            30: Phase.TRAIN,
        }
        for protocol in CUT_PROTOCOLS:
            for days, phase in expected.items():
                with self.subTest(protocol=protocol, days=days):
                    self.assertIs(classify_phase(days, protocol), phase)

    def test_every_day_maps_to_one_weight_cut_phase(self) -> None:
        allowed = {Phase.TRAIN, Phase.LOAD, Phase.CUT, Phase.COMPETE, Phase.RECOVER}
        previous = None
        order = [Phase.RECOVER, Phase.COMPETE, Phase.CUT, Phase.LOAD, Phase.TRAIN]
        for days in range(-20, 40):
            phase = classify_phase(days, Protocol.RAPID_CUT)
            self.assertIn(phase, allowed)
            # bands are contiguous: walking forward never goes back to an earlier band
            if previous is not None:
                self.assertGreaterEqual(order.index(phase), order.index(previous))
            previous = phase

    def test_fractional_days_are_floored(self) -> None:
        self.assertIs(classify_phase(2.7, Protocol.OPTIMAL_CUT), Phase.CUT)
        self.assertIs(classify_phase(-0.5, Protocol.OPTIMAL_CUT), Phase.RECOVER)

    def test_spar_protocols_track_until_weigh_in(self) -> None:
        self.assertIs(classify_phase(3, Protocol.SPAR_GENERAL), Phase.TRACKING)
        self.assertIs(classify_phase(10, Protocol.SPAR_COMPETITION), Phase.TRACKING)
        self.assertIs(classify_phase(0, Protocol.SPAR_COMPETITION), Phase.COMPETE)
        self.assertIs(classify_phase(0, Protocol.SPAR_GENERAL), Phase.TRACKING)
        self.assertIs(classify_phase(-1, Protocol.SPAR_GENERAL), Phase.RECOVER)

    def test_protocol_tags_are_accepted(self) -> None:
        self.assertIs(classify_phase(4, "2"), Phase.LOAD)
        self.assertIs(classify_phase(4, "rapid_cut"), Phase.LOAD)

    def test_unknown_protocol_raises(self) -> None:
        with self.assertRaises(UnknownProtocolError):
            classify_phase(3, "9")
        with self.assertRaises(LookupError):
            classify_phase(3, None)


class TestDaysUntilWeighIn(unittest.TestCase):
    def test_calendar_day_difference(self) -> None:
        weigh_in = datetime(2026, 3, 14, 7, 0)
        self.assertEqual(days_until_weigh_in(weigh_in, datetime(2026, 3, 13, 23, 30)), 1)
        self.assertEqual(days_until_weigh_in(weigh_in, datetime(2026, 3, 14, 18, 0)), 0)
        self.assertEqual(days_until_weigh_in(weigh_in, datetime(2026, 3, 15, 6, 0)), -1)
        self.assertEqual(days_until_weigh_in(weigh_in.date(), datetime(2026, 3, 7, 12, 0)), 7)

    def test_aware_values_use_weigh_in_timezone(self) -> None:
        tz = timezone(timedelta(hours=-5))
        weigh_in = datetime(2026, 3, 14, 7, 0, tzinfo=tz)
        # 02:00 UTC on the 14th is still the 13th in the weigh-in's zone
        now = datetime(2026, 3, 14, 2, 0, tzinfo=timezone.utc)
        self.assertEqual(days_until_weigh_in(weigh_in, now), 1)

    def test_missing_or_mixed_values_raise(self) -> None:
        with self.assertRaises(ConfigurationError):
            days_until_weigh_in(None, datetime(2026, 3, 14))
        with self.assertRaises(ConfigurationError):
            days_until_weigh_in(
                datetime(2026, 3, 14, tzinfo=timezone.utc), datetime(2026, 3, 13)
            )

    def test_effective_now_prefers_simulated_date(self) -> None:
        real = datetime(2026, 3, 10, 9, 0)
        simulated = datetime(2026, 3, 12, 9, 0)
        self.assertEqual(effective_now(SimpleNamespace(simulated_date=simulated), real), simulated)
        self.assertEqual(effective_now(SimpleNamespace(simulated_date=None), real), real)


class TestDescribePhase(unittest.TestCase):
    def test_protocol_labels(self) -> None:
        self.assertEqual(describe_phase(Protocol.RAPID_CUT, 3).label, "CUT → PERFORMANCE")
        self.assertEqual(describe_phase(Protocol.RAPID_CUT, 4).label, "CUT")
        self.assertEqual(describe_phase(Protocol.EXTREME_CUT, 1).label, "PERFORMANCE PREP")
        self.assertEqual(describe_phase(Protocol.EXTREME_CUT, 8).label, "EXTREME CUT")
        self.assertEqual(describe_phase(Protocol.OPTIMAL_CUT, 5).label, "FGF21 ACTIVATION")
        self.assertEqual(describe_phase(Protocol.GAIN, 5).label, "BALANCED")
        self.assertEqual(describe_phase(Protocol.SPAR_COMPETITION, 4).label, "WATER LOAD")
        self.assertEqual(describe_phase(Protocol.SPAR_COMPETITION, 2).label, "WATER CUT")

    def test_competition_and_recovery_days(self) -> None:
        for protocol in (*CUT_PROTOCOLS, Protocol.SPAR_COMPETITION):
            with self.subTest(protocol=protocol):
                self.assertEqual(describe_phase(protocol, 0).label, "COMPETITION DAY")
                self.assertEqual(describe_phase(protocol, -2).label, "RECOVERY")

    def test_spar_general_is_always_balanced(self) -> None:
        for days in (-1, 0, 3, 10):
            info = describe_phase(Protocol.SPAR_GENERAL, days)
            self.assertEqual(info.label, "BALANCED")
            self.assertTrue(info.food_tip)


if __name__ == "__main__":
    unittest.main()
