# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from weightcut.errors import InvalidInputError
from weightcut.protocol.models import Protocol
from weightcut.protocol.recommendation import (
    ProjectionRecommendation,
    RecommendationPolicy,
    accept_switch,
    advise_switch,
    dismiss_key,
    recommend_protocol,
)
from weightcut.tracking.models import Profile, StateSnapshot
from weightcut.tracking.snapshot import SnapshotProvider


def _projection(protocol: Protocol = Protocol.EXTREME_CUT) -> ProjectionRecommendation:
    return ProjectionRecommendation(
        switch_protocol=True,
        urgency="critical",
        message="Projected 156.0 lbs at weigh-in",
        protocol=protocol,
    )


class TestRecommendProtocol(unittest.TestCase):
    def test_weight_bands(self) -> None:
        self.assertIs(recommend_protocol(140.0, 150.0).protocol, Protocol.GAIN)
        self.assertIs(recommend_protocol(170.0, 150.0).protocol, Protocol.EXTREME_CUT)
        self.assertIs(recommend_protocol(165.0, 150.0).protocol, Protocol.RAPID_CUT)
        self.assertIs(recommend_protocol(155.0, 150.0).protocol, Protocol.OPTIMAL_CUT)
        self.assertIs(recommend_protocol(150.0, 150.0).protocol, Protocol.OPTIMAL_CUT)

    def test_extreme_cut_carries_warning(self) -> None:
        rec = recommend_protocol(170.0, 150.0)
        self.assertIn("13.3% over", rec.reason)
        self.assertEqual(rec.warning, "Run 2-4 weeks max, then transition to Rapid Cut or Optimal Cut.")
        self.assertIsNone(recommend_protocol(155.0, 150.0).warning)

    def test_custom_policy(self) -> None:
        policy = RecommendationPolicy(extreme_cut_trigger_percent=9.0)
        self.assertIs(recommend_protocol(165.0, 150.0, policy).protocol, Protocol.EXTREME_CUT)

    def test_invalid_input_raises(self) -> None:
        with self.assertRaises(InvalidInputError):
            recommend_protocol(None, 150.0)


class TestAdviseSwitch(unittest.TestCase):
    def test_weight_based_advice(self) -> None:
        advice = advise_switch(Protocol.OPTIMAL_CUT, 165.0, 150.0)
        self.assertIsNotNone(advice)
        self.assertIs(advice.recommended, Protocol.RAPID_CUT)
        self.assertEqual(advice.urgency, "normal")
        self.assertFalse(advice.from_projection)
        self.assertEqual(advice.dismiss_key, "2:3")

    def test_no_advice_when_already_on_recommended(self) -> None:
        self.assertIsNone(advise_switch(Protocol.RAPID_CUT, 165.0, 150.0))

    def test_spar_protocols_get_no_weight_advice(self) -> None:
        self.assertIsNone(advise_switch(Protocol.SPAR_COMPETITION, 175.0, 150.0))
        self.assertIsNone(advise_switch(Protocol.SPAR_GENERAL, 140.0, 150.0))

    def test_missing_weights_give_no_advice(self) -> None:
        self.assertIsNone(advise_switch(Protocol.OPTIMAL_CUT, None, 150.0))
        self.assertIsNone(advise_switch(Protocol.OPTIMAL_CUT, 165.0, None))

    def test_projection_wins(self) -> None:
        advice = advise_switch(Protocol.OPTIMAL_CUT, 165.0, 150.0, projection=_projection())
        self.assertIs(advice.recommended, Protocol.EXTREME_CUT)
        self.assertEqual(advice.urgency, "critical")
        self.assertTrue(advice.from_projection)

    def test_projection_applies_to_spar(self) -> None:
        advice = advise_switch(Protocol.SPAR_COMPETITION, 165.0, 150.0, projection=_projection())
        self.assertIs(advice.recommended, Protocol.EXTREME_CUT)

    def test_projection_without_switch_falls_back(self) -> None:
        quiet = ProjectionRecommendation(switch_protocol=False, urgency="high", message="")
        advice = advise_switch(Protocol.OPTIMAL_CUT, 165.0, 150.0, projection=quiet)
        self.assertIs(advice.recommended, Protocol.RAPID_CUT)

    def test_dismissal_hides_only_its_pair(self) -> None:
        self.assertIsNone(advise_switch(Protocol.OPTIMAL_CUT, 165.0, 150.0, dismissed=["2:3"]))
        # Same recommendation from a different current protocol comes back
        advice = advise_switch(Protocol.GAIN, 165.0, 150.0, dismissed=["2:3"])
        self.assertEqual(advice.dismiss_key, "2:4")
        # A projection for another protocol is not hidden by the old dismissal
        advice = advise_switch(
            Protocol.OPTIMAL_CUT, 165.0, 150.0,
            dismissed=["2:3"], projection=_projection(Protocol.SPAR_GENERAL),
        )
        self.assertIs(advice.recommended, Protocol.SPAR_GENERAL)

    def test_dismiss_key_accepts_tags(self) -> None:
        self.assertEqual(dismiss_key("rapid_cut", "3"), "2:3")

    def test_accept_switch_updates_profile(self) -> None:
        provider = SnapshotProvider(StateSnapshot(profile=Profile(target_weight_class=150.0)))
        advice = advise_switch(provider.profile.protocol, 165.0, 150.0)
        accept_switch(provider, advice)
        self.assertIs(provider.profile.protocol, Protocol.RAPID_CUT)
        self.assertEqual(provider.profile.target_weight_class, 150.0)


if __name__ == "__main__":
    unittest.main()
