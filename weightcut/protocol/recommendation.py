# -*- coding: utf-8 -*-
"""
Protocol recommendation / switch advisor

Two sources can suggest a protocol change: a trend projection (supplied by
the caller) and a weight-based rule of thumb. The projection wins; weight
mismatches are never raised for SPAR protocols, whose targets auto-adjust.
Dismissals are remembered per (recommended, current) pair.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from ..config import settings
from ..validation import require_positive
from .models import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecommendationPolicy:
    extreme_cut_trigger_percent: float = 12.0
    walk_around_multiplier: float = 1.07

    @classmethod
    def from_settings(cls) -> "RecommendationPolicy":
        return cls(
            extreme_cut_trigger_percent=settings.extreme_cut_trigger_percent,
            walk_around_multiplier=settings.walk_around_multiplier,
        )


@dataclass(frozen=True)
class ProtocolRecommendation:
    protocol: Protocol
    reason: str
    warning: Optional[str] = None


@dataclass(frozen=True)
class ProjectionRecommendation:
    """Trend-derived advice; urgency is "critical" or "high"."""
    switch_protocol: bool
    urgency: str
    message: str
    protocol: Protocol = Protocol.EXTREME_CUT


@dataclass(frozen=True)
class SwitchAdvice:
    recommended: Protocol
    current: Protocol
    message: str
    urgency: str
    from_projection: bool

    @property
    def dismiss_key(self) -> str:
        return dismiss_key(self.recommended, self.current)


def dismiss_key(recommended: Protocol, current: Protocol) -> str:
    return f"{Protocol.parse(recommended).value}:{Protocol.parse(current).value}"


def recommend_protocol(
    current_weight: float,
    target_weight_class: float,
    policy: Optional[RecommendationPolicy] = None,
) -> ProtocolRecommendation:
    """Weight-only recommendation, independent of trend data."""
    policy = policy or RecommendationPolicy.from_settings()
    current_weight = require_positive(current_weight, "current_weight")
    target_weight_class = require_positive(target_weight_class, "target_weight_class")

    walk_around = target_weight_class * policy.walk_around_multiplier
    lbs_over_target = current_weight - target_weight_class
    lbs_over_walk_around = current_weight - walk_around
    percent_over = lbs_over_target / target_weight_class * 100

    if current_weight < target_weight_class:
        return ProtocolRecommendation(
            Protocol.GAIN,
            f"You're {abs(lbs_over_target):.1f} lbs under your target class. "
            "Gain Phase will help you gain muscle safely.",
        )
    if percent_over > policy.extreme_cut_trigger_percent:
        return ProtocolRecommendation(
            Protocol.EXTREME_CUT,
            f"You're {percent_over:.1f}% over your competition weight "
            f"({lbs_over_walk_around:.1f} lbs above walk-around). "
            "Extreme Cut Phase will burn fat without sacrificing performance.",
            "Run 2-4 weeks max, then transition to Rapid Cut or Optimal Cut.",
        )
    if current_weight > walk_around:
        return ProtocolRecommendation(
            Protocol.RAPID_CUT,
            f"You're {lbs_over_walk_around:.1f} lbs above your walk-around weight "
            f"({walk_around:.1f} lbs). Rapid Cut Phase manages your weekly cut "
            "while preserving performance.",
        )
    return ProtocolRecommendation(
        Protocol.OPTIMAL_CUT,
        "You're at your walk-around weight. Optimal Cut Phase keeps you "
        "competition-ready while training hard.",
    )


def advise_switch(
    current: Protocol,
    current_weight: Optional[float],
    target_weight_class: Optional[float],
    dismissed: Iterable[str] = (),
    projection: Optional[ProjectionRecommendation] = None,
    policy: Optional[RecommendationPolicy] = None,
) -> Optional[SwitchAdvice]:
    """
    Decide whether to show a "switch protocol" prompt.

    ``dismissed`` holds dismiss keys (see ``dismiss_key``). A dismissal only
    hides the exact pair it was made for, so a different recommendation or a
    changed current protocol brings the prompt back.
    """
    current = Protocol.parse(current)
    dismissed = set(dismissed)

    advice: Optional[SwitchAdvice] = None
    if projection is not None and projection.switch_protocol:
        advice = SwitchAdvice(
            recommended=Protocol.parse(projection.protocol),
            current=current,
            message=projection.message,
            urgency=projection.urgency,
            from_projection=True,
        )
    elif not current.is_spar and current_weight is not None and target_weight_class is not None:
        rec = recommend_protocol(current_weight, target_weight_class, policy)
        message = rec.reason if not rec.warning else f"{rec.reason} {rec.warning}"
        advice = SwitchAdvice(
            recommended=rec.protocol,
            current=current,
            message=message,
            urgency="normal",
            from_projection=False,
        )

    if advice is None or advice.recommended is current:
        return None
    if advice.dismiss_key in dismissed:
        logger.debug("Switch advice %s dismissed", advice.dismiss_key)
        return None
    return advice


def accept_switch(provider: Any, advice: SwitchAdvice) -> None:
    """Apply an accepted switch through the profile provider."""
    logger.info("Switching protocol %s -> %s", advice.current.value, advice.recommended.value)
    provider.update_profile({"protocol": advice.recommended})
