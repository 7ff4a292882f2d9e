# -*- coding: utf-8 -*-
"""
Safety assessor

Classifies how far the athlete sits above today's target into a risk level
with guidance text. Checks run in a fixed precedence; the first match wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Optional

from ..config import settings
from ..protocol.models import Protocol
from ..validation import require_positive


@total_ordering
class SafetyLevel(Enum):
    """Risk levels, ordered by increasing severity."""
    SAFE = 0
    CAUTION = 1
    WARNING = 2
    DANGER = 3

    def __lt__(self, other: "SafetyLevel") -> bool:
        if not isinstance(other, SafetyLevel):
            return NotImplemented
        return self.value < other.value


@dataclass(frozen=True)
class SafetyThresholds:
    danger_delta_24h_lbs: float = 3.0
    warning_delta_48h_lbs: float = 5.0
    critical_days_threshold: int = 2
    max_safe_total_cut_percent: float = 8.0

    @classmethod
    def from_settings(cls) -> "SafetyThresholds":
        return cls(
            danger_delta_24h_lbs=settings.danger_delta_24h_lbs,
            warning_delta_48h_lbs=settings.warning_delta_48h_lbs,
            critical_days_threshold=settings.critical_days_threshold,
            max_safe_total_cut_percent=settings.max_safe_total_cut_percent,
        )


@dataclass(frozen=True)
class SafetyAssessment:
    level: SafetyLevel
    message: str
    detail: Optional[str] = None


def assess_safety(
    current_weight: float,
    target: float,
    days_until: int,
    protocol: Protocol,
    target_weight_class: Optional[float] = None,
    thresholds: Optional[SafetyThresholds] = None,
) -> SafetyAssessment:
    """
    Assess the gap between the current weight and today's target.

    A missing or non-positive current weight raises InvalidInputError; it is
    never read as "on target".
    """
    protocol = Protocol.parse(protocol)
    current_weight = require_positive(current_weight, "current_weight")
    if protocol.is_spar:
        return SafetyAssessment(SafetyLevel.SAFE, "Nutrition tracking mode")

    th = thresholds or SafetyThresholds.from_settings()
    target = require_positive(target, "target")
    weight_class = (
        target if target_weight_class is None
        else require_positive(target_weight_class, "target_weight_class")
    )

    delta = current_weight - target
    if delta <= 0:
        return SafetyAssessment(
            SafetyLevel.SAFE,
            "On target",
            "Consider rehydrating slightly" if delta < -2 else None,
        )

    # Final day
    if days_until <= 1:
        if delta > th.danger_delta_24h_lbs:
            return SafetyAssessment(
                SafetyLevel.DANGER,
                "Extreme cut required",
                f"{delta:.1f} lbs in <24h is dangerous. Consider moving up a weight class.",
            )
        if delta > 2:
            return SafetyAssessment(
                SafetyLevel.WARNING,
                "Aggressive cut needed",
                "Water cut only. No food until after weigh-in.",
            )
        return SafetyAssessment(
            SafetyLevel.CAUTION, "Final push", "Sip water only. Stay warm to maintain sweat."
        )

    # Final 48h
    if days_until <= th.critical_days_threshold:
        if delta > th.warning_delta_48h_lbs:
            return SafetyAssessment(
                SafetyLevel.DANGER,
                "Behind schedule",
                f"{delta:.1f} lbs with {days_until} days is risky. Extra workouts critical.",
            )
        if delta > 3:
            return SafetyAssessment(
                SafetyLevel.WARNING, "Tight timeline", "Limit sodium. Extra cardio recommended."
            )
        return SafetyAssessment(
            SafetyLevel.CAUTION, "On pace", "Stay disciplined with nutrition."
        )

    percent_over = delta / weight_class * 100
    if percent_over > th.max_safe_total_cut_percent:
        return SafetyAssessment(
            SafetyLevel.WARNING,
            "Large cut planned",
            f"{percent_over:.1f}% cut is aggressive. Monitor energy levels.",
        )
    if delta > 5:
        return SafetyAssessment(
            SafetyLevel.CAUTION,
            "Significant weight to lose",
            "Stay consistent with daily targets.",
        )
    return SafetyAssessment(SafetyLevel.SAFE, "On track")
