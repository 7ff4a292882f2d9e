# -*- coding: utf-8 -*-
"""
Competition calorie adjuster

Daily calorie adjustment for SPAR Competition athletes, driven by how far
they sit above walk-around weight and how many days remain before the
weigh-in. Over walk-around, the deficit scales at 150 kcal per lb, clamped
between the light and heavy deficit bounds.

| Period           | At/below walk-around | Over walk-around        |
|------------------|----------------------|-------------------------|
| Training (6+ d)  | 0 (maintain)         | -150/lb, [-750, -250]   |
| Water load (3-5) | -250                 | -150/lb, [-750, -250]   |
| Water cut (1-2)  | -500                 | -500                    |
| Competition (0)  | +250                 | +250                    |
| Recovery (<0)    | +500                 | +500                    |
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config import settings
from ..validation import require_positive


class Goal(str, Enum):
    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


class Intensity(str, Enum):
    LEAN = "lean"
    AGGRESSIVE = "aggressive"


@dataclass(frozen=True)
class AdjusterPolicy:
    walk_around_multiplier: float = 1.07
    cal_per_lb_over: float = 150.0
    min_deficit: int = -250
    max_deficit: int = -750
    water_cut_deficit: int = -500
    competition_surplus: int = 250
    recovery_surplus: int = 500
    aggressive_deficit_threshold: int = -500

    @classmethod
    def from_settings(cls) -> "AdjusterPolicy":
        return cls(
            walk_around_multiplier=settings.walk_around_multiplier,
            cal_per_lb_over=settings.cal_per_lb_over,
            min_deficit=settings.min_deficit,
            max_deficit=settings.max_deficit,
            water_cut_deficit=settings.water_cut_deficit,
            competition_surplus=settings.competition_surplus,
            recovery_surplus=settings.recovery_surplus,
            aggressive_deficit_threshold=settings.aggressive_deficit_threshold,
        )

    def scaled_deficit(self, lbs_over: float) -> int:
        """-cal_per_lb_over per lb over walk-around, clamped to [max_deficit, min_deficit]."""
        # Half-up rounding on the positive side, then negate.
        raw = -int(math.floor(lbs_over * self.cal_per_lb_over + 0.5))
        return max(self.max_deficit, min(self.min_deficit, raw))


@dataclass(frozen=True)
class CompetitionAdjustment:
    calorie_adjustment: int
    goal: Goal
    intensity: Intensity
    reason: str


def walk_around_weight(target_weight_class: float, policy: Optional[AdjusterPolicy] = None) -> float:
    policy = policy or AdjusterPolicy.from_settings()
    return target_weight_class * policy.walk_around_multiplier


def competition_adjustment(
    current_weight: float,
    target_weight_class: float,
    days_until: int,
    policy: Optional[AdjusterPolicy] = None,
) -> CompetitionAdjustment:
    policy = policy or AdjusterPolicy.from_settings()
    current_weight = require_positive(current_weight, "current_weight")
    target_weight_class = require_positive(target_weight_class, "target_weight_class")

    lbs_over = current_weight - walk_around_weight(target_weight_class, policy)
    is_over = lbs_over > 0

    if days_until < 0:
        return CompetitionAdjustment(
            policy.recovery_surplus, Goal.GAIN, Intensity.AGGRESSIVE,
            "Recovery: full refeed to restore glycogen and energy",
        )
    if days_until == 0:
        return CompetitionAdjustment(
            policy.competition_surplus, Goal.GAIN, Intensity.LEAN,
            "Competition day: refuel for performance",
        )
    if days_until <= 2:
        return CompetitionAdjustment(
            policy.water_cut_deficit, Goal.LOSE, Intensity.AGGRESSIVE,
            "Water cut: minimal portions, restrict water",
        )

    if days_until <= 5:
        if not is_over:
            return CompetitionAdjustment(
                policy.min_deficit, Goal.LOSE, Intensity.LEAN,
                "Water load: balanced portions, peak hydration",
            )
        deficit = policy.scaled_deficit(lbs_over)
        return CompetitionAdjustment(
            deficit, Goal.LOSE, _intensity_for(deficit, policy),
            f"Water load: {lbs_over:.1f} lbs over walk-around",
        )

    if not is_over:
        return CompetitionAdjustment(
            0, Goal.MAINTAIN, Intensity.LEAN,
            "Training: at walk-around weight, maintaining",
        )
    deficit = policy.scaled_deficit(lbs_over)
    return CompetitionAdjustment(
        deficit, Goal.LOSE, _intensity_for(deficit, policy),
        f"Training: {lbs_over:.1f} lbs over walk-around ({abs(deficit)} cal deficit)",
    )


def _intensity_for(deficit: int, policy: AdjusterPolicy) -> Intensity:
    return Intensity.AGGRESSIVE if deficit <= policy.aggressive_deficit_threshold else Intensity.LEAN
