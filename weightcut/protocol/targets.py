# -*- coding: utf-8 -*-
"""
Weight target calculator

Computes today's target body weight. Weight-cut protocols evaluate a cut
curve (day count -> lbs) chosen per protocol; SPAR protocols aim at the
weight class itself.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

import numpy as np

from ..config import settings
from ..errors import ConfigurationError
from .models import Protocol
from .phase import days_until_weigh_in, effective_now


class CutCurve:
    """Maps days until weigh-in to a target weight."""

    def target_for(self, days_until: int, target_weight_class: float, profile: Any = None) -> float:
        raise NotImplementedError


class PercentPerDayCurve(CutCurve):
    """``class * (1 + rate * days)``; the target settles on the class from weigh-in day on."""

    def __init__(self, rate: Optional[float] = None):
        self.rate = settings.percent_per_day_rate if rate is None else rate

    def target_for(self, days_until, target_weight_class, profile=None):
        return target_weight_class * (1 + self.rate * max(0, days_until))


class LinearCurve(CutCurve):
    """
    Straight line from the cut-start weight ``duration_days`` out down to the
    class on weigh-in day.

    The start weight comes from the profile's ``cut_start_weight``; without
    one the walk-around estimate is used. Without ``duration_days`` the
    window runs from the profile's ``cut_start_date`` to its weigh-in date.
    Outside the window the curve is held flat at either end.
    """

    def __init__(self, duration_days: Optional[int] = None, start_weight: Optional[float] = None):
        if duration_days is not None and duration_days <= 0:
            raise ConfigurationError(f"Cut duration must be > 0 days, got {duration_days}")
        self.duration_days = duration_days
        self.start_weight = start_weight

    def _start_weight(self, target_weight_class: float, profile: Any) -> float:
        if self.start_weight is not None:
            return self.start_weight
        from_profile = getattr(profile, "cut_start_weight", None)
        if from_profile is not None:
            return from_profile
        return target_weight_class * settings.walk_around_multiplier

    def _duration(self, profile: Any) -> int:
        if self.duration_days is not None:
            return self.duration_days
        start_date = getattr(profile, "cut_start_date", None)
        weigh_in_at = getattr(profile, "weigh_in_at", None)
        if start_date is None or weigh_in_at is None:
            raise ConfigurationError("Linear cut curve needs duration_days or a cut start date and weigh-in date")
        duration = days_until_weigh_in(weigh_in_at, start_date)
        if duration <= 0:
            raise ConfigurationError(f"Cut start date must be before the weigh-in, got {duration} days")
        return duration

    def target_for(self, days_until, target_weight_class, profile=None):
        start = self._start_weight(target_weight_class, profile)
        duration = self._duration(profile)
        return float(np.interp(days_until, [0, duration], [target_weight_class, start]))


class FlatCurve(CutCurve):
    def target_for(self, days_until, target_weight_class, profile=None):
        return target_weight_class


def default_curves() -> Dict[Protocol, CutCurve]:
    percent = PercentPerDayCurve()
    return {
        Protocol.EXTREME_CUT: percent,
        Protocol.RAPID_CUT: percent,
        Protocol.OPTIMAL_CUT: percent,
        Protocol.GAIN: FlatCurve(),
    }


def _weight_class(profile: Any) -> float:
    value = getattr(profile, "target_weight_class", None)
    if value is None:
        raise ConfigurationError("Target weight class is not set")
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Target weight class is not a number: {value!r}") from exc
    if not math.isfinite(value) or value <= 0:
        raise ConfigurationError(f"Target weight class must be > 0, got {value}")
    return value


def calculate_target(
    profile: Any,
    now: datetime,
    curves: Optional[Mapping[Protocol, CutCurve]] = None,
) -> float:
    """
    Today's target weight in lbs.

    Raises ConfigurationError instead of returning a placeholder when the
    profile or curve configuration cannot produce a trustworthy number.
    """
    weight_class = _weight_class(profile)
    protocol = Protocol.parse(getattr(profile, "protocol", None))
    if protocol.is_spar:
        return weight_class

    weigh_in_at = getattr(profile, "weigh_in_at", None)
    if weigh_in_at is None:
        raise ConfigurationError(f"Weigh-in date is required for {protocol.label}")
    days = days_until_weigh_in(weigh_in_at, effective_now(profile, now))

    curve = (curves if curves is not None else default_curves()).get(protocol)
    if curve is None:
        raise ConfigurationError(f"No cut curve configured for {protocol.label}")

    target = curve.target_for(days, weight_class, profile)
    if target is None or not np.isfinite(target) or target <= 0:
        raise ConfigurationError(
            f"Cut curve for {protocol.label} produced an invalid target: {target!r}"
        )
    return float(target)


@dataclass(frozen=True)
class WeightRange:
    low: float
    high: float


@dataclass(frozen=True)
class Checkpoints:
    """Weekly weight checkpoints ahead of a weigh-in."""
    walk_around: WeightRange
    mid_week: WeightRange
    final_day: WeightRange


def _range(weight_class: float, low: float, high: float) -> WeightRange:
    return WeightRange(round(weight_class * low, 1), round(weight_class * high, 1))


def checkpoints(target_weight_class: float) -> Checkpoints:
    if target_weight_class is None or not math.isfinite(target_weight_class) or target_weight_class <= 0:
        raise ConfigurationError(f"Target weight class must be > 0, got {target_weight_class!r}")
    return Checkpoints(
        walk_around=_range(target_weight_class, 1.06, 1.07),
        mid_week=_range(target_weight_class, 1.04, 1.05),
        final_day=_range(target_weight_class, 1.02, 1.03),
    )


@dataclass(frozen=True)
class RehydrationPlan:
    fluid_oz: WeightRange
    sodium_mg: WeightRange
    glycogen: str = "40-50g dextrose or rice cakes"


FLUID_OZ_PER_LB = (16, 24)
SODIUM_MG_PER_LB = (500, 700)


def rehydration_plan(lbs_lost: float) -> RehydrationPlan:
    """Post weigh-in fluid and sodium for the weight lost in the cut."""
    lbs = max(0.0, float(lbs_lost)) if lbs_lost is not None and math.isfinite(lbs_lost) else 0.0
    return RehydrationPlan(
        fluid_oz=WeightRange(round(lbs * FLUID_OZ_PER_LB[0]), round(lbs * FLUID_OZ_PER_LB[1])),
        sodium_mg=WeightRange(round(lbs * SODIUM_MG_PER_LB[0]), round(lbs * SODIUM_MG_PER_LB[1])),
    )
