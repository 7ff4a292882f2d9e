# -*- coding: utf-8 -*-
"""
Protocol engine

Evaluates one state snapshot at one instant: phase, today's target, safety,
calorie adjustment, slice targets, switch advice and the fuel guide. Nothing
is cached; every call recomputes from the snapshot it is given.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Mapping, Optional

from .errors import InvalidInputError
from .nutrition.adjuster import AdjusterPolicy, CompetitionAdjustment, competition_adjustment
from .nutrition.fuel import FuelGuide, MacroLimits, select_fuel_guide
from .nutrition.spar import SparInput, SparResult, calculate_competition_slices, calculate_slices
from .protocol.models import Phase, Protocol
from .protocol.phase import (
    PhaseInfo,
    classify_phase,
    days_until_weigh_in,
    describe_phase,
    effective_now,
    ensure_comparable,
)
from .protocol.recommendation import (
    ProjectionRecommendation,
    RecommendationPolicy,
    SwitchAdvice,
    advise_switch,
)
from .protocol.targets import CutCurve, calculate_target
from .safety.assessor import SafetyAssessment, SafetyThresholds, assess_safety
from .tracking.models import Profile, StateSnapshot

logger = logging.getLogger(__name__)

# Day count used for labels when a SPAR athlete has no weigh-in scheduled.
_NO_WEIGH_IN_DAYS = 7
_NO_CEILING = MacroLimits(carbs_max=float("inf"), protein_max=float("inf"))


@dataclass(frozen=True)
class EngineResult:
    now: datetime
    days_until_weigh_in: Optional[int]
    phase: Phase
    phase_info: PhaseInfo
    target_weight: float
    current_weight: float
    safety: SafetyAssessment
    adjustment: Optional[CompetitionAdjustment]
    macros: Optional[SparResult]
    switch_advice: Optional[SwitchAdvice]
    fuel_guide: Optional[FuelGuide]


def current_weight_of(snapshot: StateSnapshot, now: datetime) -> float:
    """Latest logged weight at or before ``now``, else the profile's weight."""
    if snapshot.logs:
        ensure_comparable(snapshot.logs[0].date, now, "Log dates and current time")
    logged = [log for log in snapshot.logs if log.date <= now]
    if logged:
        return logged[-1].weight
    if snapshot.profile.current_weight is None:
        raise InvalidInputError("current_weight is required")
    return snapshot.profile.current_weight


def _spar_input(profile: Profile, weight: float) -> SparInput:
    return SparInput(
        sex=profile.sex,
        age=profile.age,
        height_inches=profile.height_inches,
        weight_lbs=weight,
        training_sessions=profile.training_sessions,
        workday_activity=profile.workday_activity,
        body_fat_percent=profile.body_fat_percent,
    )


def evaluate(
    snapshot: StateSnapshot,
    now: datetime,
    *,
    between_matches: bool = False,
    projection: Optional[ProjectionRecommendation] = None,
    limits: Optional[MacroLimits] = None,
    curves: Optional[Mapping[Protocol, CutCurve]] = None,
    thresholds: Optional[SafetyThresholds] = None,
    adjuster_policy: Optional[AdjusterPolicy] = None,
    recommendation_policy: Optional[RecommendationPolicy] = None,
) -> EngineResult:
    """
    Run every engine component against ``snapshot``.

    Raises ConfigurationError when the profile cannot produce a target and
    InvalidInputError when there is no current weight; callers show a
    "setup incomplete" state for both.
    """
    profile = snapshot.profile
    now = effective_now(profile, now)
    protocol = Protocol.parse(profile.protocol)

    target = calculate_target(profile, now, curves)

    days: Optional[int] = None
    if profile.weigh_in_at is not None:
        days = days_until_weigh_in(profile.weigh_in_at, now)
    phase = classify_phase(days, protocol) if days is not None else Phase.TRACKING
    phase_info = describe_phase(protocol, days if days is not None else _NO_WEIGH_IN_DAYS)

    weight = current_weight_of(snapshot, now)
    safety = assess_safety(
        weight,
        target,
        days if days is not None else _NO_WEIGH_IN_DAYS,
        protocol,
        target_weight_class=profile.target_weight_class,
        thresholds=thresholds,
    )

    adjustment: Optional[CompetitionAdjustment] = None
    macros: Optional[SparResult] = None
    if protocol.is_spar:
        spar_input = _spar_input(profile, weight)
        if protocol is Protocol.SPAR_COMPETITION and days is not None:
            adjustment = competition_adjustment(
                weight, profile.target_weight_class, days, adjuster_policy
            )
            macros = calculate_competition_slices(spar_input, adjustment)
        else:
            macros = calculate_slices(spar_input)

    advice = advise_switch(
        protocol,
        weight,
        profile.target_weight_class,
        dismissed=snapshot.dismissed_switches,
        projection=projection,
        policy=recommendation_policy,
    )

    guide = select_fuel_guide(protocol, phase, limits or _NO_CEILING, between_matches)

    logger.debug(
        "evaluate: protocol=%s days=%s phase=%s target=%.1f safety=%s",
        protocol.value, days, phase.value, target, safety.level.name,
    )
    return EngineResult(
        now=now,
        days_until_weigh_in=days,
        phase=phase,
        phase_info=phase_info,
        target_weight=target,
        current_weight=weight,
        safety=safety,
        adjustment=adjustment,
        macros=macros,
        switch_advice=advice,
        fuel_guide=guide,
    )
