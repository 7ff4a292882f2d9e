# -*- coding: utf-8 -*-
"""
Time & phase classification

Maps "days until weigh-in" to a named cut phase and to the per-protocol
display label shown to the athlete.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Union

from ..errors import ConfigurationError, UnknownProtocolError
from .models import Phase, Protocol


def effective_now(profile: Any, now: datetime) -> datetime:
    """The profile's simulated date, when one is set, replaces the real clock."""
    simulated = getattr(profile, "simulated_date", None)
    return simulated if simulated is not None else now


def is_aware(value: datetime) -> bool:
    return value.tzinfo is not None and value.utcoffset() is not None


def ensure_comparable(first: datetime, second: datetime, what: str = "Timestamps") -> None:
    """Raise ConfigurationError unless both values are naive or both are aware."""
    if is_aware(first) != is_aware(second):
        raise ConfigurationError(f"{what} must both be naive or both be aware")


def days_until_weigh_in(weigh_in_at: Union[datetime, date, None], now: Union[datetime, date]) -> int:
    """Calendar days from ``now``'s date to the weigh-in date (negative once past)."""
    if weigh_in_at is None:
        raise ConfigurationError("Weigh-in date is not set")
    if isinstance(weigh_in_at, datetime) and isinstance(now, datetime):
        ensure_comparable(weigh_in_at, now, "Weigh-in date and current time")
        if is_aware(weigh_in_at):
            now = now.astimezone(weigh_in_at.tzinfo)
    weigh_in_day = weigh_in_at.date() if isinstance(weigh_in_at, datetime) else weigh_in_at
    today = now.date() if isinstance(now, datetime) else now
    return (weigh_in_day - today).days


def classify_phase(days_until: Union[int, float], protocol: Protocol) -> Phase:
    """
    Classify the cut phase.

    Bands are checked from the most time-critical outward: recovery is
    strictly after the weigh-in, not merely "0 days".
    """
    protocol = Protocol.parse(protocol)
    days = math.floor(days_until)

    if protocol.is_spar:
        if days < 0:
            return Phase.RECOVER
        if days == 0 and protocol is Protocol.SPAR_COMPETITION:
            return Phase.COMPETE
        return Phase.TRACKING

    if days < 0:
        return Phase.RECOVER
    if days == 0:
        return Phase.COMPETE
    if days <= 2:
        return Phase.CUT
    if days <= 5:
        return Phase.LOAD
    return Phase.TRAIN


@dataclass(frozen=True)
class PhaseInfo:
    """Display label for the current day of a protocol."""
    label: str
    food_tip: str


_RECOVERY_INFO = PhaseInfo("RECOVERY", "Eat everything. Full recovery refeed.")
_COMPETITION_INFO = PhaseInfo("COMPETITION DAY", "Post-weigh-in refuel. Fast carbs between matches.")


def describe_phase(protocol: Protocol, days_until: int) -> PhaseInfo:
    protocol = Protocol.parse(protocol)

    if protocol is Protocol.SPAR_GENERAL:
        return PhaseInfo("BALANCED", "All macros. Hit your portion targets.")
    if days_until < 0:
        return _RECOVERY_INFO
    if days_until == 0:
        return _COMPETITION_INFO

    if protocol is Protocol.EXTREME_CUT:
        if days_until == 1:
            return PhaseInfo("PERFORMANCE PREP", "Fructose + evening protein only")
        if days_until <= 5:
            return PhaseInfo("MAX FAT BURN", "Fructose only. Zero protein for FGF21 activation.")
        return PhaseInfo("EXTREME CUT", "Moderate protein + fructose carbs")
    if protocol is Protocol.RAPID_CUT:
        if days_until <= 2:
            return PhaseInfo("PERFORMANCE", "Switch to glucose/starch. Collagen + seafood protein.")
        if days_until == 3:
            return PhaseInfo("CUT → PERFORMANCE", "Fructose heavy. Collagen + leucine at dinner.")
        if days_until <= 5:
            return PhaseInfo("CUT", "Fructose only. Zero protein for maximum fat loss.")
        return PhaseInfo("RAPID CUT", "Moderate protein + fructose carbs")
    if protocol is Protocol.OPTIMAL_CUT:
        if days_until <= 2:
            return PhaseInfo("PERFORMANCE", "Glucose emphasis. Full protein for performance.")
        if days_until <= 4:
            return PhaseInfo("MIXED", "Mixed fructose/glucose. Moderate protein.")
        if days_until == 5:
            return PhaseInfo("FGF21 ACTIVATION", "Fructose heavy. Brief FGF21 activation.")
        return PhaseInfo("OPTIMAL CUT", "Full protein + balanced carbs")
    if protocol is Protocol.GAIN:
        if days_until <= 4:
            return PhaseInfo("GLUCOSE EMPHASIS", "Glucose/starch carbs. High protein for growth.")
        if days_until == 5:
            return PhaseInfo("BALANCED", "Balanced carbs. Moderate protein.")
        return PhaseInfo("GAIN", "Off-season building. High protein, high carbs.")
    if protocol is Protocol.SPAR_COMPETITION:
        if days_until <= 2:
            return PhaseInfo("WATER CUT", "Light portions, restrict water")
        if days_until <= 5:
            return PhaseInfo("WATER LOAD", "Balanced portions, peak hydration")
        return PhaseInfo("TRAINING", "SPAR portions, auto-adjusting for walk-around")
    raise UnknownProtocolError(f"No phase labels for protocol {protocol!r}")
