from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, List, Optional

import pandas as pd

from ..config import settings
from ..errors import ConfigurationError
from ..nutrition.adjuster import Goal
from ..protocol.models import Protocol
from ..protocol.phase import days_until_weigh_in, ensure_comparable, is_aware
from ..protocol.recommendation import ProjectionRecommendation
from .models import LogType, WeightLog

logger = logging.getLogger(__name__)

# Typical drift when the athlete has not logged enough pairs yet.
DEFAULT_OVERNIGHT_DRIFT = -1.2
DEFAULT_SESSION_LOSS = -2.5


def _check_timestamps(logs: List[WeightLog], now: Optional[datetime] = None) -> None:
    kinds = {is_aware(log.date) for log in logs}
    if len(kinds) > 1:
        raise ConfigurationError("Log dates mix naive and timezone-aware timestamps")
    if logs and now is not None:
        ensure_comparable(logs[0].date, now, "Log dates and current time")


def logs_frame(logs: Iterable[WeightLog]) -> pd.DataFrame:
    """Weight logs as a date-sorted frame with columns date/type/weight."""
    logs = list(logs)
    _check_timestamps(logs)
    rows = [
        {"date": log.date, "type": LogType(log.type).value, "weight": float(log.weight)}
        for log in logs
    ]
    if not rows:
        return pd.DataFrame(columns=["date", "type", "weight"])
    df = pd.DataFrame(rows)
    return df.sort_values("date", kind="stable").reset_index(drop=True)


def seven_day_average(logs: Iterable[WeightLog], now: datetime) -> Optional[float]:
    logs = list(logs)
    _check_timestamps(logs, now)
    df = logs_frame(logs)
    if df.empty:
        return None
    recent = df[(df["date"] >= now - timedelta(days=7)) & (df["date"] <= now)]
    if recent.empty:
        return None
    return float(recent["weight"].mean())


def should_recalculate(last_calc_weight: float, current_avg_weight: float,
                       threshold_lbs: Optional[float] = None) -> bool:
    threshold = settings.recalc_threshold_lbs if threshold_lbs is None else threshold_lbs
    return abs(current_avg_weight - last_calc_weight) >= threshold


def has_reached_goal(goal: Goal, goal_weight: float, current_avg_weight: float) -> bool:
    goal = Goal(goal)
    if goal is Goal.LOSE:
        return current_avg_weight <= goal_weight
    if goal is Goal.GAIN:
        return current_avg_weight >= goal_weight
    return False


@dataclass(frozen=True)
class DriftMetrics:
    overnight: Optional[float]  # evening -> next morning, lbs (negative = loss)
    session: Optional[float]  # pre -> post practice, lbs


def drift_metrics(logs: Iterable[WeightLog]) -> DriftMetrics:
    """
    Mean overnight drift and practice-session loss from consecutive log pairs.

    Overnight pairs run from a post-practice or before-bed log to the next
    morning log 6-16 hours later; session pairs from pre- to post-practice
    under 4 hours apart.
    """
    df = logs_frame(logs)
    if len(df) < 2:
        return DriftMetrics(None, None)

    prev = df.shift(1)
    hours = (df["date"] - prev["date"]).dt.total_seconds() / 3600.0
    delta = df["weight"] - prev["weight"]

    overnight = (
        (df["type"] == LogType.morning.value)
        & prev["type"].isin([LogType.post_practice.value, LogType.before_bed.value])
        & (hours > 6) & (hours < 16)
    )
    session = (
        (df["type"] == LogType.post_practice.value)
        & (prev["type"] == LogType.pre_practice.value)
        & (hours < 4)
    )
    return DriftMetrics(
        overnight=float(delta[overnight].mean()) if overnight.any() else None,
        session=float(delta[session].mean()) if session.any() else None,
    )


def project_weigh_in(logs: Iterable[WeightLog], now: datetime, weigh_in_at: datetime) -> Optional[float]:
    """
    Projected weigh-in weight: the latest log minus one day of overnight drift
    and practice loss for each day remaining.
    """
    logs = list(logs)
    _check_timestamps(logs, now)
    days_left = max(0, days_until_weigh_in(weigh_in_at, now))
    df = logs_frame(logs)
    df = df[df["date"] <= now]
    if df.empty:
        return None

    drift = drift_metrics(logs)
    overnight = drift.overnight if drift.overnight is not None else DEFAULT_OVERNIGHT_DRIFT
    session = drift.session if drift.session is not None else DEFAULT_SESSION_LOSS

    latest = float(df["weight"].iloc[-1])
    projected = latest - (abs(overnight) + abs(session)) * days_left
    logger.debug("Projected weigh-in %.1f lbs (%d days, latest %.1f)", projected, days_left, latest)
    return projected


def projection_recommendation(
    projected: Optional[float],
    target_weight_class: float,
    days_until: int,
    protocol: Protocol,
    buffer_lbs: Optional[float] = None,
) -> Optional[ProjectionRecommendation]:
    """Recommend Extreme Cut when the projection misses the class by more than the buffer."""
    protocol = Protocol.parse(protocol)
    if projected is None or days_until < 0 or protocol is Protocol.EXTREME_CUT:
        return None
    buffer = settings.projection_switch_buffer_lbs if buffer_lbs is None else buffer_lbs
    over = projected - target_weight_class
    if over <= buffer:
        return None

    critical = days_until <= settings.critical_days_threshold
    return ProjectionRecommendation(
        switch_protocol=True,
        urgency="critical" if critical else "high",
        message=(
            f"Projected {projected:.1f} lbs at weigh-in, {over:.1f} lbs over "
            f"{target_weight_class:g}. Switch to Extreme Cut to make weight."
        ),
    )
