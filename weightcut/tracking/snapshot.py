# -*- coding: utf-8 -*-
"""
Snapshot operations and the in-memory profile provider.

Every operation returns a new snapshot; the one passed in is left as is.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..validation import coerce_non_negative
from .models import DailyTracking, LogType, Profile, StateSnapshot, WeightLog

logger = logging.getLogger(__name__)


def add_log(snapshot: StateSnapshot, log: WeightLog) -> StateSnapshot:
    """Append ``log``; the snapshot is revalidated, so mixed timestamp kinds are rejected."""
    return StateSnapshot.model_validate({**dict(snapshot), "logs": [*snapshot.logs, log]})


def remove_log(snapshot: StateSnapshot, log_id: str) -> StateSnapshot:
    logs = [log for log in snapshot.logs if log.id != log_id]
    if len(logs) == len(snapshot.logs):
        logger.debug("remove_log: no log with id %s", log_id)
    return snapshot.model_copy(update={"logs": logs})


def update_profile(snapshot: StateSnapshot, patch: Mapping[str, Any]) -> StateSnapshot:
    """Merge ``patch`` into the profile; the result is validated like a fresh profile."""
    data = snapshot.profile.model_dump()
    data.update(patch)
    profile = Profile.model_validate(data)
    return StateSnapshot.model_validate({**dict(snapshot), "profile": profile})


def set_daily_tracking(snapshot: StateSnapshot, tracking: DailyTracking) -> StateSnapshot:
    daily = dict(snapshot.daily_tracking)
    daily[tracking.day] = tracking
    return snapshot.model_copy(update={"daily_tracking": daily})


def dismiss_switch(snapshot: StateSnapshot, key: str) -> StateSnapshot:
    if key in snapshot.dismissed_switches:
        return snapshot
    return snapshot.model_copy(update={"dismissed_switches": [*snapshot.dismissed_switches, key]})


def daily_tracking_for(snapshot: StateSnapshot, day: date) -> DailyTracking:
    return snapshot.daily_tracking.get(day) or DailyTracking(day=day)


def logs_on(snapshot: StateSnapshot, day: date) -> List[WeightLog]:
    return [log for log in snapshot.logs if log.date.date() == day]


def required_log_types(tracking: Optional[DailyTracking]) -> Tuple[LogType, ...]:
    """Rest days only need the morning and before-bed weigh-ins."""
    if tracking is not None and tracking.no_practice:
        return (LogType.morning, LogType.before_bed)
    return (LogType.morning, LogType.pre_practice, LogType.post_practice, LogType.before_bed)


def is_day_complete(snapshot: StateSnapshot, day: date) -> bool:
    logged = {log.type for log in logs_on(snapshot, day)}
    # An official weigh-in stands in for the morning log.
    if LogType.weigh_in in logged:
        logged.add(LogType.morning)
    return all(t in logged for t in required_log_types(snapshot.daily_tracking.get(day)))


@dataclass(frozen=True)
class DailyTotals:
    protein_g: float
    carbs_g: float
    fat_g: float
    fiber_g: float
    water_oz: float
    calories_kcal: float
    slices: Dict[str, int]


def daily_totals(tracking: DailyTracking) -> DailyTotals:
    """Aggregates for display; unusable values count as 0."""
    protein = coerce_non_negative(tracking.protein_g)
    carbs = coerce_non_negative(tracking.carbs_g)
    fat = coerce_non_negative(tracking.fat_g)
    slices = {
        name: int(coerce_non_negative(count))
        for name, count in tracking.slices.model_dump().items()
    }
    return DailyTotals(
        protein_g=round(protein, 1),
        carbs_g=round(carbs, 1),
        fat_g=round(fat, 1),
        fiber_g=round(coerce_non_negative(tracking.fiber_g), 1),
        water_oz=round(coerce_non_negative(tracking.water_oz), 1),
        calories_kcal=round(protein * 4 + carbs * 4 + fat * 9, 1),
        slices=slices,
    )


class ProfileProvider:
    """What the engine reads from the host, plus the one write it makes."""

    @property
    def profile(self) -> Profile:
        raise NotImplementedError

    @property
    def logs(self) -> List[WeightLog]:
        raise NotImplementedError

    def daily_tracking(self, day: date) -> DailyTracking:
        raise NotImplementedError

    def update_profile(self, patch: Mapping[str, Any]) -> None:
        raise NotImplementedError


class SnapshotProvider(ProfileProvider):
    """
    Profile provider backed by a single in-memory snapshot.

    The host owns the provider and is its only writer; each mutation swaps
    in a new snapshot, so an evaluation in progress keeps a consistent view.
    """

    def __init__(self, snapshot: Optional[StateSnapshot] = None):
        self.snapshot = snapshot or StateSnapshot()

    @property
    def profile(self) -> Profile:
        return self.snapshot.profile

    @property
    def logs(self) -> List[WeightLog]:
        return list(self.snapshot.logs)

    def daily_tracking(self, day: date) -> DailyTracking:
        return daily_tracking_for(self.snapshot, day)

    def update_profile(self, patch: Mapping[str, Any]) -> None:
        self.snapshot = update_profile(self.snapshot, patch)

    def add_log(self, log: WeightLog) -> None:
        self.snapshot = add_log(self.snapshot, log)

    def remove_log(self, log_id: str) -> None:
        self.snapshot = remove_log(self.snapshot, log_id)

    def set_daily_tracking(self, tracking: DailyTracking) -> None:
        self.snapshot = set_daily_tracking(self.snapshot, tracking)
