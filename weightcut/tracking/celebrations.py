# -*- coding: utf-8 -*-
"""
Celebrations and the per-day fired-event ledger.

A celebration fires at most once per calendar day. Fired keys are stored in
the snapshot by day, so they survive restarts and can be evicted by date.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Mapping, Optional, Set, Tuple

from ..config import settings
from ..protocol.phase import days_until_weigh_in, effective_now
from .models import LogType, StateSnapshot, WeightLog
from .snapshot import daily_tracking_for, is_day_complete, logs_on

_MORNING_TYPES = (LogType.morning, LogType.weigh_in)
STREAK_MILESTONES = (3, 5, 7, 14, 21, 30)


class FiredEvents:
    """Event keys already fired, grouped by calendar day."""

    def __init__(self, fired: Optional[Mapping[date, Iterable[str]]] = None):
        self._fired: Dict[date, Set[str]] = {
            day: set(keys) for day, keys in (fired or {}).items()
        }

    def has_fired(self, day: date, key: str) -> bool:
        return key in self._fired.get(day, ())

    def fire(self, day: date, key: str) -> bool:
        """Record ``key`` for ``day``; False if it had already fired."""
        keys = self._fired.setdefault(day, set())
        if key in keys:
            return False
        keys.add(key)
        return True

    def evict_before(self, day: date) -> int:
        """Drop days before ``day``; returns how many were dropped."""
        old = [d for d in self._fired if d < day]
        for d in old:
            del self._fired[d]
        return len(old)

    def to_dict(self) -> Dict[date, List[str]]:
        return {day: sorted(keys) for day, keys in sorted(self._fired.items())}


@dataclass(frozen=True)
class Celebration:
    type: str  # made-weight, new-low, big-drop, streak, first-log, all-logged
    title: str
    subtitle: str = ""
    confetti: bool = False

    def key(self, day: date) -> str:
        return f"{self.type}-{day.isoformat()}"


def _is_morning(log: WeightLog) -> bool:
    return log.type in _MORNING_TYPES


def _morning_streak(logs: List[WeightLog], today: date) -> int:
    mornings = {log.date.date() for log in logs if _is_morning(log)}
    streak = 0
    for i in range(365):
        day = today - timedelta(days=i)
        if day in mornings:
            streak += 1
        elif i == 0:
            continue
        else:
            break
    return streak


def find_celebration(snapshot: StateSnapshot, now: datetime) -> Optional[Celebration]:
    """The first celebration the newest log of today earns, if any."""
    now = effective_now(snapshot.profile, now)
    today = now.date()
    todays = sorted(logs_on(snapshot, today), key=lambda log: log.date, reverse=True)
    if not todays:
        return None
    newest = todays[0]
    profile = snapshot.profile
    weight_class = profile.target_weight_class

    if (
        weight_class is not None
        and profile.weigh_in_at is not None
        and days_until_weigh_in(profile.weigh_in_at, now) == 0
        and _is_morning(newest)
        and newest.weight <= weight_class
    ):
        return Celebration(
            "made-weight",
            "YOU MADE WEIGHT!",
            f"{newest.weight:.1f} lbs, under the {weight_class:g} lb class. Go compete!",
            confetti=True,
        )

    if _is_morning(newest):
        week_ago = today - timedelta(days=7)
        week_mornings = [
            log.weight for log in snapshot.logs
            if _is_morning(log) and week_ago <= log.date.date() < today
        ]
        if len(week_mornings) >= 2 and newest.weight < min(week_mornings):
            diff = min(week_mornings) - newest.weight
            return Celebration(
                "new-low",
                "New weekly low!",
                f"{newest.weight:.1f} lbs, {diff:.1f} lbs below previous low",
            )

        yesterday = today - timedelta(days=1)
        previous = next(
            (log for log in snapshot.logs if _is_morning(log) and log.date.date() == yesterday),
            None,
        )
        if previous is not None:
            drop = previous.weight - newest.weight
            if drop >= settings.big_drop_lbs:
                return Celebration(
                    "big-drop",
                    f"Down {drop:.1f} lbs overnight!",
                    f"{previous.weight:.1f} -> {newest.weight:.1f} lbs. The process is working.",
                )

        streak = _morning_streak(snapshot.logs, today)
        if streak in STREAK_MILESTONES:
            return Celebration(
                "streak",
                f"{streak} day streak!",
                "Consistency is what separates champions. Keep going!" if streak >= 7
                else "Building the habit. Every day counts!",
                confetti=streak >= 7,
            )

    if len(snapshot.logs) == 1:
        return Celebration("first-log", "First weigh-in logged!", "Your weight management journey starts now.")

    if is_day_complete(snapshot, today):
        rest_day = daily_tracking_for(snapshot, today).no_practice
        return Celebration(
            "all-logged",
            "Perfect tracking day!",
            "Both rest day weigh-ins logged. Recovery matters too!" if rest_day
            else "All 4 weigh-ins logged. Your data game is elite.",
            confetti=True,
        )
    return None


def detect_celebrations(snapshot: StateSnapshot, now: datetime) -> Tuple[Optional[Celebration], StateSnapshot]:
    """
    Find today's celebration and record it in the snapshot's ledger.

    Days older than a week are evicted from the ledger on every call. The
    celebration is None when nothing qualifies or it already fired today; the
    snapshot passed in is returned as is when the ledger did not change.
    """
    today = effective_now(snapshot.profile, now).date()
    ledger = FiredEvents(snapshot.fired_events)
    evicted = ledger.evict_before(today - timedelta(days=7))
    if evicted:
        snapshot = snapshot.model_copy(update={"fired_events": ledger.to_dict()})

    celebration = find_celebration(snapshot, now)
    if celebration is None or not ledger.fire(today, celebration.key(today)):
        return None, snapshot
    return celebration, snapshot.model_copy(update={"fired_events": ledger.to_dict()})
