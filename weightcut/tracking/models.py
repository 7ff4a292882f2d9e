# -*- coding: utf-8 -*-
"""Tracking: Pydantic models for the athlete state snapshot."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Dict, List, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..nutrition.spar import Sex, TrainingSessions, WorkdayActivity
from ..protocol.models import Protocol
from ..protocol.phase import is_aware

SNAPSHOT_VERSION = 1


class LogType(str, Enum):
    morning = "morning"
    pre_practice = "pre-practice"
    post_practice = "post-practice"
    before_bed = "before-bed"
    weigh_in = "weigh-in"


class WeightLog(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    date: datetime
    type: LogType
    weight: float = Field(..., gt=0, allow_inf_nan=False, description="lbs")


class Profile(BaseModel):
    model_config = ConfigDict(frozen=True)

    current_weight: Optional[float] = Field(None, gt=0, allow_inf_nan=False)
    target_weight_class: Optional[float] = Field(None, gt=0, allow_inf_nan=False)
    weigh_in_at: Optional[datetime] = None
    protocol: Protocol = Protocol.OPTIMAL_CUT
    simulated_date: Optional[datetime] = Field(None, description="Overrides 'now' for history views")

    # Linear cut curve
    cut_start_weight: Optional[float] = Field(None, gt=0, allow_inf_nan=False)
    cut_start_date: Optional[date] = None

    # SPAR body inputs
    sex: Sex = Sex.MALE
    age: int = Field(18, gt=0, lt=120)
    height_inches: float = Field(68.0, gt=0, allow_inf_nan=False)
    training_sessions: TrainingSessions = TrainingSessions.THREE_FOUR
    workday_activity: WorkdayActivity = WorkdayActivity.MOSTLY_SITTING
    body_fat_percent: Optional[float] = Field(None, ge=0, lt=100)

    @field_validator("protocol", mode="before")
    @classmethod
    def _parse_protocol(cls, v):
        return Protocol.parse(v)


class SliceCounts(BaseModel):
    protein: int = 0
    carb: int = 0
    veg: int = 0
    fruit: int = 0
    fat: int = 0


class DailyTracking(BaseModel):
    """Consumption for one calendar day. Values are as logged; totals clean them up."""
    model_config = ConfigDict(frozen=True)

    day: date
    protein_g: Optional[float] = 0.0
    carbs_g: Optional[float] = 0.0
    fat_g: Optional[float] = 0.0
    fiber_g: Optional[float] = 0.0
    water_oz: Optional[float] = 0.0
    slices: SliceCounts = SliceCounts()
    no_practice: bool = False


class StateSnapshot(BaseModel):
    """Everything the engine needs for one evaluation."""
    model_config = ConfigDict(frozen=True)

    version: int = SNAPSHOT_VERSION
    profile: Profile = Profile()
    logs: List[WeightLog] = []
    daily_tracking: Dict[date, DailyTracking] = {}
    dismissed_switches: List[str] = []
    fired_events: Dict[date, List[str]] = {}

    @field_validator("logs")
    @classmethod
    def _sort_logs(cls, v: List[WeightLog]) -> List[WeightLog]:
        if len({is_aware(log.date) for log in v}) > 1:
            raise ValueError("log dates mix naive and timezone-aware timestamps")
        return sorted(v, key=lambda log: log.date)

    @model_validator(mode="after")
    def _check_timestamp_kinds(self) -> "StateSnapshot":
        if not self.logs:
            return self
        logs_aware = is_aware(self.logs[0].date)
        for name in ("weigh_in_at", "simulated_date"):
            value = getattr(self.profile, name)
            if value is not None and is_aware(value) != logs_aware:
                raise ValueError(f"profile.{name} and log dates must both be naive or both be aware")
        return self
