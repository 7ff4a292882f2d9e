# -*- coding: utf-8 -*-
"""
SPAR slice calculator

Turns body stats, training load and a goal into daily portion ("slice")
targets: protein palms, carb fists, vegetable fists, fruit pieces and fat
thumbs. Protein is anchored to bodyweight; vegetables and fruit are fixed
minimums; the remaining calories are split between fat and starch carbs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional, Tuple

from ..config import settings
from ..validation import require_positive
from .adjuster import CompetitionAdjustment, Goal, Intensity

logger = logging.getLogger(__name__)

LBS_TO_KG = 0.45359237
INCHES_TO_CM = 2.54


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


class TrainingSessions(str, Enum):
    ONE_TWO = "1-2"
    THREE_FOUR = "3-4"
    FIVE_SIX = "5-6"
    SEVEN_PLUS = "7+"


class WorkdayActivity(str, Enum):
    MOSTLY_SITTING = "mostly_sitting"
    ON_FEET_SOME = "on_feet_some"
    ON_FEET_MOST = "on_feet_most"


class MaintainPriority(str, Enum):
    GENERAL = "general"
    PERFORMANCE = "performance"


_ACTIVITY_MATRIX: Dict[TrainingSessions, Dict[WorkdayActivity, float]] = {
    TrainingSessions.ONE_TWO: {
        WorkdayActivity.MOSTLY_SITTING: 1.2,
        WorkdayActivity.ON_FEET_SOME: 1.35,
        WorkdayActivity.ON_FEET_MOST: 1.35,
    },
    TrainingSessions.THREE_FOUR: {
        WorkdayActivity.MOSTLY_SITTING: 1.35,
        WorkdayActivity.ON_FEET_SOME: 1.55,
        WorkdayActivity.ON_FEET_MOST: 1.55,
    },
    TrainingSessions.FIVE_SIX: {
        WorkdayActivity.MOSTLY_SITTING: 1.55,
        WorkdayActivity.ON_FEET_SOME: 1.55,
        WorkdayActivity.ON_FEET_MOST: 1.725,
    },
    TrainingSessions.SEVEN_PLUS: {
        WorkdayActivity.MOSTLY_SITTING: 1.55,
        WorkdayActivity.ON_FEET_SOME: 1.725,
        WorkdayActivity.ON_FEET_MOST: 1.725,
    },
}
_DEFAULT_ACTIVITY = 1.55


@dataclass(frozen=True)
class GoalConfig:
    protein_per_lb: float
    calorie_adjustment: int
    fat_percent: float  # share of calories left after protein and fixed slices
    carb_percent: float


GOAL_CONFIGS: Dict[str, GoalConfig] = {
    "lose_lean": GoalConfig(0.85, -250, 50, 50),
    "lose_aggressive": GoalConfig(0.85, -500, 50, 50),
    "maintain_general": GoalConfig(0.65, 0, 45, 55),
    "maintain_performance": GoalConfig(0.75, 0, 30, 70),
    "gain_lean": GoalConfig(0.95, 250, 30, 70),
    "gain_aggressive": GoalConfig(0.95, 500, 30, 70),
}

# kcal and grams per slice
SLICE_CALORIES = {"protein": 125, "carb": 104, "veg": 32, "fruit": 100, "fat": 126}
SLICE_GRAMS = {"protein": 25, "carb": 26, "veg": 8, "fruit": 25, "fat": 14}

FIXED_VEG_SLICES = 5
FIXED_FRUIT_SLICES = 2
FIXED_CARBS = FIXED_VEG_SLICES * SLICE_GRAMS["veg"] + FIXED_FRUIT_SLICES * SLICE_GRAMS["fruit"]
FIXED_CALORIES = (
    FIXED_VEG_SLICES * SLICE_CALORIES["veg"] + FIXED_FRUIT_SLICES * SLICE_CALORIES["fruit"]
)


@dataclass
class SparInput:
    """Body stats and goal for the slice calculator."""
    sex: Sex
    age: int
    height_inches: float
    weight_lbs: float
    training_sessions: TrainingSessions = TrainingSessions.THREE_FOUR
    workday_activity: WorkdayActivity = WorkdayActivity.MOSTLY_SITTING
    goal: Goal = Goal.MAINTAIN
    intensity: Optional[Intensity] = None
    maintain_priority: Optional[MaintainPriority] = None

    # Optional overrides
    body_fat_percent: Optional[float] = None  # enables Cunningham BMR
    custom_protein_per_lb: Optional[float] = None
    custom_fat_percent: Optional[float] = None
    custom_carb_percent: Optional[float] = None
    calorie_override: Optional[int] = None  # replaces the goal's calorie adjustment


@dataclass(frozen=True)
class SliceTargets:
    protein: int
    carb: int
    veg: int
    fruit: int
    fat: int


@dataclass(frozen=True)
class SparResult:
    slices: SliceTargets
    bmr: int
    tdee: int
    adjusted_tdee: int
    protein_g: int
    carbs_total_g: int
    starch_carbs_g: int
    fat_g: int
    total_slice_calories: int
    calorie_adjustment: int
    protein_per_lb: float
    fat_carb_split: Tuple[float, float]


def _mifflin_st_jeor(weight_lbs: float, height_inches: float, age: int, sex: Sex) -> float:
    weight_kg = weight_lbs * LBS_TO_KG
    height_cm = height_inches * INCHES_TO_CM
    s = 5 if Sex(sex) is Sex.MALE else -161
    return 10 * weight_kg + 6.25 * height_cm - 5 * age + s


def _cunningham(weight_lbs: float, body_fat_percent: float) -> float:
    lean_mass_kg = weight_lbs * LBS_TO_KG * (1 - body_fat_percent / 100)
    return 500 + 22 * lean_mass_kg


def activity_multiplier(sessions: TrainingSessions, workday: WorkdayActivity) -> float:
    try:
        return _ACTIVITY_MATRIX[TrainingSessions(sessions)][WorkdayActivity(workday)]
    except (KeyError, ValueError):
        return _DEFAULT_ACTIVITY


def goal_key(goal: Goal, intensity: Optional[Intensity] = None,
             maintain_priority: Optional[MaintainPriority] = None) -> str:
    goal = Goal(goal)
    if goal is Goal.MAINTAIN:
        return f"maintain_{MaintainPriority(maintain_priority or MaintainPriority.GENERAL).value}"
    return f"{goal.value}_{Intensity(intensity or Intensity.AGGRESSIVE).value}"


def calculate_slices(data: SparInput) -> SparResult:
    weight = require_positive(data.weight_lbs, "weight_lbs")

    bf = data.body_fat_percent
    if bf is not None and 0 < bf < 100:
        bmr = _cunningham(weight, bf)
    else:
        bmr = _mifflin_st_jeor(weight, data.height_inches, data.age, data.sex)

    tdee = bmr * activity_multiplier(data.training_sessions, data.workday_activity)

    config = GOAL_CONFIGS[goal_key(data.goal, data.intensity, data.maintain_priority)]
    adjustment = config.calorie_adjustment if data.calorie_override is None else data.calorie_override
    adjusted_tdee = max(settings.min_daily_calories, tdee + adjustment)

    protein_per_lb = (
        config.protein_per_lb if data.custom_protein_per_lb is None else data.custom_protein_per_lb
    )
    protein_g = weight * protein_per_lb
    remaining = adjusted_tdee - protein_g * 4 - FIXED_CALORIES

    fat_pct = config.fat_percent if data.custom_fat_percent is None else data.custom_fat_percent
    carb_pct = config.carb_percent if data.custom_carb_percent is None else data.custom_carb_percent
    total_pct = fat_pct + carb_pct
    if total_pct <= 0:
        fat_pct, carb_pct, total_pct = config.fat_percent, config.carb_percent, 100.0

    fat_g = remaining * (fat_pct / total_pct) / 9
    carbs_total_g = remaining * (carb_pct / total_pct) / 4
    starch_g = max(0.0, carbs_total_g - FIXED_CARBS)

    protein_slices = round(protein_g / SLICE_GRAMS["protein"])
    carb_slices = round(starch_g / SLICE_GRAMS["carb"])
    fat_slices = round(fat_g / SLICE_GRAMS["fat"])

    total_slice_calories = (
        protein_slices * SLICE_CALORIES["protein"]
        + carb_slices * SLICE_CALORIES["carb"]
        + FIXED_CALORIES
        + fat_slices * SLICE_CALORIES["fat"]
    )

    slices = SliceTargets(
        protein=max(2, protein_slices),
        carb=max(1, carb_slices),
        veg=FIXED_VEG_SLICES,
        fruit=FIXED_FRUIT_SLICES,
        fat=max(1, fat_slices),
    )
    logger.debug(
        "SPAR slices: bmr=%.0f tdee=%.0f adjusted=%.0f slices=%s", bmr, tdee, adjusted_tdee, slices
    )
    return SparResult(
        slices=slices,
        bmr=round(bmr),
        tdee=round(tdee),
        adjusted_tdee=round(adjusted_tdee),
        protein_g=round(protein_g),
        carbs_total_g=round(carbs_total_g),
        starch_carbs_g=round(starch_g),
        fat_g=round(fat_g),
        total_slice_calories=round(total_slice_calories),
        calorie_adjustment=adjustment,
        protein_per_lb=protein_per_lb,
        fat_carb_split=(fat_pct, carb_pct),
    )


def calculate_competition_slices(data: SparInput, adjustment: CompetitionAdjustment) -> SparResult:
    """Slice targets with the competition adjuster's goal and calorie delta applied."""
    return calculate_slices(replace(
        data,
        goal=adjustment.goal,
        intensity=adjustment.intensity,
        calorie_override=adjustment.calorie_adjustment,
    ))
