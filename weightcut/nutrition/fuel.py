# -*- coding: utf-8 -*-
"""
Fuel guide selector

Picks which food table and slice to show for the current protocol and
phase. There is no arithmetic here beyond slicing and grouping by timing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..errors import UnknownProtocolError
from ..protocol.models import Phase, Protocol
from . import food_data
from .food_data import AvoidFood, CarbFood, CutWindow, ProteinFood


class CarbType(str, Enum):
    FRUCTOSE = "fructose"
    GLUCOSE = "glucose"
    MIXED = "mixed"
    ANY = "any"


class ProteinStatus(str, Enum):
    BLOCKED = "blocked"
    COLLAGEN_ONLY = "collagen-only"
    COLLAGEN_SEAFOOD = "collagen+seafood"
    FULL = "full"
    RECOVERY = "recovery"


@dataclass(frozen=True)
class MacroLimits:
    """Daily ceilings in grams; 0 means the macro is off the menu today."""
    carbs_max: float
    protein_max: float


@dataclass
class TimingGroup:
    timing: str
    foods: List[CarbFood] = field(default_factory=list)


@dataclass
class FuelGuide:
    carb_type: CarbType
    protein_status: ProteinStatus
    morning_carbs: List[CarbFood] = field(default_factory=list)
    evening_carbs: List[CarbFood] = field(default_factory=list)
    proteins: List[ProteinFood] = field(default_factory=list)
    tournament: Optional[List[TimingGroup]] = None
    recovery: Optional[List[CarbFood]] = None
    avoid: List[AvoidFood] = field(default_factory=list)


_F, _G, _M, _A = CarbType.FRUCTOSE, CarbType.GLUCOSE, CarbType.MIXED, CarbType.ANY
_RULES: Dict[Protocol, Dict[Phase, Tuple[CarbType, ProteinStatus]]] = {
    Protocol.EXTREME_CUT: {
        Phase.TRAIN: (_F, ProteinStatus.FULL),
        Phase.LOAD: (_F, ProteinStatus.BLOCKED),
        Phase.CUT: (_F, ProteinStatus.COLLAGEN_ONLY),
        Phase.COMPETE: (_G, ProteinStatus.BLOCKED),
        Phase.RECOVER: (_A, ProteinStatus.RECOVERY),
    },
    Protocol.RAPID_CUT: {
        Phase.TRAIN: (_F, ProteinStatus.FULL),
        Phase.LOAD: (_F, ProteinStatus.COLLAGEN_ONLY),
        Phase.CUT: (_G, ProteinStatus.COLLAGEN_SEAFOOD),
        Phase.COMPETE: (_G, ProteinStatus.BLOCKED),
        Phase.RECOVER: (_A, ProteinStatus.RECOVERY),
    },
    Protocol.OPTIMAL_CUT: {
        Phase.TRAIN: (_M, ProteinStatus.FULL),
        Phase.LOAD: (_M, ProteinStatus.FULL),
        Phase.CUT: (_G, ProteinStatus.FULL),
        Phase.COMPETE: (_G, ProteinStatus.BLOCKED),
        Phase.RECOVER: (_A, ProteinStatus.RECOVERY),
    },
    Protocol.GAIN: {
        Phase.TRAIN: (_M, ProteinStatus.FULL),
        Phase.LOAD: (_M, ProteinStatus.FULL),
        Phase.CUT: (_G, ProteinStatus.FULL),
        Phase.COMPETE: (_G, ProteinStatus.FULL),
        Phase.RECOVER: (_A, ProteinStatus.RECOVERY),
    },
}


def carb_and_protein_rules(protocol: Protocol, phase: Phase) -> Tuple[CarbType, ProteinStatus]:
    try:
        return _RULES[protocol][phase]
    except KeyError:
        raise UnknownProtocolError(f"No fuel rules for {protocol!r} in phase {phase!r}") from None


def _carb_table(carb_type: CarbType, phase: Phase) -> Tuple[CarbFood, ...]:
    if carb_type is CarbType.FRUCTOSE:
        return food_data.HIGH_FRUCTOSE
    if carb_type is CarbType.GLUCOSE:
        return food_data.ZERO_FIBER if phase in (Phase.CUT, Phase.COMPETE) else food_data.HIGH_GLUCOSE
    if carb_type is CarbType.MIXED:
        return food_data.BALANCED
    return food_data.RECOVERY


def _protein_picks(status: ProteinStatus) -> List[ProteinFood]:
    if status is ProteinStatus.BLOCKED:
        return []
    if status is ProteinStatus.COLLAGEN_ONLY:
        return [p for p in food_data.PROTEINS if p.collagen]
    if status is ProteinStatus.COLLAGEN_SEAFOOD:
        return [p for p in food_data.PROTEINS if p.collagen or p.seafood]
    if status is ProteinStatus.RECOVERY:
        return [p for p in food_data.PROTEINS if p.recovery]
    return list(food_data.PROTEINS)


def _avoid_list(phase: Phase) -> List[AvoidFood]:
    if phase is Phase.RECOVER:
        return []
    windows = {CutWindow.ANY}
    if phase is Phase.LOAD:
        windows.add(CutWindow.LOAD)
    elif phase in (Phase.CUT, Phase.COMPETE):
        windows.add(CutWindow.CUT)
    return [a for a in food_data.AVOID if a.window in windows]


def group_by_timing(foods) -> List[TimingGroup]:
    """Group foods by their timing tag, keeping first-seen order."""
    groups: Dict[str, TimingGroup] = {}
    for food in foods:
        key = food.timing or "Anytime"
        if key not in groups:
            groups[key] = TimingGroup(key)
        groups[key].foods.append(food)
    return list(groups.values())


def select_fuel_guide(
    protocol: Protocol,
    phase: Phase,
    limits: MacroLimits,
    between_matches: bool = False,
) -> Optional[FuelGuide]:
    """Today's fuel guide, or None for SPAR protocols (slice tracking only)."""
    protocol = Protocol.parse(protocol)
    if protocol.is_spar:
        return None

    carb_type, protein_status = carb_and_protein_rules(protocol, phase)
    if limits.protein_max <= 0:
        protein_status = ProteinStatus.BLOCKED

    guide = FuelGuide(
        carb_type=carb_type,
        protein_status=protein_status,
        proteins=_protein_picks(protein_status)[:4],
        avoid=_avoid_list(phase),
    )

    if phase is Phase.COMPETE and between_matches:
        guide.tournament = group_by_timing(food_data.TOURNAMENT)
        return guide

    if phase is Phase.RECOVER:
        guide.recovery = list(food_data.RECOVERY)
        carbs = guide.recovery
    else:
        carbs = list(_carb_table(carb_type, phase))

    if limits.carbs_max > 0:
        guide.morning_carbs = carbs[:5]
        guide.evening_carbs = carbs[5:10]
    return guide
