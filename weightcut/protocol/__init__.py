# -*- coding: utf-8 -*-
"""
Protocol module

Phase classification, weight targets and protocol recommendations.
"""

from .models import Phase, Protocol
from .phase import PhaseInfo, classify_phase, days_until_weigh_in, describe_phase, effective_now
from .targets import (
    CutCurve,
    FlatCurve,
    LinearCurve,
    PercentPerDayCurve,
    calculate_target,
    checkpoints,
    rehydration_plan,
)
from .recommendation import (
    ProjectionRecommendation,
    SwitchAdvice,
    accept_switch,
    advise_switch,
    recommend_protocol,
)

__all__ = [
    'Phase',
    'Protocol',
    'PhaseInfo',
    'classify_phase',
    'days_until_weigh_in',
    'describe_phase',
    'effective_now',
    'CutCurve',
    'FlatCurve',
    'LinearCurve',
    'PercentPerDayCurve',
    'calculate_target',
    'checkpoints',
    'rehydration_plan',
    'ProjectionRecommendation',
    'SwitchAdvice',
    'accept_switch',
    'advise_switch',
    'recommend_protocol',
]
