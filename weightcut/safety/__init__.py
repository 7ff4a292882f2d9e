# -*- coding: utf-8 -*-
"""Safety assessment of the current weight against today's target."""

from .assessor import SafetyAssessment, SafetyLevel, SafetyThresholds, assess_safety

__all__ = ["SafetyAssessment", "SafetyLevel", "SafetyThresholds", "assess_safety"]
