# -*- coding: utf-8 -*-
"""
Nutrition module

Competition calorie adjustment, SPAR slice targets, food categorization and
the fuel guide.
"""

from .adjuster import AdjusterPolicy, CompetitionAdjustment, Goal, Intensity, competition_adjustment
from .slices import SliceCategory, categorize, categorize_nutrients
from .spar import SparInput, SparResult, calculate_competition_slices, calculate_slices
from .fuel import FuelGuide, MacroLimits, select_fuel_guide

__all__ = [
    'AdjusterPolicy',
    'CompetitionAdjustment',
    'Goal',
    'Intensity',
    'competition_adjustment',
    'SliceCategory',
    'categorize',
    'categorize_nutrients',
    'SparInput',
    'SparResult',
    'calculate_competition_slices',
    'calculate_slices',
    'FuelGuide',
    'MacroLimits',
    'select_fuel_guide',
]
