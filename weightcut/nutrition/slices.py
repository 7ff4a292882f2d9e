# -*- coding: utf-8 -*-
"""Food slice categorizer: macro profile -> SPAR portion category."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional

from ..validation import require_non_negative


class SliceCategory(str, Enum):
    PROTEIN = "protein"
    CARB = "carb"
    VEG = "veg"
    FRUIT = "fruit"
    FAT = "fat"
    NONE = "none"


def categorize(
    calories: Optional[float],
    protein: Optional[float],
    carbs: Optional[float],
    fat: Optional[float],
    fiber: Optional[float],
    category_hint: Optional[str] = None,
) -> SliceCategory:
    """
    Assign a food to a slice category.

    Rules run in order and the first match wins, so existing categorized
    data keeps its category. Missing nutrient fields count as 0; NaN or
    negative values raise InvalidInputError.
    """
    calories = require_non_negative(calories, "calories", missing_as_zero=True)
    protein = require_non_negative(protein, "protein", missing_as_zero=True)
    carbs = require_non_negative(carbs, "carbs", missing_as_zero=True)
    fat = require_non_negative(fat, "fat", missing_as_zero=True)
    fiber = require_non_negative(fiber, "fiber", missing_as_zero=True)

    if calories <= 0 and protein <= 0:
        return SliceCategory.NONE

    hint = (category_hint or "").lower()
    if "fruit" in hint and "baby" not in hint:
        return SliceCategory.FRUIT
    if "vegetable" in hint:
        return SliceCategory.VEG

    if calories > 0:
        protein_pct = protein * 4 / calories
        carb_pct = carbs * 4 / calories
        fat_pct = fat * 9 / calories

        if protein_pct > 0.40:
            return SliceCategory.PROTEIN
        if fat_pct > 0.60:
            return SliceCategory.FAT
        if carb_pct > 0.40 and fiber > 3:
            return SliceCategory.VEG
        if carb_pct > 0.40:
            return SliceCategory.CARB

    return SliceCategory.NONE


def categorize_nutrients(nutrients: Mapping[str, Any], category_hint: Optional[str] = None) -> SliceCategory:
    """Categorize a food-source nutrient tuple; sugar and sodium are ignored."""
    return categorize(
        nutrients.get("calories"),
        nutrients.get("protein"),
        nutrients.get("carbs"),
        nutrients.get("fat"),
        nutrients.get("fiber"),
        category_hint if category_hint is not None else nutrients.get("category"),
    )
