# -*- coding: utf-8 -*-
"""
Static food reference tables for the fuel guide.

Carb ratios are fructose:glucose. Protein and avoid entries carry the cut
window they apply to; entries without one apply throughout the cut.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class CutWindow(str, Enum):
    """Part of the cut week a food rule applies to."""
    LOAD = "load"  # early week, fat-burning days
    CUT = "cut"  # final days, low-fiber
    ANY = "any"


@dataclass(frozen=True)
class CarbFood:
    name: str
    ratio: str
    serving: str
    carbs: float
    note: str = ""
    oz: Optional[float] = None  # liquids count toward water intake
    timing: Optional[str] = None


@dataclass(frozen=True)
class ProteinFood:
    name: str
    serving: str
    protein: float
    note: str = ""
    timing: str = ""
    collagen: bool = False
    seafood: bool = False
    recovery: bool = False


@dataclass(frozen=True)
class AvoidFood:
    name: str
    reason: str
    window: CutWindow = CutWindow.ANY


HIGH_FRUCTOSE: Tuple[CarbFood, ...] = (
    CarbFood("Agave syrup", "90:10", "1 Tbsp", 16, "Highest fructose"),
    CarbFood("Apple juice", "70:30", "8 oz", 28, "Fast absorption, no pulp", oz=8),
    CarbFood("Pear juice", "65:35", "8 oz", 26, "High fructose", oz=8),
    CarbFood("Grape juice", "55:45", "8 oz", 36, "Balanced", oz=8),
    CarbFood("Orange juice", "50:50", "8 oz", 26, "Vitamin C", oz=8),
    CarbFood("Apples", "65:35", "1 medium", 25, "Portable"),
    CarbFood("Pears", "65:35", "1 medium", 27, "High fructose"),
    CarbFood("Grapes", "48:52", "1 cup", 27, "Convenient"),
    CarbFood("Mango", "50:50", "1 cup", 25, "Tropical"),
    CarbFood("Watermelon", "48:52", "2 cups", 22, "Hydrating"),
    CarbFood("Bananas", "50:50", "1 medium", 27, "Energy dense"),
    CarbFood("Blueberries", "45:55", "1 cup", 21, "Antioxidants"),
    CarbFood("Honey", "50:50", "1 Tbsp", 17, "All phases"),
    CarbFood("Gummy bears", "55:45", "17 bears", 22, "Zero fiber"),
    CarbFood("Coconut water", "40:60", "8 oz", 9, "Potassium + electrolytes", oz=8),
)

HIGH_GLUCOSE: Tuple[CarbFood, ...] = (
    CarbFood("White rice", "0:100", "1 cup cooked", 45, "Primary late-week carb"),
    CarbFood("Instant rice", "0:100", "1 cup cooked", 45, "Very fast"),
    CarbFood("Potatoes (peeled)", "0:100", "1 medium", 37, "Remove skin"),
    CarbFood("Sweet potatoes (peeled)", "0:100", "1 medium", 27, "Remove skin"),
    CarbFood("Rice cakes", "0:100", "2 cakes", 14, "Zero fiber"),
    CarbFood("Cream of rice", "0:100", "1 cup cooked", 28, "Hot cereal"),
    CarbFood("Rice Krispies", "0:100", "1 cup", 26, "With honey/juice"),
    CarbFood("White bread (<1g fiber)", "0:100", "2 slices", 26, "Check label"),
    CarbFood("Sourdough", "0:100", "2 slices", 30, "Easy digestion"),
    CarbFood("Maltodextrin", "0:100", "40g", 38, "Fast glucose, zero fiber"),
)

BALANCED: Tuple[CarbFood, ...] = (
    CarbFood("White rice", "0:100", "1 cup cooked", 45, "Staple"),
    CarbFood("Honey", "50:50", "2 Tbsp", 34, "Natural balance"),
    CarbFood("Ripe banana", "50:50", "1 medium", 27, "Pre-practice"),
    CarbFood("Rice cakes", "0:100", "2 cakes", 14, "Easy digestion"),
    CarbFood("Orange juice", "50:50", "8 oz", 26, "Vitamin C", oz=8),
    CarbFood("Mango", "50:50", "1 cup", 25, "Tropical"),
    CarbFood("Grapes", "48:52", "1 cup", 27, "Convenient"),
    CarbFood("Watermelon", "48:52", "2 cups", 22, "Hydrating"),
    CarbFood("Gummy bears", "55:45", "17 bears", 22, "Quick energy"),
    CarbFood("Blueberries", "45:55", "1 cup", 21, "Antioxidants"),
    CarbFood("Coconut water", "40:60", "8 oz", 9, "Potassium", oz=8),
)

ZERO_FIBER: Tuple[CarbFood, ...] = (
    CarbFood("White rice", "0:100", "1 cup", 45, "Primary carb"),
    CarbFood("Instant rice", "0:100", "1 cup", 45, "Very fast"),
    CarbFood("Potatoes (peeled)", "0:100", "1 medium", 37, "Remove skin"),
    CarbFood("Rice cakes", "0:100", "2 cakes", 14, "Zero fiber"),
    CarbFood("Cream of rice", "0:100", "1 cup", 28, "Hot cereal"),
    CarbFood("Apple juice", "70:30", "8 oz", 28, "Zero fiber", oz=8),
    CarbFood("Grape juice", "55:45", "8 oz", 36, "Zero fiber", oz=8),
    CarbFood("White bread (<1g fiber)", "0:100", "2 slices", 26, "Check label"),
    CarbFood("Sourdough", "0:100", "2 slices", 30, "Easy digestion"),
    CarbFood("Gummy bears", "55:45", "17 bears", 22, "Portable"),
    CarbFood("Dextrose powder", "0:100", "40g", 40, "No fiber"),
)

PROTEINS: Tuple[ProteinFood, ...] = (
    ProteinFood("Collagen + 5g leucine", "25-30g", 25, "Primary, preserves muscle", "All week", collagen=True),
    ProteinFood("Egg whites", "4 whites", 14, "Low fat, easy digestion", "Mid-week"),
    ProteinFood("White fish", "4 oz", 24, "Ultra lean", "Final days", seafood=True),
    ProteinFood("Shrimp", "4 oz", 24, "Zero fat", "Final days", seafood=True),
    ProteinFood("Scallops", "4 oz", 20, "Zero fat", "Final days", seafood=True),
    ProteinFood("Lean seafood", "4 oz", 22, "Performance phase", "Final days", seafood=True),
    ProteinFood("Whey isolate", "1 scoop", 25, "Fast recovery", "Post-comp", recovery=True),
    ProteinFood("Chicken breast", "4 oz", 26, "Lean protein", "Post-comp", recovery=True),
    ProteinFood("Beef/Bison", "4 oz", 26, "Iron + creatine", "Post-comp", recovery=True),
    ProteinFood("Whole eggs", "3 large", 18, "Full recovery", "Post-comp", recovery=True),
    ProteinFood("Greek yogurt", "1 cup", 17, "Recovery", "Rest day", recovery=True),
    ProteinFood("Casein", "1 scoop", 24, "Overnight recovery", "Rest day PM", recovery=True),
)

AVOID: Tuple[AvoidFood, ...] = (
    AvoidFood("Whey protein", "Blocks fat burning", CutWindow.LOAD),
    AvoidFood("Casein protein", "Blocks fat burning", CutWindow.LOAD),
    AvoidFood("Chicken/Poultry", "Blocks fat burning", CutWindow.LOAD),
    AvoidFood("Beef", "Blocks fat burning", CutWindow.LOAD),
    AvoidFood("Eggs", "Blocks fat burning", CutWindow.LOAD),
    AvoidFood("Dairy", "Blocks fat burning", CutWindow.LOAD),
    AvoidFood("Vegetables", "Fiber adds gut weight", CutWindow.CUT),
    AvoidFood("Fruits", "Fiber adds gut weight", CutWindow.CUT),
    AvoidFood("Whole grains", "Fiber adds gut weight", CutWindow.CUT),
    AvoidFood("Beans/legumes", "High fiber + gas", CutWindow.CUT),
    AvoidFood("Nuts and seeds", "Fiber + fat", CutWindow.CUT),
    AvoidFood("Spicy foods", "Can cause GI issues", CutWindow.CUT),
    AvoidFood("Large meals", "Gut weight", CutWindow.CUT),
    AvoidFood("Fatty meats", "Slow digestion"),
    AvoidFood("Fried foods", "Slow digestion, bloating"),
    AvoidFood("Carbonated drinks", "Gas and bloating"),
    AvoidFood("Alcohol", "Dehydrates, empty calories"),
)

RECOVERY: Tuple[CarbFood, ...] = (
    CarbFood("Whole eggs", "N/A", "3-4 eggs", 2, "Full recovery protein + fats"),
    CarbFood("Chicken breast", "N/A", "6-8 oz", 0, "Lean protein rebuild"),
    CarbFood("Greek yogurt", "N/A", "1-2 cups", 8, "Protein + probiotics"),
    CarbFood("White rice", "0:100", "2-3 cups", 90, "Glycogen refill"),
    CarbFood("Potatoes", "0:100", "2 medium", 74, "Potassium + carbs"),
    CarbFood("Pasta", "0:100", "2 cups cooked", 86, "Glycogen loading"),
    CarbFood("Bread", "0:100", "4 slices", 52, "Easy carbs"),
    CarbFood("Fruit (all types)", "varies", "2-3 servings", 45, "Vitamins + fiber OK today"),
    CarbFood("Vegetables", "N/A", "unlimited", 10, "Fiber OK, gut reset"),
    CarbFood("Oatmeal", "0:100", "1 cup dry", 54, "Slow carbs for recovery"),
    CarbFood("Casein shake", "N/A", "1 scoop", 3, "Before bed, overnight recovery"),
)

TOURNAMENT: Tuple[CarbFood, ...] = (
    CarbFood("Electrolyte drink", "45:55", "16-20 oz", 21, timing="0-5 min post"),
    CarbFood("Dextrose drink", "0:100", "20-30g", 25, timing="0-5 min post"),
    CarbFood("Rice cakes + honey", "25:75", "2-3 cakes", 30, timing="10-15 min"),
    CarbFood("Energy gel", "30:70", "1 packet", 22, timing="10-15 min"),
    CarbFood("Gummy bears", "55:45", "handful", 22, timing="10-15 min"),
    CarbFood("Apple juice", "70:30", "8-12 oz", 28, timing="20-30 min"),
    CarbFood("Sports drink", "45:55", "16 oz", 21, timing="20-30 min"),
    CarbFood("Small white rice", "0:100", "1/2 cup", 22, timing="40-50 min"),
    CarbFood("Ripe banana", "50:50", "1 medium", 27, timing="40-50 min"),
    CarbFood("Electrolyte sipping", "45:55", "16-24 oz/hr", 21, timing="Continuous"),
)
