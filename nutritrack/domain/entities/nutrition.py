"""Domain entity describing nutrition facts for a food query."""

from dataclasses import dataclass


@dataclass
class NutritionFacts:
    food_name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    serving_qty: float
    serving_unit: str
    serving_weight_grams: float


__all__ = ["NutritionFacts"]
