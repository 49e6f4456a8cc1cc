"""Schemas for nutrition lookups."""

from pydantic import BaseModel


class NutritionQuery(BaseModel):
    query: str


class NutritionFactsRead(BaseModel):
    food_name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    serving_qty: float
    serving_unit: str
    serving_weight_grams: float


__all__ = ["NutritionFactsRead", "NutritionQuery"]
