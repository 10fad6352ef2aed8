"""Whole-kitchen snapshot used for offline generation."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from larder.models.inventory import Ingredient
from larder.models.plan import MealPlan
from larder.models.recipe import Recipe
from larder.models.shopping import ShoppingItem


class KitchenSnapshot(BaseModel):
    """Point-in-time copy of every collection the planner reads."""

    ingredients: list[Ingredient] = Field(default_factory=list)
    recipes: list[Recipe] = Field(default_factory=list)
    meal_plans: list[MealPlan] = Field(default_factory=list)
    shopping_list: list[ShoppingItem] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


__all__ = ["KitchenSnapshot"]
