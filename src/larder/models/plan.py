"""Meal plan and recipe evaluation models."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from larder.models.recipe import Recipe, RecipeIngredient


class MealPlan(BaseModel):
    """Dinner scheduled for a date, holding a snapshot of the chosen recipe."""

    id: str
    date: date
    recipe: Recipe
    servings: int = Field(ge=1)

    model_config = ConfigDict(frozen=True)


class RecipeScore(BaseModel):
    """Inventory-availability score for a single recipe."""

    score: float = Field(ge=0)
    available_count: int = Field(ge=0)
    total_count: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)


class Compatibility(BaseModel):
    """How much of a recipe can be cooked from the current inventory."""

    available_count: int = Field(ge=0)
    total_count: int = Field(ge=0)
    percentage: float = Field(ge=0, le=100)
    can_make: bool
    missing: list[RecipeIngredient] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


__all__ = ["Compatibility", "MealPlan", "RecipeScore"]
