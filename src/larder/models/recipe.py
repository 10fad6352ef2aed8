"""Recipe catalog models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Nutrition(BaseModel):
    """Nutrition facts for the recipe's stated servings."""

    calories: float = Field(default=0, ge=0)
    protein: float = Field(default=0, ge=0)
    carbs: float = Field(default=0, ge=0)
    fat: float = Field(default=0, ge=0)
    fiber: float = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)


class RecipeIngredient(BaseModel):
    """Quantity of a named ingredient a recipe calls for."""

    name: str
    quantity: float = Field(gt=0)
    unit: str

    model_config = ConfigDict(frozen=True)


class Recipe(BaseModel):
    """Recipe available for planning."""

    id: str
    name: str
    ingredients: list[RecipeIngredient] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    prep_time: int = Field(default=0, ge=0)
    cook_time: int = Field(default=0, ge=0)
    servings: int = Field(default=1, ge=1)
    nutrition: Nutrition = Field(default_factory=Nutrition)
    tags: list[str] = Field(default_factory=list)
    image: Optional[str] = Field(default=None)
    is_user_created: bool = Field(default=False)

    model_config = ConfigDict(frozen=True)

    @property
    def total_time(self) -> int:
        return self.prep_time + self.cook_time


__all__ = ["Nutrition", "Recipe", "RecipeIngredient"]
