"""Pantry inventory models."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class IngredientCategory(str, Enum):
    """Grocery categories shared by inventory entries and shopping items."""

    PROTEIN = "Protein"
    VEGETABLES = "Vegetables"
    FRUITS = "Fruits"
    DAIRY = "Dairy"
    GRAINS = "Grains"
    PANTRY = "Pantry"
    HERBS_SPICES = "Herbs & Spices"
    FROZEN = "Frozen"


class Ingredient(BaseModel):
    """Ingredient currently held in the household inventory."""

    id: str
    name: str
    categories: list[IngredientCategory] = Field(default_factory=list)
    quantity: float = Field(ge=0)
    unit: str
    expiry_date: date
    added_date: date
    tags: Optional[list[str]] = Field(default=None)

    model_config = ConfigDict(frozen=True)


__all__ = ["Ingredient", "IngredientCategory"]
