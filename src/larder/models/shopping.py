"""Shopping list models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from larder.models.inventory import IngredientCategory


class ShoppingItem(BaseModel):
    """Single entry on the household shopping list."""

    id: str
    name: str
    quantity: float = Field(ge=0)
    unit: str
    category: IngredientCategory = Field(default=IngredientCategory.PANTRY)
    completed: bool = Field(default=False)

    model_config = ConfigDict(frozen=True)


class ShoppingProgress(BaseModel):
    """Checked-off progress across the shopping list."""

    completed: int = Field(ge=0)
    total: int = Field(ge=0)
    percentage: float = Field(ge=0, le=100)

    model_config = ConfigDict(frozen=True)


__all__ = ["ShoppingItem", "ShoppingProgress"]
