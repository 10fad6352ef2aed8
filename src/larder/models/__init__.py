"""Pydantic models defining shared data contracts."""

from larder.models.inventory import Ingredient, IngredientCategory
from larder.models.plan import Compatibility, MealPlan, RecipeScore
from larder.models.recipe import Nutrition, Recipe, RecipeIngredient
from larder.models.shopping import ShoppingItem, ShoppingProgress
from larder.models.snapshot import KitchenSnapshot

__all__ = [
    "Ingredient",
    "IngredientCategory",
    "Compatibility",
    "MealPlan",
    "RecipeScore",
    "Nutrition",
    "Recipe",
    "RecipeIngredient",
    "ShoppingItem",
    "ShoppingProgress",
    "KitchenSnapshot",
]
