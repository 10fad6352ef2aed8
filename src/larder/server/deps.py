"""Dependency definitions for the Larder API server."""

from __future__ import annotations

from datetime import date
from typing import Callable, List, Optional

from fastapi import Depends, HTTPException, Request, status

from larder.config import get_settings
from larder.db.inventory import (
    create_inventory_item,
    delete_inventory_item,
    list_inventory,
    update_inventory_item,
)
from larder.db.meal_plans import delete_meal_plan, list_meal_plans
from larder.db.recipes import create_recipe, delete_recipe, get_recipe, list_recipes, update_recipe
from larder.db.shopping_list import (
    create_shopping_item,
    delete_shopping_item,
    list_shopping_items,
    reset_shopping_list,
    update_shopping_item,
)
from larder.models.inventory import Ingredient
from larder.models.plan import MealPlan
from larder.models.recipe import Recipe
from larder.models.shopping import ShoppingItem
from larder.services import plan_week, refresh_shopping_list
from larder.store import DatabaseStore

TodayProvider = Callable[[], date]
InventoryProvider = Callable[[], List[Ingredient]]
InventoryCreator = Callable[[dict], Ingredient]
InventoryUpdater = Callable[[str, dict], Ingredient]
InventoryDeleter = Callable[[str], None]
RecipeProvider = Callable[[], List[Recipe]]
RecipeFetcher = Callable[[str], Optional[Recipe]]
RecipeCreator = Callable[[dict], Recipe]
RecipeUpdater = Callable[[str, dict], Recipe]
RecipeDeleter = Callable[[str], None]
MealPlanProvider = Callable[[], List[MealPlan]]
MealPlanDeleter = Callable[[str], None]
WeekPlanner = Callable[[int, date], List[MealPlan]]
ShoppingListProvider = Callable[[], List[ShoppingItem]]
ShoppingListCreator = Callable[[dict], ShoppingItem]
ShoppingListUpdater = Callable[[str, dict], ShoppingItem]
ShoppingListDeleter = Callable[[str], None]
ShoppingListResetter = Callable[[], None]
ShoppingListGenerator = Callable[[], List[ShoppingItem]]


def get_today_provider() -> TodayProvider:
    """Return the clock used for week selection and expiry checks."""

    return date.today


def get_inventory_provider() -> InventoryProvider:
    return list_inventory


def get_inventory_creator() -> InventoryCreator:
    return lambda payload: create_inventory_item(**payload)


def get_inventory_updater() -> InventoryUpdater:
    return lambda item_id, payload: update_inventory_item(item_id, **payload)


def get_inventory_deleter() -> InventoryDeleter:
    return lambda item_id: delete_inventory_item(item_id)


def get_recipe_provider() -> RecipeProvider:
    return list_recipes


def get_recipe_fetcher() -> RecipeFetcher:
    return get_recipe


def get_recipe_creator() -> RecipeCreator:
    return lambda payload: create_recipe(**payload)


def get_recipe_updater() -> RecipeUpdater:
    return lambda recipe_id, payload: update_recipe(recipe_id, **payload)


def get_recipe_deleter() -> RecipeDeleter:
    return lambda recipe_id: delete_recipe(recipe_id)


def get_meal_plan_provider() -> MealPlanProvider:
    return list_meal_plans


def get_meal_plan_deleter() -> MealPlanDeleter:
    return lambda plan_id: delete_meal_plan(plan_id)


def get_week_planner() -> WeekPlanner:
    """Return the weekly generator bound to the database-backed store."""

    return lambda week_offset, today: plan_week(DatabaseStore(), week_offset, today)


def get_shopping_list_provider() -> ShoppingListProvider:
    return list_shopping_items


def get_shopping_list_creator() -> ShoppingListCreator:
    return lambda payload: create_shopping_item(**payload)


def get_shopping_list_updater() -> ShoppingListUpdater:
    return lambda item_id, payload: update_shopping_item(item_id, **payload)


def get_shopping_list_deleter() -> ShoppingListDeleter:
    return lambda item_id: delete_shopping_item(item_id)


def get_shopping_list_resetter() -> ShoppingListResetter:
    return reset_shopping_list


def get_shopping_list_generator() -> ShoppingListGenerator:
    return lambda: refresh_shopping_list(DatabaseStore())


def require_api_token(
    request: Request,
    settings = Depends(get_settings),
) -> None:
    """Ensure requests carry the configured API token when required."""

    token = settings.api_token
    if not token:
        return

    auth_header = request.headers.get("Authorization")
    if auth_header and auth_header.split("Bearer ")[-1].strip() == token:
        return

    if request.headers.get("X-API-Key") == token:
        return

    if request.query_params.get("api_token") == token:
        return

    raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
