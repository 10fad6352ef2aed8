"""Ingredient matching, recipe scoring and plan/shopping-list generation."""

from larder.planner.freshness import (
    ExpiryStatus,
    days_until_expiry,
    expired_items,
    expiring_items,
    expiry_status,
)
from larder.planner.matching import ANCHOR_KEYWORDS, find_exact_ingredient, match_ingredient
from larder.planner.scoring import can_make, missing_ingredients, recipe_compatibility, score_recipe
from larder.planner.shopping import (
    ESSENTIALS,
    classify_ingredient,
    consolidate_needs,
    draft_shopping_list,
    generate_shopping_list,
    group_by_category,
    shopping_progress,
)
from larder.planner.utils import plans_for_dates, week_dates, weekday_dates
from larder.planner.weekly import generate_weekly_plan, rank_recipes

__all__ = [
    "ExpiryStatus",
    "days_until_expiry",
    "expired_items",
    "expiring_items",
    "expiry_status",
    "ANCHOR_KEYWORDS",
    "find_exact_ingredient",
    "match_ingredient",
    "can_make",
    "missing_ingredients",
    "recipe_compatibility",
    "score_recipe",
    "ESSENTIALS",
    "classify_ingredient",
    "consolidate_needs",
    "draft_shopping_list",
    "generate_shopping_list",
    "group_by_category",
    "shopping_progress",
    "plans_for_dates",
    "week_dates",
    "weekday_dates",
    "generate_weekly_plan",
    "rank_recipes",
]
