"""Greedy weekly dinner plan generation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Sequence, Set

from larder.models.inventory import Ingredient
from larder.models.plan import MealPlan
from larder.models.recipe import Recipe

from .scoring import score_recipe

logger = logging.getLogger(__name__)

PLANNED_SERVINGS = 2
MAX_PLANNED_DAYS = 5


@dataclass(frozen=True)
class ScoredRecipe:
    """Recipe paired with its inventory score."""

    recipe: Recipe
    score: float
    available_count: int
    total_count: int


def rank_recipes(recipes: Iterable[Recipe], inventory: Sequence[Ingredient]) -> List[ScoredRecipe]:
    """Score every recipe and order them best first, keeping catalog order on ties."""
    scored: List[ScoredRecipe] = []
    for recipe in recipes:
        result = score_recipe(recipe, inventory)
        scored.append(
            ScoredRecipe(
                recipe=recipe,
                score=result.score,
                available_count=result.available_count,
                total_count=result.total_count,
            )
        )
    # list.sort is stable, so equal scores keep their catalog order.
    scored.sort(key=lambda entry: entry.score, reverse=True)
    return scored


def meal_plan_id(plan_date: date, recipe_id: str) -> str:
    return f"{plan_date.isoformat()}-{recipe_id}"


def _validate_dates(weekday_dates: Sequence[date]) -> None:
    if len(weekday_dates) > MAX_PLANNED_DAYS:
        raise ValueError(
            f"At most {MAX_PLANNED_DAYS} weekday dates can be planned, got {len(weekday_dates)}"
        )
    weekend = [day.isoformat() for day in weekday_dates if day.weekday() >= 5]
    if weekend:
        raise ValueError(f"Weekend dates are never planned: {', '.join(weekend)}")


def _next_unused(ranked: Sequence[ScoredRecipe], used: Set[str]) -> Optional[ScoredRecipe]:
    for entry in ranked:
        if entry.recipe.id not in used and entry.score > 0:
            return entry
    return None


def generate_weekly_plan(
    recipes: Sequence[Recipe],
    inventory: Sequence[Ingredient],
    weekday_dates: Sequence[date],
) -> List[MealPlan]:
    """Choose one dinner per weekday, favouring recipes the inventory covers.

    Each date takes the best-scoring recipe not yet used this week. Once no
    unused recipe scores above zero, dates fall back to the ranked list by
    position, which may repeat recipes. An empty catalog plans nothing.
    """
    _validate_dates(weekday_dates)
    ranked = rank_recipes(recipes, inventory)
    used: Set[str] = set()
    plans: List[MealPlan] = []

    for index, plan_date in enumerate(weekday_dates):
        choice = _next_unused(ranked, used)
        if choice is not None:
            used.add(choice.recipe.id)
        elif ranked:
            choice = ranked[index % len(ranked)]
            logger.debug(
                "No unused scoring recipe for %s; falling back to %s",
                plan_date,
                choice.recipe.name,
            )
        else:
            continue

        plans.append(
            MealPlan(
                id=meal_plan_id(plan_date, choice.recipe.id),
                date=plan_date,
                recipe=choice.recipe.model_copy(deep=True),
                servings=PLANNED_SERVINGS,
            )
        )

    logger.debug("Planned %s of %s weekday dinners", len(plans), len(weekday_dates))
    return plans
