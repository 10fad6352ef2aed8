"""Weekly meal plan generation tests."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from larder.models.inventory import Ingredient, IngredientCategory
from larder.models.recipe import Recipe, RecipeIngredient
from larder.planner.utils import weekday_dates
from larder.planner.weekly import generate_weekly_plan, meal_plan_id, rank_recipes

MONDAY = date(2024, 1, 8)
WEEKDAYS = [MONDAY + timedelta(days=offset) for offset in range(5)]


def _ingredient(name: str, quantity: float = 1000) -> Ingredient:
    return Ingredient(
        id=name.lower(),
        name=name,
        categories=[IngredientCategory.PANTRY],
        quantity=quantity,
        unit="g",
        expiry_date=date(2024, 6, 1),
        added_date=date(2024, 1, 1),
    )


def _recipe(recipe_id: str, *names: str) -> Recipe:
    return Recipe(
        id=recipe_id,
        name=recipe_id.title(),
        ingredients=[RecipeIngredient(name=name, quantity=100, unit="g") for name in names],
        servings=4,
    )


def test_picks_best_scoring_recipes_without_repeats():
    inventory = [_ingredient("Rice"), _ingredient("Chicken"), _ingredient("Broccoli")]
    recipes = [
        _recipe("partial", "Rice", "Saffron"),
        _recipe("full", "Rice", "Chicken", "Broccoli"),
        _recipe("two", "Chicken", "Broccoli"),
        _recipe("one", "Broccoli"),
        _recipe("another", "Rice", "Chicken"),
        _recipe("last", "Chicken", "Leeks"),
    ]

    plans = generate_weekly_plan(recipes, inventory, WEEKDAYS)

    assert len(plans) == 5
    assert [plan.date for plan in plans] == WEEKDAYS
    assert plans[0].recipe.id == "full"
    recipe_ids = [plan.recipe.id for plan in plans]
    assert len(set(recipe_ids)) == len(recipe_ids)


def test_equal_scores_keep_catalog_order():
    inventory = [_ingredient("Rice")]
    recipes = [_recipe("first", "Rice"), _recipe("second", "Rice"), _recipe("third", "Rice")]

    ranked = rank_recipes(recipes, inventory)

    assert [entry.recipe.id for entry in ranked] == ["first", "second", "third"]
    plans = generate_weekly_plan(recipes, inventory, WEEKDAYS[:3])
    assert [plan.recipe.id for plan in plans] == ["first", "second", "third"]


def test_fallback_wraps_ranked_list_by_position():
    inventory = [_ingredient("Rice")]
    recipes = [
        _recipe("unstocked-a", "Saffron"),
        _recipe("stocked", "Rice"),
        _recipe("unstocked-b", "Truffle"),
    ]

    plans = generate_weekly_plan(recipes, inventory, WEEKDAYS)

    # ranked order: stocked, unstocked-a, unstocked-b
    assert [plan.recipe.id for plan in plans] == [
        "stocked",
        "unstocked-a",
        "unstocked-b",
        "stocked",
        "unstocked-a",
    ]


def test_nothing_scoring_falls_back_for_every_day():
    recipes = [_recipe("a", "Saffron"), _recipe("b", "Truffle")]

    plans = generate_weekly_plan(recipes, [], WEEKDAYS)

    assert [plan.recipe.id for plan in plans] == ["a", "b", "a", "b", "a"]


def test_empty_catalog_plans_nothing():
    assert generate_weekly_plan([], [_ingredient("Rice")], WEEKDAYS) == []


def test_plans_use_fixed_servings_and_date_based_ids():
    recipe = _recipe("stir-fry", "Rice")

    plans = generate_weekly_plan([recipe], [_ingredient("Rice")], WEEKDAYS[:1])

    assert plans[0].servings == 2
    assert plans[0].id == "2024-01-08-stir-fry"
    assert meal_plan_id(MONDAY, "stir-fry") == plans[0].id


def test_plan_holds_a_copy_of_the_recipe():
    recipe = _recipe("stir-fry", "Rice")
    recipes = [recipe]

    plans = generate_weekly_plan(recipes, [_ingredient("Rice")], WEEKDAYS[:1])

    assert plans[0].recipe == recipe
    assert plans[0].recipe is not recipe
    assert plans[0].recipe.ingredients[0] is not recipe.ingredients[0]
    assert recipes == [recipe]


def test_weekend_dates_are_rejected():
    saturday = MONDAY + timedelta(days=5)

    with pytest.raises(ValueError, match="Weekend"):
        generate_weekly_plan([_recipe("a", "Rice")], [], [MONDAY, saturday])


def test_more_than_five_dates_are_rejected():
    dates = WEEKDAYS + [MONDAY + timedelta(days=7)]

    with pytest.raises(ValueError, match="At most 5"):
        generate_weekly_plan([_recipe("a", "Rice")], [], dates)


def test_generates_for_calendar_week():
    dates = weekday_dates(0, date(2024, 1, 10))

    plans = generate_weekly_plan([_recipe("a", "Rice")], [_ingredient("Rice")], dates)

    assert [plan.date for plan in plans] == WEEKDAYS
    assert all(plan.date.weekday() < 5 for plan in plans)
