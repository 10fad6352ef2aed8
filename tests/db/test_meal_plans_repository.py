from __future__ import annotations

from datetime import date

import pytest

from larder.db.meal_plans import (
    delete_meal_plan,
    list_meal_plans,
    replace_meal_plans,
    save_meal_plan,
)
from larder.db.recipes import create_recipe, update_recipe
from larder.models.plan import MealPlan


def _recipe(name: str = "Stir-Fry"):
    return create_recipe(name=name, ingredients=[{"name": "Rice", "quantity": 100, "unit": "g"}])


def test_save_meal_plan_upserts_on_date_and_recipe():
    recipe = _recipe()

    first = save_meal_plan(plan_date=date(2024, 1, 8), recipe=recipe)
    second = save_meal_plan(plan_date=date(2024, 1, 8), recipe=recipe, servings=4)

    assert first.id == second.id == f"2024-01-08-{recipe.id}"
    plans = list_meal_plans()
    assert len(plans) == 1
    assert plans[0].servings == 4


def test_meal_plans_list_by_date():
    recipe = _recipe()
    save_meal_plan(plan_date=date(2024, 1, 10), recipe=recipe)
    save_meal_plan(plan_date=date(2024, 1, 8), recipe=recipe)

    assert [plan.date for plan in list_meal_plans()] == [date(2024, 1, 8), date(2024, 1, 10)]


def test_plan_keeps_recipe_snapshot_after_recipe_edit():
    recipe = _recipe()
    save_meal_plan(plan_date=date(2024, 1, 8), recipe=recipe)

    update_recipe(recipe.id, name="Renamed")

    assert list_meal_plans()[0].recipe.name == "Stir-Fry"


def test_replace_meal_plans_swaps_whole_collection():
    old_recipe = _recipe("Old")
    new_recipe = _recipe("New")
    save_meal_plan(plan_date=date(2023, 12, 4), recipe=old_recipe)
    replacement = [
        MealPlan(
            id=f"2024-01-08-{new_recipe.id}",
            date=date(2024, 1, 8),
            recipe=new_recipe,
            servings=2,
        )
    ]

    replace_meal_plans(replacement)

    assert list_meal_plans() == replacement


def test_delete_meal_plan():
    plan = save_meal_plan(plan_date=date(2024, 1, 8), recipe=_recipe())

    delete_meal_plan(plan.id)

    assert list_meal_plans() == []
    with pytest.raises(ValueError, match="not found"):
        delete_meal_plan(plan.id)
