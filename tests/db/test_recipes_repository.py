from __future__ import annotations

import pytest

from larder.db.recipes import create_recipe, delete_recipe, get_recipe, list_recipes, update_recipe
from larder.models.recipe import Nutrition, RecipeIngredient


def test_create_recipe_round_trips_nested_fields():
    recipe = create_recipe(
        name="Shakshuka",
        ingredients=[
            RecipeIngredient(name="Eggs", quantity=4, unit="piece"),
            {"name": "Tomato Sauce", "quantity": 400, "unit": "ml"},
        ],
        instructions=["Simmer sauce", "Crack eggs in"],
        prep_time=5,
        cook_time=20,
        servings=2,
        nutrition={"calories": 380, "protein": 22},
        tags=["vegetarian"],
    )

    stored = get_recipe(recipe.id)

    assert stored == recipe
    assert stored.is_user_created is True
    assert [item.name for item in stored.ingredients] == ["Eggs", "Tomato Sauce"]
    assert stored.nutrition == Nutrition(calories=380, protein=22)
    assert stored.total_time == 25


def test_list_recipes_in_creation_order():
    create_recipe(name="First", ingredients=[])
    create_recipe(name="Second", ingredients=[])

    assert [recipe.name for recipe in list_recipes()] == ["First", "Second"]


def test_update_recipe_fields():
    bread = {"name": "Bread", "quantity": 2, "unit": "slice"}
    recipe = create_recipe(name="Toast", ingredients=[bread])

    updated = update_recipe(
        recipe.id,
        name="Cheese Toast",
        ingredients=[bread, {"name": "Cheese", "quantity": 50, "unit": "g"}],
        tags=["quick"],
    )

    assert updated.name == "Cheese Toast"
    assert len(updated.ingredients) == 2
    assert updated.tags == ["quick"]


def test_update_recipe_rejects_unknown_fields():
    recipe = create_recipe(name="Toast", ingredients=[])

    with pytest.raises(ValueError, match="Unknown recipe field"):
        update_recipe(recipe.id, id="hijacked")


def test_delete_recipe():
    recipe = create_recipe(name="Toast", ingredients=[])

    delete_recipe(recipe.id)

    assert get_recipe(recipe.id) is None
    with pytest.raises(ValueError, match="not found"):
        delete_recipe(recipe.id)
