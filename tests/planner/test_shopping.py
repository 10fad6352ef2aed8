"""Shopping list generation tests."""

from __future__ import annotations

from datetime import date
from itertools import count

import pytest

from larder.models.inventory import Ingredient, IngredientCategory
from larder.models.plan import MealPlan
from larder.models.recipe import Recipe, RecipeIngredient
from larder.models.shopping import ShoppingItem
from larder.planner.shopping import (
    SHOPPING_CATEGORIES,
    classify_ingredient,
    consolidate_needs,
    draft_shopping_list,
    essential_items,
    generate_shopping_list,
    group_by_category,
    shopping_progress,
    shortfall_items,
)

ESSENTIAL_NAMES = ["Olive Oil", "Salt", "Black Pepper"]


def _ingredient(name: str, quantity: float, unit: str = "g") -> Ingredient:
    return Ingredient(
        id=name.lower().replace(" ", "-"),
        name=name,
        categories=[IngredientCategory.PANTRY],
        quantity=quantity,
        unit=unit,
        expiry_date=date(2024, 6, 1),
        added_date=date(2024, 1, 1),
    )


def _plan(recipe_id: str, plan_date: date, *requirements: tuple[str, float, str]) -> MealPlan:
    recipe = Recipe(
        id=recipe_id,
        name=recipe_id.title(),
        ingredients=[
            RecipeIngredient(name=name, quantity=quantity, unit=unit)
            for name, quantity, unit in requirements
        ],
        servings=4,
    )
    return MealPlan(
        id=f"{plan_date.isoformat()}-{recipe_id}",
        date=plan_date,
        recipe=recipe,
        servings=2,
    )


def _rice_plans() -> list[MealPlan]:
    return [
        _plan("bowl", date(2024, 1, 8), ("Rice", 200, "g")),
        _plan("curry", date(2024, 1, 9), ("Rice", 150, "g")),
    ]


def _sequential_ids():
    counter = count(1)
    return lambda: f"item-{next(counter)}"


def test_sufficient_stock_produces_no_item():
    items = generate_shopping_list(_rice_plans(), [_ingredient("Rice", 2000)])

    assert [item.name for item in items] == ESSENTIAL_NAMES


def test_shortfall_produces_single_consolidated_item():
    items = shortfall_items(_rice_plans(), [_ingredient("Rice", 500)])

    assert len(items) == 1
    rice = items[0]
    assert rice.name == "Rice"
    assert rice.quantity == 200
    assert rice.unit == "g"
    assert rice.category == IngredientCategory.GRAINS
    assert rice.completed is False


def test_needs_scale_by_plan_servings_and_merge_ignoring_case():
    plans = [
        _plan("a", date(2024, 1, 8), ("Chicken Breast", 250, "g")),
        _plan("b", date(2024, 1, 9), ("chicken breast", 100, "oz")),
    ]

    needs = consolidate_needs(plans)

    assert len(needs) == 1
    assert needs[0].name == "Chicken Breast"
    assert needs[0].unit == "g"
    assert needs[0].needed == pytest.approx(700)


def test_stock_lookup_uses_exact_name_only():
    plans = [_plan("bowl", date(2024, 1, 8), ("Rice", 200, "g"))]

    items = shortfall_items(plans, [_ingredient("Jasmine Rice", 5000)])

    assert [(item.name, item.quantity) for item in items] == [("Rice", 400)]


def test_fractional_shortfall_rounds_up():
    plans = [_plan("tea", date(2024, 1, 8), ("Lemon", 1.25, "piece"))]

    items = shortfall_items(plans, [])

    assert items[0].quantity == 3


@pytest.mark.parametrize(
    "name, category",
    [
        ("Chicken Stock", IngredientCategory.PROTEIN),
        ("Salmon Fillet", IngredientCategory.PROTEIN),
        ("Bell Pepper", IngredientCategory.VEGETABLES),
        ("Red Onion", IngredientCategory.VEGETABLES),
        ("Strawberry", IngredientCategory.FRUITS),
        ("Greek Yogurt", IngredientCategory.DAIRY),
        ("Whole Wheat Pasta", IngredientCategory.GRAINS),
        ("Peanut Oil", IngredientCategory.PANTRY),
        ("Flour", IngredientCategory.PANTRY),
        ("Black Pepper", IngredientCategory.VEGETABLES),
    ],
)
def test_classify_ingredient(name, category):
    assert classify_ingredient(name) == category


def test_empty_plans_yield_only_essentials():
    items = generate_shopping_list([], [], id_factory=_sequential_ids())

    assert [(item.id, item.name, item.quantity, item.unit, item.category) for item in items] == [
        ("item-1", "Olive Oil", 1, "bottle", IngredientCategory.PANTRY),
        ("item-2", "Salt", 1, "container", IngredientCategory.PANTRY),
        ("item-3", "Black Pepper", 1, "container", IngredientCategory.HERBS_SPICES),
    ]


def test_essentials_skip_names_found_in_inventory():
    inventory = [_ingredient("Extra Virgin Olive Oil", 1, "bottle"), _ingredient("sea salt", 1)]

    items = essential_items(inventory, [])

    assert [item.name for item in items] == ["Black Pepper"]


def test_essentials_are_not_duplicated_by_shortfall_items():
    plans = [_plan("steak", date(2024, 1, 8), ("Black Pepper", 1, "container"))]

    items = generate_shopping_list(plans, [])

    names = [item.name for item in items]
    assert names.count("Black Pepper") == 1
    assert names == ["Black Pepper", "Olive Oil", "Salt"]


def test_generation_does_not_mutate_inputs():
    plans = _rice_plans()
    inventory = [_ingredient("Rice", 500)]
    before = [plan.model_copy(deep=True) for plan in plans]

    generate_shopping_list(plans, inventory)

    assert plans == before
    assert inventory[0].quantity == 500


def test_shopping_progress():
    items = [
        ShoppingItem(id=str(index), name=f"item {index}", quantity=1, unit="piece")
        for index in range(4)
    ]
    items[0] = items[0].model_copy(update={"completed": True})

    progress = shopping_progress(items)

    assert (progress.completed, progress.total, progress.percentage) == (1, 4, 25.0)
    assert shopping_progress([]).percentage == 0


def test_group_by_category_lists_every_category_in_order():
    peas = ShoppingItem(
        id="1", name="Peas", quantity=1, unit="bag", category=IngredientCategory.FROZEN
    )
    rice = ShoppingItem(
        id="2", name="Rice", quantity=1, unit="bag", category=IngredientCategory.GRAINS
    )

    grouped = group_by_category([peas, rice])

    assert list(grouped)[: len(SHOPPING_CATEGORIES)] == list(SHOPPING_CATEGORIES)
    assert grouped[IngredientCategory.GRAINS] == [rice]
    assert grouped[IngredientCategory.FROZEN] == [peas]
    assert grouped[IngredientCategory.PROTEIN] == []


def test_draft_keeps_shortfalls_and_essentials_apart():
    draft = draft_shopping_list(
        _rice_plans(), [_ingredient("Rice", 500)], id_factory=_sequential_ids()
    )

    assert [item.name for item in draft.shortfalls] == ["Rice"]
    assert [item.name for item in draft.essentials] == ESSENTIAL_NAMES
    assert draft.items == draft.shortfalls + draft.essentials
    assert [item.id for item in draft.items] == ["item-1", "item-2", "item-3", "item-4"]
