"""Store and service-layer tests."""

from __future__ import annotations

from datetime import date

import pytest
from prometheus_client import REGISTRY

from larder.models.inventory import Ingredient, IngredientCategory
from larder.models.recipe import Recipe, RecipeIngredient
from larder.models.shopping import ShoppingItem
from larder.services import plan_week, refresh_shopping_list
from larder.store import DatabaseStore, InMemoryStore

WEDNESDAY = date(2024, 1, 10)


def _ingredient(name: str, quantity: float) -> Ingredient:
    return Ingredient(
        id=name.lower(),
        name=name,
        categories=[IngredientCategory.GRAINS],
        quantity=quantity,
        unit="g",
        expiry_date=date(2024, 6, 1),
        added_date=date(2024, 1, 1),
    )


def _recipe(recipe_id: str, name: str, quantity: float) -> Recipe:
    return Recipe(
        id=recipe_id,
        name=recipe_id.title(),
        ingredients=[RecipeIngredient(name=name, quantity=quantity, unit="g")],
    )


def _store() -> InMemoryStore:
    store = InMemoryStore()
    store.add_ingredient(_ingredient("Rice", 500))
    store.add_recipe(_recipe("rice-bowl", "Rice", 200))
    store.add_recipe(_recipe("pasta-bake", "Pasta", 150))
    return store


def _sample(name: str, labels: dict[str, str] | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


def test_plan_week_replaces_all_existing_plans():
    store = _store()
    plan_week(store, 1, WEDNESDAY)

    plans = plan_week(store, 0, WEDNESDAY)

    assert store.meal_plans() == plans
    assert [plan.date for plan in plans] == [date(2024, 1, day) for day in range(8, 13)]
    assert plans[0].recipe.id == "rice-bowl"


def test_plan_week_counts_generated_plans():
    before = _sample("larder_meal_plans_generated_total")

    plan_week(_store(), 0, WEDNESDAY)

    assert _sample("larder_meal_plans_generated_total") == before + 5


def test_refresh_discards_completed_flags():
    store = _store()
    store.replace_meal_plans(plan_week(store, 0, WEDNESDAY)[:1])
    first = refresh_shopping_list(store)
    for item in first:
        store.update_shopping_item(item.id, completed=True)
    assert all(item.completed for item in store.shopping_list())

    second = refresh_shopping_list(store)

    assert store.shopping_list() == second
    assert all(item.completed is False for item in second)
    assert {item.id for item in first}.isdisjoint(item.id for item in second)
    assert [item.name for item in second] == [item.name for item in first]


def test_refresh_records_items_by_source():
    store = _store()
    store.replace_meal_plans(plan_week(store, 0, WEDNESDAY))
    shortfall_before = _sample("larder_shopping_items_generated_total", {"source": "shortfall"})
    essential_before = _sample("larder_shopping_items_generated_total", {"source": "essential"})

    items = refresh_shopping_list(store)

    shortfalls = _sample("larder_shopping_items_generated_total", {"source": "shortfall"})
    essentials = _sample("larder_shopping_items_generated_total", {"source": "essential"})
    assert shortfalls - shortfall_before + essentials - essential_before == len(items)
    assert essentials - essential_before == 3


def test_in_memory_store_updates_and_removals():
    store = _store()
    item = ShoppingItem(id="milk", name="Milk", quantity=1, unit="l")
    store.add_shopping_item(item)

    updated = store.update_shopping_item("milk", quantity=2)

    assert updated.quantity == 2
    assert store.shopping_list() == [updated]
    store.update_ingredient("rice", quantity=50)
    assert store.ingredients()[0].quantity == 50
    store.remove_recipe("pasta-bake")
    assert [recipe.id for recipe in store.recipes()] == ["rice-bowl"]

    with pytest.raises(ValueError, match="not found"):
        store.remove_ingredient("missing")
    with pytest.raises(ValueError, match="not found"):
        store.update_shopping_item("missing", completed=True)


def test_in_memory_store_returns_copies_of_collections():
    store = _store()

    store.ingredients().clear()

    assert len(store.ingredients()) == 1


def test_snapshot_round_trip_through_store():
    store = _store()
    plan_week(store, 0, WEDNESDAY)

    restored = InMemoryStore.from_snapshot(store.snapshot())

    assert restored.meal_plans() == store.meal_plans()
    assert restored.recipes() == store.recipes()


def test_database_store_persists_generated_collections():
    from larder.db.inventory import create_inventory_item
    from larder.db.recipes import create_recipe

    create_inventory_item(
        name="Rice",
        categories=[IngredientCategory.GRAINS],
        quantity=500,
        unit="g",
        expiry_date=date(2024, 6, 1),
    )
    create_recipe(name="Rice Bowl", ingredients=[{"name": "Rice", "quantity": 200, "unit": "g"}])
    store = DatabaseStore()

    plans = plan_week(store, 0, WEDNESDAY)
    items = refresh_shopping_list(store)

    assert store.meal_plans() == plans
    assert store.shopping_list() == items
    assert [item.name for item in items] == ["Rice", "Olive Oil", "Salt", "Black Pepper"]


def test_in_memory_store_is_built_empty_or_from_a_snapshot():
    with pytest.raises(TypeError):
        InMemoryStore(_ingredients=[_ingredient("Rice", 1)])

    restored = InMemoryStore.from_snapshot(_store().snapshot())

    assert [item.name for item in restored.ingredients()] == ["Rice"]
    assert InMemoryStore().snapshot().ingredients == []
