"""State containers the planning services read from and write back to."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Protocol, Sequence, TypeVar

from pydantic import BaseModel

from larder.db.inventory import list_inventory
from larder.db.meal_plans import list_meal_plans, replace_meal_plans
from larder.db.recipes import list_recipes
from larder.db.shopping_list import list_shopping_items, replace_shopping_list
from larder.models.inventory import Ingredient
from larder.models.plan import MealPlan
from larder.models.recipe import Recipe
from larder.models.shopping import ShoppingItem
from larder.models.snapshot import KitchenSnapshot

ModelT = TypeVar("ModelT", bound=BaseModel)


class KitchenStore(Protocol):
    """Read access to every collection plus wholesale replacement of generated ones."""

    def ingredients(self) -> List[Ingredient]: ...

    def recipes(self) -> List[Recipe]: ...

    def meal_plans(self) -> List[MealPlan]: ...

    def shopping_list(self) -> List[ShoppingItem]: ...

    def replace_meal_plans(self, plans: Sequence[MealPlan]) -> None: ...

    def replace_shopping_list(self, items: Sequence[ShoppingItem]) -> None: ...


def _update_by_id(items: List[ModelT], item_id: str, changes: dict[str, Any], kind: str) -> ModelT:
    for index, item in enumerate(items):
        if getattr(item, "id") == item_id:
            updated = item.model_copy(update=changes)
            items[index] = updated
            return updated
    raise ValueError(f"{kind} {item_id} not found")


def _remove_by_id(items: List[ModelT], item_id: str, kind: str) -> None:
    for index, item in enumerate(items):
        if getattr(item, "id") == item_id:
            del items[index]
            return
    raise ValueError(f"{kind} {item_id} not found")


@dataclass
class InMemoryStore:
    """Process-local kitchen state, e.g. for the CLI or tests."""

    _ingredients: List[Ingredient] = field(init=False, default_factory=list)
    _recipes: List[Recipe] = field(init=False, default_factory=list)
    _meal_plans: List[MealPlan] = field(init=False, default_factory=list)
    _shopping_list: List[ShoppingItem] = field(init=False, default_factory=list)

    @classmethod
    def from_snapshot(cls, snapshot: KitchenSnapshot) -> "InMemoryStore":
        store = cls()
        store._ingredients = list(snapshot.ingredients)
        store._recipes = list(snapshot.recipes)
        store._meal_plans = list(snapshot.meal_plans)
        store._shopping_list = list(snapshot.shopping_list)
        return store

    def snapshot(self) -> KitchenSnapshot:
        return KitchenSnapshot(
            ingredients=list(self._ingredients),
            recipes=list(self._recipes),
            meal_plans=list(self._meal_plans),
            shopping_list=list(self._shopping_list),
        )

    def ingredients(self) -> List[Ingredient]:
        return list(self._ingredients)

    def recipes(self) -> List[Recipe]:
        return list(self._recipes)

    def meal_plans(self) -> List[MealPlan]:
        return list(self._meal_plans)

    def shopping_list(self) -> List[ShoppingItem]:
        return list(self._shopping_list)

    def replace_meal_plans(self, plans: Sequence[MealPlan]) -> None:
        self._meal_plans = list(plans)

    def replace_shopping_list(self, items: Sequence[ShoppingItem]) -> None:
        self._shopping_list = list(items)

    def add_ingredient(self, ingredient: Ingredient) -> None:
        self._ingredients.append(ingredient)

    def update_ingredient(self, ingredient_id: str, **changes: Any) -> Ingredient:
        return _update_by_id(self._ingredients, ingredient_id, changes, "Inventory item")

    def remove_ingredient(self, ingredient_id: str) -> None:
        _remove_by_id(self._ingredients, ingredient_id, "Inventory item")

    def add_recipe(self, recipe: Recipe) -> None:
        self._recipes.append(recipe)

    def remove_recipe(self, recipe_id: str) -> None:
        _remove_by_id(self._recipes, recipe_id, "Recipe")

    def remove_meal_plan(self, plan_id: str) -> None:
        _remove_by_id(self._meal_plans, plan_id, "Meal plan")

    def add_shopping_item(self, item: ShoppingItem) -> None:
        self._shopping_list.append(item)

    def update_shopping_item(self, item_id: str, **changes: Any) -> ShoppingItem:
        return _update_by_id(self._shopping_list, item_id, changes, "Shopping list item")


class DatabaseStore:
    """Kitchen state persisted through the SQLAlchemy repositories."""

    def ingredients(self) -> List[Ingredient]:
        return list_inventory()

    def recipes(self) -> List[Recipe]:
        return list_recipes()

    def meal_plans(self) -> List[MealPlan]:
        return list_meal_plans()

    def shopping_list(self) -> List[ShoppingItem]:
        return list_shopping_items()

    def replace_meal_plans(self, plans: Sequence[MealPlan]) -> None:
        replace_meal_plans(plans)

    def replace_shopping_list(self, items: Sequence[ShoppingItem]) -> None:
        replace_shopping_list(items)


__all__ = ["KitchenStore", "InMemoryStore", "DatabaseStore"]
