"""Shopping list generation from planned meals."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Sequence, Tuple
from uuid import uuid4

from larder.models.inventory import Ingredient, IngredientCategory
from larder.models.plan import MealPlan
from larder.models.shopping import ShoppingItem, ShoppingProgress

from .matching import find_exact_ingredient
from .utils import fold_case

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]

CATEGORY_KEYWORDS: Tuple[Tuple[Tuple[str, ...], IngredientCategory], ...] = (
    (("chicken", "beef", "fish", "salmon"), IngredientCategory.PROTEIN),
    (("pepper", "broccoli", "onion"), IngredientCategory.VEGETABLES),
    (("apple", "banana", "berry"), IngredientCategory.FRUITS),
    (("milk", "cheese", "yogurt"), IngredientCategory.DAIRY),
    (("rice", "pasta", "bread"), IngredientCategory.GRAINS),
    (("oil", "salt", "sugar"), IngredientCategory.PANTRY),
)

SHOPPING_CATEGORIES: Tuple[IngredientCategory, ...] = (
    IngredientCategory.PROTEIN,
    IngredientCategory.VEGETABLES,
    IngredientCategory.FRUITS,
    IngredientCategory.DAIRY,
    IngredientCategory.GRAINS,
    IngredientCategory.PANTRY,
    IngredientCategory.HERBS_SPICES,
)


@dataclass(frozen=True)
class Essential:
    name: str
    quantity: float
    unit: str
    category: IngredientCategory


ESSENTIALS: Tuple[Essential, ...] = (
    Essential("Olive Oil", 1, "bottle", IngredientCategory.PANTRY),
    Essential("Salt", 1, "container", IngredientCategory.PANTRY),
    Essential("Black Pepper", 1, "container", IngredientCategory.HERBS_SPICES),
)


@dataclass
class ConsolidatedNeed:
    """Total quantity of one ingredient required across planned meals."""

    name: str
    needed: float
    unit: str


@dataclass(frozen=True)
class ShoppingListDraft:
    """A generated list kept split by where each item came from."""

    shortfalls: List[ShoppingItem]
    essentials: List[ShoppingItem]

    @property
    def items(self) -> List[ShoppingItem]:
        return self.shortfalls + self.essentials


def _new_id() -> str:
    return uuid4().hex


def classify_ingredient(name: str) -> IngredientCategory:
    """Map an ingredient name to a shopping category by keyword."""
    folded = fold_case(name)
    for keywords, category in CATEGORY_KEYWORDS:
        if any(keyword in folded for keyword in keywords):
            return category
    return IngredientCategory.PANTRY


def consolidate_needs(meal_plans: Iterable[MealPlan]) -> List[ConsolidatedNeed]:
    """Sum scaled requirements per ingredient name, ignoring case.

    Quantities are scaled by the plan's servings. The first occurrence of a
    name fixes the reported name and unit.
    """
    needs: Dict[str, ConsolidatedNeed] = {}
    for plan in meal_plans:
        for requirement in plan.recipe.ingredients:
            needed = requirement.quantity * plan.servings
            key = fold_case(requirement.name)
            existing = needs.get(key)
            if existing is None:
                needs[key] = ConsolidatedNeed(requirement.name, needed, requirement.unit)
            else:
                existing.needed += needed
    return list(needs.values())


def _contains_name(names: Iterable[str], fragment: str) -> bool:
    folded = fold_case(fragment)
    return any(folded in fold_case(name) for name in names)


def shortfall_items(
    meal_plans: Sequence[MealPlan],
    inventory: Sequence[Ingredient],
    *,
    id_factory: IdFactory = _new_id,
) -> List[ShoppingItem]:
    """Return one item per consolidated need the inventory cannot cover.

    Stock is looked up by exact name only, and the shortfall is rounded up to a
    whole unit count.
    """
    items: List[ShoppingItem] = []
    for need in consolidate_needs(meal_plans):
        stock = find_exact_ingredient(need.name, inventory)
        shortfall = need.needed - (stock.quantity if stock is not None else 0.0)
        if shortfall <= 0:
            continue
        items.append(
            ShoppingItem(
                id=id_factory(),
                name=need.name,
                quantity=math.ceil(shortfall),
                unit=need.unit,
                category=classify_ingredient(need.name),
                completed=False,
            )
        )
    return items


def essential_items(
    inventory: Sequence[Ingredient],
    queued: Sequence[ShoppingItem],
    *,
    id_factory: IdFactory = _new_id,
) -> List[ShoppingItem]:
    """Return the pantry essentials named neither in stock nor on the list."""
    inventory_names = [ingredient.name for ingredient in inventory]
    queued_names = [item.name for item in queued]
    items: List[ShoppingItem] = []
    for essential in ESSENTIALS:
        if _contains_name(inventory_names, essential.name):
            continue
        if _contains_name(queued_names, essential.name):
            continue
        item = ShoppingItem(
            id=id_factory(),
            name=essential.name,
            quantity=essential.quantity,
            unit=essential.unit,
            category=essential.category,
            completed=False,
        )
        items.append(item)
        queued_names.append(item.name)
    return items


def draft_shopping_list(
    meal_plans: Sequence[MealPlan],
    inventory: Sequence[Ingredient],
    *,
    id_factory: IdFactory = _new_id,
) -> ShoppingListDraft:
    """Compute shortfall items for every planned meal, then the essentials not yet covered."""
    shortfalls = shortfall_items(meal_plans, inventory, id_factory=id_factory)
    essentials = essential_items(inventory, shortfalls, id_factory=id_factory)
    logger.debug(
        "Shopping list built with %s shortfall item(s) and %s essential(s)",
        len(shortfalls),
        len(essentials),
    )
    return ShoppingListDraft(shortfalls=shortfalls, essentials=essentials)


def generate_shopping_list(
    meal_plans: Sequence[MealPlan],
    inventory: Sequence[Ingredient],
    *,
    id_factory: IdFactory = _new_id,
) -> List[ShoppingItem]:
    """Build a fresh shopping list covering every planned meal plus essentials."""
    return draft_shopping_list(meal_plans, inventory, id_factory=id_factory).items


def shopping_progress(items: Sequence[ShoppingItem]) -> ShoppingProgress:
    total = len(items)
    completed = sum(1 for item in items if item.completed)
    percentage = completed / total * 100 if total else 0.0
    return ShoppingProgress(completed=completed, total=total, percentage=percentage)


def group_by_category(
    items: Iterable[ShoppingItem],
) -> Dict[IngredientCategory, List[ShoppingItem]]:
    """Bucket items under every shopping category, in display order."""
    grouped: Dict[IngredientCategory, List[ShoppingItem]] = {
        category: [] for category in SHOPPING_CATEGORIES
    }
    for item in items:
        grouped.setdefault(item.category, []).append(item)
    return grouped
