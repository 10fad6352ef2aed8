"""Inventory filtering helpers."""

from __future__ import annotations

from typing import Iterable, List, Optional

from larder.models.inventory import Ingredient, IngredientCategory


def filter_inventory(
    inventory: Iterable[Ingredient],
    query: str = "",
    *,
    category: Optional[IngredientCategory] = None,
) -> List[Ingredient]:
    """Return entries whose name contains ``query`` and, if given, carry ``category``.

    Name matching ignores case; an empty query matches everything.
    """
    needle = query.strip().lower()
    return [
        item
        for item in inventory
        if needle in item.name.lower() and (category is None or category in item.categories)
    ]
