"""Name-based matching between recipe requirements and inventory entries."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from larder.models.inventory import Ingredient

from .utils import fold_case

# Food words that make two differently worded names interchangeable,
# e.g. "tomato sauce" and "pasta sauce".
ANCHOR_KEYWORDS: Tuple[str, ...] = (
    "pasta",
    "sauce",
    "chicken",
    "beef",
    "salmon",
    "rice",
    "pepper",
    "peas",
    "broccoli",
)


def _shares_anchor(requirement: str, candidate: str) -> bool:
    return any(anchor in requirement and anchor in candidate for anchor in ANCHOR_KEYWORDS)


def _matches_tag(requirement: str, tags: Optional[Iterable[str]]) -> bool:
    if not tags:
        return False
    for tag in tags:
        folded = fold_case(tag)
        if not folded:
            continue
        if folded in requirement or requirement in folded:
            return True
    return False


def ingredient_matches(requirement_name: str, ingredient: Ingredient) -> bool:
    """Return True when ``ingredient`` can stand in for ``requirement_name``."""
    requirement = fold_case(requirement_name)
    candidate = fold_case(ingredient.name)
    if candidate == requirement:
        return True
    if _shares_anchor(requirement, candidate):
        return True
    return _matches_tag(requirement, ingredient.tags)


def match_ingredient(
    requirement_name: str, inventory: Iterable[Ingredient]
) -> Optional[Ingredient]:
    """Return the first inventory entry that satisfies the named requirement.

    Matching is by name only. Quantities and units are left to the caller.
    """
    for ingredient in inventory:
        if ingredient_matches(requirement_name, ingredient):
            return ingredient
    return None


def find_exact_ingredient(name: str, inventory: Iterable[Ingredient]) -> Optional[Ingredient]:
    """Locate an inventory entry whose name equals ``name`` ignoring case."""
    folded = fold_case(name)
    for ingredient in inventory:
        if fold_case(ingredient.name) == folded:
            return ingredient
    return None
