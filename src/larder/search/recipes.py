"""Recipe catalog search helpers."""

from __future__ import annotations

from typing import Iterable, List, Optional

from larder.models.recipe import Recipe


def _matches_query(recipe: Recipe, query: str) -> bool:
    if query in recipe.name.lower():
        return True
    return any(query in ingredient.name.lower() for ingredient in recipe.ingredients)


def search_recipes(
    recipes: Iterable[Recipe],
    query: str = "",
    *,
    tag: Optional[str] = None,
) -> List[Recipe]:
    """Return recipes whose name or ingredients contain ``query``, optionally with ``tag``.

    An empty query matches every recipe; tags must match exactly.
    """
    needle = query.strip().lower()
    results: List[Recipe] = []
    for recipe in recipes:
        if needle and not _matches_query(recipe, needle):
            continue
        if tag and tag not in recipe.tags:
            continue
        results.append(recipe)
    return results


def recipe_tags(recipes: Iterable[Recipe]) -> List[str]:
    """Unique tags across the catalog in first-seen order."""
    seen: dict[str, None] = {}
    for recipe in recipes:
        for tag in recipe.tags:
            seen.setdefault(tag, None)
    return list(seen)
