"""Recipe scoring against the current inventory."""

from __future__ import annotations

from typing import List, Optional, Sequence

from larder.models.inventory import Ingredient
from larder.models.plan import Compatibility, RecipeScore
from larder.models.recipe import Recipe, RecipeIngredient

from .matching import match_ingredient

FULL_MATCH_POINTS = 10.0
PARTIAL_MATCH_POINTS = 5.0
COVERAGE_BONUS_POINTS = 20.0


def _is_sufficient(match: Optional[Ingredient], requirement: RecipeIngredient) -> bool:
    # Raw quantities are compared as-is; units are never converted.
    return match is not None and match.quantity >= requirement.quantity


def score_recipe(recipe: Recipe, inventory: Sequence[Ingredient]) -> RecipeScore:
    """Score ``recipe`` by how much of it the inventory covers.

    Each requirement found in stock in sufficient quantity earns
    ``FULL_MATCH_POINTS``; one found with too little stock earns
    ``PARTIAL_MATCH_POINTS`` but does not count as available. A coverage bonus
    proportional to the share of available requirements is added on top.
    Recipes without ingredients score zero.
    """
    total_count = len(recipe.ingredients)
    if total_count == 0:
        return RecipeScore(score=0.0, available_count=0, total_count=0)

    score = 0.0
    available_count = 0
    for requirement in recipe.ingredients:
        match = match_ingredient(requirement.name, inventory)
        if _is_sufficient(match, requirement):
            score += FULL_MATCH_POINTS
            available_count += 1
        elif match is not None:
            score += PARTIAL_MATCH_POINTS

    score += (available_count / total_count) * COVERAGE_BONUS_POINTS
    return RecipeScore(score=score, available_count=available_count, total_count=total_count)


def can_make(recipe: Recipe, inventory: Sequence[Ingredient]) -> bool:
    """Return True when every requirement is in stock in sufficient quantity."""
    return all(
        _is_sufficient(match_ingredient(requirement.name, inventory), requirement)
        for requirement in recipe.ingredients
    )


def missing_ingredients(recipe: Recipe, inventory: Sequence[Ingredient]) -> List[RecipeIngredient]:
    """Return the requirements that are absent or short, in recipe order."""
    return [
        requirement
        for requirement in recipe.ingredients
        if not _is_sufficient(match_ingredient(requirement.name, inventory), requirement)
    ]


def recipe_compatibility(recipe: Recipe, inventory: Sequence[Ingredient]) -> Compatibility:
    result = score_recipe(recipe, inventory)
    percentage = (
        result.available_count / result.total_count * 100 if result.total_count else 0.0
    )
    return Compatibility(
        available_count=result.available_count,
        total_count=result.total_count,
        percentage=percentage,
        can_make=result.available_count == result.total_count,
        missing=missing_ingredients(recipe, inventory),
    )
