"""Recipe catalog persistence helpers."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from larder.models.recipe import Nutrition, Recipe, RecipeIngredient

from .models import RecipeORM
from .repository import next_position, session_scope

RECIPE_FIELDS = {
    "name",
    "ingredients",
    "instructions",
    "prep_time",
    "cook_time",
    "servings",
    "nutrition",
    "tags",
    "image",
    "is_user_created",
}


def _to_model(row: RecipeORM) -> Recipe:
    return Recipe.model_validate(
        {
            "id": row.id,
            "name": row.name,
            "ingredients": row.ingredients or [],
            "instructions": row.instructions or [],
            "prep_time": row.prep_time,
            "cook_time": row.cook_time,
            "servings": row.servings,
            "nutrition": row.nutrition or {},
            "tags": row.tags or [],
            "image": row.image,
            "is_user_created": row.is_user_created,
        }
    )


def _ingredient_payload(ingredients: Iterable[RecipeIngredient | dict[str, Any]]) -> list[dict]:
    return [RecipeIngredient.model_validate(entry).model_dump() for entry in ingredients]


def _nutrition_payload(nutrition: Nutrition | dict[str, Any] | None) -> dict[str, Any]:
    return Nutrition.model_validate(nutrition or {}).model_dump()


def add_recipe(session: Session, recipe: Recipe) -> RecipeORM:
    """Insert a fully-formed recipe, keeping its id."""

    db_recipe = RecipeORM(
        id=recipe.id,
        position=next_position(session, RecipeORM),
        name=recipe.name,
        ingredients=_ingredient_payload(recipe.ingredients),
        instructions=list(recipe.instructions),
        prep_time=recipe.prep_time,
        cook_time=recipe.cook_time,
        servings=recipe.servings,
        nutrition=_nutrition_payload(recipe.nutrition),
        tags=list(recipe.tags),
        image=recipe.image,
        is_user_created=recipe.is_user_created,
    )
    session.add(db_recipe)
    session.flush()
    return db_recipe


def list_recipes() -> List[Recipe]:
    """Return the catalog in insertion order."""

    with session_scope() as session:
        rows = (
            session.execute(select(RecipeORM).order_by(RecipeORM.position, RecipeORM.created_at))
            .scalars()
            .all()
        )
        return [_to_model(row) for row in rows]


def create_recipe(
    *,
    name: str,
    ingredients: Iterable[RecipeIngredient | dict[str, Any]],
    instructions: Iterable[str] = (),
    prep_time: int = 0,
    cook_time: int = 0,
    servings: int = 1,
    nutrition: Nutrition | dict[str, Any] | None = None,
    tags: Iterable[str] = (),
    image: Optional[str] = None,
    is_user_created: bool = True,
) -> Recipe:
    recipe = Recipe(
        id=uuid4().hex,
        name=name.strip(),
        ingredients=_ingredient_payload(ingredients),
        instructions=list(instructions),
        prep_time=prep_time,
        cook_time=cook_time,
        servings=servings,
        nutrition=_nutrition_payload(nutrition),
        tags=list(tags),
        image=image,
        is_user_created=is_user_created,
    )
    with session_scope() as session:
        return _to_model(add_recipe(session, recipe))


def update_recipe(recipe_id: str, **changes: Any) -> Recipe:
    """Apply field changes to a stored recipe.

    Existing meal plans keep the snapshot they were created with.
    """

    with session_scope() as session:
        db_recipe = session.get(RecipeORM, recipe_id)
        if db_recipe is None:
            raise ValueError(f"Recipe {recipe_id} not found")

        for field, value in changes.items():
            if field not in RECIPE_FIELDS:
                raise ValueError(f"Unknown recipe field '{field}'")
            if field == "ingredients":
                value = _ingredient_payload(value)
            elif field == "nutrition":
                value = _nutrition_payload(value)
            elif field in {"instructions", "tags"}:
                value = list(value)
            setattr(db_recipe, field, value)

        session.flush()
        return _to_model(db_recipe)


def delete_recipe(recipe_id: str) -> None:
    with session_scope() as session:
        db_recipe = session.get(RecipeORM, recipe_id)
        if db_recipe is None:
            raise ValueError(f"Recipe {recipe_id} not found")
        session.delete(db_recipe)


def get_recipe(recipe_id: str) -> Optional[Recipe]:
    with session_scope() as session:
        row = session.get(RecipeORM, recipe_id)
        if row is None:
            return None
        return _to_model(row)


__all__ = [
    "add_recipe",
    "list_recipes",
    "create_recipe",
    "update_recipe",
    "delete_recipe",
    "get_recipe",
]
