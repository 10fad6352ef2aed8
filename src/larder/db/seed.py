"""Default data seeded into an empty database."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from larder.catalog import DEFAULT_RECIPES
from larder.models.inventory import IngredientCategory

from .models import IngredientORM, RecipeORM
from .recipes import add_recipe

logger = logging.getLogger(__name__)

# (name, categories, quantity, unit, days until expiry, tags)
DEFAULT_INVENTORY = [
    ("Chicken Breast", [IngredientCategory.PROTEIN], 500, "g", 3, ["poultry"]),
    ("Broccoli", [IngredientCategory.VEGETABLES], 300, "g", 5, None),
    ("Jasmine Rice", [IngredientCategory.GRAINS, IngredientCategory.PANTRY], 1000, "g", 180, None),
    ("Frozen Peas", [IngredientCategory.VEGETABLES, IngredientCategory.FROZEN], 400, "g", 90, None),
    ("Soy Sauce", [IngredientCategory.PANTRY], 250, "ml", 365, None),
]


def _seed_recipes(session: Session) -> int:
    if session.execute(select(RecipeORM.id).limit(1)).first():
        return 0
    for recipe in DEFAULT_RECIPES:
        add_recipe(session, recipe)
    return len(DEFAULT_RECIPES)


def _seed_inventory(session: Session, today: date) -> int:
    if session.execute(select(IngredientORM.id).limit(1)).first():
        return 0
    for position, (name, categories, quantity, unit, shelf_days, tags) in enumerate(
        DEFAULT_INVENTORY
    ):
        session.add(
            IngredientORM(
                id=uuid4().hex,
                position=position,
                name=name,
                categories=[category.value for category in categories],
                quantity=float(quantity),
                unit=unit,
                expiry_date=today + timedelta(days=shelf_days),
                added_date=today,
                tags=tags,
            )
        )
    session.flush()
    return len(DEFAULT_INVENTORY)


def seed_defaults(session: Session, today: Optional[date] = None) -> None:
    """Populate empty recipe and inventory tables with starter data."""

    recipes = _seed_recipes(session)
    ingredients = _seed_inventory(session, today or date.today())
    if recipes or ingredients:
        logger.info("Seeded %s recipe(s) and %s inventory item(s)", recipes, ingredients)
