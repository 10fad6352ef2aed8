"""Inventory data access helpers."""

from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional
from uuid import uuid4

from sqlalchemy import select

from larder.models.inventory import Ingredient, IngredientCategory

from .models import IngredientORM
from .repository import next_position, session_scope

_UNSET = object()


def _category_values(categories: Iterable[IngredientCategory | str]) -> list[str]:
    return [IngredientCategory(category).value for category in categories]


def _to_model(row: IngredientORM) -> Ingredient:
    return Ingredient.model_validate(
        {
            "id": row.id,
            "name": row.name,
            "categories": row.categories or [],
            "quantity": row.quantity,
            "unit": row.unit,
            "expiry_date": row.expiry_date,
            "added_date": row.added_date,
            "tags": row.tags,
        }
    )


def list_inventory() -> List[Ingredient]:
    """Return inventory entries in the order they were added."""

    with session_scope() as session:
        rows = (
            session.execute(
                select(IngredientORM).order_by(IngredientORM.position, IngredientORM.created_at)
            )
            .scalars()
            .all()
        )
        return [_to_model(row) for row in rows]


def create_inventory_item(
    *,
    name: str,
    categories: Iterable[IngredientCategory | str],
    quantity: float,
    unit: str,
    expiry_date: date,
    added_date: Optional[date] = None,
    tags: Optional[list[str]] = None,
) -> Ingredient:
    with session_scope() as session:
        db_item = IngredientORM(
            id=uuid4().hex,
            position=next_position(session, IngredientORM),
            name=name.strip(),
            categories=_category_values(categories),
            quantity=float(quantity),
            unit=unit.strip(),
            expiry_date=expiry_date,
            added_date=added_date or date.today(),
            tags=list(tags) if tags is not None else None,
        )
        session.add(db_item)
        session.flush()
        return _to_model(db_item)


def update_inventory_item(
    item_id: str,
    *,
    name: Optional[str] = None,
    categories: Optional[Iterable[IngredientCategory | str]] = None,
    quantity: Optional[float] = None,
    unit: Optional[str] = None,
    expiry_date: Optional[date] = None,
    tags: Optional[list[str]] | object = _UNSET,
) -> Ingredient:
    with session_scope() as session:
        db_item = session.get(IngredientORM, item_id)
        if db_item is None:
            raise ValueError(f"Inventory item {item_id} not found")

        if name is not None:
            db_item.name = name.strip()
        if categories is not None:
            db_item.categories = _category_values(categories)
        if quantity is not None:
            db_item.quantity = float(quantity)
        if unit is not None:
            db_item.unit = unit.strip()
        if expiry_date is not None:
            db_item.expiry_date = expiry_date
        if tags is not _UNSET:
            db_item.tags = list(tags) if tags is not None else None  # type: ignore[arg-type]

        session.flush()
        return _to_model(db_item)


def delete_inventory_item(item_id: str) -> None:
    with session_scope() as session:
        db_item = session.get(IngredientORM, item_id)
        if db_item is None:
            raise ValueError(f"Inventory item {item_id} not found")
        session.delete(db_item)


def get_inventory_item(item_id: str) -> Optional[Ingredient]:
    with session_scope() as session:
        row = session.get(IngredientORM, item_id)
        if row is None:
            return None
        return _to_model(row)


__all__ = [
    "list_inventory",
    "create_inventory_item",
    "update_inventory_item",
    "delete_inventory_item",
    "get_inventory_item",
]
