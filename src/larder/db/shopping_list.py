"""Shopping list persistence helpers."""

from __future__ import annotations

from typing import Iterable, List, Optional
from uuid import uuid4

from sqlalchemy import delete, select

from larder.models.inventory import IngredientCategory
from larder.models.shopping import ShoppingItem

from .models import ShoppingItemORM
from .repository import next_position, session_scope


def _to_model(row: ShoppingItemORM) -> ShoppingItem:
    return ShoppingItem.model_validate(
        {
            "id": row.id,
            "name": row.name,
            "quantity": row.quantity,
            "unit": row.unit,
            "category": row.category,
            "completed": row.completed,
        }
    )


def list_shopping_items() -> List[ShoppingItem]:
    """Return shopping list items in list order."""

    with session_scope() as session:
        rows = (
            session.execute(
                select(ShoppingItemORM).order_by(
                    ShoppingItemORM.position,
                    ShoppingItemORM.created_at,
                )
            )
            .scalars()
            .all()
        )
        return [_to_model(row) for row in rows]


def create_shopping_item(
    *,
    name: str,
    quantity: float = 1,
    unit: str = "piece",
    category: IngredientCategory | str = IngredientCategory.PANTRY,
) -> ShoppingItem:
    with session_scope() as session:
        db_item = ShoppingItemORM(
            id=uuid4().hex,
            position=next_position(session, ShoppingItemORM),
            name=name.strip(),
            quantity=float(quantity),
            unit=unit.strip(),
            category=IngredientCategory(category).value,
            completed=False,
        )
        session.add(db_item)
        session.flush()
        return _to_model(db_item)


def update_shopping_item(
    item_id: str,
    *,
    name: Optional[str] = None,
    quantity: Optional[float] = None,
    unit: Optional[str] = None,
    category: IngredientCategory | str | None = None,
    completed: Optional[bool] = None,
) -> ShoppingItem:
    with session_scope() as session:
        db_item = session.get(ShoppingItemORM, item_id)
        if db_item is None:
            raise ValueError(f"Shopping list item {item_id} not found")

        if name is not None:
            db_item.name = name.strip()
        if quantity is not None:
            db_item.quantity = float(quantity)
        if unit is not None:
            db_item.unit = unit.strip()
        if category is not None:
            db_item.category = IngredientCategory(category).value
        if completed is not None:
            db_item.completed = bool(completed)

        session.flush()
        return _to_model(db_item)


def delete_shopping_item(item_id: str) -> None:
    with session_scope() as session:
        db_item = session.get(ShoppingItemORM, item_id)
        if db_item is None:
            raise ValueError(f"Shopping list item {item_id} not found")
        session.delete(db_item)


def reset_shopping_list() -> None:
    """Remove all shopping list items."""

    with session_scope() as session:
        session.execute(delete(ShoppingItemORM))


def replace_shopping_list(items: Iterable[ShoppingItem]) -> List[ShoppingItem]:
    """Swap the whole shopping list for ``items``; prior checked state is dropped."""

    stored: List[ShoppingItem] = []
    with session_scope() as session:
        session.execute(delete(ShoppingItemORM))
        for position, item in enumerate(items):
            session.add(
                ShoppingItemORM(
                    id=item.id,
                    position=position,
                    name=item.name,
                    quantity=float(item.quantity),
                    unit=item.unit,
                    category=item.category.value,
                    completed=item.completed,
                )
            )
            stored.append(item)
    return stored


def get_shopping_item(item_id: str) -> Optional[ShoppingItem]:
    with session_scope() as session:
        row = session.get(ShoppingItemORM, item_id)
        if row is None:
            return None
        return _to_model(row)


__all__ = [
    "list_shopping_items",
    "create_shopping_item",
    "update_shopping_item",
    "delete_shopping_item",
    "reset_shopping_list",
    "replace_shopping_list",
    "get_shopping_item",
]
