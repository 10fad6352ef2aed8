"""Meal plan persistence helpers."""

from __future__ import annotations

from datetime import date
from typing import Iterable, List

from sqlalchemy import delete, select

from larder.models.plan import MealPlan
from larder.models.recipe import Recipe
from larder.planner.weekly import meal_plan_id

from .models import MealPlanORM
from .repository import next_position, session_scope


def _to_model(row: MealPlanORM) -> MealPlan:
    return MealPlan.model_validate(
        {
            "id": row.id,
            "date": row.plan_date,
            "recipe": row.recipe,
            "servings": row.servings,
        }
    )


def list_meal_plans() -> List[MealPlan]:
    """Return every planned meal ordered by date."""

    with session_scope() as session:
        rows = (
            session.execute(
                select(MealPlanORM).order_by(MealPlanORM.plan_date, MealPlanORM.position)
            )
            .scalars()
            .all()
        )
        return [_to_model(row) for row in rows]


def save_meal_plan(*, plan_date: date, recipe: Recipe, servings: int = 2) -> MealPlan:
    """Schedule ``recipe`` on ``plan_date`` (upsert on date + recipe id)."""

    plan_id = meal_plan_id(plan_date, recipe.id)
    snapshot = recipe.model_dump(mode="json")
    with session_scope() as session:
        db_plan = session.get(MealPlanORM, plan_id)
        if db_plan is None:
            db_plan = MealPlanORM(
                id=plan_id,
                position=next_position(session, MealPlanORM),
                plan_date=plan_date,
                recipe=snapshot,
                servings=servings,
            )
            session.add(db_plan)
        else:
            db_plan.recipe = snapshot
            db_plan.servings = servings
        session.flush()
        return _to_model(db_plan)


def replace_meal_plans(plans: Iterable[MealPlan]) -> List[MealPlan]:
    """Swap the whole meal plan collection for ``plans``."""

    stored: List[MealPlan] = []
    with session_scope() as session:
        session.execute(delete(MealPlanORM))
        for position, plan in enumerate(plans):
            session.merge(
                MealPlanORM(
                    id=plan.id,
                    position=position,
                    plan_date=plan.date,
                    recipe=plan.recipe.model_dump(mode="json"),
                    servings=plan.servings,
                )
            )
            stored.append(plan)
    return stored


def delete_meal_plan(plan_id: str) -> None:
    with session_scope() as session:
        db_plan = session.get(MealPlanORM, plan_id)
        if db_plan is None:
            raise ValueError(f"Meal plan {plan_id} not found")
        session.delete(db_plan)


__all__ = [
    "list_meal_plans",
    "save_meal_plan",
    "replace_meal_plans",
    "delete_meal_plan",
]
