"""Operations that run the planning engine against a kitchen store."""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from larder import metrics
from larder.models.plan import MealPlan
from larder.models.shopping import ShoppingItem
from larder.planner.shopping import draft_shopping_list
from larder.planner.utils import weekday_dates
from larder.planner.weekly import generate_weekly_plan
from larder.store import KitchenStore

logger = logging.getLogger(__name__)


def plan_week(
    store: KitchenStore,
    week_offset: int = 0,
    today: Optional[date] = None,
) -> List[MealPlan]:
    """Plan Monday to Friday of the selected week and replace all stored plans."""

    dates = weekday_dates(week_offset, today)
    plans = generate_weekly_plan(store.recipes(), store.ingredients(), dates)
    store.replace_meal_plans(plans)
    metrics.MEAL_PLANS_GENERATED.inc(len(plans))
    logger.info(
        "Generated %s meal plan(s) for week starting %s",
        len(plans),
        dates[0].isoformat(),
    )
    return plans


def refresh_shopping_list(store: KitchenStore) -> List[ShoppingItem]:
    """Rebuild the shopping list from every stored meal plan.

    The previous list, including its completed flags, is discarded.
    """

    draft = draft_shopping_list(store.meal_plans(), store.ingredients())
    items = draft.items
    store.replace_shopping_list(items)

    metrics.SHOPPING_ITEMS_GENERATED.labels(source="shortfall").inc(len(draft.shortfalls))
    metrics.SHOPPING_ITEMS_GENERATED.labels(source="essential").inc(len(draft.essentials))
    logger.info(
        "Shopping list regenerated with %s item(s) (%s shortfall, %s essential)",
        len(items),
        len(draft.shortfalls),
        len(draft.essentials),
    )
    return items


__all__ = ["plan_week", "refresh_shopping_list"]
