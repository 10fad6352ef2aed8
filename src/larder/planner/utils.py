"""Shared helpers for planner modules."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, List, Optional

from larder.models.plan import MealPlan

DAYS_PER_WEEK = 7


def fold_case(value: str) -> str:
    """Lower-case a free-text name for case-insensitive comparison."""
    return value.lower()


def week_dates(week_offset: int = 0, today: Optional[date] = None) -> List[date]:
    """Return the seven dates of a Sunday-first week.

    ``week_offset`` 0 is the week containing ``today``, 1 the following one.
    """
    anchor = today or date.today()
    days_since_sunday = (anchor.weekday() + 1) % DAYS_PER_WEEK
    start = anchor - timedelta(days=days_since_sunday) + timedelta(weeks=week_offset)
    return [start + timedelta(days=offset) for offset in range(DAYS_PER_WEEK)]


def weekday_dates(week_offset: int = 0, today: Optional[date] = None) -> List[date]:
    """Return Monday through Friday of the selected week."""
    return week_dates(week_offset, today)[1:6]


def plans_for_dates(meal_plans: Iterable[MealPlan], dates: Iterable[date]) -> List[MealPlan]:
    """Keep the meal plans scheduled on any of ``dates``, preserving order."""
    wanted = set(dates)
    return [plan for plan in meal_plans if plan.date in wanted]
