"""Expiry tracking tests."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from larder.models.inventory import Ingredient, IngredientCategory
from larder.planner.freshness import (
    ExpiryStatus,
    days_until_expiry,
    expired_items,
    expiring_items,
    expiry_status,
)

TODAY = date(2024, 3, 15)


def _expiring_in(days: int, name: str = "Milk") -> Ingredient:
    return Ingredient(
        id=f"{name}-{days}",
        name=name,
        categories=[IngredientCategory.DAIRY],
        quantity=1,
        unit="l",
        expiry_date=TODAY + timedelta(days=days),
        added_date=TODAY - timedelta(days=7),
    )


@pytest.mark.parametrize(
    "days, status",
    [
        (-1, ExpiryStatus.EXPIRED),
        (0, ExpiryStatus.EXPIRING),
        (3, ExpiryStatus.EXPIRING),
        (4, ExpiryStatus.FRESH),
    ],
)
def test_expiry_status_thresholds(days, status):
    item = _expiring_in(days)

    assert days_until_expiry(item, TODAY) == days
    assert expiry_status(item, TODAY) == status


def test_expiring_items_window_is_inclusive():
    inventory = [_expiring_in(days) for days in (-2, 0, 3, 4, 10)]

    soon = expiring_items(inventory, TODAY)

    assert [days_until_expiry(item, TODAY) for item in soon] == [0, 3]
    assert len(expiring_items(inventory, TODAY, within_days=10)) == 4


def test_expired_items():
    inventory = [_expiring_in(days) for days in (-2, -1, 0, 5)]

    assert [days_until_expiry(item, TODAY) for item in expired_items(inventory, TODAY)] == [-2, -1]
