"""Expiry tracking for perishable inventory."""

from __future__ import annotations

from datetime import date, timedelta
from enum import Enum
from typing import Iterable, List

from larder.models.inventory import Ingredient

EXPIRING_WITHIN_DAYS = 3


class ExpiryStatus(str, Enum):
    EXPIRED = "expired"
    EXPIRING = "expiring"
    FRESH = "fresh"


def days_until_expiry(ingredient: Ingredient, today: date) -> int:
    return (ingredient.expiry_date - today).days


def expiry_status(ingredient: Ingredient, today: date) -> ExpiryStatus:
    days = days_until_expiry(ingredient, today)
    if days < 0:
        return ExpiryStatus.EXPIRED
    if days <= EXPIRING_WITHIN_DAYS:
        return ExpiryStatus.EXPIRING
    return ExpiryStatus.FRESH


def expiring_items(
    inventory: Iterable[Ingredient],
    today: date,
    within_days: int = EXPIRING_WITHIN_DAYS,
) -> List[Ingredient]:
    """Return entries that expire between today and ``within_days`` from now, inclusive."""
    horizon = today + timedelta(days=within_days)
    return [item for item in inventory if today <= item.expiry_date <= horizon]


def expired_items(inventory: Iterable[Ingredient], today: date) -> List[Ingredient]:
    return [item for item in inventory if expiry_status(item, today) == ExpiryStatus.EXPIRED]
