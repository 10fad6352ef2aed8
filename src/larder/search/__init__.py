"""Search utilities for Larder."""

from __future__ import annotations

from .inventory import filter_inventory
from .recipes import recipe_tags, search_recipes

__all__ = ["filter_inventory", "recipe_tags", "search_recipes"]
