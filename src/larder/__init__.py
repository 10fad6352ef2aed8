"""
Larder meal-planning package.

The package tracks pantry inventory and a recipe catalog, generates weekday dinner
plans from what is on hand and derives shopping lists from the planned meals.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
