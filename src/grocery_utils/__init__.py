"""Grocery Utils - Ingredient normalization and grocery list consolidation."""

__version__ = "0.1.0"

from . import database, grocery, ingredients

__all__ = ["database", "grocery", "ingredients"]
