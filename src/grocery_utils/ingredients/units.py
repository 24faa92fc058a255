"""Unit synonyms and per-ingredient unit conversion."""

import logging
from typing import Optional

from grocery_utils.ingredients.models import CanonicalIngredient

logger = logging.getLogger(__name__)

# Canonical unit token -> surface spellings
UNIT_MAP = {
    # Volume
    "cup": ["cup", "cups"],
    "tbsp": ["tbsp", "tbsp.", "tbs", "tablespoon", "tablespoons"],
    "tsp": ["tsp", "tsp.", "teaspoon", "teaspoons"],
    "ml": ["ml", "ml.", "milliliter", "milliliters", "millilitre", "millilitres"],
    "l": ["l", "liter", "liters", "litre", "litres"],
    "quart": ["quart", "quarts", "qt", "qt."],
    "gallon": ["gallon", "gallons", "gal", "gal."],
    # Weight
    "lb": ["lb", "lb.", "lbs", "lbs.", "pound", "pounds"],
    "oz": ["oz", "oz.", "ounce", "ounces"],
    "g": ["g", "gram", "grams"],
    "kg": ["kg", "kilogram", "kilograms"],
    # Count/packaging
    "piece": ["piece", "pieces", "medium", "large", "small", "whole"],
    "clove": ["clove", "cloves"],
    "head": ["head", "heads"],
    "can": ["can", "cans"],
    "package": ["package", "packages", "pkg", "packet", "packets"],
    "jar": ["jar", "jars"],
    "bag": ["bag", "bags"],
    "box": ["box", "boxes"],
    "bottle": ["bottle", "bottles"],
    "container": ["container", "containers"],
    "bunch": ["bunch", "bunches"],
    "slice": ["slice", "slices"],
    "fillet": ["fillet", "fillets"],
    "dozen": ["dozen"],
    "handful": ["handful", "handfuls"],
    "serving": ["serving", "servings"],
    "pinch": ["pinch", "pinches"],
    "dash": ["dash", "dashes"],
}

# Create reverse mapping for lookup
UNIT_LOOKUP = {v: k for k, vs in UNIT_MAP.items() for v in vs}

# Units whose display form does not take an "s"
INVARIANT_UNITS = {"oz", "tsp", "tbsp", "g", "kg", "ml", "l", "dozen"}

IRREGULAR_PLURALS = {
    "lb": "lbs",
    "box": "boxes",
    "bunch": "bunches",
    "pinch": "pinches",
    "dash": "dashes",
}


def normalize_unit(unit: str) -> str:
    """Normalize unit names to their canonical token.

    Args:
        unit: Raw unit string

    Returns:
        Canonical unit token, or the lowercased input if it is not a known unit

    Examples:
        >>> normalize_unit("Cups")
        'cup'
        >>> normalize_unit("tablespoons")
        'tbsp'
    """
    unit = unit.lower().strip()
    if unit in UNIT_LOOKUP:
        return UNIT_LOOKUP[unit]
    return UNIT_LOOKUP.get(unit.strip("."), unit)


def pluralize_unit(unit: str, quantity: float) -> str:
    """Return the display form of ``unit`` for ``quantity``."""
    if quantity <= 1 or unit in INVARIANT_UNITS:
        return unit
    if unit in IRREGULAR_PLURALS:
        return IRREGULAR_PLURALS[unit]
    return unit + "s"


def convert_quantity(
    quantity: float,
    from_unit: str,
    to_unit: str,
    ingredient: Optional[CanonicalIngredient],
) -> Optional[float]:
    """Convert ``quantity`` between two units of the same ingredient.

    Goes through the ingredient's standard unit: divide by the factor of the
    source unit, multiply by the factor of the target unit.

    Returns:
        The converted quantity, or None when either unit has no known factor
        for this ingredient.

    Examples:
        With chicken (standard unit lb, {"oz": 16}):
        >>> convert_quantity(8, "oz", "lb", chicken)
        0.5
    """
    if from_unit == to_unit:
        return quantity
    if ingredient is None:
        return None

    from_factor = ingredient.factor_for(from_unit)
    to_factor = ingredient.factor_for(to_unit)
    if not from_factor or not to_factor:
        return None
    return quantity / from_factor * to_factor


def to_standard_unit(
    quantity: float, unit: str, ingredient: CanonicalIngredient
) -> Optional[float]:
    """Express ``quantity`` of ``unit`` in the ingredient's standard unit."""
    return convert_quantity(quantity, unit, ingredient.standard_unit, ingredient)
