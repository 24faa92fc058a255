"""Aggregate ingredient occurrences across recipes."""

import dataclasses
import logging
from typing import Dict, Iterable, List, Optional

from grocery_utils.ingredients.categorization import categorize
from grocery_utils.ingredients.models import (
    CanonicalIngredient,
    Category,
    ConsolidatedEntry,
    IngredientSource,
    Priority,
)
from grocery_utils.ingredients.normalization import capitalize_first
from grocery_utils.ingredients.units import convert_quantity, to_standard_unit

logger = logging.getLogger(__name__)

DEFAULT_ITEM_COST = 3.00
DEFAULT_SHELF_LIFE_DAYS = 7

CATEGORY_PRIORITY = {
    Category.MEAT_POULTRY: Priority.HIGH,
    Category.SEAFOOD: Priority.HIGH,
    Category.DAIRY_EGGS: Priority.MEDIUM,
    Category.PRODUCE: Priority.MEDIUM,
}


@dataclasses.dataclass
class ConsolidationLine:
    """One parsed ingredient occurrence waiting to be grouped."""

    canonical: Optional[CanonicalIngredient]
    cleaned_name: str
    quantity: float
    unit: str
    recipe_name: str
    servings: float
    original_text: str
    ingredient_text: str = ""


def default_priority(category: Category) -> Priority:
    return CATEGORY_PRIORITY.get(category, Priority.LOW)


def estimate_entry_cost(entry: ConsolidatedEntry) -> float:
    """Cost of an entry in its canonical ingredient's standard unit.

    Unmatched ingredients get DEFAULT_ITEM_COST. When the entry's unit has no
    conversion to the standard unit, one standard unit is priced.
    """
    if entry.canonical is None:
        return DEFAULT_ITEM_COST

    standard_quantity = to_standard_unit(
        entry.total_quantity, entry.unit, entry.canonical
    )
    if standard_quantity is None:
        return round(entry.canonical.average_cost, 2)
    return round(standard_quantity * entry.canonical.average_cost, 2)


class Consolidator:
    """Group ingredient lines by canonical ingredient and sum their quantities.

    Matched lines group by catalog base name; unmatched lines group by their
    capitalized cleaned name, so they only merge when the names are identical.
    The first occurrence fixes the entry's unit. Later occurrences are
    converted into it when the catalog knows both units, and otherwise added
    as-is (e.g. cloves and heads of garlic summed as if they were the same
    unit); that gap is known and kept on purpose.
    """

    def __init__(self):
        self._entries: Dict[str, ConsolidatedEntry] = {}

    def add(self, line: ConsolidationLine) -> ConsolidatedEntry:
        quantity = line.quantity * line.servings
        source = IngredientSource(
            recipe_name=line.recipe_name,
            quantity=quantity,
            unit=line.unit,
            original_text=line.original_text,
        )

        if line.canonical is not None:
            key = line.canonical.base_name
        else:
            key = capitalize_first(line.cleaned_name)

        entry = self._entries.get(key)
        if entry is None:
            entry = self._new_entry(key, line, quantity, source)
            self._entries[key] = entry
            return entry

        converted = convert_quantity(quantity, line.unit, entry.unit, entry.canonical)
        if converted is None:
            logger.debug(
                f"No conversion from '{line.unit}' to '{entry.unit}' for '{key}', "
                f"adding {quantity} unconverted"
            )
            converted = quantity

        entry.total_quantity += converted
        entry.sources.append(source)
        if len(entry.recipe_names) > 1:
            entry.priority = Priority.HIGH
        return entry

    def _new_entry(
        self,
        key: str,
        line: ConsolidationLine,
        quantity: float,
        source: IngredientSource,
    ) -> ConsolidatedEntry:
        if line.canonical is not None:
            category = line.canonical.category
            shelf_life = line.canonical.shelf_life_days
        else:
            category = categorize(line.ingredient_text or line.cleaned_name)
            shelf_life = DEFAULT_SHELF_LIFE_DAYS
            logger.debug(f"Unmatched ingredient '{key}' categorized as {category.value}")

        return ConsolidatedEntry(
            base_ingredient=key,
            total_quantity=quantity,
            unit=line.unit,
            category=category,
            priority=default_priority(category),
            sources=[source],
            shelf_life_days=shelf_life,
            canonical=line.canonical,
        )

    def entries(self) -> List[ConsolidatedEntry]:
        """Finished entries in first-occurrence order, with costs filled in."""
        entries = list(self._entries.values())
        for entry in entries:
            entry.estimated_cost = estimate_entry_cost(entry)
        return entries


def consolidate(lines: Iterable[ConsolidationLine]) -> List[ConsolidatedEntry]:
    """Consolidate ingredient lines from one list-generation run."""
    consolidator = Consolidator()
    for line in lines:
        consolidator.add(line)
    return consolidator.entries()
