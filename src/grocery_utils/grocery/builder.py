"""Build the final grocery list and its time and cost estimates."""

import logging
import math
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from grocery_utils.grocery.consolidation import ConsolidationLine, Consolidator
from grocery_utils.ingredients.catalog import Catalog, load_default_catalog
from grocery_utils.ingredients.matching import IngredientMatcher
from grocery_utils.ingredients.models import (
    Category,
    ConsolidatedEntry,
    GroceryItem,
    GroceryListResult,
    Priority,
    RecipeInput,
)
from grocery_utils.ingredients.normalization import capitalize_first
from grocery_utils.ingredients.parsing import IngredientExtractor
from grocery_utils.ingredients.units import pluralize_unit

logger = logging.getLogger(__name__)

# --- Shopping time model (minutes) ---

BASE_SHOPPING_MINUTES = 8
MINUTES_PER_CATEGORY = 2
MINUTES_PER_HIGH_PRIORITY_ITEM = 0.3
MIN_SHOPPING_MINUTES = 15

CATEGORY_ITEM_MINUTES = {
    Category.PRODUCE: 1.5,
    Category.MEAT_POULTRY: 2.0,
    Category.SEAFOOD: 2.0,
    Category.DAIRY_EGGS: 1.0,
    Category.FROZEN: 0.8,
    Category.BEVERAGES: 0.5,
    Category.GRAINS_PASTA: 0.7,
    Category.CONDIMENTS_OILS: 0.8,
    Category.SNACKS: 0.6,
    Category.GENERAL: 1.0,
}

# Default store layout, in walking order
STORE_SECTIONS = [
    ("Store Entrance", [Category.GENERAL]),
    ("Fresh Produce", [Category.PRODUCE]),
    ("Meat & Seafood", [Category.MEAT_POULTRY, Category.SEAFOOD]),
    (
        "Pantry & Dry Goods",
        [Category.GRAINS_PASTA, Category.CONDIMENTS_OILS, Category.SNACKS],
    ),
    ("Beverages", [Category.BEVERAGES]),
    ("Frozen Foods", [Category.FROZEN]),
    ("Dairy & Refrigerated", [Category.DAIRY_EGGS]),
]
SECTION_BY_CATEGORY = {
    category: name for name, categories in STORE_SECTIONS for category in categories
}
SECTION_ORDER = {name: order for order, (name, _) in enumerate(STORE_SECTIONS)}

AS_NEEDED = "As needed"

PriorItem = Union[GroceryItem, Dict[str, Any]]


def store_section_for(category: Category) -> str:
    return SECTION_BY_CATEGORY.get(category, "Pantry & Dry Goods")


def sort_by_store_route(items: Iterable[GroceryItem]) -> List[GroceryItem]:
    """Order items by the store walking route, keeping list order within a section."""
    return sorted(
        items, key=lambda item: SECTION_ORDER.get(item.store_section, len(SECTION_ORDER))
    )


def format_quantity(quantity: float, unit: str) -> str:
    """Human-readable quantity such as "3 lbs" or "1.5 cups".

    Whole numbers drop the decimal, everything else keeps one place, and the
    unit is pluralized above one. A single serving reads "As needed", and
    positive amounts too small to show at one decimal read "<0.1".

    Examples:
        >>> format_quantity(3, "lb")
        '3 lbs'
        >>> format_quantity(0.25, "cup")
        '0.2 cup'
        >>> format_quantity(1, "serving")
        'As needed'
        >>> format_quantity(1 / 32, "tsp")
        '<0.1 tsp'
    """
    if quantity == 1 and unit == "serving":
        return AS_NEEDED

    rounded = round(quantity, 1)
    if quantity > 0 and rounded == 0:
        return f"<0.1 {pluralize_unit(unit, 0.1)}"
    if float(rounded).is_integer():
        number = str(int(rounded))
    else:
        number = f"{rounded:.1f}"
    return f"{number} {pluralize_unit(unit, rounded)}"


def merge_prior_items(
    new_items: List[GroceryItem], prior_items: Sequence[PriorItem]
) -> List[GroceryItem]:
    """Carry checked state and ids forward from a previously saved list.

    A prior item matches a new one when either name contains the other,
    ignoring case; the first match donates ``is_checked`` and ``id``. An id is
    only carried once, and new items whose generated id collides with a
    carried one are renumbered.

    Args:
        new_items: Freshly built items; updated in place.
        prior_items: Items from the saved list, as GroceryItem or stored dicts.

    Returns:
        ``new_items``, for chaining.
    """
    prior = [
        item if isinstance(item, GroceryItem) else GroceryItem.from_dict(item)
        for item in prior_items
    ]
    prior = [item for item in prior if item.name.strip()]

    carried_ids = set()
    carried_positions = set()
    for position, item in enumerate(new_items):
        name = item.name.lower()
        for old in prior:
            old_name = old.name.lower()
            if old_name in name or name in old_name:
                item.is_checked = old.is_checked
                if old.id not in carried_ids:
                    item.id = old.id
                    carried_ids.add(old.id)
                    carried_positions.add(position)
                break

    used_ids = set(carried_ids)
    next_index = 0
    for position, item in enumerate(new_items):
        if position in carried_positions:
            continue
        if item.id in used_ids:
            while f"item_{next_index}" in used_ids:
                next_index += 1
            item.id = f"item_{next_index}"
        used_ids.add(item.id)
    return new_items


def estimate_shopping_time(items: Iterable[GroceryItem]) -> int:
    """Estimated minutes in the store, rounded to the nearest 5, at least 15.

    base 8 + 2 per distinct category + per-item time by category
    + 0.3 per high-priority item.
    """
    items = list(items)
    categories = {item.category for item in items}
    minutes = BASE_SHOPPING_MINUTES + MINUTES_PER_CATEGORY * len(categories)
    minutes += sum(
        CATEGORY_ITEM_MINUTES.get(item.category, CATEGORY_ITEM_MINUTES[Category.GENERAL])
        for item in items
    )
    minutes += MINUTES_PER_HIGH_PRIORITY_ITEM * sum(
        1 for item in items if item.priority == Priority.HIGH
    )
    rounded = int(math.floor(minutes / 5 + 0.5)) * 5
    return max(MIN_SHOPPING_MINUTES, rounded)


def estimate_total_cost(items: Iterable[GroceryItem]) -> float:
    return round(sum(item.estimated_cost for item in items), 2)


class GroceryListBuilder:
    """Turn planned recipes into a consolidated, categorized grocery list.

    The catalog is injected once and only read; a builder can be shared
    between threads and reused for any number of plans.

    Attributes:
        catalog: Reference catalog used for matching, conversion and pricing.
        extractor: Quantity/unit extractor bound to the catalog.
        matcher: Matcher bound to the catalog.
    """

    def __init__(self, catalog: Optional[Catalog] = None):
        self.catalog = catalog if catalog is not None else load_default_catalog()
        self.extractor = IngredientExtractor(self.catalog)
        self.matcher = IngredientMatcher(self.catalog)

    def parse_recipe(self, recipe: RecipeInput) -> List[ConsolidationLine]:
        """Parse and match every non-blank ingredient line of a recipe."""
        lines = []
        for text in recipe.ingredient_lines:
            if not text or not text.strip():
                continue
            parsed = self.extractor.extract(text)
            lines.append(
                ConsolidationLine(
                    canonical=self.matcher.match(parsed.cleaned_name),
                    cleaned_name=parsed.cleaned_name,
                    quantity=parsed.quantity,
                    unit=parsed.unit,
                    recipe_name=recipe.name,
                    servings=recipe.servings,
                    original_text=text,
                    ingredient_text=parsed.ingredient_text,
                )
            )
        return lines

    def build_items(self, entries: Iterable[ConsolidatedEntry]) -> List[GroceryItem]:
        items = []
        for index, entry in enumerate(entries):
            if entry.canonical is not None:
                name = capitalize_first(entry.canonical.base_name)
            else:
                name = entry.base_ingredient
            items.append(
                GroceryItem(
                    id=f"item_{index}",
                    name=name,
                    quantity_display=format_quantity(entry.total_quantity, entry.unit),
                    category=entry.category,
                    from_recipes=entry.recipe_names,
                    is_checked=False,
                    priority=entry.priority,
                    estimated_cost=entry.estimated_cost,
                    shelf_life_days=entry.shelf_life_days,
                    store_section=store_section_for(entry.category),
                    base_ingredient=entry.base_ingredient,
                    unit=entry.unit,
                    total_quantity=entry.total_quantity,
                )
            )
        return items

    def generate(
        self,
        recipes: Iterable[RecipeInput],
        prior_list: Optional[Sequence[PriorItem]] = None,
    ) -> GroceryListResult:
        """Generate the grocery list for a set of recipes.

        Args:
            recipes: Planned recipes with their servings multipliers.
            prior_list: Previously saved items for the same plan, whose checked
                state and ids carry over to matching new items.

        Returns:
            GroceryListResult with items, shopping time and total cost.
        """
        recipes = list(recipes)
        consolidator = Consolidator()
        for recipe in recipes:
            for line in self.parse_recipe(recipe):
                consolidator.add(line)

        items = self.build_items(consolidator.entries())
        if prior_list:
            merge_prior_items(items, prior_list)

        result = GroceryListResult(
            items=items,
            estimated_shopping_time_minutes=estimate_shopping_time(items),
            estimated_total_cost=estimate_total_cost(items),
        )
        logger.info(
            f"Generated {len(items)} grocery items from {len(recipes)} recipes "
            f"(~{result.estimated_shopping_time_minutes} min, "
            f"${result.estimated_total_cost:.2f})"
        )
        return result


def generate_grocery_list(
    recipes: Iterable[RecipeInput],
    prior_list: Optional[Sequence[PriorItem]] = None,
    catalog: Optional[Catalog] = None,
) -> GroceryListResult:
    """Generate a grocery list; see GroceryListBuilder.generate."""
    return GroceryListBuilder(catalog).generate(recipes, prior_list)
