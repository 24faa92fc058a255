"""Tabular export of generated grocery lists."""

import logging
from typing import Iterable

import pandas as pd

from grocery_utils.grocery.builder import sort_by_store_route
from grocery_utils.ingredients.models import GroceryItem, GroceryListResult

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "id",
    "store_section",
    "name",
    "quantity",
    "category",
    "priority",
    "estimated_cost",
    "shelf_life_days",
    "from_recipes",
    "is_checked",
]


def _item_row(item: GroceryItem) -> dict:
    return {
        "id": item.id,
        "store_section": item.store_section,
        "name": item.name,
        "quantity": item.quantity_display,
        "category": item.category.value,
        "priority": item.priority.value,
        "estimated_cost": item.estimated_cost,
        "shelf_life_days": item.shelf_life_days,
        "from_recipes": "; ".join(item.from_recipes),
        "is_checked": item.is_checked,
    }


def grocery_list_to_dataframe(
    result: GroceryListResult, by_store_route: bool = True
) -> pd.DataFrame:
    """One row per grocery item, optionally in store walking order."""
    items: Iterable[GroceryItem] = result.items
    if by_store_route:
        items = sort_by_store_route(items)
    return pd.DataFrame([_item_row(item) for item in items], columns=CSV_COLUMNS)


def write_grocery_list_csv(
    result: GroceryListResult, output_file: str, by_store_route: bool = True
) -> None:
    """Write a grocery list to CSV.

    Args:
        result: Generated grocery list
        output_file: Path to output CSV file
        by_store_route: Order rows by store section instead of list order
    """
    df = grocery_list_to_dataframe(result, by_store_route=by_store_route)
    df.to_csv(output_file, index=False)
    logger.info(
        f"Wrote {len(df)} grocery items to {output_file} "
        f"(~{result.estimated_shopping_time_minutes} min, "
        f"${result.estimated_total_cost:.2f})"
    )
