"""Grocery list consolidation, estimation and export."""

from .builder import (
    GroceryListBuilder,
    estimate_shopping_time,
    estimate_total_cost,
    format_quantity,
    generate_grocery_list,
    merge_prior_items,
    sort_by_store_route,
    store_section_for,
)
from .consolidation import ConsolidationLine, Consolidator, consolidate
from .export import grocery_list_to_dataframe, write_grocery_list_csv
from .plans import plan_summary, recipes_from_weekly_plan

__all__ = [
    "GroceryListBuilder",
    "estimate_shopping_time",
    "estimate_total_cost",
    "format_quantity",
    "generate_grocery_list",
    "merge_prior_items",
    "sort_by_store_route",
    "store_section_for",
    "ConsolidationLine",
    "Consolidator",
    "consolidate",
    "grocery_list_to_dataframe",
    "write_grocery_list_csv",
    "plan_summary",
    "recipes_from_weekly_plan",
]
