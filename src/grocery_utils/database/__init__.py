"""Database utilities for saved grocery lists."""

from .schema import DDL, create_schema
from .utils import (
    get_connection,
    load_grocery_items,
    load_grocery_list,
    save_grocery_list,
    set_item_checked,
    transaction,
)

__all__ = [
    "DDL",
    "create_schema",
    "get_connection",
    "load_grocery_items",
    "load_grocery_list",
    "save_grocery_list",
    "set_item_checked",
    "transaction",
]
