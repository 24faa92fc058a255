"""Database helpers for storing generated grocery lists."""

import contextlib
import json
import logging
import pathlib
import sqlite3
from typing import Generator, List, Optional, Union

from grocery_utils.ingredients.models import GroceryItem, GroceryListResult

logger = logging.getLogger(__name__)

ITEM_COLUMNS = (
    "item_id",
    "position",
    "name",
    "quantity",
    "category",
    "priority",
    "from_recipes",
    "is_checked",
    "estimated_cost",
    "shelf_life",
    "store_section",
    "base_ingredient",
    "unit",
    "total_quantity",
)


def get_connection(db_path: Union[str, pathlib.Path]) -> sqlite3.Connection:
    """Get a SQLite database connection with foreign keys enabled.

    Args:
        db_path: Path to the SQLite database file

    Returns:
        SQLite connection with foreign keys enabled
    """
    conn = sqlite3.connect(db_path)
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextlib.contextmanager
def transaction(conn: sqlite3.Connection) -> Generator[sqlite3.Cursor, None, None]:
    """Context manager for database transactions.

    Args:
        conn: SQLite database connection

    Yields:
        Database cursor for executing queries

    Example:
        with transaction(conn) as cur:
            cur.execute("DELETE FROM grocery_list WHERE plan_id = ?", ("week-1",))
    """
    cur = conn.cursor()
    try:
        yield cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise


def _item_values(plan_id: str, position: int, item: GroceryItem) -> tuple:
    return (
        plan_id,
        item.id,
        position,
        item.name,
        item.quantity_display,
        item.category.value,
        item.priority.value,
        json.dumps(item.from_recipes),
        int(item.is_checked),
        item.estimated_cost,
        item.shelf_life_days,
        item.store_section,
        item.base_ingredient,
        item.unit,
        item.total_quantity,
    )


def save_grocery_list(
    conn: sqlite3.Connection, plan_id: str, result: GroceryListResult
) -> None:
    """Replace the saved grocery list for a meal plan.

    The old list and its items are deleted and the new ones written in a
    single transaction, so concurrent saves for one plan end with the last
    writer's list.

    Args:
        conn: SQLite database connection
        plan_id: Identifier of the meal plan the list belongs to
        result: Generated grocery list
    """
    placeholders = ", ".join("?" for _ in range(len(ITEM_COLUMNS) + 1))
    with transaction(conn) as cur:
        cur.execute("DELETE FROM grocery_item WHERE plan_id = ?", (plan_id,))
        cur.execute("DELETE FROM grocery_list WHERE plan_id = ?", (plan_id,))
        cur.execute(
            "INSERT INTO grocery_list(plan_id, estimated_shopping_time, "
            "estimated_total_cost) VALUES (?, ?, ?)",
            (
                plan_id,
                result.estimated_shopping_time_minutes,
                result.estimated_total_cost,
            ),
        )
        cur.executemany(
            f"INSERT INTO grocery_item(plan_id, {', '.join(ITEM_COLUMNS)}) "
            f"VALUES ({placeholders})",
            [
                _item_values(plan_id, position, item)
                for position, item in enumerate(result.items)
            ],
        )
    logger.info(f"Saved {len(result.items)} grocery items for plan '{plan_id}'")


def load_grocery_items(conn: sqlite3.Connection, plan_id: str) -> List[GroceryItem]:
    """Load the saved items for a meal plan in list order (empty if none)."""
    cur = conn.execute(
        f"SELECT {', '.join(ITEM_COLUMNS)} FROM grocery_item "
        "WHERE plan_id = ? ORDER BY position",
        (plan_id,),
    )
    items = []
    for row in cur.fetchall():
        record = dict(zip(ITEM_COLUMNS, row))
        items.append(
            GroceryItem.from_dict(
                {
                    "id": record["item_id"],
                    "name": record["name"],
                    "quantity": record["quantity"],
                    "category": record["category"],
                    "priority": record["priority"],
                    "fromRecipes": json.loads(record["from_recipes"]),
                    "isChecked": bool(record["is_checked"]),
                    "estimatedCost": record["estimated_cost"],
                    "shelfLife": record["shelf_life"],
                    "storeSection": record["store_section"],
                    "baseIngredient": record["base_ingredient"],
                    "unit": record["unit"],
                    "totalQuantityNeeded": record["total_quantity"],
                }
            )
        )
    return items


def load_grocery_list(
    conn: sqlite3.Connection, plan_id: str
) -> Optional[GroceryListResult]:
    """Load a saved grocery list with its estimates, or None if never saved."""
    row = conn.execute(
        "SELECT estimated_shopping_time, estimated_total_cost FROM grocery_list "
        "WHERE plan_id = ?",
        (plan_id,),
    ).fetchone()
    if row is None:
        return None
    return GroceryListResult(
        items=load_grocery_items(conn, plan_id),
        estimated_shopping_time_minutes=row[0],
        estimated_total_cost=row[1],
    )


def set_item_checked(
    conn: sqlite3.Connection, plan_id: str, item_id: str, checked: bool
) -> bool:
    """Mark a saved item as checked or unchecked.

    Returns:
        True if the item exists and was updated, False otherwise.
    """
    with transaction(conn) as cur:
        cur.execute(
            "UPDATE grocery_item SET is_checked = ? WHERE plan_id = ? AND item_id = ?",
            (int(checked), plan_id, item_id),
        )
        updated = cur.rowcount > 0
    if not updated:
        logger.warning(f"No item '{item_id}' in grocery list for plan '{plan_id}'")
    return updated
