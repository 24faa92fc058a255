"""Database schema for saved grocery lists."""

import sqlite3

DDL = """
CREATE TABLE IF NOT EXISTS grocery_list(
    plan_id                   TEXT PRIMARY KEY,
    estimated_shopping_time   INTEGER NOT NULL,
    estimated_total_cost      REAL NOT NULL,
    updated_at                TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS grocery_item(
    plan_id          TEXT NOT NULL,
    item_id          TEXT NOT NULL,
    position         INTEGER NOT NULL,
    name             TEXT NOT NULL,
    quantity         TEXT NOT NULL,
    category         TEXT NOT NULL,
    priority         TEXT NOT NULL,
    from_recipes     TEXT NOT NULL,
    is_checked       INTEGER NOT NULL DEFAULT 0,
    estimated_cost   REAL,
    shelf_life       INTEGER,
    store_section    TEXT,
    base_ingredient  TEXT,
    unit             TEXT,
    total_quantity   REAL,
    PRIMARY KEY(plan_id, item_id),
    FOREIGN KEY(plan_id) REFERENCES grocery_list(plan_id) ON DELETE CASCADE
);

"""


def create_schema(conn: sqlite3.Connection) -> None:
    """Create the grocery list tables.

    Args:
        conn: SQLite database connection
    """
    conn.executescript(DDL)
    conn.execute("PRAGMA foreign_keys = ON")
