#!/usr/bin/env python3
"""
Generate grocery lists from weekly meal plan JSON files.

Each plan file holds either a bare ``{day: [meal, ...]}`` mapping or an
object with ``planId`` and ``weeklyMeals``. The list for each plan is saved
to SQLite, carrying checked items over from the previously saved list, and
written to CSV in store walking order.
"""

import argparse
import json
import logging
import pathlib

from tqdm import tqdm

from grocery_utils.database import (
    create_schema,
    get_connection,
    load_grocery_items,
    save_grocery_list,
)
from grocery_utils.grocery import (
    GroceryListBuilder,
    plan_summary,
    recipes_from_weekly_plan,
    write_grocery_list_csv,
)
from grocery_utils.ingredients import DEFAULT_CATALOG_FILE, DEFAULT_RULES_FILE, Catalog

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def load_plan(plan_file: pathlib.Path):
    """Return (plan_id, weekly_meals) for a plan file."""
    with open(plan_file, "r", encoding="utf-8") as f:
        data = json.load(f)
    if "weeklyMeals" in data:
        return str(data.get("planId") or plan_file.stem), data["weeklyMeals"]
    return plan_file.stem, data


def main():
    parser = argparse.ArgumentParser(
        description="Generate grocery lists from weekly meal plan JSON files"
    )
    parser.add_argument("plans", nargs="+", help="Meal plan JSON files")
    parser.add_argument(
        "--catalog",
        type=str,
        default=DEFAULT_CATALOG_FILE,
        help="Ingredient catalog JSON (default: bundled catalog)",
    )
    parser.add_argument(
        "--rules",
        type=str,
        default=DEFAULT_RULES_FILE,
        help="Consolidation rules JSON (default: bundled rules)",
    )
    parser.add_argument(
        "--db-path",
        type=str,
        default="data/grocery_lists.db",
        help="Path to the database file (default: data/grocery_lists.db)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=".",
        help="Directory to write output CSV files (default: current directory)",
    )
    args = parser.parse_args()

    builder = GroceryListBuilder(Catalog.from_files(args.catalog, args.rules))
    output_dir = pathlib.Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    pathlib.Path(args.db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = get_connection(args.db_path)
    create_schema(conn)

    try:
        for plan_file in tqdm(
            [pathlib.Path(p) for p in args.plans], desc="Generating grocery lists"
        ):
            plan_id, weekly_meals = load_plan(plan_file)
            recipes = recipes_from_weekly_plan(weekly_meals)
            summary = plan_summary(recipes)
            logger.info(
                f"Plan '{plan_id}': {summary['recipes']} recipes, "
                f"{summary['ingredient_lines']} ingredient lines"
            )

            prior_items = load_grocery_items(conn, plan_id)
            result = builder.generate(recipes, prior_list=prior_items)

            save_grocery_list(conn, plan_id, result)
            write_grocery_list_csv(
                result, str(output_dir / f"{plan_id}_grocery_list.csv")
            )
    finally:
        conn.close()


if __name__ == "__main__":
    main()
