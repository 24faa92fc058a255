#!/usr/bin/env python3
"""
Compare a secondary ingredient catalog against the canonical one and report
ingredients whose category, standard unit or shelf life disagree.
"""

import argparse
import logging
import sys

from grocery_utils.ingredients import DEFAULT_CATALOG_FILE, Catalog, compare_catalogs

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description="Report drift between two ingredient catalogs"
    )
    parser.add_argument("secondary", help="Catalog JSON to check")
    parser.add_argument(
        "--catalog",
        type=str,
        default=DEFAULT_CATALOG_FILE,
        help="Canonical catalog JSON (default: bundled catalog)",
    )
    args = parser.parse_args()

    primary = Catalog.from_files(args.catalog, rules_file=None)
    secondary = Catalog.from_files(args.secondary, rules_file=None)

    drift = compare_catalogs(primary, secondary)
    shared = sum(1 for ingredient in primary if ingredient.base_name in secondary)
    logger.info(
        f"{len(drift)} disagreements across {shared} shared ingredients "
        f"({len(primary)} canonical, {len(secondary)} secondary)"
    )
    sys.exit(1 if drift else 0)


if __name__ == "__main__":
    main()
