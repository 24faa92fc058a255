"""Reference catalog of canonical ingredients and consolidation rules."""

import dataclasses
import functools
import json
import logging
import os
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from grocery_utils.ingredients.models import (
    CanonicalIngredient,
    Category,
    ConsolidationRule,
)

logger = logging.getLogger(__name__)

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")
DEFAULT_CATALOG_FILE = os.path.join(DATA_DIR, "catalog.json")
DEFAULT_RULES_FILE = os.path.join(DATA_DIR, "consolidation_rules.json")

STORAGE_TYPES = {"pantry", "fridge", "freezer", "room-temp"}


def ingredient_from_record(record: Mapping[str, Any]) -> CanonicalIngredient:
    """Build a CanonicalIngredient from one JSON catalog record.

    Raises:
        ValueError: If a required field is missing or a value is invalid.
    """
    try:
        base_name = record["base_name"].strip().lower()
        category_value = record["category"]
        standard_unit = record["standard_unit"]
    except KeyError as e:
        raise ValueError(f"Catalog record is missing field {e}: {record!r}") from None

    if not base_name:
        raise ValueError(f"Catalog record has an empty base_name: {record!r}")

    try:
        category = Category(category_value)
    except ValueError:
        raise ValueError(
            f"Unknown category '{category_value}' for ingredient '{base_name}'"
        ) from None

    factors = {}
    for unit, factor in record.get("conversion_factors", {}).items():
        if not isinstance(factor, (int, float)) or factor <= 0:
            raise ValueError(
                f"Conversion factor for '{unit}' on '{base_name}' must be positive, "
                f"got {factor!r}"
            )
        factors[unit] = float(factor)

    storage_type = record.get("storage_type")
    if storage_type is not None and storage_type not in STORAGE_TYPES:
        raise ValueError(
            f"Unknown storage type '{storage_type}' for ingredient '{base_name}'"
        )

    return CanonicalIngredient(
        base_name=base_name,
        aliases=frozenset(alias.lower() for alias in record.get("aliases", [])),
        category=category,
        standard_unit=standard_unit,
        conversion_factors=factors,
        average_cost=float(record.get("average_cost", 0.0)),
        shelf_life_days=int(record.get("shelf_life_days", 7)),
        sub_category=record.get("sub_category"),
        storage_type=storage_type,
    )


class Catalog:
    """Immutable set of canonical ingredients plus phrase-level consolidation rules.

    Build it once and hand it to the matcher and list builder. Lookups by
    base name are case-insensitive and iteration keeps the order the
    ingredients were given in, which is also the order substring matching
    tries them.

    Attributes:
        ingredients: Canonical ingredients in catalog order.
        consolidation_rules: Rules folding variant phrasings onto a canonical name.
    """

    def __init__(
        self,
        ingredients: Iterable[CanonicalIngredient],
        consolidation_rules: Iterable[ConsolidationRule] = (),
    ):
        index: Dict[str, CanonicalIngredient] = {}
        for ingredient in ingredients:
            key = ingredient.base_name.lower()
            if key in index:
                raise ValueError(f"Duplicate base_name in catalog: '{key}'")
            index[key] = ingredient

        self._index = MappingProxyType(index)
        self._ingredients: Tuple[CanonicalIngredient, ...] = tuple(index.values())
        self._rules: Tuple[ConsolidationRule, ...] = tuple(consolidation_rules)

    @property
    def ingredients(self) -> Tuple[CanonicalIngredient, ...]:
        return self._ingredients

    @property
    def consolidation_rules(self) -> Tuple[ConsolidationRule, ...]:
        return self._rules

    def get(self, name: str) -> Optional[CanonicalIngredient]:
        """Look up an ingredient by base name, ignoring case."""
        return self._index.get(name.strip().lower())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __iter__(self) -> Iterator[CanonicalIngredient]:
        return iter(self._ingredients)

    def __len__(self) -> int:
        return len(self._ingredients)

    def __repr__(self) -> str:
        return (
            f"Catalog({len(self._ingredients)} ingredients, "
            f"{len(self._rules)} consolidation rules)"
        )

    @classmethod
    def from_records(
        cls,
        ingredient_records: Iterable[Mapping[str, Any]],
        rule_records: Optional[Mapping[str, Iterable[str]]] = None,
    ) -> "Catalog":
        """Build a catalog from plain dicts shaped like the bundled JSON files."""
        ingredients = [ingredient_from_record(record) for record in ingredient_records]
        rules = [
            ConsolidationRule(
                canonical_name=canonical.strip().lower(),
                variants=tuple(variant.lower() for variant in variants),
            )
            for canonical, variants in (rule_records or {}).items()
        ]
        return cls(ingredients, rules)

    @classmethod
    def from_files(
        cls,
        catalog_file: str = DEFAULT_CATALOG_FILE,
        rules_file: Optional[str] = DEFAULT_RULES_FILE,
    ) -> "Catalog":
        """Load a catalog from JSON files.

        Args:
            catalog_file: JSON list of ingredient records. Defaults to the
                bundled catalog.
            rules_file: JSON object mapping canonical names to variant phrases.
                Defaults to the bundled rules; pass None for no rules.
        """
        with open(catalog_file, "r", encoding="utf-8") as f:
            ingredient_records = json.load(f)

        rule_records = {}
        if rules_file is not None:
            with open(rules_file, "r", encoding="utf-8") as f:
                rule_records = json.load(f)

        catalog = cls.from_records(ingredient_records, rule_records)
        logger.info(f"Loaded {catalog!r} from {catalog_file}")
        return catalog


@functools.lru_cache(maxsize=1)
def load_default_catalog() -> Catalog:
    """Load the bundled catalog once per process."""
    return Catalog.from_files()


@dataclasses.dataclass(frozen=True)
class CatalogDrift:
    base_name: str
    field: str
    primary_value: Any
    secondary_value: Any


DRIFT_FIELDS = ("category", "standard_unit", "shelf_life_days")


def compare_catalogs(primary: Catalog, secondary: Catalog) -> List[CatalogDrift]:
    """Report disagreements between two catalogs for the ingredients they share.

    The primary catalog is authoritative; this only surfaces drift while a
    second ingredient database is still in use so it can be reconciled.

    Args:
        primary: The canonical catalog.
        secondary: The catalog being compared against it.

    Returns:
        One CatalogDrift per (ingredient, field) whose category, standard unit
        or shelf life differs, in primary catalog order.
    """
    drift = []
    for ingredient in primary:
        other = secondary.get(ingredient.base_name)
        if other is None:
            continue
        for field in DRIFT_FIELDS:
            ours = getattr(ingredient, field)
            theirs = getattr(other, field)
            if ours != theirs:
                record = CatalogDrift(ingredient.base_name, field, ours, theirs)
                logger.warning(
                    f"Catalog drift for '{record.base_name}': {field} is "
                    f"{_display(ours)!r} in primary, {_display(theirs)!r} in secondary"
                )
                drift.append(record)
    return drift


def _display(value: Any) -> Any:
    return value.value if isinstance(value, Category) else value
