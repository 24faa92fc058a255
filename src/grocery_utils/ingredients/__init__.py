"""Ingredient parsing, normalization and matching utilities."""

from .catalog import (
    DEFAULT_CATALOG_FILE,
    DEFAULT_RULES_FILE,
    Catalog,
    CatalogDrift,
    compare_catalogs,
    load_default_catalog,
)
from .categorization import categorize, categorize_ingredient
from .matching import IngredientMatcher, levenshtein_distance, similarity
from .models import (
    CanonicalIngredient,
    Category,
    ConsolidatedEntry,
    ConsolidationRule,
    GroceryItem,
    GroceryListResult,
    IngredientSource,
    ParsedLine,
    Priority,
    RecipeInput,
)
from .normalization import normalize
from .parsing import IngredientExtractor, extract
from .units import convert_quantity, normalize_unit, pluralize_unit

__all__ = [
    "DEFAULT_CATALOG_FILE",
    "DEFAULT_RULES_FILE",
    "Catalog",
    "CatalogDrift",
    "compare_catalogs",
    "load_default_catalog",
    "categorize",
    "categorize_ingredient",
    "IngredientMatcher",
    "levenshtein_distance",
    "similarity",
    "CanonicalIngredient",
    "Category",
    "ConsolidatedEntry",
    "ConsolidationRule",
    "GroceryItem",
    "GroceryListResult",
    "IngredientSource",
    "ParsedLine",
    "Priority",
    "RecipeInput",
    "normalize",
    "IngredientExtractor",
    "extract",
    "convert_quantity",
    "normalize_unit",
    "pluralize_unit",
]
