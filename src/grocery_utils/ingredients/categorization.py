"""Shopping category assignment."""

from typing import List, Optional, Tuple

from grocery_utils.ingredients.catalog import Catalog, load_default_catalog
from grocery_utils.ingredients.matching import IngredientMatcher
from grocery_utils.ingredients.models import Category
from grocery_utils.ingredients.normalization import normalize

# Checked in order; the first category with a substring hit wins.
CATEGORY_KEYWORDS: List[Tuple[Category, List[str]]] = [
    (
        Category.MEAT_POULTRY,
        ["meat", "chicken", "beef", "pork", "turkey", "bacon", "sausage"],
    ),
    (Category.SEAFOOD, ["fish", "salmon", "tuna", "shrimp", "crab", "seafood"]),
    (Category.DAIRY_EGGS, ["milk", "cheese", "yogurt", "butter", "cream", "eggs"]),
    (
        Category.PRODUCE,
        ["vegetables", "fruits", "onion", "garlic", "tomato", "lettuce", "spinach"],
    ),
    (Category.GRAINS_PASTA, ["rice", "pasta", "bread", "flour", "oats", "quinoa"]),
    (Category.CONDIMENTS_OILS, ["oil", "vinegar", "sauce", "dressing", "spices"]),
    (Category.FROZEN, ["frozen"]),
    (Category.BEVERAGES, ["juice", "soda", "water", "coffee", "tea"]),
    (Category.SNACKS, ["chips", "crackers", "nuts", "cookies"]),
]


def categorize(name: str) -> Category:
    """Keyword-based category for ingredients the catalog does not know.

    Examples:
        >>> categorize("Frozen peas")
        <Category.FROZEN: 'Frozen'>
        >>> categorize("Saffron threads")
        <Category.GENERAL: 'General'>
    """
    text = name.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return category
    return Category.GENERAL


def categorize_ingredient(
    free_text: str, catalog: Optional[Catalog] = None
) -> Category:
    """Category for a free-text ingredient: catalog match first, keywords otherwise."""
    if catalog is None:
        catalog = load_default_catalog()

    ingredient = IngredientMatcher(catalog).match(normalize(free_text))
    if ingredient is not None:
        return ingredient.category
    return categorize(free_text)
