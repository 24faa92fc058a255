import pytest

from grocery_utils.ingredients import Catalog
from grocery_utils.ingredients.categorization import categorize, categorize_ingredient
from grocery_utils.ingredients.matching import (
    IngredientMatcher,
    levenshtein_distance,
    similarity,
)
from grocery_utils.ingredients.models import Category


@pytest.fixture
def matcher(catalog):
    return IngredientMatcher(catalog)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("", "abc", 3),
        ("abc", "", 3),
        ("salt", "salt", 0),
    ],
)
def test_levenshtein_distance(a, b, expected):
    assert levenshtein_distance(a, b) == expected
    assert levenshtein_distance(b, a) == expected


def test_similarity():
    assert similarity("egg", "eggs") == pytest.approx(0.75)
    assert similarity("rice", "rice") == 1.0
    assert similarity("", "") == 1.0
    assert similarity("abc", "xyz") == 0.0


@pytest.mark.parametrize(
    "cleaned_name, expected_base_name",
    [
        # consolidation rule
        ("greek style yogurt", "greek yogurt"),
        ("kosher salt", "salt"),
        ("minced garlic", "garlic"),
        # base name contained in the text
        ("chicken breasts", "chicken"),
        ("red onion", "onion"),
        ("Rice", "rice"),
        # alias contained in the text
        ("egg", "eggs"),
        # fuzzy
        ("chiken", "chicken"),
        ("onions", "onion"),
    ],
)
def test_match(matcher, cleaned_name, expected_base_name):
    ingredient = matcher.match(cleaned_name)
    assert ingredient is not None
    assert ingredient.base_name == expected_base_name


@pytest.mark.parametrize("cleaned_name", ["quinoa", "saffron threads", "", "   "])
def test_match_returns_none_for_unknown_ingredients(matcher, cleaned_name):
    assert matcher.match(cleaned_name) is None


def test_match_logs_unmatched_at_debug(matcher, caplog):
    with caplog.at_level("DEBUG", logger="grocery_utils.ingredients.matching"):
        matcher.match("quinoa")
    assert "No catalog match for 'quinoa'" in caplog.text


def test_resolve_consolidation(matcher):
    assert matcher.resolve_consolidation("plain greek yogurt") == "greek yogurt"
    assert matcher.resolve_consolidation("garlic cloves") == "garlic"
    assert matcher.resolve_consolidation("quinoa") is None


def test_rule_canonical_name_falls_back_to_contained_catalog_key():
    catalog = Catalog.from_records(
        [
            {
                "base_name": "cheese",
                "category": "Dairy & Eggs",
                "standard_unit": "package",
            }
        ],
        {"parmesan cheese": ["grated parmesan"]},
    )
    ingredient = IngredientMatcher(catalog).match("grated parmesan")
    assert ingredient is not None
    assert ingredient.base_name == "cheese"


def test_match_prefers_catalog_order():
    catalog = Catalog.from_records(
        [
            {"base_name": "greek yogurt", "category": "Dairy & Eggs", "standard_unit": "cup"},
            {"base_name": "yogurt", "category": "Dairy & Eggs", "standard_unit": "cup"},
        ]
    )
    assert IngredientMatcher(catalog).match("greek yogurt").base_name == "greek yogurt"
    assert IngredientMatcher(catalog).match("vanilla yogurt").base_name == "yogurt"


@pytest.mark.parametrize(
    "name, expected_category",
    [
        ("Ground pork", Category.MEAT_POULTRY),
        ("Canned tuna", Category.SEAFOOD),
        ("Heavy cream", Category.DAIRY_EGGS),
        ("Romaine lettuce", Category.PRODUCE),
        ("1 serving quinoa", Category.GRAINS_PASTA),
        ("Rice vinegar", Category.GRAINS_PASTA),
        ("Soy sauce", Category.CONDIMENTS_OILS),
        ("1 bag frozen peas", Category.FROZEN),
        ("Orange juice", Category.BEVERAGES),
        ("Tortilla chips", Category.SNACKS),
        ("Saffron threads", Category.GENERAL),
        ("", Category.GENERAL),
    ],
)
def test_categorize(name, expected_category):
    assert categorize(name) == expected_category


@pytest.mark.parametrize(
    "free_text, expected_category",
    [
        ("2 lbs boneless chicken thighs", Category.MEAT_POULTRY),
        ("2 cups plain greek yogurt", Category.DAIRY_EGGS),
        ("1 cup quinoa", Category.GRAINS_PASTA),
        ("3 saffron threads", Category.GENERAL),
    ],
)
def test_categorize_ingredient(catalog, free_text, expected_category):
    assert categorize_ingredient(free_text, catalog) == expected_category


def test_categorize_ingredient_uses_catalog_before_keywords():
    catalog = Catalog.from_records(
        [{"base_name": "tofu", "category": "Produce", "standard_unit": "package"}]
    )
    assert categorize("silken tofu") == Category.GENERAL
    assert categorize_ingredient("1 package silken tofu", catalog) == Category.PRODUCE
