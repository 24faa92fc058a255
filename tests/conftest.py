import pytest

from grocery_utils.ingredients import Catalog

INGREDIENT_RECORDS = [
    {
        "base_name": "chicken",
        "aliases": ["chicken breast", "chicken thigh"],
        "category": "Meat & Poultry",
        "standard_unit": "lb",
        "conversion_factors": {"oz": 16},
        "average_cost": 8.0,
        "shelf_life_days": 3,
        "storage_type": "fridge",
    },
    {
        "base_name": "garlic",
        "aliases": ["garlic bulb"],
        "category": "Produce",
        "standard_unit": "head",
        "conversion_factors": {"clove": 8, "tsp": 24},
        "average_cost": 0.5,
        "shelf_life_days": 30,
    },
    {
        "base_name": "rice",
        "aliases": ["white rice", "brown rice"],
        "category": "Grains & Pasta",
        "standard_unit": "bag",
        "conversion_factors": {"cup": 8, "serving": 16},
        "average_cost": 4.0,
        "shelf_life_days": 365,
    },
    {
        "base_name": "salt",
        "aliases": ["sea salt"],
        "category": "Condiments & Oils",
        "standard_unit": "container",
        "conversion_factors": {"tsp": 156},
        "average_cost": 1.5,
        "shelf_life_days": 1095,
    },
    {
        "base_name": "greek yogurt",
        "aliases": ["plain greek yogurt"],
        "category": "Dairy & Eggs",
        "standard_unit": "container",
        "conversion_factors": {"cup": 4},
        "average_cost": 3.0,
        "shelf_life_days": 14,
    },
    {
        "base_name": "eggs",
        "aliases": ["egg"],
        "category": "Dairy & Eggs",
        "standard_unit": "dozen",
        "conversion_factors": {"piece": 12},
        "average_cost": 4.8,
        "shelf_life_days": 21,
    },
    {
        "base_name": "onion",
        "aliases": ["red onion", "yellow onion"],
        "category": "Produce",
        "standard_unit": "lb",
        "conversion_factors": {"piece": 4},
        "average_cost": 2.0,
        "shelf_life_days": 30,
    },
]

RULE_RECORDS = {
    "greek yogurt": ["plain greek yogurt", "greek style yogurt"],
    "garlic": ["garlic cloves", "minced garlic"],
    "salt": ["sea salt", "kosher salt"],
}


@pytest.fixture
def catalog():
    return Catalog.from_records(INGREDIENT_RECORDS, RULE_RECORDS)
