import pandas as pd
import pytest

from grocery_utils.grocery.builder import GroceryListBuilder
from grocery_utils.grocery.export import (
    CSV_COLUMNS,
    grocery_list_to_dataframe,
    write_grocery_list_csv,
)
from grocery_utils.ingredients.models import RecipeInput


@pytest.fixture
def result(catalog):
    return GroceryListBuilder(catalog).generate(
        [
            RecipeInput("Omelette", ["3 large eggs", "pinch of salt"]),
            RecipeInput("Stir fry", ["1 lb chicken breast", "1 red onion", "3 eggs"]),
        ]
    )


def test_grocery_list_to_dataframe_in_store_order(result):
    df = grocery_list_to_dataframe(result)

    assert list(df.columns) == CSV_COLUMNS
    assert list(df["name"]) == ["Onion", "Chicken", "Salt", "Eggs"]
    assert list(df["store_section"]) == [
        "Fresh Produce",
        "Meat & Seafood",
        "Pantry & Dry Goods",
        "Dairy & Refrigerated",
    ]
    eggs = df[df["name"] == "Eggs"].iloc[0]
    assert eggs["quantity"] == "6 pieces"
    assert eggs["from_recipes"] == "Omelette; Stir fry"
    assert eggs["priority"] == "high"


def test_grocery_list_to_dataframe_in_list_order(result):
    df = grocery_list_to_dataframe(result, by_store_route=False)
    assert list(df["id"]) == [item.id for item in result.items]


def test_write_grocery_list_csv(result, tmp_path):
    output_file = tmp_path / "grocery_list.csv"
    write_grocery_list_csv(result, str(output_file))

    df = pd.read_csv(output_file)
    assert list(df.columns) == CSV_COLUMNS
    assert len(df) == len(result.items)
    assert not df["is_checked"].any()
