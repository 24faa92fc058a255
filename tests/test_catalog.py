import dataclasses
import json

import pytest

from grocery_utils.ingredients.catalog import (
    Catalog,
    CatalogDrift,
    compare_catalogs,
    ingredient_from_record,
    load_default_catalog,
)
from grocery_utils.ingredients.matching import IngredientMatcher
from grocery_utils.ingredients.models import Category


def make_record(**overrides):
    record = {
        "base_name": "rice",
        "aliases": ["white rice"],
        "category": "Grains & Pasta",
        "standard_unit": "bag",
        "conversion_factors": {"cup": 8},
        "average_cost": 2.99,
        "shelf_life_days": 365,
    }
    record.update(overrides)
    return record


def test_bundled_catalog_loads():
    catalog = load_default_catalog()
    assert len(catalog) == 28
    assert len(catalog.consolidation_rules) == 17
    assert "rice" in catalog
    assert catalog.get("Rice").standard_unit == "bag"
    assert catalog.get("chicken").category == Category.MEAT_POULTRY


def test_bundled_rules_resolve_to_catalog_entries():
    catalog = load_default_catalog()
    matcher = IngredientMatcher(catalog)
    for rule in catalog.consolidation_rules:
        assert matcher.match(rule.canonical_name) is not None, rule.canonical_name


def test_load_default_catalog_is_cached():
    assert load_default_catalog() is load_default_catalog()


def test_lookup_is_case_insensitive(catalog):
    assert catalog.get("  Greek Yogurt ").base_name == "greek yogurt"
    assert "CHICKEN" in catalog
    assert "quinoa" not in catalog
    assert 42 not in catalog


def test_iteration_keeps_catalog_order(catalog):
    assert [ingredient.base_name for ingredient in catalog][:3] == [
        "chicken",
        "garlic",
        "rice",
    ]


def test_catalog_entries_are_read_only(catalog):
    chicken = catalog.get("chicken")
    with pytest.raises(dataclasses.FrozenInstanceError):
        chicken.average_cost = 0.0
    with pytest.raises(TypeError):
        chicken.conversion_factors["oz"] = 1


def test_factor_for(catalog):
    garlic = catalog.get("garlic")
    assert garlic.factor_for("head") == 1.0
    assert garlic.factor_for("clove") == 8
    assert garlic.factor_for("cup") is None


def test_record_fields_are_normalized():
    ingredient = ingredient_from_record(
        make_record(base_name=" Rice ", aliases=["White Rice"], storage_type="pantry")
    )
    assert ingredient.base_name == "rice"
    assert ingredient.aliases == frozenset({"white rice"})
    assert ingredient.storage_type == "pantry"
    assert ingredient.sub_category is None


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"base_name": "  "}, "empty base_name"),
        ({"category": "Candy"}, "Unknown category"),
        ({"conversion_factors": {"cup": 0}}, "must be positive"),
        ({"conversion_factors": {"cup": -2}}, "must be positive"),
        ({"conversion_factors": {"cup": "eight"}}, "must be positive"),
        ({"storage_type": "cellar"}, "Unknown storage type"),
    ],
)
def test_invalid_records_are_rejected(overrides, message):
    with pytest.raises(ValueError, match=message):
        ingredient_from_record(make_record(**overrides))


@pytest.mark.parametrize("missing_field", ["base_name", "category", "standard_unit"])
def test_missing_fields_are_rejected(missing_field):
    record = make_record()
    del record[missing_field]
    with pytest.raises(ValueError, match="missing field"):
        ingredient_from_record(record)


def test_duplicate_base_names_are_rejected():
    with pytest.raises(ValueError, match="Duplicate base_name"):
        Catalog.from_records([make_record(), make_record(base_name="RICE")])


def test_from_files(tmp_path, caplog):
    catalog_file = tmp_path / "catalog.json"
    rules_file = tmp_path / "rules.json"
    catalog_file.write_text(json.dumps([make_record()]), encoding="utf-8")
    rules_file.write_text(json.dumps({"rice": ["jasmine rice"]}), encoding="utf-8")

    with caplog.at_level("INFO", logger="grocery_utils.ingredients.catalog"):
        catalog = Catalog.from_files(str(catalog_file), str(rules_file))

    assert len(catalog) == 1
    assert catalog.consolidation_rules[0].canonical_name == "rice"
    assert catalog.consolidation_rules[0].variants == ("jasmine rice",)
    assert "Loaded Catalog(1 ingredients, 1 consolidation rules)" in caplog.text


def test_from_files_without_rules(tmp_path):
    catalog_file = tmp_path / "catalog.json"
    catalog_file.write_text(json.dumps([make_record()]), encoding="utf-8")
    catalog = Catalog.from_files(str(catalog_file), rules_file=None)
    assert catalog.consolidation_rules == ()


def test_compare_catalogs_reports_drift(caplog):
    primary = Catalog.from_records(
        [make_record(), make_record(base_name="quinoa", shelf_life_days=730)]
    )
    secondary = Catalog.from_records(
        [
            make_record(category="General", standard_unit="cup"),
            make_record(base_name="quinoa", shelf_life_days=730),
            make_record(base_name="couscous"),
        ]
    )

    with caplog.at_level("WARNING", logger="grocery_utils.ingredients.catalog"):
        drift = compare_catalogs(primary, secondary)

    assert drift == [
        CatalogDrift("rice", "category", Category.GRAINS_PASTA, Category.GENERAL),
        CatalogDrift("rice", "standard_unit", "bag", "cup"),
    ]
    assert "category is 'Grains & Pasta' in primary, 'General' in secondary" in (
        caplog.text
    )


def test_compare_identical_catalogs(catalog):
    assert compare_catalogs(catalog, catalog) == []
