import pytest

from grocery_utils.ingredients.normalization import capitalize_first, normalize

NORMALIZE_CASES = [
    ("2 cups of cooked rice", "rice"),
    ("1 (15 oz) can chickpeas, rinsed and drained", "chickpeas"),
    ("Extra-virgin olive oil", "olive oil"),
    ("2 tablespoons extra-virgin olive oil", "olive oil"),
    ("3 large eggs", "eggs"),
    ("2% milk", "milk"),
    ("salt, to taste", "salt"),
    ("Fresh basil leaves", "basil leaves"),
    ("A pinch of salt", "salt"),
    ("2 cloves garlic, minced", "garlic"),
    ("1 lb boneless, skinless chicken thighs", "chicken thighs"),
    ("1 cup crumbled feta cheese", "feta cheese"),
    ("  lots   of   whitespace  ", "lots of whitespace"),
]


@pytest.mark.parametrize("input_text, expected_text", NORMALIZE_CASES)
def test_normalize(input_text, expected_text):
    """Test that normalize removes quantities, units, qualifiers and packaging."""
    assert normalize(input_text) == expected_text


@pytest.mark.parametrize(
    "input_text",
    [case[0] for case in NORMALIZE_CASES]
    + ["to taste", "Large", "1 (8 oz) package", "½ cup chopped fresh parsley"],
)
def test_normalize_is_idempotent(input_text):
    once = normalize(input_text)
    assert normalize(once) == once


@pytest.mark.parametrize("input_text", ["to taste", "Large", "chopped"])
def test_normalize_falls_back_to_original_when_everything_is_stripped(input_text):
    assert normalize(input_text) == input_text.strip()


@pytest.mark.parametrize("input_text", ["", "   ", "\t\n"])
def test_normalize_blank_input(input_text):
    assert normalize(input_text) == ""


def test_normalize_keeps_words_containing_stripped_tokens():
    """Only whole tokens are removed."""
    assert normalize("cantaloupe") == "cantaloupe"
    assert normalize("headcheese") == "headcheese"


def test_normalize_no_changes():
    assert normalize("lemon juice") == "lemon juice"


def test_capitalize_first():
    assert capitalize_first("greek yogurt") == "Greek yogurt"
    assert capitalize_first("") == ""
