"""Ingredient text normalization."""

import re
from typing import Iterable

from grocery_utils.ingredients.number_utils import replace_unicode_fractions
from grocery_utils.ingredients.units import UNIT_LOOKUP

QUALIFIERS = [
    "plain",
    "fresh",
    "freshly",
    "organic",
    "natural",
    "raw",
    "cooked",
    "uncooked",
    "dried",
    "frozen",
    "canned",
    "bottled",
    "extra virgin",
    "extra-virgin",
    "virgin",
    "reduced fat",
    "reduced-fat",
    "low fat",
    "low-fat",
    "non-fat",
    "nonfat",
    "fat-free",
    "whole",
    "skim",
    "2%",
    "1%",
    "boneless",
    "skinless",
    "unsalted",
    "ripe",
]

PREPARATIONS = [
    "chopped",
    "diced",
    "minced",
    "sliced",
    "grated",
    "shredded",
    "crumbled",
    "pitted",
    "halved",
    "quartered",
    "rinsed",
    "drained",
    "peeled",
    "cubed",
    "crushed",
    "mashed",
    "beaten",
    "softened",
    "melted",
    "toasted",
    "trimmed",
    "seeded",
    "finely",
    "roughly",
    "thinly",
    "coarsely",
]

# Trailing usage notes carry no ingredient information
USAGE_NOTES = [
    "to taste",
    "as needed",
    "for garnish",
    "for serving",
    "optional",
    "divided",
]

SIZES = ["large", "medium", "small", "extra", "jumbo", "baby", "mini"]

PACKAGING = [
    "can",
    "cans",
    "jar",
    "jars",
    "bottle",
    "bottles",
    "package",
    "packages",
    "bag",
    "bags",
    "box",
    "boxes",
    "container",
    "containers",
    "bunch",
    "bunches",
    "head",
    "heads",
    "clove",
    "cloves",
    "piece",
    "pieces",
    "inch",
    "inches",
    "pinch",
    "dash",
    "sprig",
    "sprigs",
]


def _word_pattern(words: Iterable[str]) -> re.Pattern:
    """Compile a whole-token alternation, longest phrase first."""
    alternatives = "|".join(
        re.escape(word) for word in sorted(set(words), key=len, reverse=True)
    )
    return re.compile(rf"(?<![\w-])(?:{alternatives})(?![\w-])", re.IGNORECASE)


_UNIT_ALTERNATIVES = "|".join(
    re.escape(unit) for unit in sorted(UNIT_LOOKUP, key=len, reverse=True)
)

PARENTHETICAL_RE = re.compile(r"\([^)]*\)")
LEADING_QUANTITY_RE = re.compile(
    r"^(?:\d+\s+\d+/\d+|\d+/\d+|\d+(?:\.\d+)?)(?![\d.%/])\s*"
    rf"(?:(?:{_UNIT_ALTERNATIVES})(?![\w-]))?\s*",
    re.IGNORECASE,
)
QUALIFIER_RE = _word_pattern(QUALIFIERS)
PREPARATION_RE = _word_pattern(PREPARATIONS)
SIZE_RE = _word_pattern(SIZES)
PACKAGING_RE = _word_pattern(PACKAGING)
USAGE_NOTE_RE = _word_pattern(USAGE_NOTES)
LEADING_FILLER_RE = re.compile(r"^(?:(?:a|an|the|of|and|or)\s+)+")
TRAILING_FILLER_RE = re.compile(r"(?:\s+(?:and|or|of))+$")

# Safety bound for the fixed-point loop; real input settles in two passes.
MAX_PASSES = 10


def _collapse(text: str) -> str:
    return " ".join(text.split())


def _normalize_pass(text: str) -> str:
    text = PARENTHETICAL_RE.sub(" ", text)
    text = text.replace("(", " ").replace(")", " ")
    text = _collapse(replace_unicode_fractions(text).lower())

    text = LEADING_QUANTITY_RE.sub("", text, count=1)
    for pattern in (
        QUALIFIER_RE,
        PREPARATION_RE,
        SIZE_RE,
        PACKAGING_RE,
        USAGE_NOTE_RE,
    ):
        text = pattern.sub(" ", text)

    # Keep the first comma segment with content ("boneless, skinless chicken")
    segments = [_collapse(part).strip(" .;:-") for part in text.split(",")]
    text = next((segment for segment in segments if segment), "")
    text = LEADING_FILLER_RE.sub("", text)
    text = TRAILING_FILLER_RE.sub("", text)
    return text.strip()


def normalize(raw: str) -> str:
    """Reduce a raw ingredient phrase to a bare ingredient name.

    Removes parenthetical asides, a leading quantity and unit, descriptive
    qualifiers, preparation words, size words and packaging nouns, keeps the
    first non-empty comma-separated part and drops a leading article. The result is
    lowercased.

    The cleaning pass is repeated until the text stops changing, which makes
    the function idempotent. If every token gets stripped, the original
    trimmed text is returned instead so the name is never empty.

    Args:
        raw: Raw ingredient text, with or without a quantity.

    Returns:
        The bare ingredient name, or "" for blank input.

    Examples:
        >>> normalize("2 cups of cooked rice")
        'rice'
        >>> normalize("1 (15 oz) can chickpeas, rinsed and drained")
        'chickpeas'
        >>> normalize("Extra-virgin olive oil")
        'olive oil'
    """
    original = raw.strip()
    if not original:
        return ""

    text = original
    for _ in range(MAX_PASSES):
        cleaned = _normalize_pass(text)
        if not cleaned:
            return original
        if cleaned == text:
            break
        text = cleaned
    return text


def capitalize_first(text: str) -> str:
    """Uppercase the first character and leave the rest alone."""
    return text[:1].upper() + text[1:]
