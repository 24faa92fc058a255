"""Quantity and unit extraction from raw ingredient lines."""

import re
from typing import Callable, List, Optional, Tuple

from grocery_utils.ingredients.catalog import Catalog, load_default_catalog
from grocery_utils.ingredients.matching import IngredientMatcher
from grocery_utils.ingredients.models import ParsedLine
from grocery_utils.ingredients.normalization import (
    PARENTHETICAL_RE,
    capitalize_first,
    normalize,
)
from grocery_utils.ingredients.number_utils import (
    parse_number,
    replace_unicode_fractions,
)
from grocery_utils.ingredients.units import UNIT_LOOKUP, normalize_unit

# --- Constants ---

DEFAULT_QUANTITY = 1.0
DEFAULT_UNIT = "piece"

# "pinch of" and "dash of" are read as 1/8 tsp
PINCH_QUANTITY = 0.125
PINCH_UNIT = "tsp"

_UNIT_WORDS = "|".join(
    re.escape(unit) for unit in sorted(UNIT_LOOKUP, key=len, reverse=True)
)

# Handlers return (quantity, unit, rest) and may raise ValueError for bad numbers
Handler = Callable[[re.Match], Tuple[float, str, str]]


def _with_unit(match: re.Match) -> Tuple[float, str, str]:
    return parse_number(match.group(1)), normalize_unit(match.group(2)), match.group(3)


def _without_unit(match: re.Match) -> Tuple[float, str, str]:
    return parse_number(match.group(1)), DEFAULT_UNIT, match.group(2)


def _pinch(match: re.Match) -> Tuple[float, str, str]:
    return PINCH_QUANTITY, PINCH_UNIT, match.group(1)


# Tried in order; the first pattern whose handler succeeds wins.
PATTERNS: List[Tuple[re.Pattern, Handler]] = [
    # "2 1/4 cups flour", "1/2 cup sugar", "2 cups rice"
    (
        re.compile(
            rf"^(\d+\s+\d+/\d+|\d+/\d+|\d+)\s+({_UNIT_WORDS})\s+(.+)$", re.IGNORECASE
        ),
        _with_unit,
    ),
    # "1.5 tsp salt"
    (
        re.compile(rf"^(\d+(?:\.\d+)?|\.\d+)\s+({_UNIT_WORDS})\s+(.+)$", re.IGNORECASE),
        _with_unit,
    ),
    # "1 1/2 onions"
    (re.compile(r"^(\d+\s+\d+/\d+)\s+(.+)$"), _without_unit),
    # "3 eggs"
    (re.compile(r"^(\d+)\s+(.+)$"), _without_unit),
    # "pinch of salt", "a dash of pepper"
    (re.compile(r"^(?:an?\s+)?(?:pinch|dash)\s+of\s+(.+)$", re.IGNORECASE), _pinch),
    # "1/2 onion", "0.5 avocado"
    (re.compile(r"^(\d+/\d+|\d*\.\d+)\s+(.+)$"), _without_unit),
]


def ingredient_text(rest: str) -> str:
    """Lowercased ingredient words of a line, parenthetical asides removed."""
    return " ".join(PARENTHETICAL_RE.sub(" ", rest).lower().split())


class IngredientExtractor:
    """Parse quantity, unit and cleaned name out of free-text ingredient lines.

    The cleaned name is folded through the catalog's consolidation rules, so
    "2 cups plain greek yogurt" comes back as "Greek yogurt".

    Attributes:
        matcher: Matcher whose consolidation rules finalize cleaned names.
    """

    def __init__(self, catalog: Catalog):
        self.matcher = IngredientMatcher(catalog)

    def clean_name(self, rest: str) -> str:
        """Normalize the name part of a line and resolve consolidation rules."""
        normalized = normalize(rest)
        canonical = self.matcher.resolve_consolidation(normalized)
        if canonical:
            return capitalize_first(canonical)

        # Drop stray single letters left behind by the stripping passes
        words = [
            word
            for word in normalized.split(" ")
            if len(word) > 1 or word.lower() in ("a", "i")
        ]
        final = " ".join(words).strip() or normalized
        return capitalize_first(final)

    def extract(self, raw: str) -> ParsedLine:
        """Parse one ingredient line.

        Args:
            raw: Raw ingredient text (e.g. "2 1/4 cups flour" or "pinch of salt").

        Returns:
            A ParsedLine. Lines with no recognizable quantity default to
            quantity 1 and unit "piece". Malformed numbers never raise.
        """
        text = " ".join(replace_unicode_fractions(raw).split())

        for pattern, handler in PATTERNS:
            match = pattern.match(text)
            if not match:
                continue
            try:
                parsed = handler(match)
            except (ValueError, ZeroDivisionError):
                # e.g. "1/0 cup", try the next phrasing
                continue
            quantity, unit, rest = parsed
            return ParsedLine(
                quantity, unit, self.clean_name(rest.strip()), ingredient_text(rest)
            )

        return ParsedLine(
            DEFAULT_QUANTITY, DEFAULT_UNIT, self.clean_name(text), ingredient_text(text)
        )


def extract(raw: str, catalog: Optional[Catalog] = None) -> ParsedLine:
    """Parse one ingredient line against ``catalog`` (bundled catalog by default)."""
    if catalog is None:
        catalog = load_default_catalog()
    return IngredientExtractor(catalog).extract(raw)
