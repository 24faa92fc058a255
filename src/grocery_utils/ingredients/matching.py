"""Resolve cleaned ingredient names to canonical catalog entries."""

import logging
from typing import Optional

from grocery_utils.ingredients.catalog import Catalog
from grocery_utils.ingredients.models import CanonicalIngredient

logger = logging.getLogger(__name__)

RULE_SIMILARITY_THRESHOLD = 0.8
FUZZY_SIMILARITY_THRESHOLD = 0.75


def levenshtein_distance(a: str, b: str) -> int:
    """Edit distance between two strings (insert, delete, substitute)."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(
                min(
                    current[j - 1] + 1,
                    previous[j] + 1,
                    previous[j - 1] + cost,
                )
            )
        previous = current
    return previous[-1]


def similarity(a: str, b: str) -> float:
    """Normalized Levenshtein similarity in [0, 1].

    Examples:
        >>> similarity("egg", "eggs")
        0.75
        >>> similarity("", "")
        1.0
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return (longest - levenshtein_distance(a, b)) / longest


class IngredientMatcher:
    """Match cleaned ingredient names against a catalog.

    Attempts, first success wins:

    1. consolidation rules (variant contained in the text, or similarity of
       at least 0.8), resolved to the rule's canonical catalog entry;
    2. a catalog base name contained in the text;
    3. a catalog alias contained in the text;
    4. fuzzy similarity of at least 0.75 to a base name.

    Attributes:
        catalog: The reference catalog matches are drawn from.
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def resolve_consolidation(self, text: str) -> Optional[str]:
        """Return the canonical name of the first rule that covers ``text``."""
        text = text.lower().strip()
        if not text:
            return None

        for rule in self.catalog.consolidation_rules:
            for phrase in rule.variants + (rule.canonical_name,):
                if (
                    phrase in text
                    or similarity(text, phrase) >= RULE_SIMILARITY_THRESHOLD
                ):
                    return rule.canonical_name
        return None

    def _lookup_canonical(self, canonical_name: str) -> Optional[CanonicalIngredient]:
        ingredient = self.catalog.get(canonical_name)
        if ingredient is not None:
            return ingredient
        for candidate in self.catalog:
            if candidate.base_name in canonical_name:
                return candidate
        return None

    def match(self, cleaned_name: str) -> Optional[CanonicalIngredient]:
        """Find the canonical ingredient for a cleaned name.

        Args:
            cleaned_name: Ingredient name with quantities and noise removed.

        Returns:
            The matching CanonicalIngredient, or None when the ingredient is
            not in the catalog.
        """
        text = cleaned_name.lower().strip()
        if not text:
            return None

        canonical_name = self.resolve_consolidation(text)
        if canonical_name:
            ingredient = self._lookup_canonical(canonical_name)
            if ingredient is not None:
                return ingredient

        for ingredient in self.catalog:
            if ingredient.base_name in text:
                return ingredient

        for ingredient in self.catalog:
            for alias in ingredient.aliases:
                if alias in text:
                    return ingredient

        for ingredient in self.catalog:
            if similarity(text, ingredient.base_name) >= FUZZY_SIMILARITY_THRESHOLD:
                return ingredient

        logger.debug(f"No catalog match for '{cleaned_name}'")
        return None
