"""Flatten a stored weekly meal plan into recipe inputs."""

import logging
from typing import Any, Dict, List, Mapping, Sequence

from grocery_utils.ingredients.models import RecipeInput

logger = logging.getLogger(__name__)

CARB_BASE_LINE = "1 serving {}"


def recipe_from_meal(meal: Mapping[str, Any]) -> RecipeInput:
    """Build a RecipeInput from one planned meal dict.

    The meal's carb base (rice, quinoa, ...) is added as a ``1 serving``
    ingredient line so it lands on the list with everything else.
    """
    name = meal.get("recipeName") or meal.get("name") or "Untitled recipe"
    lines = [line for line in meal.get("ingredients") or [] if isinstance(line, str)]

    carb_base = meal.get("carbBase")
    if isinstance(carb_base, str) and carb_base.strip():
        lines.append(CARB_BASE_LINE.format(carb_base.strip()))

    servings = meal.get("servings") or 1
    return RecipeInput(name=name, ingredient_lines=lines, servings=float(servings))


def recipes_from_weekly_plan(
    plan: Mapping[str, Sequence[Mapping[str, Any]]]
) -> List[RecipeInput]:
    """Flatten ``{day: [meal, ...]}`` into recipe inputs, in day and meal order.

    Meals with no ingredient list are skipped with a warning.

    Args:
        plan: Weekly plan keyed by day name. Each meal has ``recipeName`` (or
            ``name``), ``servings``, ``ingredients`` and optionally ``carbBase``.

    Returns:
        One RecipeInput per usable meal.
    """
    recipes = []
    for day, meals in plan.items():
        for meal in meals or []:
            if not meal.get("ingredients"):
                label = meal.get("recipeName") or meal.get("name") or "unnamed meal"
                logger.warning(f"Skipping '{label}' on {day}: no ingredients listed")
                continue
            recipes.append(recipe_from_meal(meal))
    return recipes


def plan_summary(recipes: Sequence[RecipeInput]) -> Dict[str, int]:
    """Count recipes and ingredient lines, for progress logging."""
    return {
        "recipes": len(recipes),
        "ingredient_lines": sum(len(recipe.ingredient_lines) for recipe in recipes),
    }
