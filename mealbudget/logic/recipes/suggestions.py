"""Recipe views over the catalog and pantry.

Suggestions are recipes the pantry covers partially: at least one ingredient
owned, at least one still to buy. Fully covered recipes are "ready to cook"
instead and never appear as suggestions.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Tuple

from mealbudget.domain.Pantry import PantryInventory
from mealbudget.domain.Recipe import Recipe
from mealbudget.domain.errors import InvalidSlotError
from mealbudget.utilities.constants import MEAL_TYPES

__all__ = [
    "pantry_coverage", "is_suggested", "suggest_recipes", "ready_to_cook",
    "search_recipes", "favorite_recipes", "recipes_for_meal_type", "suggestion_entries",
]


def pantry_coverage(recipe: Recipe, pantry: PantryInventory) -> Tuple[int, int]:
    """Return (owned, total) ingredient counts for recipe."""
    owned = sum(1 for ing in recipe.ingredients if ing in pantry)
    return owned, len(recipe.ingredients)


def is_suggested(recipe: Recipe, pantry: PantryInventory) -> bool:
    owned, total = pantry_coverage(recipe, pantry)
    return 0 < owned < total


def suggest_recipes(recipes: Iterable[Recipe], pantry: PantryInventory) -> List[Recipe]:
    return [r for r in recipes if is_suggested(r, pantry)]


def ready_to_cook(recipes: Iterable[Recipe], pantry: PantryInventory) -> List[Recipe]:
    """Recipes whose every ingredient is already in the pantry."""
    return [r for r in recipes if all(ing in pantry for ing in r.ingredients)]


def suggestion_entries(recipes: Iterable[Recipe], pantry: PantryInventory) -> List[Dict[str, Any]]:
    """Suggested recipes with the 'You have X of Y ingredients' figures."""
    entries = []
    for recipe in suggest_recipes(recipes, pantry):
        owned, total = pantry_coverage(recipe, pantry)
        entry = recipe.to_dict()
        entry.update({
            "owned": owned,
            "total": total,
            "missing": [ing for ing in recipe.ingredients if ing not in pantry],
        })
        entries.append(entry)
    return entries


def search_recipes(recipes: Iterable[Recipe], query: str) -> List[Recipe]:
    """Case-insensitive substring match on the recipe name or any ingredient.

    An empty query returns every recipe.
    """
    if not query:
        return list(recipes)
    needle = query.lower()
    return [
        r for r in recipes
        if needle in r.name.lower() or any(needle in ing.lower() for ing in r.ingredients)
    ]


def favorite_recipes(recipes: Iterable[Recipe]) -> List[Recipe]:
    return [r for r in recipes if r.favorite]


def recipes_for_meal_type(recipes: Iterable[Recipe], meal_type: str) -> List[Recipe]:
    """Recipes offered when filling a slot of the given meal type."""
    if meal_type not in MEAL_TYPES:
        raise InvalidSlotError(None, meal_type)
    return [r for r in recipes if r.type == meal_type]
