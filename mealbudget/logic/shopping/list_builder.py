"""Shopping list builder.

Provides build_shopping_list(plan, pantry): every ingredient used by a planned
meal that the pantry does not already hold, each listed once.
"""
from typing import Iterable, List

from mealbudget.domain.Pantry import PantryInventory
from mealbudget.domain.ShoppingList import ShoppingList
from mealbudget.domain.WeeklyPlan import WeeklyPlan


def required_ingredients(plan: WeeklyPlan) -> List[str]:
    """Union of the ingredients of every planned meal, in order of discovery."""
    seen = {}
    for recipe in plan.planned_recipes():
        for ingredient in recipe.ingredients:
            seen.setdefault(ingredient, None)
    return list(seen)


def missing_ingredients(required: Iterable[str], pantry: PantryInventory) -> List[str]:
    # Exact string match: "Tomato" in the pantry does not cover "tomato"
    return [name for name in required if name not in pantry]


def build_shopping_list(plan: WeeklyPlan, pantry: PantryInventory) -> ShoppingList:
    """Compute the shopping list for a weekly plan.

    Args:
        plan: WeeklyPlan snapshot.
        pantry: PantryInventory snapshot.

    Returns:
        A fresh ShoppingList; every item starts unchecked. Calling this twice
        with the same snapshots yields equal lists.
    """
    if plan is None or plan.is_empty():
        return ShoppingList()
    return ShoppingList.from_names(missing_ingredients(required_ingredients(plan), pantry))


__all__ = ['build_shopping_list', 'required_ingredients', 'missing_ingredients']
