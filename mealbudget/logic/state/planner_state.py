"""Planner state manager.

Owns the authoritative stores (recipe catalog, weekly plan, pantry, budget)
and the derived ones (shopping list, expense total). Every mutator swaps in a
new snapshot, recomputes the derived state synchronously and only then
publishes events, so any reader or subscriber sees a consistent state.
"""
from __future__ import annotations

import logging
import math
import threading
from typing import Any, Dict, List, Optional

from mealbudget.domain.Pantry import PantryInventory
from mealbudget.domain.Recipe import Recipe, RecipeCatalog
from mealbudget.domain.ShoppingList import ShoppingList
from mealbudget.domain.WeeklyPlan import WeeklyPlan
from mealbudget.domain.errors import InvalidInputError, NotFoundError
from mealbudget.events.Event_Bus import EventBus
from mealbudget.events.event_helpers import (
    publish_budget_changed,
    publish_favorite_toggled,
    publish_pantry_changed,
    publish_plan_changed,
    publish_recomputed,
)
from mealbudget.infra.Catalog_Repository import load_catalog, load_expense_history, load_pantry
from mealbudget.logic.budget.expenses import (
    compute_budget_summary,
    compute_expense_chart,
    compute_expense_total,
)
from mealbudget.logic.recipes.suggestions import (
    favorite_recipes,
    ready_to_cook,
    recipes_for_meal_type,
    search_recipes,
    suggest_recipes,
    suggestion_entries,
)
from mealbudget.logic.shopping.list_builder import build_shopping_list
from mealbudget.utilities.config import DEFAULT_BUDGET, EXPENSE_CHART_CEILING

logger = logging.getLogger(__name__)


class PlannerStateManager:
    def __init__(self, catalog: RecipeCatalog, pantry: Optional[PantryInventory] = None,
                 budget: float = DEFAULT_BUDGET, expense_history: Optional[List[Dict[str, Any]]] = None,
                 plan: Optional[WeeklyPlan] = None, event_bus: Optional[EventBus] = None):
        self._catalog = catalog
        self._plan = plan or WeeklyPlan()
        self._pantry = pantry or PantryInventory()
        self._budget = self._validated_budget(budget)
        self._expense_history = list(expense_history or [])
        self._event_bus = event_bus or EventBus()
        self._shopping_list = ShoppingList()
        self._expense_total = 0.0
        # Serialises mutate, recompute, publish; API endpoints run in a thread pool
        self._lock = threading.RLock()
        self._recompute_shopping_list()
        self._recompute_expenses()

    @classmethod
    def from_repository(cls, event_bus: Optional[EventBus] = None, budget: float = DEFAULT_BUDGET):
        '''Builds a manager from the packaged starter catalog, pantry and expense history.'''
        return cls(
            catalog=load_catalog(),
            pantry=load_pantry(),
            budget=budget,
            expense_history=load_expense_history(),
            event_bus=event_bus,
        )

    # --- Read-only views ---------------------------------------------------
    @property
    def lock(self) -> threading.RLock:
        '''Held by every mutator; hold it to read several stores as one consistent state.'''
        return self._lock

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def catalog(self) -> RecipeCatalog:
        return self._catalog

    @property
    def plan(self) -> WeeklyPlan:
        return self._plan

    @property
    def pantry(self) -> PantryInventory:
        return self._pantry

    @property
    def shopping_list(self) -> ShoppingList:
        return self._shopping_list

    @property
    def expense_total(self) -> float:
        return self._expense_total

    @property
    def budget(self) -> float:
        return self._budget

    @property
    def expense_history(self) -> List[Dict[str, Any]]:
        return [dict(e) for e in self._expense_history]

    # --- Derivation --------------------------------------------------------
    def _recompute_shopping_list(self):
        self._shopping_list = build_shopping_list(self._plan, self._pantry)

    def _recompute_expenses(self):
        self._expense_total = compute_expense_total(self._plan)

    # --- Weekly plan -------------------------------------------------------
    def _set_plan(self, plan: WeeklyPlan, day: Optional[str], meal_type: Optional[str],
                  recipe_id: Optional[int]):
        shopping_list = build_shopping_list(plan, self._pantry)
        expense_total = compute_expense_total(plan)
        self._plan, self._shopping_list, self._expense_total = plan, shopping_list, expense_total
        publish_plan_changed(self._event_bus, day, meal_type, recipe_id)
        publish_recomputed(self._event_bus, self._shopping_list, self._expense_total)

    def assign(self, day: str, meal_type: str, recipe: Recipe):
        '''Puts recipe in the (day, meal_type) slot, replacing whatever was there.'''
        with self._lock:
            plan = self._plan.assign(day, meal_type, recipe)
            logger.info("Assigned %s to %s %s", recipe.name, day, meal_type)
            self._set_plan(plan, day, meal_type, recipe.id)
            return self._plan

    def assign_recipe_id(self, day: str, meal_type: str, recipe_id: int):
        '''Resolves recipe_id in the catalog, then assigns it.'''
        with self._lock:
            recipe = self._catalog.require(recipe_id)
            return self.assign(day, meal_type, recipe)

    def clear(self, day: str, meal_type: str):
        with self._lock:
            plan = self._plan.clear(day, meal_type)
            logger.info("Cleared %s %s", day, meal_type)
            self._set_plan(plan, day, meal_type, None)
            return self._plan

    def reset_plan(self):
        '''Empties all 21 slots at once.'''
        with self._lock:
            logger.info("Weekly plan reset")
            self._set_plan(WeeklyPlan(), None, None, None)
            return self._plan

    # --- Pantry ------------------------------------------------------------
    def add_pantry_item(self, item: str) -> bool:
        '''
        Adds item to the pantry and recomputes the shopping list.
        Returns False (and changes nothing) when the item is already present.
        Raises InvalidInputError for blank items.
        '''
        with self._lock:
            try:
                pantry = self._pantry.add(item)
            except InvalidInputError:
                logger.warning("Rejected blank pantry item %r", item)
                raise
            if pantry is self._pantry:
                logger.info("Pantry already holds %r", item)
                return False
            self._pantry, self._shopping_list = pantry, build_shopping_list(self._plan, pantry)
            publish_pantry_changed(self._event_bus, "add", item)
            publish_recomputed(self._event_bus, self._shopping_list)
            return True

    def remove_pantry_item(self, item: str) -> bool:
        '''
        Removes item from the pantry. The shopping list is recomputed even when
        the item was not there, which also clears every checked flag.
        Returns whether the item was present.
        '''
        with self._lock:
            pantry = self._pantry.remove(item)
            removed = pantry is not self._pantry
            self._pantry, self._shopping_list = pantry, build_shopping_list(self._plan, pantry)
            if removed:
                publish_pantry_changed(self._event_bus, "remove", item)
            publish_recomputed(self._event_bus, self._shopping_list)
            return removed

    # --- Shopping list -----------------------------------------------------
    def toggle_shopping_item(self, name: str) -> ShoppingList:
        '''Flips the checked flag of one item. Lost at the next recomputation.'''
        with self._lock:
            self._shopping_list = self._shopping_list.toggle_item(name)
            return self._shopping_list

    def shopping_summary(self) -> Dict[str, int]:
        return self._shopping_list.summary()

    # --- Recipes -----------------------------------------------------------
    def toggle_favorite(self, recipe_id: int) -> Recipe:
        '''
        Flips the favorite flag of recipe_id.
        Unknown ids leave the catalog untouched and raise NotFoundError.
        '''
        with self._lock:
            try:
                catalog = self._catalog.toggle_favorite(recipe_id)
            except NotFoundError:
                logger.warning("toggle_favorite: unknown recipe id %r", recipe_id)
                raise
            self._catalog = catalog
            recipe = catalog.require(recipe_id)
            publish_favorite_toggled(self._event_bus, recipe_id, recipe.favorite)
            return recipe

    def search(self, query: str = "") -> List[Recipe]:
        return search_recipes(self._catalog, query)

    def favorites(self) -> List[Recipe]:
        return favorite_recipes(self._catalog)

    def suggestions(self) -> List[Recipe]:
        return suggest_recipes(self._catalog, self._pantry)

    def suggestion_entries(self) -> List[Dict[str, Any]]:
        return suggestion_entries(self._catalog, self._pantry)

    def ready_to_cook(self) -> List[Recipe]:
        return ready_to_cook(self._catalog, self._pantry)

    def recipes_for_meal_type(self, meal_type: str) -> List[Recipe]:
        return recipes_for_meal_type(self._catalog, meal_type)

    # --- Budget ------------------------------------------------------------
    @staticmethod
    def _validated_budget(amount) -> float:
        try:
            value = float(amount)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Budget must be a number, got {amount!r}") from e
        if not math.isfinite(value) or value < 0:
            raise InvalidInputError(f"Budget must be a non-negative number, got {amount!r}")
        return value

    def set_budget(self, amount) -> float:
        with self._lock:
            try:
                self._budget = self._validated_budget(amount)
            except InvalidInputError:
                logger.warning("Rejected budget %r", amount)
                raise
            publish_budget_changed(self._event_bus, self._budget)
            return self._budget

    def budget_summary(self) -> Dict[str, Any]:
        return compute_budget_summary(self._expense_total, self._budget)

    def expense_history_chart(self, ceiling: float = EXPENSE_CHART_CEILING) -> Dict[str, Any]:
        return compute_expense_chart(self._expense_history, ceiling=ceiling)

    def __repr__(self) -> str:
        return (f"PlannerStateManager(recipes={len(self._catalog)}, pantry={len(self._pantry)}, "
                f"shopping={len(self._shopping_list)}, expenses={self._expense_total:.2f}, "
                f"budget={self._budget:.2f})")
