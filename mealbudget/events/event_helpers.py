"""Event helper utilities.

Builders for the payloads the planner state manager publishes, so every
publisher and the web observers agree on the payload shape.

Quick import:
    from mealbudget.events.event_helpers import (
        publish_plan_changed, publish_pantry_changed, publish_recomputed
    )
"""
from __future__ import annotations

from typing import Optional

from .Event_Bus import (
    EventBus,
    PLAN_CHANGED, PANTRY_CHANGED, SHOPPING_LIST_RECOMPUTED,
    EXPENSES_RECOMPUTED, BUDGET_CHANGED, RECIPE_FAVORITE_TOGGLED,
)

__all__ = [
    'publish_plan_changed', 'publish_pantry_changed', 'publish_recomputed',
    'publish_budget_changed', 'publish_favorite_toggled',
]


def publish_plan_changed(bus: EventBus, day: Optional[str], meal_type: Optional[str], recipe_id: Optional[int]):
    """Publish a plan.changed event. day/meal_type are None for a whole-week reset."""
    bus.publish(PLAN_CHANGED, {
        'day': day,
        'meal_type': meal_type,
        'recipe_id': recipe_id,
    })


def publish_pantry_changed(bus: EventBus, action: str, item: str):
    bus.publish(PANTRY_CHANGED, {'action': action, 'item': item})


def publish_recomputed(bus: EventBus, shopping_list, expense_total: Optional[float] = None):
    """Publish shopping_list.recomputed and, when given, expenses.recomputed.

    Payload structure:
        { 'count': <int>, 'items': [ <name>, ... ] }
        { 'total': <float> }
    """
    names = shopping_list.names()
    bus.publish(SHOPPING_LIST_RECOMPUTED, {'count': len(names), 'items': names})
    if expense_total is not None:
        bus.publish(EXPENSES_RECOMPUTED, {'total': expense_total})


def publish_budget_changed(bus: EventBus, budget: float):
    bus.publish(BUDGET_CHANGED, {'budget': budget})


def publish_favorite_toggled(bus: EventBus, recipe_id: int, favorite: bool):
    bus.publish(RECIPE_FAVORITE_TOGGLED, {'recipe_id': recipe_id, 'favorite': favorite})
