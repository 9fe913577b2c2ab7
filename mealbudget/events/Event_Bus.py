"""Simple Event Bus / Observer implementation for planner state changes.

Event names:
  plan.changed -> payload {"day": str | None, "meal_type": str | None, "recipe_id": int | None}
  pantry.changed -> payload {"action": "add" | "remove", "item": str}
  shopping_list.recomputed -> payload {"count": int, "items": [str, ...]}
  expenses.recomputed -> payload {"total": float}
  budget.changed -> payload {"budget": float}
  recipe.favorite_toggled -> payload {"recipe_id": int, "favorite": bool}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
PLAN_CHANGED = "plan.changed"
PANTRY_CHANGED = "pantry.changed"
SHOPPING_LIST_RECOMPUTED = "shopping_list.recomputed"
EXPENSES_RECOMPUTED = "expenses.recomputed"
BUDGET_CHANGED = "budget.changed"
RECIPE_FAVORITE_TOGGLED = "recipe.favorite_toggled"

ALL_EVENTS = (
	PLAN_CHANGED, PANTRY_CHANGED, SHOPPING_LIST_RECOMPUTED,
	EXPENSES_RECOMPUTED, BUDGET_CHANGED, RECIPE_FAVORITE_TOGGLED,
)


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def subscribers(self, event_name: str) -> List[Callable[[str, Any], None]]:
		return list(self._subscribers.get(event_name, []))

	def publish(self, event_name: str, payload: Any):
		for cb in self.subscribers(event_name):
			try:
				cb(event_name, payload)
			except Exception:
				# One broken subscriber must not block the others or the mutation
				logger.exception("Error delivering %s to %r", event_name, cb)


__all__ = [
	'EventBus', 'ALL_EVENTS',
	'PLAN_CHANGED', 'PANTRY_CHANGED', 'SHOPPING_LIST_RECOMPUTED',
	'EXPENSES_RECOMPUTED', 'BUDGET_CHANGED', 'RECIPE_FAVORITE_TOGGLED',
]
