"""Shared FastAPI dependencies: the process-wide planner state and its event recorder."""
from __future__ import annotations

import logging
from typing import Optional

from mealbudget.events.web_observers import EventRecorder
from mealbudget.logic.state.planner_state import PlannerStateManager

logger = logging.getLogger(__name__)

_planner: Optional[PlannerStateManager] = None
_recorder = EventRecorder()


def get_recorder() -> EventRecorder:
    return _recorder


def get_planner() -> PlannerStateManager:
    """Lazily build the in-memory planner from the starter data on first use."""
    global _planner
    if _planner is None:
        _planner = PlannerStateManager.from_repository()
        _recorder.start(_planner.event_bus)
        logger.info("Planner state initialised: %r", _planner)
    return _planner
