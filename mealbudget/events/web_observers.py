"""Web-facing observers for planner events.

Subscribes to an EventBus for every planner event and keeps a bounded
in-memory ring buffer of recent events that the web layer can poll
(since=<last_id_seen>) to refresh only the panels that changed.

Design:
  * Each event stored with an auto-increment integer id (cursor).
  * A Lock guards the buffer; uvicorn runs sync endpoints in a thread pool.
  * MAX_EVENTS caps memory use.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Dict, List, Optional

from mealbudget.utilities.config import MAX_EVENTS

from .Event_Bus import ALL_EVENTS, EventBus

logger = logging.getLogger(__name__)


class EventRecorder:
    def __init__(self, max_events: int = MAX_EVENTS):
        self._lock = Lock()
        self._events: List[Dict[str, Any]] = []
        self._next_id = 1
        self.max_events = max_events
        self._buses: List[EventBus] = []

    def record(self, event_name: str, payload: Any):  # signature expected by EventBus
        with self._lock:
            evt = {
                'id': self._next_id,
                'type': event_name,
                'ts': datetime.now(timezone.utc).isoformat(),
            }
            if isinstance(payload, dict):
                evt.update(payload)
            self._events.append(evt)
            self._next_id += 1
            # Trim buffer
            if len(self._events) > self.max_events:
                del self._events[: len(self._events) - self.max_events]

    def start(self, bus: EventBus):
        """Idempotent per bus: subscribe once to every planner event."""
        if any(b is bus for b in self._buses):
            return
        for name in ALL_EVENTS:
            bus.subscribe(name, self.record)
        self._buses.append(bus)
        logger.info("Web observers subscribed to %d planner events", len(ALL_EVENTS))

    def get_events(self, since: Optional[int] = None) -> Dict[str, Any]:
        """Return events newer than 'since' (exclusive).

        If since is None, returns the whole buffer. next_cursor is the largest
        id seen so the client can poll with since=next_cursor.
        """
        with self._lock:
            if since is None:
                data = list(self._events)
            else:
                data = [e for e in self._events if e['id'] > since]
            next_cursor = self._events[-1]['id'] if self._events else since or 0
        return {'events': data, 'next_cursor': next_cursor}


__all__ = ['EventRecorder']
