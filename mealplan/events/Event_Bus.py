"""Simple Event Bus / Observer implementation for meal plan changes.

Event names used so far:
  meal_plan.updated -> payload {"member_id": str, "dates": [str], "action": str}
  prep.invalidated -> payload {"member_id": str, "prep_date": str, "removed": int}

Listeners are callables taking (event_name, payload). subscribe() hands back a
zero-argument callable that removes the listener again.
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

Listener = Callable[[str, Any], None]

# --- Event name constants (used across modules) ---
MEAL_PLAN_UPDATED = "meal_plan.updated"
PREP_INVALIDATED = "prep.invalidated"


class EventBus:
	def __init__(self):
		self._listeners: Dict[str, List[Listener]] = defaultdict(list)

	def subscribe(self, event_name: str, listener: Listener) -> Callable[[], None]:
		registered = self._listeners[event_name]
		if listener not in registered:
			registered.append(listener)
		return lambda: self.unsubscribe(event_name, listener)

	def unsubscribe(self, event_name: str, listener: Listener) -> bool:
		registered = self._listeners.get(event_name)
		if not registered or listener not in registered:
			return False
		registered.remove(listener)
		if not registered:
			del self._listeners[event_name]
		return True

	def has_listeners(self, event_name: str) -> bool:
		return bool(self._listeners.get(event_name))

	def publish(self, event_name: str, payload: Any) -> int:
		"""Deliver to every listener of event_name; returns how many ran without error."""
		delivered = 0
		for listener in list(self._listeners.get(event_name, ())):
			try:
				listener(event_name, payload)
			except Exception:
				logger.exception(f"[EventBus] Listener {listener!r} failed on {event_name}")
				continue
			delivered += 1
		return delivered


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


__all__ = ['EventBus', 'Listener', 'GLOBAL_EVENT_BUS', 'MEAL_PLAN_UPDATED', 'PREP_INVALIDATED']
