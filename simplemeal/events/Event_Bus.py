"""Simple Event Bus / Observer implementation for planner notifications.

Event names used so far:
  shopping.generated  -> payload {"count": int, "start": datetime, "end": datetime}
  plan.orphans_purged -> payload {"count": int, "ids": [str]}
  import.applied      -> payload {"kind": str, "result": ImportResult}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
SHOPPING_GENERATED = "shopping.generated"
PLAN_ORPHANS_PURGED = "plan.orphans_purged"
IMPORT_APPLIED = "import.applied"


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

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				# a broken listener must not undo a committed mutation
				logger.exception("Error delivering %s to %r", event_name, cb)


# Default bus for callers that do not pass their own
GLOBAL_EVENT_BUS = EventBus()


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS',
	'SHOPPING_GENERATED', 'PLAN_ORPHANS_PURGED', 'IMPORT_APPLIED'
]
