"""Simple Event Bus / Observer implementation for storage notifications.

Event names:
  storage.depleted      -> payload {"name": str}
  storage.expired_moved -> payload {"groceries": [Grocery, ...], "count": int}
  storage.expired_purged -> payload {"groceries": [Grocery, ...], "count": int}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
STORAGE_DEPLETED = "storage.depleted"
STORAGE_EXPIRED_MOVED = "storage.expired_moved"
STORAGE_EXPIRED_PURGED = "storage.expired_purged"


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
        # A failing listener must not undo a mutation that already happened
        for cb in list(self._subscribers.get(event_name, [])):
            try:
                cb(event_name, payload)
            except Exception:
                logger.exception("Error delivering %s to %r", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


__all__ = [
    'EventBus', 'GLOBAL_EVENT_BUS',
    'STORAGE_DEPLETED', 'STORAGE_EXPIRED_MOVED', 'STORAGE_EXPIRED_PURGED'
]
