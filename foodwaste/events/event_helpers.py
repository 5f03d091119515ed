"""Event helper utilities.

Helpers for publishing storage-related events. Each helper publishes on the
bus it is given, or on the global bus when none is passed.

Quick import:
    from foodwaste.events.event_helpers import (
        publish_depleted, publish_expired_moved, publish_expired_purged
    )
"""
from __future__ import annotations
from typing import Iterable, Any, Optional
from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS,
    STORAGE_DEPLETED, STORAGE_EXPIRED_MOVED, STORAGE_EXPIRED_PURGED
)

__all__ = [
    'publish_depleted', 'publish_expired_moved', 'publish_expired_purged',
    'STORAGE_DEPLETED', 'STORAGE_EXPIRED_MOVED', 'STORAGE_EXPIRED_PURGED'
]


def _bus(bus: Optional[EventBus]) -> EventBus:
    return bus if bus is not None else GLOBAL_EVENT_BUS


def publish_depleted(name: str, bus: Optional[EventBus] = None):
    """Publish a storage.depleted event (last batch of `name` is gone)."""
    _bus(bus).publish(STORAGE_DEPLETED, {'name': name})


def publish_expired_moved(groceries: Iterable[Any], bus: Optional[EventBus] = None):
    """Publish the batches classify_expired moved into the expired map.

    Payload structure:
        {'count': <int>, 'groceries': [Grocery, ...]}
    """
    items = list(groceries)
    _bus(bus).publish(STORAGE_EXPIRED_MOVED, {'count': len(items), 'groceries': items})


def publish_expired_purged(groceries: Iterable[Any], bus: Optional[EventBus] = None):
    """Publish the batches purge_expired discarded."""
    items = list(groceries)
    _bus(bus).publish(STORAGE_EXPIRED_PURGED, {'count': len(items), 'groceries': items})
