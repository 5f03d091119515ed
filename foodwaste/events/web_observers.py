"""Web-facing observers for storage events.

This module subscribes to the GLOBAL_EVENT_BUS for:
  - storage.depleted
  - storage.expired_moved
  - storage.expired_purged

and stores a bounded in-memory ring buffer of recent events that the web
layer can poll (since=<last_id_seen>) to show alerts.

Each event gets an auto-increment integer id used as cursor. A Lock guards
the buffer since sync FastAPI endpoints run in a threadpool.
"""
from __future__ import annotations
import logging
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from foodwaste.utilities.config import MAX_EVENTS
from .Event_Bus import (
    GLOBAL_EVENT_BUS, STORAGE_DEPLETED, STORAGE_EXPIRED_MOVED, STORAGE_EXPIRED_PURGED
)

logger = logging.getLogger(__name__)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
_started = False


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt: Dict[str, Any] = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')
        }
        if isinstance(payload, dict):
            if 'name' in payload:
                evt['name'] = payload['name']
            if 'count' in payload:
                evt['count'] = payload['count']
            groceries = payload.get('groceries')
            if groceries:
                evt['names'] = sorted({getattr(g, 'name', str(g)) for g in groceries})
        _events.append(evt)
        _next_id += 1
        # Trim buffer
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]
    logger.debug("Recorded event %s", evt)


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    for event_name in (STORAGE_DEPLETED, STORAGE_EXPIRED_MOVED, STORAGE_EXPIRED_PURGED):
        GLOBAL_EVENT_BUS.subscribe(event_name, _record)
    _started = True


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns every buffered event.
    Response includes next_cursor (largest id) so client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_events']
