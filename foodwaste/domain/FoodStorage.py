"""FoodStorage aggregate: groceries grouped by name, withdrawn earliest-expiry first.

Two case-insensitive maps are kept:
  * active  - batches still usable, each list sorted by expiry date
  * expired - batches moved out of active by classify_expired()

A batch lives in exactly one of the two maps. Lists are never left empty.
"""
import logging
from datetime import date
from threading import RLock
from typing import Dict, Iterator, List, Optional

from foodwaste.domain.Grocery import Grocery
from foodwaste.domain.GroceryIndex import GroceryIndex
from foodwaste.domain.errors import (
    InsufficientStock, NullItem, UnitMismatch, UnknownItem
)
from foodwaste.domain.validation import validate_date, validate_name, validate_positive
from foodwaste.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS
from foodwaste.events.event_helpers import (
    publish_depleted, publish_expired_moved, publish_expired_purged
)
from foodwaste.utilities.constants import AMOUNT_EPSILON
from foodwaste.utilities.unit_converter import get_standard_unit, is_compatible, normalize

logger = logging.getLogger(__name__)


def _by_expiry(grocery: Grocery):
    return grocery.expiry_date


class FoodStorage:
    def __init__(self, event_bus: Optional[EventBus] = None):
        self._active = GroceryIndex()
        self._expired = GroceryIndex()
        self._lock = RLock()
        self._event_bus = event_bus if event_bus is not None else GLOBAL_EVENT_BUS

    # --- Observer helpers -------------------------------------------------
    def set_event_bus(self, bus: EventBus):
        self._event_bus = bus
        return self

    # --- Mutations ----------------------------------------------------------
    def register(self, grocery: Grocery) -> Grocery:
        '''
        Adds a batch to the active map.
        A batch with the same expiry date and unit is merged into the existing one,
        anything else is appended. Returns the batch now holding the amount.
        '''
        if grocery is None:
            raise NullItem()
        with self._lock:
            groceries = self._active.get(grocery.name, [])
            for existing in groceries:
                if existing.expiry_date == grocery.expiry_date and existing.unit == grocery.unit:
                    existing.increase(grocery.amount)
                    logger.debug(f"Merged {grocery.amount:g} {grocery.unit} into {existing}")
                    target = existing
                    break
            else:
                groceries.append(grocery)
                target = grocery
                logger.info(f"Registered {grocery}")
            groceries.sort(key=_by_expiry)
            self._active[grocery.name] = groceries
            return target

    def withdraw(self, name: str, amount: float, unit: str) -> float:
        '''
        Removes `amount` (given in `unit`) of `name`, consuming the batches that
        expire first. Nothing is modified unless the whole amount is available.
        Returns the withdrawn amount in canonical units.
        '''
        name = validate_name(name)
        amount = validate_positive(amount)
        with self._lock:
            groceries = self._active.get(name)
            if not groceries:
                raise UnknownItem(name)

            # Only batches of the requested unit family can be drawn from
            matching = [g for g in groceries if is_compatible(unit, g.unit)]
            if not matching:
                raise UnitMismatch(unit, groceries[0].unit, name)
            requested, standard = normalize(amount, unit)

            available = sum(g.amount for g in matching)
            if requested > available + AMOUNT_EPSILON:
                raise InsufficientStock(name, requested, available, standard)

            remaining = requested
            for batch in matching:
                if remaining <= AMOUNT_EPSILON:
                    break
                if batch.amount <= remaining + AMOUNT_EPSILON:
                    remaining -= batch.amount
                    groceries.remove(batch)
                else:
                    batch.decrease(remaining)
                    remaining = 0

            logger.info(f"Withdrew {requested:g} {standard} of '{name}'")
            if not groceries:
                del self._active[name]
                logger.info(f"Storage is out of '{name}'")
                publish_depleted(name, self._event_bus)
            return requested

    def classify_expired(self, today: Optional[date] = None) -> Dict[str, List[Grocery]]:
        '''
        Moves every expired batch from the active map into the expired map.
        Calling it again without new registrations changes nothing.
        Returns a snapshot of the expired map.
        '''
        today = today or date.today()
        with self._lock:
            moved = self._take_expired(today)
            for grocery in moved:
                self._expired.add(grocery)
            if moved:
                logger.info(f"Moved {len(moved)} expired batch(es) out of storage")
                publish_expired_moved(moved, self._event_bus)
            return self._expired.snapshot()

    def purge_expired(self, today: Optional[date] = None) -> List[Grocery]:
        '''Deletes expired batches from the active map without keeping them. Returns what was dropped.'''
        today = today or date.today()
        with self._lock:
            purged = self._take_expired(today)
            if purged:
                logger.info(f"Purged {len(purged)} expired batch(es) from storage")
                publish_expired_purged(purged, self._event_bus)
            return purged

    def _take_expired(self, today: date) -> List[Grocery]:
        taken: List[Grocery] = []
        for name in list(self._active):
            keep: List[Grocery] = []
            for grocery in self._active[name]:
                (taken if grocery.is_expired(today) else keep).append(grocery)
            self._active[name] = keep
        return taken

    # --- Queries ----------------------------------------------------------------
    def find(self, name: str) -> List[Grocery]:
        '''Returns the active batches for `name` (case-insensitive), or an empty list.'''
        name = validate_name(name)
        with self._lock:
            return list(self._active.get(name, []))

    def find_expired(self, name: str) -> List[Grocery]:
        name = validate_name(name)
        with self._lock:
            return list(self._expired.get(name, []))

    def expiring_before(self, cutoff: date) -> List[Grocery]:
        '''Returns active batches of every name whose expiry date is strictly before `cutoff`.'''
        cutoff = validate_date(cutoff, "Date")
        with self._lock:
            return [g for g in self._active.batches() if g.expiry_date < cutoff]

    def total_value(self) -> float:
        with self._lock:
            return sum(g.value() for g in self._active.batches())

    def total_expired_value(self) -> float:
        with self._lock:
            return sum(g.value() for g in self._expired.batches())

    def available_amount(self, name: str, unit: Optional[str] = None) -> float:
        '''Sum of active amounts for `name`; restricted to batches in `unit`'s family when given.'''
        standard = get_standard_unit(unit) if unit is not None else None
        with self._lock:
            return sum(
                g.amount for g in self._active.get(name, [])
                if standard is None or g.unit == standard
            )

    def sorted_by_name(self) -> Dict[str, List[Grocery]]:
        with self._lock:
            return self._active.snapshot(sort_keys=True)

    def expired_groceries(self) -> Dict[str, List[Grocery]]:
        with self._lock:
            return self._expired.snapshot()

    def names(self) -> List[str]:
        with self._lock:
            return list(self._active)

    def __contains__(self, name) -> bool:
        return name in self._active

    def __iter__(self) -> Iterator[Grocery]:
        with self._lock:
            return iter(list(self._active.batches()))

    def __len__(self) -> int:
        return len(self._active)

    def __str__(self) -> str:
        lines = []
        for name, groceries in self.sorted_by_name().items():
            lines.append(f"{name.upper()}:")
            lines.extend(f"\t{g}" for g in groceries)
        return "\n".join(lines) if lines else "Storage is empty"

    def __repr__(self) -> str:
        return self.__str__()
