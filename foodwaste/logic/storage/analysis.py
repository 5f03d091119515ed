"""Storage analysis helpers."""
from __future__ import annotations
from datetime import date as _date
from typing import List, Dict, Any, Iterable, Optional

from foodwaste.domain.Grocery import Grocery
from foodwaste.utilities.config import DAYS_BEFORE_EXPIRY
from foodwaste.utilities.constants import DATE_FORMAT

__all__ = ["compute_expiring_soon"]


def compute_expiring_soon(groceries: Iterable[Grocery], *, window: int | None = None,
                          today: Optional[_date] = None) -> List[Dict[str, Any]]:
    """Return batches expiring in <= window days (including already expired)."""
    expiring_window = window if window is not None else DAYS_BEFORE_EXPIRY
    today = today or _date.today()
    result: List[Dict[str, Any]] = []
    for grocery in groceries:
        days_left = grocery.days_left(today)
        if days_left <= expiring_window:
            result.append({
                'name': grocery.name,
                'amount': grocery.amount,
                'unit': grocery.unit,
                'exp': grocery.expiry_date.strftime(DATE_FORMAT),
                'days_left': days_left,
                'value': grocery.value(),
            })
    result.sort(key=lambda x: (x['days_left'], x['name'].lower()))
    return result
