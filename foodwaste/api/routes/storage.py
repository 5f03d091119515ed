import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from foodwaste.api.dependencies import get_storage
from foodwaste.domain.FoodStorage import FoodStorage
from foodwaste.domain.Grocery import Grocery
from foodwaste.events.web_observers import get_events
from foodwaste.logic.storage.analysis import compute_expiring_soon
from foodwaste.utilities.unit_converter import get_standard_unit
from foodwaste.utilities.validators import GroceryInput, WithdrawInput, parse_date

router = APIRouter(prefix="/api/storage", tags=["storage"])
logger = logging.getLogger(__name__)


def _serialize(groceries: List[Grocery]) -> List[dict]:
    return [g.to_dict() for g in groceries]


def _serialize_map(groceries: Dict[str, List[Grocery]]) -> Dict[str, List[dict]]:
    return {name: _serialize(batch) for name, batch in groceries.items()}


# -------------------- Groceries --------------------
@router.get("")
def list_storage(storage: FoodStorage = Depends(get_storage)):
    """Return every active batch grouped by name, names in alphabetical order."""
    groceries = storage.sorted_by_name()
    return {"count": len(groceries), "groceries": _serialize_map(groceries)}


@router.post("/groceries")
def register_grocery(payload: GroceryInput, storage: FoodStorage = Depends(get_storage)):
    """Register a batch. An already expired batch is moved to the expired view right away."""
    grocery = Grocery(payload.name, payload.price, payload.amount, payload.unit, payload.expiry_date)
    stored = storage.register(grocery)
    expired = grocery.is_expired()
    if expired:
        storage.classify_expired()
        logger.warning("Registered already expired grocery %s", grocery)
    return {"success": True, "expired": expired, "grocery": stored.to_dict()}


@router.post("/withdraw")
def withdraw_grocery(payload: WithdrawInput, storage: FoodStorage = Depends(get_storage)):
    """Remove an amount, earliest expiry first."""
    withdrawn = storage.withdraw(payload.name, payload.amount, payload.unit)
    remaining = storage.find(payload.name)
    return {
        "success": True,
        "withdrawn": withdrawn,
        "unit": get_standard_unit(payload.unit),
        "remaining": _serialize(remaining),
        "depleted": not remaining,
    }


@router.get("/groceries/{name}")
def find_grocery(name: str, storage: FoodStorage = Depends(get_storage)):
    """Search both the active storage and the expired view."""
    return {
        "name": name,
        "active": _serialize(storage.find(name)),
        "expired": _serialize(storage.find_expired(name)),
    }


# -------------------- Expiry --------------------
@router.get("/expiring")
def expiring_before(before: str = Query(..., description="dd-mm-yyyy or yyyy-mm-dd"),
                    storage: FoodStorage = Depends(get_storage)):
    try:
        cutoff = parse_date(before)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    groceries = storage.expiring_before(cutoff)
    return {"before": cutoff.isoformat(), "count": len(groceries), "groceries": _serialize(groceries)}


@router.get("/expiring-soon")
def expiring_soon(window: Optional[int] = Query(default=None, ge=0),
                  storage: FoodStorage = Depends(get_storage)):
    """Batches expiring within `window` days (default DAYS_BEFORE_EXPIRY), already expired included."""
    items = compute_expiring_soon(storage, window=window)
    return {"count": len(items), "items": items}


@router.get("/expired")
def list_expired(storage: FoodStorage = Depends(get_storage)):
    """Classify first so batches that expired since registration show up."""
    groceries = storage.classify_expired()
    return {"count": len(groceries), "groceries": _serialize_map(groceries)}


@router.post("/expired/classify")
def classify_expired(storage: FoodStorage = Depends(get_storage)):
    """Move expired batches out of storage and return the expired view."""
    groceries = storage.classify_expired()
    return {"count": len(groceries), "groceries": _serialize_map(groceries)}


@router.post("/expired/purge")
def purge_expired(storage: FoodStorage = Depends(get_storage)):
    """Drop expired batches from storage without keeping them."""
    purged = storage.purge_expired()
    return {"count": len(purged), "purged": _serialize(purged)}


# -------------------- Value & alerts --------------------
@router.get("/value")
def storage_value(storage: FoodStorage = Depends(get_storage)):
    return {"total": storage.total_value(), "expired_total": storage.total_expired_value()}


@router.get("/alerts")
def storage_alerts(since: Optional[int] = Query(default=None, description="Return events with id greater than this value")):
    """
    Return recent storage events (depleted, expired moved/purged).

    Client polling strategy:
        1. First call without 'since' to load the current backlog.
        2. Store 'next_cursor' from response.
        3. Subsequent polls: /api/storage/alerts?since=<next_cursor>
    """
    return get_events(since)
