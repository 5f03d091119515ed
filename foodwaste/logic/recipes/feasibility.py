"""Recipe feasibility against a FoodStorage.

Availability is pooled per ingredient name across every active batch,
regardless of how the amount is split between expiry dates. Batches stored in
a different unit family than the requirement do not count towards it.
"""
from __future__ import annotations
from typing import List, NamedTuple, TYPE_CHECKING

from foodwaste.domain.errors import NullRecipe, NullStorage
from foodwaste.utilities.constants import AMOUNT_EPSILON

if TYPE_CHECKING:
    from foodwaste.domain.FoodStorage import FoodStorage
    from foodwaste.domain.Recipe import Recipe

__all__ = ["MissingIngredient", "available_amount", "can_make", "missing_ingredients"]


class MissingIngredient(NamedTuple):
    name: str
    amount: float
    unit: str


def _check(recipe, storage):
    if recipe is None:
        raise NullRecipe()
    if storage is None:
        raise NullStorage()


def available_amount(storage: "FoodStorage", name: str, unit: str) -> float:
    """Amount of `name` in storage counted in the canonical family of `unit`."""
    return storage.available_amount(name, unit)


def can_make(recipe: "Recipe", storage: "FoodStorage") -> bool:
    """True when storage holds enough of every ingredient; stops at the first shortfall."""
    _check(recipe, storage)
    for name, detail in recipe.ingredients.items():
        if available_amount(storage, name, detail.unit) + AMOUNT_EPSILON < detail.amount:
            return False
    return True


def missing_ingredients(recipe: "Recipe", storage: "FoodStorage") -> List[MissingIngredient]:
    """Return (name, missing amount, canonical unit) for every ingredient short in storage."""
    _check(recipe, storage)
    missing: List[MissingIngredient] = []
    for name, detail in recipe.ingredients.items():
        available = available_amount(storage, name, detail.unit)
        if available + AMOUNT_EPSILON < detail.amount:
            missing.append(MissingIngredient(name, detail.amount - available, detail.unit))
    return missing
