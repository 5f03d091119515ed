"""Unit normalization: every amount is stored in grams, liters or pieces (stk).

Supported units:
  mass:     mg, g, kg   -> g
  volume:   ml, dl, l   -> l
  discrete: stk         -> stk
"""
from typing import Tuple

from foodwaste.domain.errors import InvalidArgument, UnsupportedUnit
from foodwaste.utilities.constants import UNIT_TABLE

__all__ = ["normalize", "get_standard_unit", "convert_unit_amount", "is_compatible"]


def _lookup(unit: str) -> Tuple[str, int, int]:
    if unit is None or not isinstance(unit, str) or not unit.strip():
        raise InvalidArgument("Unit can not be None or empty.")
    try:
        return UNIT_TABLE[unit.strip().lower()]
    except KeyError:
        raise UnsupportedUnit(unit) from None


def get_standard_unit(unit: str) -> str:
    """Return the canonical unit symbol for `unit` without converting anything."""
    return _lookup(unit)[0]


def convert_unit_amount(amount: float, unit: str) -> float:
    _, multiplier, divisor = _lookup(unit)
    return amount * multiplier / divisor


def normalize(amount: float, unit: str) -> Tuple[float, str]:
    """Convert `amount` given in `unit` to (canonical amount, canonical unit)."""
    return convert_unit_amount(amount, unit), get_standard_unit(unit)


def is_compatible(unit_a: str, unit_b: str) -> bool:
    '''True when both units belong to the same family (mass, volume or count).'''
    return get_standard_unit(unit_a) == get_standard_unit(unit_b)
