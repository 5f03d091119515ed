"""Shared argument checks for the domain entities."""
import re
from datetime import date, datetime

from foodwaste.domain.errors import InvalidArgument, InvalidAmount

_NUMERIC = re.compile(r"-?\d+(\.\d+)?")


def validate_name(name, field: str = "Name") -> str:
    '''Reject None, blank and purely numeric text; returns the stripped value.'''
    if name is None or not isinstance(name, str) or not name.strip():
        raise InvalidArgument(f"{field} can not be None or empty.")
    if _NUMERIC.fullmatch(name.strip()):
        raise InvalidArgument(f"{field} can not be a numerical value.")
    return name.strip()


def validate_positive(value, field: str = "Amount") -> float:
    if value is None or isinstance(value, bool):
        raise InvalidAmount(f"{field} must be a number.")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidAmount(f"{field} must be a number.") from None
    if not number > 0:
        raise InvalidAmount(f"{field} must be greater than 0.")
    return number


def validate_date(value, field: str = "Expiry date") -> date:
    if value is None:
        raise InvalidArgument(f"{field} cannot be None.")
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise InvalidArgument(f"{field} must be a date, got {type(value).__name__}.")
    return value
