from typing import Final

DATE_FORMAT: Final[str] = "%d-%m-%Y"
ISO_DATE_FORMAT: Final[str] = "%Y-%m-%d"

# Canonical units every amount is stored in
GRAM: Final[str] = "g"
LITER: Final[str] = "l"
COUNT: Final[str] = "stk"

# unit -> (canonical unit, multiplier, divisor) towards the canonical unit
UNIT_TABLE: Final[dict[str, tuple[str, int, int]]] = {
    "mg": (GRAM, 1, 1000),
    "g": (GRAM, 1, 1),
    "kg": (GRAM, 1000, 1),
    "ml": (LITER, 1, 1000),
    "dl": (LITER, 1, 10),
    "l": (LITER, 1, 1),
    "stk": (COUNT, 1, 1),
}

# Tolerance used when comparing float amounts after unit conversion
AMOUNT_EPSILON: Final[float] = 1e-9
