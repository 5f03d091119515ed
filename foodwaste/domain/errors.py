"""Domain errors raised by the storage ledger, groceries and recipes.

Every error derives from InventoryError (a ValueError) so callers can catch
the whole family at once; the API layer maps the subclasses to HTTP codes.
"""
from typing import Optional


class InventoryError(ValueError):
    """Base class for every expected domain failure."""


class InvalidArgument(InventoryError):
    """Blank/numeric name, non-positive price or amount, missing unit or date."""


class InvalidAmount(InvalidArgument):
    pass


class UnsupportedUnit(InvalidArgument):
    def __init__(self, unit):
        self.unit = unit
        super().__init__(f"Unsupported unit: {unit}")


class UnitMismatch(InventoryError):
    def __init__(self, unit: str, stored_unit: str, name: str = ""):
        self.unit = unit
        self.stored_unit = stored_unit
        self.name = name
        super().__init__(
            f"Unit mismatch: cannot use '{unit}' with groceries measured in '{stored_unit}'."
        )


class UnknownItem(InventoryError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"The grocery item '{name}' does not exist in storage.")


class InsufficientStock(InventoryError):
    def __init__(self, name: str, requested: float, available: float, unit: Optional[str] = None):
        self.name = name
        self.requested = requested
        self.available = available
        self.unit = unit
        super().__init__(
            f"Cannot remove {requested:g} {unit or ''} of '{name}': only {available:g} available."
        )


class DuplicateRecipe(InventoryError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Recipe '{name}' already exists in the recipe book.")


class MissingReference(InvalidArgument):
    """A required object reference was None."""


class NullItem(MissingReference):
    def __init__(self):
        super().__init__("Grocery cannot be None.")


class NullRecipe(MissingReference):
    def __init__(self):
        super().__init__("Recipe cannot be None.")


class NullStorage(MissingReference):
    def __init__(self):
        super().__init__("Storage cannot be None.")


__all__ = [
    'InventoryError', 'InvalidArgument', 'InvalidAmount', 'UnsupportedUnit',
    'UnitMismatch', 'UnknownItem', 'InsufficientStock', 'DuplicateRecipe',
    'MissingReference', 'NullItem', 'NullRecipe', 'NullStorage',
]
