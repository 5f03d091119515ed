"""Required amount of one recipe ingredient, normalized to its canonical unit."""
from foodwaste.domain.validation import validate_positive
from foodwaste.utilities.constants import AMOUNT_EPSILON
from foodwaste.utilities.unit_converter import normalize


class IngredientDetail:
    def __init__(self, amount: float, unit: str):
        self.set_amount_and_unit(amount, unit)

    def set_amount_and_unit(self, amount: float, unit: str):
        self.amount, self.unit = normalize(validate_positive(amount), unit)

    def __eq__(self, other) -> bool:
        if not isinstance(other, IngredientDetail):
            return NotImplemented
        return self.unit == other.unit and abs(self.amount - other.amount) < AMOUNT_EPSILON

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.unit}"

    __repr__ = __str__

    def to_dict(self):
        return {"amount": self.amount, "unit": self.unit}
