"""Grocery domain entity: one batch of a named item with price, amount, unit and expiry date."""
from datetime import date
from typing import Optional

from foodwaste.domain.errors import InvalidAmount
from foodwaste.domain.validation import validate_date, validate_name, validate_positive
from foodwaste.utilities.constants import DATE_FORMAT
from foodwaste.utilities.unit_converter import normalize


class Grocery:
    def __init__(self, name: str, price: float, amount: float, unit: str, expiry_date: date):
        '''
        price is per canonical unit; amount and unit are normalized on the way in
        (e.g. 2 kg is stored as 2000 g).
        '''
        self.name = validate_name(name)
        self.price = validate_positive(price, "Price")
        self.amount, self.unit = normalize(validate_positive(amount, "Amount"), unit)
        self.expiry_date = validate_date(expiry_date)

    @property
    def key(self) -> str:
        return self.name.lower()

    def increase(self, delta: float):
        '''Adds delta (canonical units) to the batch.'''
        if delta is None or delta <= 0:
            raise InvalidAmount("Amount to increase with must be greater than 0.")
        self.amount += delta

    def decrease(self, delta: float):
        '''Takes delta (canonical units) out of the batch; never below zero.'''
        if delta is None or delta <= 0:
            raise InvalidAmount("Amount to decrease with must be greater than 0.")
        if delta > self.amount:
            raise InvalidAmount("Amount to decrease cannot be greater than the current amount.")
        self.amount -= delta

    def is_expired(self, today: Optional[date] = None) -> bool:
        today = today or date.today()
        return today > self.expiry_date

    def days_left(self, today: Optional[date] = None) -> int:
        today = today or date.today()
        return (self.expiry_date - today).days

    def value(self) -> float:
        return self.price * self.amount

    def __str__(self) -> str:
        return f"{self.name}, {self.price}kr, {self.amount:g} {self.unit}, {self.expiry_date.strftime(DATE_FORMAT)}"

    __repr__ = __str__

    def to_dict(self):
        '''Converts the Grocery to a plain dictionary for JSON responses.'''
        return {
            "name": self.name,
            "price": self.price,
            "amount": self.amount,
            "unit": self.unit,
            "expiry_date": self.expiry_date.strftime(DATE_FORMAT),
            "value": self.value(),
        }
