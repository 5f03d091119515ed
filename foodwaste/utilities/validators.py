"""
Input validation schemas using Pydantic for the HTTP layer.

These only check shape and syntax (types, ranges, date strings); the domain
performs the semantic checks (units, names, stock) and raises its own errors.
"""
from datetime import date, datetime
from typing import Dict

from pydantic import BaseModel, Field, field_validator

from foodwaste.utilities.constants import DATE_FORMAT, ISO_DATE_FORMAT


def parse_date(value) -> date:
    """Accept a date, 'dd-mm-yyyy' or ISO 'yyyy-mm-dd'."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError('Date must be a string')
    text = value.strip()
    for fmt in (DATE_FORMAT, ISO_DATE_FORMAT):
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Invalid date '{value}' (expected dd-mm-yyyy or yyyy-mm-dd)")


class GroceryInput(BaseModel):
    """Schema for registering a grocery batch."""
    name: str = Field(..., min_length=1, max_length=100)
    price: float = Field(..., gt=0)
    amount: float = Field(..., gt=0)
    unit: str = Field(..., min_length=1, max_length=10)
    expiry_date: date

    @field_validator('name', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('expiry_date', mode='before')
    @classmethod
    def parse_expiry(cls, v):
        return parse_date(v)


class WithdrawInput(BaseModel):
    """Schema for removing an amount of a grocery."""
    name: str = Field(..., min_length=1, max_length=100)
    amount: float = Field(..., gt=0)
    unit: str = Field(..., min_length=1, max_length=10)

    @field_validator('name', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


class IngredientInput(BaseModel):
    """Required amount of one ingredient."""
    amount: float = Field(..., gt=0)
    unit: str = Field(..., min_length=1, max_length=10)


class RecipeInput(BaseModel):
    """Schema for recipe input validation."""
    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    process: str = Field(..., min_length=1)
    ingredients: Dict[str, IngredientInput]

    @field_validator('name', 'description', 'process')
    @classmethod
    def strip_text(cls, v):
        return v.strip()

    @field_validator('ingredients')
    @classmethod
    def validate_ingredients(cls, v):
        """Ensure recipe has at least one ingredient."""
        if not v:
            raise ValueError('Recipe must have at least one ingredient')
        return v

    def ingredient_pairs(self) -> Dict[str, tuple]:
        return {name.strip(): (ing.amount, ing.unit) for name, ing in self.ingredients.items()}
