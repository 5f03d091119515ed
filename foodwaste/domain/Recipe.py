"""Recipe domain entity: name, description, process and required ingredients."""
from typing import Dict, List, Mapping, Optional, Tuple, Union

from foodwaste.domain.FoodStorage import FoodStorage
from foodwaste.domain.IngredientDetail import IngredientDetail
from foodwaste.domain.errors import InvalidArgument, NullStorage
from foodwaste.domain.validation import validate_name
from foodwaste.logic.recipes.feasibility import MissingIngredient, can_make, missing_ingredients

IngredientSpec = Union[IngredientDetail, Tuple[float, str]]


class Recipe:
    def __init__(self, name: str, description: str, process: str,
                 ingredients: Mapping[str, IngredientSpec], storage: Optional[FoodStorage] = None):
        self.name = validate_name(name, "Recipe name")
        self.description = validate_name(description, "Description")
        self.process = validate_name(process, "Process")
        self.ingredients = self._normalize_ingredients(ingredients)
        # Bound by set_storage() or RecipeBook.available_recipes(); never created here
        self.storage = storage

    @staticmethod
    def _normalize_ingredients(ingredients) -> Dict[str, IngredientDetail]:
        if not ingredients:
            raise InvalidArgument("Ingredients can not be None or empty.")
        normalized: Dict[str, IngredientDetail] = {}
        for name, detail in ingredients.items():
            name = validate_name(name, "Ingredient name")
            if not isinstance(detail, IngredientDetail):
                try:
                    amount, unit = detail
                except (TypeError, ValueError):
                    raise InvalidArgument(f"Ingredient '{name}' needs an (amount, unit) pair.") from None
                detail = IngredientDetail(amount, unit)
            normalized[name] = detail
        return normalized

    def set_storage(self, storage: FoodStorage):
        if storage is None:
            raise NullStorage()
        self.storage = storage
        return self

    def _resolve(self, storage: Optional[FoodStorage]) -> FoodStorage:
        storage = storage if storage is not None else self.storage
        if storage is None:
            raise NullStorage()
        return storage

    def can_make(self, storage: Optional[FoodStorage] = None) -> bool:
        '''Checks `storage` (or the bound storage) for every ingredient.'''
        return can_make(self, self._resolve(storage))

    def missing_ingredients(self, storage: Optional[FoodStorage] = None) -> List[MissingIngredient]:
        return missing_ingredients(self, self._resolve(storage))

    def __str__(self) -> str:
        rows = "\n".join(f"{name:<20} | {detail}" for name, detail in self.ingredients.items())
        return (f"Recipe: {self.name}\nDescription: {self.description}\n"
                f"Process: {self.process}\nIngredients:\n{rows}")

    def __repr__(self) -> str:
        return f"Recipe({self.name!r})"

    def to_dict(self):
        return {
            "name": self.name,
            "description": self.description,
            "process": self.process,
            "ingredients": {name: detail.to_dict() for name, detail in self.ingredients.items()},
        }
