"""RecipeBook aggregate: ordered recipes with case-insensitive unique names."""
import logging
from threading import Lock
from typing import Iterator, List, Optional

from foodwaste.domain.FoodStorage import FoodStorage
from foodwaste.domain.Recipe import Recipe
from foodwaste.domain.errors import DuplicateRecipe, NullRecipe, NullStorage

logger = logging.getLogger(__name__)


class RecipeBook:
    def __init__(self):
        self.recipes: List[Recipe] = []
        self._lock = Lock()

    def add(self, recipe: Recipe):
        '''
        Adds a recipe; a name already present (ignoring case) is rejected.
        '''
        if recipe is None:
            raise NullRecipe()
        with self._lock:
            if self._find(recipe.name) is not None:
                raise DuplicateRecipe(recipe.name)
            self.recipes.append(recipe)
        logger.info(f"Added recipe '{recipe.name}'")

    def _find(self, name: str) -> Optional[Recipe]:
        wanted = name.strip().lower()
        return next((r for r in self.recipes if r.name.lower() == wanted), None)

    def get_by_name(self, name: str) -> Optional[Recipe]:
        if not isinstance(name, str):
            return None
        with self._lock:
            return self._find(name)

    def remove(self, name: str) -> bool:
        if not isinstance(name, str):
            return False
        with self._lock:
            recipe = self._find(name)
            if recipe is None:
                return False
            self.recipes.remove(recipe)
            return True

    def available_recipes(self, storage: FoodStorage) -> List[Recipe]:
        '''Binds every recipe to `storage` and returns the ones that can be made right now.'''
        if storage is None:
            raise NullStorage()
        with self._lock:
            recipes = list(self.recipes)
        available = []
        for recipe in recipes:
            recipe.set_storage(storage)
            if recipe.can_make():
                available.append(recipe)
        return available

    def __iter__(self) -> Iterator[Recipe]:
        return iter(list(self.recipes))

    def __len__(self) -> int:
        return len(self.recipes)

    def __str__(self) -> str:
        return "\n\n".join(str(r) for r in self.recipes) or "No recipes found."

    __repr__ = __str__
