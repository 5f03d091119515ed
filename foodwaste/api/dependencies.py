"""Request-scoped accessors for the objects created in create_app()."""
from fastapi import Request

from foodwaste.domain.FoodStorage import FoodStorage
from foodwaste.domain.RecipeBook import RecipeBook


def get_storage(request: Request) -> FoodStorage:
    return request.app.state.storage


def get_recipe_book(request: Request) -> RecipeBook:
    return request.app.state.recipe_book
