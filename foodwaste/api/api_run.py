"""FastAPI application exposing the food storage and recipe book."""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from foodwaste.api.routes.recipes import router as recipes_router
from foodwaste.api.routes.storage import router as storage_router
from foodwaste.domain.FoodStorage import FoodStorage
from foodwaste.domain.RecipeBook import RecipeBook
from foodwaste.domain.errors import DuplicateRecipe, InventoryError, UnknownItem
from foodwaste.events.web_observers import start as start_event_observers

# Logging
logger = logging.getLogger("foodwaste_app")


def _status_for(exc: InventoryError) -> int:
    if isinstance(exc, UnknownItem):
        return 404
    if isinstance(exc, DuplicateRecipe):
        return 409
    return 400


async def inventory_error_handler(request: Request, exc: InventoryError):
    status_code = _status_for(exc)
    logger.info("%s %s -> %s: %s", request.method, request.url.path, status_code, exc)
    return JSONResponse(status_code=status_code, content={"error": str(exc), "kind": type(exc).__name__})


def create_app(storage: Optional[FoodStorage] = None, recipe_book: Optional[RecipeBook] = None) -> FastAPI:
    """Build the app around one storage and one recipe book (fresh ones unless given)."""
    app = FastAPI(title="Foodwaste Storage & Recipe API")
    app.state.storage = storage if storage is not None else FoodStorage()
    app.state.recipe_book = recipe_book if recipe_book is not None else RecipeBook()

    app.add_exception_handler(InventoryError, inventory_error_handler)
    app.include_router(storage_router)
    app.include_router(recipes_router)

    start_event_observers()
    logger.info("Web observers for storage events started")
    return app


app = create_app()
