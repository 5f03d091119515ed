from fastapi import APIRouter, Depends, HTTPException

from foodwaste.api.dependencies import get_recipe_book, get_storage
from foodwaste.domain.FoodStorage import FoodStorage
from foodwaste.domain.Recipe import Recipe
from foodwaste.domain.RecipeBook import RecipeBook
from foodwaste.utilities.validators import RecipeInput

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.get("")
def list_recipes(book: RecipeBook = Depends(get_recipe_book)):
    recipes = [r.to_dict() for r in book]
    return {"count": len(recipes), "recipes": recipes}


@router.post("")
def add_recipe(payload: RecipeInput, book: RecipeBook = Depends(get_recipe_book)):
    recipe = Recipe(payload.name, payload.description, payload.process, payload.ingredient_pairs())
    book.add(recipe)
    return {"success": True, "recipe": recipe.to_dict()}


@router.get("/available")
def available_recipes(book: RecipeBook = Depends(get_recipe_book),
                      storage: FoodStorage = Depends(get_storage)):
    """Return the recipes current storage holds every ingredient for.

    Response JSON structure:
        {"count": <int>, "total": <int>, "recipes": [ {name, description, process, ingredients} ]}
    """
    available = book.available_recipes(storage)
    return {
        "count": len(available),
        "total": len(book),
        "recipes": [r.to_dict() for r in available],
    }


@router.get("/{name}")
def recipe_detail(name: str, book: RecipeBook = Depends(get_recipe_book),
                  storage: FoodStorage = Depends(get_storage)):
    recipe = book.get_by_name(name)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    missing = recipe.missing_ingredients(storage)
    return {
        "recipe": recipe.to_dict(),
        "can_make": not missing,
        "missing": [m._asdict() for m in missing],
    }
