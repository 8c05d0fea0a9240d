import logging
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.repositories.recipe_repository import RecipeRepository
from app.schemas import Recipe, RecipeCreate, RecipeUpdate, RecipeSearchFilter
from app.services.recipe_service import RecipeService

logger = logging.getLogger(__name__)

router = APIRouter()


def _split_ingredients(values: List[str] | None) -> List[str] | None:
    # query values may be repeated, comma-separated, or both
    if values is None:
        return None
    return [item.strip() for value in values for item in value.split(",") if item.strip()]


def get_recipe_service(db: AsyncSession = Depends(get_db)) -> RecipeService:
    return RecipeService(RecipeRepository(db))


@router.post("/", response_model=Recipe, status_code=201)
async def create_new_recipe(*, service: RecipeService = Depends(get_recipe_service), recipe_in: RecipeCreate) -> Any:
    recipe = await service.create_recipe(recipe_in=recipe_in)
    logger.debug(f"Created recipe: {recipe!r}")
    return recipe


@router.get("/", response_model=List[Recipe])
async def read_recipes(*, service: RecipeService = Depends(get_recipe_service)) -> Any:
    return await service.get_all_recipes()


@router.get("/search/", response_model=List[Recipe])
async def search_recipes(
    *,
    service: RecipeService = Depends(get_recipe_service),
    is_vegetarian: bool | None = Query(None, alias="isVegetarian"),
    servings: int | None = Query(None),
    include_ingredients: List[str] | None = Query(
        None, alias="includeIngredients", description="Ingredients that must all be present (repeat or comma-separate)"
    ),
    exclude_ingredients: List[str] | None = Query(
        None, alias="excludeIngredients", description="Ingredients that must not be present (repeat or comma-separate)"
    ),
    instruction_text: str | None = Query(
        None, alias="instructionText", description="Case-insensitive text the instructions must contain"
    ),
) -> Any:
    filters = RecipeSearchFilter(
        is_vegetarian=is_vegetarian,
        servings=servings,
        include_ingredients=_split_ingredients(include_ingredients),
        exclude_ingredients=_split_ingredients(exclude_ingredients),
        instruction_text=instruction_text,
    )
    return await service.search_recipes(filters=filters)


@router.get("/{recipe_id}", response_model=Recipe)
async def read_recipe_by_id(*, service: RecipeService = Depends(get_recipe_service), recipe_id: int = Path(..., ge=1)) -> Any:
    return await service.get_recipe_by_id(recipe_id=recipe_id)


@router.put("/{recipe_id}", response_model=Recipe)
async def update_existing_recipe(
    *, service: RecipeService = Depends(get_recipe_service), recipe_id: int = Path(..., ge=1), recipe_in: RecipeUpdate
) -> Any:
    recipe = await service.update_recipe(recipe_id=recipe_id, recipe_in=recipe_in)
    logger.debug(f"Updated recipe with ID {recipe_id}: {recipe!r}")
    return recipe


@router.delete("/{recipe_id}")
async def delete_existing_recipe(*, service: RecipeService = Depends(get_recipe_service), recipe_id: int = Path(..., ge=1)) -> Any:
    deleted = await service.delete_recipe(recipe_id=recipe_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return {"deleted": True}
