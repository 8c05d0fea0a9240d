import logging
from typing import Sequence

from app.core.exceptions import RecipeNotFoundError
from app.models import Recipe
from app.repositories.recipe_repository import RecipeRepository
from app.schemas import RecipeCreate, RecipeUpdate, RecipeSearchFilter
from app.services.recipe_filters import build_recipe_filter

logger = logging.getLogger(__name__)


class RecipeService:
    """Recipe business operations on top of an explicitly supplied repository."""

    def __init__(self, repository: RecipeRepository):
        self.repository = repository

    async def create_recipe(self, *, recipe_in: RecipeCreate) -> Recipe:
        db_recipe = Recipe(**recipe_in.model_dump())
        logger.debug(f"Persisting new recipe: {recipe_in.name!r}")
        return await self.repository.save(db_recipe)

    async def update_recipe(self, *, recipe_id: int, recipe_in: RecipeUpdate) -> Recipe:
        logger.info(f"Starting to update recipe {recipe_id}")
        db_recipe = await self.repository.find_by_id(recipe_id)
        if db_recipe is None:
            raise RecipeNotFoundError(recipe_id)

        for field, value in recipe_in.model_dump().items():
            setattr(db_recipe, field, value)

        return await self.repository.save(db_recipe)

    async def delete_recipe(self, *, recipe_id: int) -> bool:
        logger.debug(f"The id to delete from database: {recipe_id}")
        return await self.repository.delete_by_id(recipe_id)

    async def get_all_recipes(self) -> Sequence[Recipe]:
        logger.info("Retrieving all recipes from the database.")
        return await self.repository.find_all()

    async def get_recipe_by_id(self, *, recipe_id: int) -> Recipe:
        recipe = await self.repository.find_by_id(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(recipe_id)
        return recipe

    async def search_recipes(self, *, filters: RecipeSearchFilter) -> Sequence[Recipe]:
        logger.debug(f"Searching recipes with filters: {filters.model_dump(exclude_none=True)}")
        recipes = await self.repository.find(build_recipe_filter(filters))
        logger.debug(f"Search matched {len(recipes)} recipe(s)")
        return recipes
