import logging
from typing import Sequence

from sqlalchemy import ColumnElement, delete, select, true
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import RecipeConflictError, StorageError
from app.models import Recipe, RecipeIngredient

logger = logging.getLogger(__name__)


class RecipeRepository:
    """
    Data access for recipes.
    Holds no filtering logic of its own: ``find`` runs whatever predicate it is given.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find(self, predicate: ColumnElement[bool]) -> Sequence[Recipe]:
        query = select(Recipe).where(predicate).order_by(Recipe.id)
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as ex:
            raise StorageError("Could not read recipes from the database") from ex
        return result.scalars().all()

    async def find_all(self) -> Sequence[Recipe]:
        return await self.find(true())

    async def find_by_id(self, recipe_id: int) -> Recipe | None:
        query = select(Recipe).where(Recipe.id == recipe_id)
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as ex:
            raise StorageError(f"Could not read recipe {recipe_id} from the database") from ex
        return result.scalar_one_or_none()

    async def save(self, recipe: Recipe) -> Recipe:
        # rollback expires persistent instances, so read the name up front
        name = recipe.name
        self.db.add(recipe)
        try:
            await self.db.commit()
        except IntegrityError as ex:
            await self.db.rollback()
            logger.warning(f"Integrity violation while saving recipe {name!r}: {ex.orig}")
            raise RecipeConflictError(f"A recipe named {name!r} already exists") from ex
        except SQLAlchemyError as ex:
            await self.db.rollback()
            logger.error(f"Failed to persist recipe {name!r}: {ex}")
            raise StorageError("Could not save recipe to the database") from ex

        logger.debug(f"Saved recipe into DB: {recipe!r}")
        return recipe

    async def delete_by_id(self, recipe_id: int) -> bool:
        try:
            await self.db.execute(
                delete(RecipeIngredient).where(RecipeIngredient.recipe_id == recipe_id)
            )
            result = await self.db.execute(delete(Recipe).where(Recipe.id == recipe_id))
            await self.db.commit()
        except SQLAlchemyError as ex:
            await self.db.rollback()
            logger.error(f"Failed to delete recipe {recipe_id}: {ex}")
            raise StorageError(f"Could not delete recipe {recipe_id}") from ex

        deleted = result.rowcount > 0
        logger.debug(f"Deleted status for id {recipe_id}: {deleted}")
        return deleted
