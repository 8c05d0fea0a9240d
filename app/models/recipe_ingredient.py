from .base import Base

from sqlalchemy import Column, ForeignKey, Integer, String


class RecipeIngredient(Base):
    """One entry of a recipe's ordered ingredient list."""

    __tablename__ = "recipe_ingredients"

    id = Column(Integer, primary_key=True)
    recipe_id = Column(Integer, ForeignKey("recipes.id", ondelete="CASCADE"), index=True, nullable=False)
    position = Column(Integer, nullable=False)
    name = Column(String(255), index=True, nullable=False)
