from .base import Base
from .recipe import Recipe
from .recipe_ingredient import RecipeIngredient

__all__ = [
    "Base",
    "Recipe",
    "RecipeIngredient"
]
