from .recipe_base import RecipeBase
from .recipe_create import RecipeCreate
from .recipe_update import RecipeUpdate
from .recipe import Recipe
from .recipe_search import RecipeSearchFilter

__all__ = [
    "RecipeBase",
    "RecipeCreate",
    "RecipeUpdate",
    "Recipe",
    "RecipeSearchFilter"
]
