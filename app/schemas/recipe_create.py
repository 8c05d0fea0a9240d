from .recipe_base import RecipeBase


class RecipeCreate(RecipeBase):
    pass
