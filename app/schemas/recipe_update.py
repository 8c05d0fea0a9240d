from .recipe_base import RecipeBase


class RecipeUpdate(RecipeBase):
    """Full replacement payload: every field is required, nothing is patched."""
