class RecipeError(Exception):
    """Base class for failures raised by the recipe core."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RecipeNotFoundError(RecipeError):
    """An operation addressed a recipe id that does not exist."""

    def __init__(self, recipe_id: int):
        super().__init__(f"Recipe with ID {recipe_id} not found")
        self.recipe_id = recipe_id


class RecipeConflictError(RecipeError):
    """A uniqueness or integrity constraint was violated, e.g. a duplicate name."""


class StorageError(RecipeError):
    """The underlying database failed (connectivity, unexpected driver errors)."""
