from .recipe_base import CamelModel


class RecipeSearchFilter(CamelModel):
    """
    Optional search criteria. ``None`` means the filter was not supplied.
    Ingredient names are matched exactly as given.
    """

    is_vegetarian: bool | None = None
    servings: int | None = None
    include_ingredients: list[str] | None = None
    exclude_ingredients: list[str] | None = None
    instruction_text: str | None = None
