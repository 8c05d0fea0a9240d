from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

IngredientName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]


class CamelModel(BaseModel):
    # camelCase on the wire, snake_case accepted as well
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecipeBase(CamelModel):
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
    is_vegetarian: bool
    servings: int = Field(..., ge=1, le=10000)
    ingredients: list[IngredientName] = Field(default_factory=list, max_length=100)
    instructions: str = Field(..., max_length=50000)
