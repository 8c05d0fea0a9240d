"""
Composition of recipe search filters into a single SQL predicate.

Every supported filter is an independent factory that either returns a
boolean clause or ``None`` when the caller did not supply that filter.
The clauses that are present are folded together with AND, starting from
``true()`` so a search without filters matches every recipe.
"""
from functools import reduce
from typing import Callable, Sequence

from sqlalchemy import ColumnElement, and_, true

from app.models import Recipe, RecipeIngredient
from app.schemas import RecipeSearchFilter

RecipeClause = ColumnElement[bool]
FilterFactory = Callable[[RecipeSearchFilter], RecipeClause | None]


def _has_ingredient(ingredient: str) -> RecipeClause:
    return Recipe.ingredient_entries.any(RecipeIngredient.name == ingredient)


def _conjoin(clauses: Sequence[RecipeClause]) -> RecipeClause | None:
    if not clauses:
        return None
    return and_(*clauses)


def vegetarian_filter(filters: RecipeSearchFilter) -> RecipeClause | None:
    if filters.is_vegetarian is None:
        return None
    return Recipe.is_vegetarian == filters.is_vegetarian


def servings_filter(filters: RecipeSearchFilter) -> RecipeClause | None:
    # 0 is a legitimate (if unsatisfiable) value, only None means "absent"
    if filters.servings is None:
        return None
    return Recipe.servings == filters.servings


def include_ingredients_filter(filters: RecipeSearchFilter) -> RecipeClause | None:
    return _conjoin([_has_ingredient(i) for i in filters.include_ingredients or []])


def exclude_ingredients_filter(filters: RecipeSearchFilter) -> RecipeClause | None:
    return _conjoin([~_has_ingredient(i) for i in filters.exclude_ingredients or []])


def instruction_text_filter(filters: RecipeSearchFilter) -> RecipeClause | None:
    text = filters.instruction_text
    if text is None or not text.strip():
        return None
    return Recipe.instructions.icontains(text, autoescape=True)


# Cheap equality checks first, then membership subqueries, then LIKE.
FILTER_FACTORIES: tuple[FilterFactory, ...] = (
    vegetarian_filter,
    servings_filter,
    include_ingredients_filter,
    exclude_ingredients_filter,
    instruction_text_filter,
)


def build_recipe_filter(
    filters: RecipeSearchFilter | None = None,
    factories: Sequence[FilterFactory] = FILTER_FACTORIES,
) -> RecipeClause:
    """Return the AND of every supplied filter, or ``true()`` when none are."""
    if filters is None:
        return true()

    clauses = (factory(filters) for factory in factories)
    return reduce(and_, (clause for clause in clauses if clause is not None), true())
