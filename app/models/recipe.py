from .base import Base
from .recipe_ingredient import RecipeIngredient

from sqlalchemy import Boolean, Column, Integer, String, Text
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship


class Recipe(Base):
    __tablename__ = "recipes"
    # ids are never handed out twice, even after the newest row is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    name = Column(String(255), unique=True, index=True, nullable=False)
    is_vegetarian = Column(Boolean, nullable=False)
    servings = Column(Integer, nullable=False)
    instructions = Column(Text, nullable=False)

    ingredient_entries = relationship(
        RecipeIngredient,
        order_by=RecipeIngredient.position,
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )

    @property
    def ingredients(self) -> list[str]:
        return [entry.name for entry in self.ingredient_entries]

    @ingredients.setter
    def ingredients(self, names: list[str]) -> None:
        self.ingredient_entries = [
            RecipeIngredient(name=name, position=index) for index, name in enumerate(names)
        ]

    def __repr__(self) -> str:
        return f"<Recipe id={self.id} name={self.name!r}>"
