from typing import List, Literal

from pydantic import BaseModel, Field

from ..services.ingredient_normalize import pluralize

LineSource = Literal["structured", "freeform"]


class WordMatch(BaseModel):
    word: str
    position: int


class Measure(BaseModel):
    amount: float = 0.0
    name: str = ""
    cups: float = 0.0
    weight: float = 0.0


class Ingredient(BaseModel):
    name: str = ""
    comment: str = ""
    measure: Measure = Field(default_factory=Measure)
    line: str = ""


class LineRecord(BaseModel):
    original: str
    sanitized: str = ""
    ingredient_matches: List[WordMatch] = []
    amount_matches: List[WordMatch] = []
    measure_matches: List[WordMatch] = []
    ingredient: Ingredient = Field(default_factory=Ingredient)
    source: LineSource = "freeform"


class IngredientList(BaseModel):
    ingredients: List[Ingredient] = []

    def __str__(self) -> str:
        from .quantity import render_amount

        out = []
        for ing in self.ingredients:
            name = ing.name
            if ing.measure.amount > 1 and ing.measure.name == "whole":
                name = pluralize(name)
            s = f"{render_amount(ing.measure.amount)} {ing.measure.name} {name}"
            if ing.comment:
                s += f" ({ing.comment})"
            out.append(s + "\n")
        return "".join(out)


class Recipe(BaseModel):
    source_name: str = ""
    source_content: str = ""
    lines: List[LineRecord] = []
    ingredients: List[Ingredient] = []

    def ingredient_list(self) -> IngredientList:
        """Per-line view of the recipe, before consolidation."""
        items = []
        for record in self.lines:
            ing = record.ingredient.model_copy(deep=True)
            ing.line = record.original
            items.append(ing)
        return IngredientList(ingredients=items)
