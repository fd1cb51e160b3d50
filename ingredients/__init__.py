"""Ingredient extraction from recipe pages, normalized into cups."""

from .parsing import (
    Ingredient,
    IngredientList,
    LineRecord,
    Measure,
    Recipe,
    WordMatch,
    extract_ingredient_lines,
    parse_quantity_token,
    render_amount,
    score_line,
)
from .services.assembly import assemble_recipe
from .services.ingestion import RecipeIngestor
from .services.unit_conversion import cups_to_measure, normalize_to_cups

__version__ = "0.1.0"

__all__ = [
    "Ingredient", "IngredientList", "LineRecord", "Measure", "Recipe", "WordMatch",
    "extract_ingredient_lines", "parse_quantity_token", "render_amount", "score_line",
    "assemble_recipe", "normalize_to_cups", "cups_to_measure", "RecipeIngestor",
]
