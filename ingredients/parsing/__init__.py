from .models import WordMatch, Measure, Ingredient, LineRecord, IngredientList, Recipe
from .matcher import Trie, find_ingredients, find_measures, find_numbers
from .quantity import parse_quantity_token, total_amount, render_amount
from .scoring import analyze_line, score_line, score_lines
from .structured import extract_structured_lines
from .tree import extract_tree_lines, extract_ingredient_lines

__all__ = [
    "WordMatch", "Measure", "Ingredient", "LineRecord", "IngredientList", "Recipe",
    "Trie", "find_ingredients", "find_measures", "find_numbers",
    "parse_quantity_token", "total_amount", "render_amount",
    "analyze_line", "score_line", "score_lines",
    "extract_structured_lines", "extract_tree_lines", "extract_ingredient_lines",
]
