"""
Recipe assembly: candidate lines -> resolved, consolidated ingredients.
"""

import logging
from typing import Dict, List

from ..errors import NoIngredientFound, NoQuantityFound, UnconvertibleUnit
from ..parsing.models import Ingredient, LineRecord, Measure, Recipe
from ..parsing.quantity import total_amount
from .ingredient_normalize import singularize
from .unit_conversion import WHOLE, estimate_weight, normalize_to_cups

logger = logging.getLogger("ingredients.assembly")

MIN_LINE_LENGTH = 3
MAX_LINE_LENGTH = 150
MAX_STRUCTURED_LINE_LENGTH = 250

BLACKLIST = ("serving size", "yield")


def is_candidate(record: LineRecord) -> bool:
    """Length and blacklist checks applied before a line is parsed."""
    max_length = MAX_STRUCTURED_LINE_LENGTH if record.source == "structured" else MAX_LINE_LENGTH
    length = len(record.sanitized.strip())
    if length < MIN_LINE_LENGTH or length > max_length:
        return False
    lowered = record.original.lower()
    return not any(phrase in lowered for phrase in BLACKLIST)


def resolve_ingredient_name(record: LineRecord) -> str:
    if not record.ingredient_matches:
        raise NoIngredientFound(f"no ingredient found in {record.sanitized.strip()!r}")
    return singularize(record.ingredient_matches[0].word)


def resolve_measure_name(record: LineRecord) -> str:
    if not record.measure_matches:
        return WHOLE
    return record.measure_matches[0].word


def resolve_comment(record: LineRecord) -> str:
    """Text between the measure and the ingredient: "2 cups chopped onion" -> "chopped"."""
    if not record.measure_matches or not record.ingredient_matches:
        return ""
    measure = record.measure_matches[0]
    ingredient = record.ingredient_matches[0]
    if measure.position >= ingredient.position:
        return ""
    return record.sanitized[measure.position + len(measure.word):ingredient.position].strip()


def parse_line(record: LineRecord) -> LineRecord:
    """
    Fill in the ingredient of a candidate line, in place.

    Raises NoQuantityFound or NoIngredientFound when the line cannot be an
    ingredient. A unit that does not convert only leaves cups at 0.
    """
    record.ingredient = Ingredient(measure=Measure(), line=record.original)

    record.ingredient.measure.amount = total_amount(record)
    record.ingredient.name = resolve_ingredient_name(record)
    record.ingredient.measure.name = resolve_measure_name(record)
    record.ingredient.comment = resolve_comment(record)

    measure = record.ingredient.measure
    try:
        measure.cups = normalize_to_cups(record.ingredient.name, measure.name, measure.amount)
    except UnconvertibleUnit as e:
        logger.debug(f"[{record.original}]: {e}")
    measure.weight = estimate_weight(record.ingredient.name, measure.name, measure.amount, measure.cups)

    return record


def consolidate(lines: List[LineRecord]) -> List[Ingredient]:
    """
    Merge lines naming the same ingredient, keeping first-seen order.

    Amounts add up only when the units agree; cups always add up.
    """
    merged: Dict[str, Ingredient] = {}
    for record in lines:
        ing = record.ingredient
        existing = merged.get(ing.name)
        if existing is None:
            merged[ing.name] = ing.model_copy(deep=True)
            continue
        if existing.measure.name == ing.measure.name:
            existing.measure.amount += ing.measure.amount
        existing.measure.cups += ing.measure.cups
        existing.measure.weight += ing.measure.weight
    return list(merged.values())


def assemble_recipe(lines: List[LineRecord], source_name: str = "", source_content: str = "") -> Recipe:
    good = []
    for record in lines:
        if not is_candidate(record):
            continue
        try:
            parse_line(record)
        except NoQuantityFound as e:
            logger.debug(f"[{record.original}]: {e} ({record.amount_matches})")
            continue
        except NoIngredientFound as e:
            logger.debug(f"[{record.original}]: {e}")
            continue
        good.append(record)

    return Recipe(
        source_name=source_name,
        source_content=source_content,
        lines=good,
        ingredients=consolidate(good),
    )
