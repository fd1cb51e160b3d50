"""
schema.org Recipe extraction.

Recipe pages usually publish their ingredient list as JSON-LD or microdata.
When they do, every recipeIngredient string is taken as a candidate line
without scoring it first.
"""

import logging
from typing import Any, Iterator, List

import extruct

from ..errors import NoStructuredData
from .models import LineRecord
from .scoring import analyze_line

logger = logging.getLogger("ingredients.parsing")

INGREDIENT_PROPERTIES = ("recipeIngredient", "ingredients")


def _coerce_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _is_recipe(item: dict) -> bool:
    types = _coerce_list(item.get("@type"))
    return any(isinstance(t, str) and t.rsplit("/", 1)[-1] == "Recipe" for t in types)


def _iter_items(data: dict) -> Iterator[dict]:
    for syntax in ("json-ld", "microdata"):
        for block in data.get(syntax, []):
            for item in _coerce_list(block):
                if not isinstance(item, dict):
                    continue
                yield item
                for nested in _coerce_list(item.get("@graph")):
                    if isinstance(nested, dict):
                        yield nested


def _read_structured_data(html: str) -> dict:
    try:
        return extruct.extract(
            html,
            syntaxes=["json-ld", "microdata"],
            uniform=True,
            errors="log",
        )
    except Exception as e:
        # lxml refuses some fragments outright; treat as "no structured data"
        logger.warning(f"Structured data reader failed: {e}")
        return {}


def extract_structured_lines(html: str) -> List[LineRecord]:
    """
    Candidate lines from the first schema.org Recipe that lists ingredients.

    Raises NoStructuredData when the page has no such Recipe.
    """
    data = _read_structured_data(html)

    for item in _iter_items(data):
        if not _is_recipe(item):
            continue

        values: list = []
        for prop in INGREDIENT_PROPERTIES:
            values = _coerce_list(item.get(prop))
            if values:
                break
        if not values:
            logger.debug("Recipe item without recipeIngredient")
            continue

        strings = []
        for value in values:
            if isinstance(value, str):
                strings.append(value)
            else:
                logger.debug(f"Skipping non-string ingredient: {value!r}")
        if not strings:
            continue

        logger.debug(f"Found {len(strings)} recipeIngredient values")
        return [analyze_line(s, source="structured") for s in strings]

    raise NoStructuredData("no schema.org Recipe with ingredients found")
