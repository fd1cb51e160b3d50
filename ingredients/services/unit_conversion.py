"""
Unit normalization into cups.

Every ingredient amount is expressed as a cup volume so that amounts from
different recipes compare. Volumes convert directly, weights go through the
ingredient's density, and a few ingredients counted as whole items carry
their own cup equivalent.
"""

import math
from typing import Optional, Tuple

from .. import corpus
from ..errors import UnconvertibleUnit
from ..parsing.quantity import render_amount
from ..settings import settings
from .ingredient_normalize import normalize_ingredient_key

# No unit given: the amount counts whole items
WHOLE = "whole"

# --- Lookup tables keyed by normalized ingredient name ---

_INGREDIENT_CUPS = {normalize_ingredient_key(k): v for k, v in corpus.INGREDIENT_CUPS.items()}
_DENSITIES = {normalize_ingredient_key(k): float(v) for k, v in corpus.DENSITIES.items()}
_FRUITS = {normalize_ingredient_key(k) for k in corpus.FRUITS}
_VEGETABLES = {normalize_ingredient_key(k) for k in corpus.VEGETABLES}
_HERBS = {normalize_ingredient_key(k) for k in corpus.HERBS}


def canonical_measure(unit: str) -> Optional[str]:
    """Canonical measure name ("tablespoons" -> "tbl"); "" for whole items, None if unknown."""
    if not unit:
        return ""
    u = unit.strip().lower()
    if u == WHOLE:
        return ""
    return corpus.MEASURES.get(u)


def density_for(ingredient: str) -> float:
    """Grams per cup, or the configured default for unlisted ingredients."""
    return _DENSITIES.get(normalize_ingredient_key(ingredient), settings.default_density_g_per_cup)


def normalize_to_cups(ingredient: str, unit: str, amount: float) -> float:
    """
    Convert an amount of an ingredient into cups.

    Raises UnconvertibleUnit when neither the unit nor the ingredient gives a
    way to a volume.
    """
    measure = canonical_measure(unit)
    if measure is None:
        raise UnconvertibleUnit(f"could not find {unit!r}")

    key = normalize_ingredient_key(ingredient)

    if measure == "" and key in _INGREDIENT_CUPS:
        return amount * _INGREDIENT_CUPS[key]

    if measure in corpus.CUP_CONVERSIONS:
        return amount * corpus.CUP_CONVERSIONS[measure]

    if measure in corpus.GRAM_CONVERSIONS:
        return amount * corpus.GRAM_CONVERSIONS[measure] / density_for(ingredient)

    if key in _FRUITS or key in _VEGETABLES:
        return amount
    if key in _HERBS:
        return amount * corpus.HERB_CUPS

    raise UnconvertibleUnit(f"could not convert {unit!r} of {ingredient!r} to a volume")


def estimate_weight(ingredient: str, unit: str, amount: float, cups: float) -> float:
    """
    Approximate weight in grams.

    Exact for weight units, density based for anything with a cup volume, 0
    when neither applies.
    """
    measure = canonical_measure(unit)
    if measure in corpus.GRAM_CONVERSIONS:
        return amount * corpus.GRAM_CONVERSIONS[measure]
    if cups > 0 and normalize_ingredient_key(ingredient) in _DENSITIES:
        return cups * density_for(ingredient)
    return 0.0


def cups_to_measure(cups: float, ingredient: str = "") -> Tuple[float, str, str]:
    """
    Pick a readable measure for a cup volume.

    Returns (amount, measure, rendered amount). Whole-item ingredients come
    back as a rounded count of items.
    """
    key = normalize_ingredient_key(ingredient)
    if key in _INGREDIENT_CUPS:
        amount = float(math.floor(cups / _INGREDIENT_CUPS[key] + 0.5))
        return amount, WHOLE, render_amount(amount)

    if cups > 0.125:
        amount, measure = cups, "cup"
    elif cups > corpus.CUP_CONVERSIONS["tsp"] * 3:
        amount, measure = cups * 16, "tablespoon"
    else:
        amount, measure = cups * 48, "teaspoon"

    if math.isinf(amount) or math.isnan(amount):
        amount = 0.0
    return amount, measure, render_amount(amount)
