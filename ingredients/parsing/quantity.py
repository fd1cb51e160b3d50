"""
Quantity parsing and rendering.

parse_quantity_token() turns a single matched token ("½", "two", "1.5") into a
float. total_amount() combines the amount matches of one line into a single
quantity, adding tokens that sit next to each other ("1 ½" -> 1.5).
render_amount() goes the other way and snaps a float to a cook friendly
fraction ("1 1/2").
"""

import math
import re
from fractions import Fraction
from typing import List

from ..corpus import FRACTION_VALUES, WORD_NUMBERS
from ..errors import NoQuantityFound
from .models import LineRecord, WordMatch

# Tokens closer than this (end of previous -> start of next) belong to one quantity
MAX_TOKEN_GAP = 6

_NUMBER_AT_START_RE = re.compile(r"^\s*(\d+(?:\.\d+)?|\d+\s+\d+/\d+)")

# Rendering targets; order breaks ties
_RENDER_FRACTIONS = [
    (Fraction(0), ""),
    (Fraction(1), ""),
    (Fraction(1, 2), "1/2"),
    (Fraction(1, 3), "1/3"),
    (Fraction(2, 3), "2/3"),
    (Fraction(1, 6), "1/6"),
    (Fraction(1, 8), "1/8"),
    (Fraction(3, 8), "3/8"),
    (Fraction(5, 8), "5/8"),
    (Fraction(7, 8), "7/8"),
    (Fraction(1, 4), "1/4"),
    (Fraction(3, 4), "3/4"),
]


def parse_quantity_token(token: str) -> float:
    """
    Convert a number token to a float.

    Unicode fractions and word numbers are looked up, anything else is parsed
    as a number. Unrecognized tokens give 0.
    """
    if token in FRACTION_VALUES:
        return FRACTION_VALUES[token]

    key = (token or "").strip().lower()
    if key in WORD_NUMBERS:
        return float(WORD_NUMBERS[key])

    try:
        if "/" in key:
            return float(Fraction(key))
        return float(key)
    except (ValueError, ZeroDivisionError):
        return 0.0


def sum_adjacent(matches: List[WordMatch]) -> float:
    """Value of the first cluster of amount tokens in a line."""
    total = 0.0
    last_end = -1
    for m in matches:
        if last_end == -1:
            total = parse_quantity_token(m.word)
        elif abs(m.position - last_end) < MAX_TOKEN_GAP:
            total += parse_quantity_token(m.word)
        last_end = m.position + len(m.word)
    return total


def total_amount(record: LineRecord) -> float:
    """
    Resolve the quantity of a line.

    Falls back to a number at the very start of the line when no amount
    token was matched, and to 1 for lines mentioning "whole". Structured
    lines may have no quantity at all; any other line raises
    NoQuantityFound.
    """
    total = sum_adjacent(record.amount_matches)

    if total == 0:
        # Numbers outside the vocabulary, e.g. "1500 grams"
        m = _NUMBER_AT_START_RE.match(record.sanitized)
        if m:
            num = m.group(1).strip()
            try:
                total = float(num)
            except ValueError:
                total = parse_quantity_token(num)

    if total == 0 and "whole" in record.sanitized:
        total = 1.0

    if total == 0 and record.source != "structured":
        raise NoQuantityFound(f"no amount found in {record.sanitized.strip()!r}")

    return total


def _parse_decimal(s: str) -> tuple[int, Fraction]:
    """Split a fixed-point decimal string into its integer part and an exact fraction."""
    negative = s.startswith("-")
    int_part, _, frac_part = s.lstrip("+-").partition(".")
    whole = int(int_part) if int_part else 0
    frac = Fraction(int(frac_part), 10 ** len(frac_part)) if frac_part else Fraction(0)
    if negative:
        return -whole, -frac
    return whole, frac


def render_amount(amount: float) -> str:
    """
    Render an amount as a mixed fraction: 1.5 -> "1 1/2", 0.33 -> "1/3".

    The fractional part snaps to the nearest of a fixed set of kitchen
    fractions. Amounts that snap to a whole number render as that number.
    """
    if math.isnan(amount) or math.isinf(amount):
        return "0"

    whole, frac = _parse_decimal(f"{amount:.10f}")
    if frac <= 0:
        return str(whole)

    _, label = min(_RENDER_FRACTIONS, key=lambda f: abs(f[0] - frac))
    if not label:
        return str(math.floor(amount + 0.5))
    if whole > 0:
        return f"{whole} {label}"
    return label
