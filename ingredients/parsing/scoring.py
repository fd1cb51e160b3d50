"""
Heuristic scoring of candidate ingredient lines.

A good ingredient line is short, names one ingredient, and reads
"<amount> <measure> <ingredient>". The thresholds below are tuned against real
recipe pages; changing them shifts extraction recall and precision.
"""

from typing import List, Tuple

from ..core.text import sanitize_line, starts_with_bullet
from .matcher import find_ingredients, find_measures, find_numbers
from .models import LineRecord, LineSource

MAX_ORIGINAL_LENGTH = 50
VERBOSE_LENGTH = 30
MAX_SANITIZED_LENGTH = 250
PUNCTUATION = (".", ",", "!", "?")


def analyze_line(text: str, source: LineSource = "freeform") -> LineRecord:
    """Sanitize a line and run all three vocabularies over it."""
    sanitized = sanitize_line(text)
    return LineRecord(
        original=text,
        sanitized=sanitized,
        ingredient_matches=find_ingredients(sanitized),
        amount_matches=find_numbers(sanitized),
        measure_matches=find_measures(sanitized),
        source=source,
    )


def score_line(text: str) -> Tuple[int, LineRecord]:
    record = analyze_line(text)
    ingredients = record.ingredient_matches
    amounts = record.amount_matches
    measures = record.measure_matches

    # Prefer the longer, more specific name of two
    if len(ingredients) == 2 and len(ingredients[1].word) > len(ingredients[0].word):
        ingredients[0] = ingredients[1]

    if len(record.original) > MAX_ORIGINAL_LENGTH:
        return 0, record

    score = 0
    if ingredients:
        score += 1
    # Several ingredients on one line reads like an instruction
    if len(ingredients) > 1:
        score -= len(ingredients) - 1
    if amounts:
        score += 1
    if measures:
        score += 1

    # Word order: amount, measure, ingredient
    if ingredients and measures and ingredients[0].position > measures[0].position:
        score += 1
    if ingredients and amounts and ingredients[0].position > amounts[0].position:
        score += 1
    if measures and amounts and measures[0].position > amounts[0].position:
        score += 1

    for mark in PUNCTUATION:
        if record.original.count(mark) > 1:
            score -= 1

    length = len(record.sanitized)
    if length > VERBOSE_LENGTH:
        score -= length - VERBOSE_LENGTH
    if length > MAX_SANITIZED_LENGTH:
        score = 0

    if starts_with_bullet(record.sanitized):
        score += 1

    # One signal on its own is noise
    if score == 1:
        score = 0

    return score, record


def score_lines(lines: List[str]) -> Tuple[int, List[LineRecord]]:
    """Score a candidate line set; fewer than two lines is never a list."""
    if len(lines) < 2:
        return 0, []
    total = 0
    records = []
    for line in lines:
        score, record = score_line(line)
        total += score
        records.append(record)
    return total, records
