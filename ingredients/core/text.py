import re

from ..corpus import FRACTIONS

# Literal replacements, applied in order
SUBSTITUTIONS = [
    ("⁄", "/"),
    (" / ", "/"),
    ("butter milk", "buttermilk"),
    ("bicarbonate of soda", "baking soda"),
    ("soda bicarbonate", "baking soda"),
    (" one ", " 1 "),
]

_PARENTHESES_RE = re.compile(r"\((.*)\)", re.DOTALL)
_APOSTROPHE_RE = re.compile(r"['’]")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9/.]+")
_DIGIT_LETTER_RE = re.compile(r"(\d)([a-z])")
_STRAY_DOT_RE = re.compile(r"\.(?!\d)")

BULLET_MARKERS = ("*", "-")


def sanitize_line(text: str) -> str:
    """
    Normalize a raw ingredient line for vocabulary matching.

    The result is lowercase, padded with a space on both sides, free of
    parenthetical asides and punctuation, and carries fractions as single
    unicode glyphs so "1 1/2 cups" becomes " 1  ½  cups ".
    """
    if not text:
        return ""

    s = text.lower()

    for old, new in SUBSTITUTIONS:
        s = s.replace(old, new)

    # Greedy: "(a) flour (b)" drops everything between the outer parentheses
    s = _PARENTHESES_RE.sub(" ", s)

    s = " " + s.strip() + " "

    # Glyphs -> "n/d" so the punctuation pass keeps them
    for glyph, fraction in FRACTIONS.items():
        s = s.replace(glyph, " " + fraction + " ")

    s = _APOSTROPHE_RE.sub("", s)
    s = _NON_ALNUM_RE.sub(" ", s)
    s = _STRAY_DOT_RE.sub(" ", s)

    # "100g" -> "100 g"
    s = _DIGIT_LETTER_RE.sub(r"\1 \2", s)

    # "n/d" -> glyph, so a fraction is one vocabulary token
    for glyph, fraction in FRACTIONS.items():
        s = s.replace(fraction, " " + glyph + " ")

    return s


def starts_with_bullet(text: str) -> bool:
    """True if the first whitespace token of the line is a list bullet."""
    fields = (text or "").split()
    return bool(fields) and fields[0] in BULLET_MARKERS
