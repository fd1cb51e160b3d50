import re

import inflection

# Applied before the generic English rules; first match wins
SINGULAR_OVERRIDES = [
    (re.compile(r"(?i)(clove)(s)?$"), r"\1"),
    (re.compile(r"(?i)(potato)(es)?$"), r"\1"),
    (re.compile(r"(?i)(tomato)(es)?$"), r"\1"),
    (re.compile(r"(?i)(olive)(s)?$"), r"\1"),
    (re.compile(r"(?i)(chive)(s)?$"), r"\1"),
    (re.compile(r"(?i)(lea)(f|ves)$"), r"\1f"),
]

PLURAL_OVERRIDES = [
    (re.compile(r"(?i)(potato)$"), r"\1es"),
    (re.compile(r"(?i)(tomato)$"), r"\1es"),
    (re.compile(r"(?i)(lea)f$"), r"\1ves"),
]

# Never inflected, matched on the last word
UNCOUNTABLES = {
    "molasses", "bacon", "asparagus", "hummus", "couscous", "breadcrumbs",
    "grits", "swiss", "jus",
}

_UNCOUNTABLE_RE = re.compile(
    r"(?i)\b(%s)$" % "|".join(sorted(UNCOUNTABLES, key=len, reverse=True))
)


def singularize(word: str) -> str:
    """Singular form of an ingredient name ("cherry tomatoes" -> "cherry tomato")."""
    if not word:
        return ""
    if _UNCOUNTABLE_RE.search(word):
        return word
    for pattern, replacement in SINGULAR_OVERRIDES:
        if pattern.search(word):
            return pattern.sub(replacement, word)
    return inflection.singularize(word)


def pluralize(word: str) -> str:
    if not word:
        return ""
    if _UNCOUNTABLE_RE.search(word):
        return word
    for pattern, replacement in PLURAL_OVERRIDES:
        if pattern.search(word):
            return pattern.sub(replacement, word)
    return inflection.pluralize(word)


def normalize_ingredient_key(name: str) -> str:
    """
    Normalize ingredient name to a canonical key for table lookups.

    Rules:
    - Lowercase
    - Parenthetical and punctuation removal
    - Whitespace collapse
    - Singularization
    """
    if not name:
        return ""

    s = name.lower()

    # "Flour (all purpose)" -> "Flour "
    s = re.sub(r"\(.*?\)", "", s)

    # Apostrophes join ("za'atar" -> "zaatar"), other punctuation splits words
    s = re.sub(r"['’]", "", s)
    s = re.sub(r"[^\w\s]", " ", s)

    s = re.sub(r"\s+", " ", s).strip()

    return singularize(s)
