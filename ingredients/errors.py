"""
Error taxonomy for ingredient extraction.

Only NoDocumentLoaded escapes the public entry points. The others describe
why a single line or a single extraction strategy failed and are handled
where they are raised.
"""


class IngredientsError(Exception):
    """Base class for all extraction errors."""


class NoDocumentLoaded(IngredientsError):
    """The document to parse is empty."""


class NoStructuredData(IngredientsError):
    """No schema.org Recipe with usable ingredients; fall back to the tree walk."""


class MalformedEmbeddedData(IngredientsError):
    """A script block did not contain parseable JSON."""


class NoQuantityFound(IngredientsError):
    pass


class NoIngredientFound(IngredientsError):
    pass


class UnconvertibleUnit(IngredientsError):
    """The (amount, unit, ingredient) triple has no cup equivalent."""
