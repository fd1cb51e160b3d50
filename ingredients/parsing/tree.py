"""
Ingredient line discovery in an HTML tree.

Fallback for pages without schema.org data. The tree is walked depth first and
every element scores the text of its children: a container whose children
together look like ingredient lines (total score > 2, between 3 and 24 scored
children) contributes all of them. Inline scripts holding JSON are searched
for string arrays that score as an ingredient list; the first convincing one
replaces everything else and ends the walk.
"""

import json
import logging
from typing import Any, List, Optional, Tuple

from bs4 import BeautifulSoup, NavigableString, Tag

from ..errors import MalformedEmbeddedData, NoDocumentLoaded, NoStructuredData
from .models import LineRecord
from .scoring import score_line, score_lines
from .structured import extract_structured_lines

logger = logging.getLogger("ingredients.parsing")

MIN_CONTAINER_SCORE = 2
MIN_CHILDREN = 2
MAX_CHILDREN = 25
MIN_EMBEDDED_SCORE = 20
MIN_LINES = 2

_HIDDEN_TEXT_PARENTS = {"script", "style", "template"}

# (text passed to the parent, line set adopted from embedded JSON)
_Visit = Tuple[str, Optional[List[LineRecord]]]


def _parse_embedded_json(text: str) -> Any:
    try:
        value = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise MalformedEmbeddedData(str(e)) from e
    if not isinstance(value, (dict, list)):
        raise MalformedEmbeddedData(f"expected object or array, got {type(value).__name__}")
    return value


def _find_string_array(value: Any) -> Optional[List[LineRecord]]:
    """First array of strings in a JSON value that scores like an ingredient list."""
    # Pre-order, document order
    stack = [value]
    while stack:
        current = stack.pop()
        if isinstance(current, dict):
            stack.extend(reversed(list(current.values())))
        elif isinstance(current, list):
            if current and all(isinstance(v, str) for v in current):
                score, records = score_lines(current)
                logger.debug(f"Embedded string array of {len(current)} scored {score}")
                if score > MIN_EMBEDDED_SCORE:
                    return records
                continue
            stack.extend(reversed(current))
    return None


def lines_from_script(text: str) -> List[LineRecord]:
    """
    Ingredient lines embedded as JSON in a script body.

    Raises MalformedEmbeddedData when the script is not JSON.
    """
    return _find_string_array(_parse_embedded_json(text)) or []


def _visible_text(node: NavigableString) -> str:
    # Comments, doctypes, CDATA and script/style bodies are subclasses
    if type(node) is not NavigableString:
        return ""
    if node.parent is not None and node.parent.name in _HIDDEN_TEXT_PARENTS:
        return ""
    return node.strip()


def _visit_leaf(node: Any) -> Optional[_Visit]:
    """Result for nodes without scored children; None for ordinary elements."""
    if isinstance(node, NavigableString):
        return _visible_text(node), None

    if not isinstance(node, Tag):
        return "", None

    if node.name == "script":
        try:
            lines = lines_from_script(node.string or "")
        except MalformedEmbeddedData as e:
            logger.debug(f"Skipping script block: {e}")
            lines = []
        if len(lines) > MIN_LINES:
            logger.debug(f"Got {len(lines)} ingredient lines from embedded JSON")
            return "", lines
        return "", None

    return None


class _Container:
    """An element whose children are still being visited."""

    __slots__ = ("children", "score", "records")

    def __init__(self, node: Tag):
        self.children = iter(node.children)
        self.score = 0
        self.records: List[LineRecord] = []

    def add(self, text: str) -> None:
        if text:
            score, record = score_line(text)
            self.records.append(record)
            self.score += score

    def close(self, found: List[LineRecord]) -> _Visit:
        if self.score > MIN_CONTAINER_SCORE and MIN_CHILDREN < len(self.records) < MAX_CHILDREN:
            found.extend(self.records)
            for record in self.records:
                logger.debug(f"[{record.original}]")
        return " ".join(r.original for r in self.records), None


def _visit(root: Any, found: List[LineRecord]) -> _Visit:
    """
    Depth-first, post-order walk with an explicit stack.

    Each node hands (text, adopted) to its parent; an adopted line set ends
    the walk.
    """
    result = _visit_leaf(root)
    if result is not None:
        return result

    stack = [_Container(root)]
    while stack:
        top = stack[-1]
        child = next(top.children, None)
        if child is not None:
            result = _visit_leaf(child)
            if result is None:
                stack.append(_Container(child))
                continue
        else:
            stack.pop()
            result = top.close(found)
            if not stack:
                return result

        text, adopted = result
        if adopted is not None:
            return "", adopted
        stack[-1].add(text)

    return "", None


def extract_tree_lines(html: str) -> List[LineRecord]:
    soup = BeautifulSoup(html, "html.parser")
    found: List[LineRecord] = []
    _, adopted = _visit(soup, found)
    if adopted is not None:
        return adopted
    return found


def extract_ingredient_lines(html: str) -> List[LineRecord]:
    """
    Candidate ingredient lines of an HTML document.

    schema.org Recipe data wins when it yields more than two lines, otherwise
    the document tree is searched.
    """
    if not html or not html.strip():
        raise NoDocumentLoaded("no document loaded")

    try:
        lines = extract_structured_lines(html)
        if len(lines) > MIN_LINES:
            logger.debug("Using schema.org Recipe ingredients")
            return lines
        logger.info(f"schema.org Recipe has only {len(lines)} ingredients, searching the page")
    except NoStructuredData:
        logger.debug("No schema.org Recipe, searching the page")

    return extract_tree_lines(html)
