"""
Multi-pattern vocabulary matching.

A Trie holds every entry of one vocabulary and finds all non-overlapping
occurrences in a string, preferring the longest entry at each start. The three
module-level tries are built once at import and only read afterwards, so they
are safe to share between threads.
"""

from typing import Iterable, List

from .. import corpus
from ..services.ingredient_normalize import pluralize
from .models import WordMatch


class _Node:
    __slots__ = ("children", "value")

    def __init__(self) -> None:
        self.children: dict[str, "_Node"] = {}
        self.value: str | None = None


class Trie:
    def __init__(self, patterns: Iterable[str] = ()):
        self._root = _Node()
        for pattern in patterns:
            self._insert(pattern)

    def _insert(self, pattern: str) -> None:
        if not pattern:
            return
        node = self._root
        for ch in pattern:
            node = node.children.setdefault(ch, _Node())
        node.value = pattern

    def find_all(self, text: str) -> List[WordMatch]:
        """
        Greedy longest-match scan.

        Each reported word is the matched entry with surrounding spaces
        trimmed; its position is the offset of the word's first character.
        """
        matches: List[WordMatch] = []
        i = 0
        n = len(text)
        while i < n:
            node = self._root
            longest = None
            longest_end = -1
            for j in range(i, n):
                node = node.children.get(text[j])
                if node is None:
                    break
                if node.value is not None:
                    longest = node.value
                    longest_end = j

            if longest is None:
                i += 1
                continue

            word = longest.strip()
            offset = len(longest) - len(longest.lstrip())
            matches.append(WordMatch(word=word, position=i + offset))
            i = longest_end + 1

        return matches


def _padded(words: Iterable[str]) -> list[str]:
    # Entries only match whole words of a space-padded sanitized line
    return [" " + w + " " for w in words if w]


def _with_plurals(words: Iterable[str]) -> list[str]:
    out = set()
    for w in words:
        out.add(w)
        out.add(pluralize(w))
    return sorted(out)


INGREDIENTS_TRIE = Trie(_padded(_with_plurals(corpus.INGREDIENTS)))
MEASURES_TRIE = Trie(_padded(corpus.MEASURES))
NUMBERS_TRIE = Trie(_padded(corpus.NUMBERS))


def find_ingredients(line: str) -> List[WordMatch]:
    return INGREDIENTS_TRIE.find_all(line)


def find_measures(line: str) -> List[WordMatch]:
    return MEASURES_TRIE.find_all(line)


def find_numbers(line: str) -> List[WordMatch]:
    return NUMBERS_TRIE.find_all(line)
