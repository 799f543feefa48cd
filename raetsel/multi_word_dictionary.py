"""Dictionary matching queries that are several dictionary words run together."""

from __future__ import annotations

from enum import Enum

from raetsel.dictionary import Dictionary, WordQuery
from raetsel.tree_dictionary import Node, TreeDictionary


class SuffixContained(Enum):
    """Whether the query's suffix from some position splits into dictionary words."""

    NO = "no"
    MAYBE = "maybe"
    YES = "yes"


class MultiWordTreeDictionary(Dictionary):
    """A query matches if it is a concatenation of one or more stored words.

    '?' in a query matches any letter.
    """

    _description = "tree dictionary"

    def __init__(self, print_words: bool = False) -> None:
        super().__init__(print_words)
        self.dictionary = TreeDictionary(print_words)
        self.previous_requests: dict[str, bool] = {}

    def add_word(self, word: str) -> bool:
        self.previous_requests.clear()
        return self.dictionary.add_word(word)

    def has_word(self, query: WordQuery) -> bool:
        text = query.query_string
        cached = self.previous_requests.get(text)
        if cached is not None:
            return cached
        suffixes = [SuffixContained.MAYBE] * len(text)
        result = self._has_word(self.dictionary.root, text, 0, suffixes)
        self.previous_requests[text] = result
        return result

    def _has_word(
        self, node: Node, query: str, index: int, suffixes: list[SuffixContained]
    ) -> bool:
        if index == len(query):
            return node.is_endpoint
        if node.is_endpoint:
            if suffixes[index] is SuffixContained.MAYBE:
                contained = self._has_word(self.dictionary.root, query, index, suffixes)
                suffixes[index] = SuffixContained.YES if contained else SuffixContained.NO
            return suffixes[index] is SuffixContained.YES
        letter = query[index].lower()
        if letter == "?":
            return any(
                self._has_word(child, query, index + 1, suffixes)
                for child in node.children.values()
            )
        child = node.children.get(letter)
        return child is not None and self._has_word(child, query, index + 1, suffixes)

    def get_words(self, query: WordQuery) -> list[str]:
        """Return each matching word padded with spaces to its place in the query."""
        text = query.query_string
        matches_by_start: dict[int, list[str]] = {}
        suffixes = [SuffixContained.MAYBE] * len(text)
        self._collect(self.dictionary.root, text, 0, "", matches_by_start, suffixes)
        return [
            " " * start + match + " " * (len(text) - start - len(match))
            for start in range(len(text))
            for match in matches_by_start.get(start, ())
        ]

    def _collect(
        self,
        node: Node,
        query: str,
        index: int,
        path: str,
        matches_by_start: dict[int, list[str]],
        suffixes: list[SuffixContained],
    ) -> bool:
        if index == len(query):
            if node.is_endpoint:
                matches_by_start.setdefault(index - len(path), []).append(path)
            return node.is_endpoint
        found = False
        if node.is_endpoint:
            if suffixes[index] is SuffixContained.MAYBE:
                contained = self._collect(
                    self.dictionary.root, query, index, "", matches_by_start, suffixes
                )
                suffixes[index] = SuffixContained.YES if contained else SuffixContained.NO
            if suffixes[index] is SuffixContained.YES:
                matches_by_start.setdefault(index - len(path), []).append(path)
                found = True
        letter = query[index].lower()
        if letter == "?":
            for key, child in node.children.items():
                found |= self._collect(
                    child, query, index + 1, path + key, matches_by_start, suffixes
                )
        elif letter in node.children:
            found |= self._collect(
                node.children[letter],
                query,
                index + 1,
                path + letter,
                matches_by_start,
                suffixes,
            )
        return found