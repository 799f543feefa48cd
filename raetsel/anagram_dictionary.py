"""Dictionary that answers anagram queries, with '?' standing for any letter."""

from __future__ import annotations

from raetsel.dictionary import Dictionary, WordQuery
from raetsel.tree_dictionary import Node, TreeDictionary


def _sort_letters(word: str) -> str:
    return "".join(sorted(word))


class AnagramDictionary(Dictionary):
    """Stores each word under its sorted letters so that queries ignore letter order.

    A query matches a word if its known letters, together with as many free
    letters as the query has unknowns, can be rearranged into that word.
    """

    _description = "dictionary"

    def __init__(self, print_words: bool = False) -> None:
        super().__init__(print_words)
        self.anagrams = TreeDictionary(print_words)
        self.anagram_to_words: dict[str, list[str]] = {}

    def add_word(self, word: str) -> bool:
        sorted_word = _sort_letters(word)
        self.anagram_to_words.setdefault(sorted_word.lower(), []).append(word)
        return self.anagrams.add_word(sorted_word)

    def _prepare(self, query: WordQuery) -> tuple[str, int]:
        query_string = _sort_letters(query.query_string)
        blanks = query.unknown_letters
        if blanks > len(query_string):
            raise ValueError(
                f"query {query.query_string!r} cannot have {blanks} unknown letters"
            )
        # '?' sorts before every letter, so the unknowns sit at the front.
        return query_string, blanks

    def has_word(self, query: WordQuery) -> bool:
        query_string, blanks = self._prepare(query)
        return self._has_word(self.anagrams.root, query_string, blanks, blanks)

    def _has_word(self, node: Node, query: str, index: int, blanks: int) -> bool:
        if index == len(query):
            if blanks == 0:
                return node.is_endpoint
            return any(
                self._has_word(child, query, index, blanks - 1)
                for child in node.children.values()
            )
        letter = query[index].lower()
        child = node.children.get(letter)
        if child is not None and self._has_word(child, query, index + 1, blanks):
            return True
        if blanks > 0:
            return any(
                self._has_word(other, query, index, blanks - 1)
                for key, other in node.children.items()
                if key != letter
            )
        return False

    def get_words(self, query: WordQuery) -> list[str]:
        query_string, blanks = self._prepare(query)
        found: dict[str, None] = {}
        self._collect(self.anagrams.root, query_string, blanks, "", blanks, found)
        return [
            word
            for anagram in found
            for word in self.anagram_to_words.get(anagram, ())
        ]

    def _collect(
        self,
        node: Node,
        query: str,
        index: int,
        path: str,
        blanks: int,
        found: dict[str, None],
    ) -> None:
        if index == len(query):
            if blanks == 0:
                if node.is_endpoint:
                    found[path] = None
                return
            for key, child in node.children.items():
                self._collect(child, query, index, path + key, blanks - 1, found)
            return
        letter = query[index].lower()
        child = node.children.get(letter)
        if child is not None:
            self._collect(child, query, index + 1, path + letter, blanks, found)
        if blanks > 0:
            for key, other in node.children.items():
                if key != letter:
                    self._collect(other, query, index, path + key, blanks - 1, found)