"""Prefix-tree dictionary supporting '?' wildcards."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from raetsel.dictionary import Dictionary, WordQuery


@dataclass
class Node:
    """A trie node keyed by lower-case letters."""

    depth: int = 0
    children: dict[str, "Node"] = field(default_factory=dict)
    is_endpoint: bool = False


class TreeDictionary(Dictionary):
    """Words stored case-insensitively in a trie; '?' in a query matches any letter."""

    _description = "tree dictionary"

    def __init__(self, print_words: bool = False) -> None:
        super().__init__(print_words)
        self.root = Node(0)

    def add_word(self, word: str) -> bool:
        if not word:
            return False
        if self.print_words:
            print(word)
        node = self.root
        for letter in word:
            letter = letter.lower()
            child = node.children.get(letter)
            if child is None:
                child = node.children[letter] = Node(node.depth + 1)
            node = child
        is_new_word = not node.is_endpoint
        node.is_endpoint = True
        return is_new_word

    def has_word(self, query: WordQuery) -> bool:
        return self._has_word(self.root, query.query_string, 0)

    def _has_word(self, node: Node, query: str, index: int) -> bool:
        if index == len(query):
            return node.is_endpoint
        letter = query[index].lower()
        if letter == "?":
            return any(
                self._has_word(child, query, index + 1)
                for child in node.children.values()
            )
        child = node.children.get(letter)
        return child is not None and self._has_word(child, query, index + 1)

    def get_words(self, query: WordQuery) -> list[str]:
        return list(self._iter_words(self.root, query.query_string, ""))

    def _iter_words(self, node: Node, query: str, path: str) -> Iterator[str]:
        index = len(path)
        if index == len(query):
            if node.is_endpoint:
                yield path
            return
        letter = query[index].lower()
        if letter == "?":
            for key, child in node.children.items():
                yield from self._iter_words(child, query, path + key)
        elif letter in node.children:
            yield from self._iter_words(node.children[letter], query, path + letter)