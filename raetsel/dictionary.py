"""Common types shared by all word dictionaries."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from raetsel.utilities import Filter, LetterMap, split_string


class DictType(Enum):
    """Kinds of dictionary that a puzzle configuration can declare."""

    SINGLE_WORD = "single_word"
    MULTI_WORD = "multi_word"
    ANAGRAM = "anagram"


@dataclass
class WordQuery:
    """A pattern ('?' for unknown letters) to look up in a dictionary."""

    query_string: str
    dictionary: "Dictionary | None"
    unknown_letters: int


@dataclass
class Word:
    """A puzzle word: where its letters come from, its filters and its dictionary."""

    letters: list[LetterMap] = field(default_factory=list)
    word_filters: list[Filter] = field(default_factory=list)
    dictionary: "Dictionary | None" = None


class Dictionary(ABC):
    """A collection of words that can be searched with wildcard queries."""

    _description = "dictionary"

    def __init__(self, print_words: bool = False) -> None:
        self.print_words = print_words

    @abstractmethod
    def add_word(self, word: str) -> bool:
        """Add a word; return True if it was not present before."""

    @abstractmethod
    def has_word(self, query: WordQuery) -> bool:
        """Return True if some word matches the query."""

    @abstractmethod
    def get_words(self, query: WordQuery) -> list[str]:
        """Return all words matching the query."""

    def construct(self, filename: str, filters: Iterable[Filter] = ()) -> "Dictionary":
        """Load one word per line from ``filename``, keeping those passing all filters.

        A missing file yields an empty dictionary.
        """
        filters = list(filters)
        try:
            with open(filename, encoding="utf-8", newline="") as handle:
                content = handle.read()
        except FileNotFoundError:
            content = ""
        total_words = sum(
            1
            for line in split_string(content, "\n")
            if all(f(line) for f in filters) and self.add_word(line)
        )
        print(f"A {self._description} containing {total_words} words has been constructed.")
        return self