"""Enumerates placements of the known words and builds dictionary queries from them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from raetsel.dictionary import WordQuery
from raetsel.input_reader import Puzzle
from raetsel.utilities import (
    LetterMapType,
    MultiWord,
    WordList,
    collapse_multi_words,
    get_word_value,
    n_choose_k,
)

FinalizedQuery = list[WordQuery]


@dataclass
class QueryStruct:
    """The queries for one puzzle word each, and the word list they came from."""

    query: FinalizedQuery
    origin_index: int


def _next_permutation(items: list[bool]) -> bool:
    """Rearrange ``items`` into the next lexicographic permutation in place.

    Returns False, after restoring the first permutation, when ``items`` was the last.
    """
    pivot = len(items) - 2
    while pivot >= 0 and not items[pivot] < items[pivot + 1]:
        pivot -= 1
    if pivot < 0:
        items.reverse()
        return False
    successor = len(items) - 1
    while not items[pivot] < items[successor]:
        successor -= 1
    items[pivot], items[successor] = items[successor], items[pivot]
    items[pivot + 1:] = reversed(items[pivot + 1:])
    return True


class QueryManager:
    """Walks through all positions the known words may take among all ordered words.

    ``non_blanks[i]`` is True when the i-th ordered word is one of the known words.
    """

    def __init__(self, known_words: Sequence[MultiWord], total_words: int) -> None:
        if len(known_words) > total_words:
            raise ValueError(
                f"{len(known_words)} known words do not fit into {total_words} words"
            )
        blanks = total_words - len(known_words)
        self.non_blanks: list[bool] = [False] * blanks + [True] * len(known_words)
        self.finished = False
        self.past_orderings = 0
        self.collapsed_multi_words: list[WordList] = [
            sorted(word_list, key=lambda word: (get_word_value(word), word))
            for word_list in collapse_multi_words(known_words)
        ]
        self.total_possibilities = n_choose_k(total_words, blanks) * len(
            self.collapsed_multi_words
        )
        self._complying_word_lists: list[int] = []
        self._words_to_known_words: dict[int, int] = {}

    def next_ordering(self) -> bool:
        """Advance to the next placement; return True once all have been visited."""
        if not self.finished:
            self.past_orderings += 1
            self.finished = not _next_permutation(self.non_blanks)
        return self.finished

    def complies(self, puzzle: Puzzle) -> bool:
        """Check which word lists fit the current placement; True if any does."""
        known_positions = (i for i, known in enumerate(self.non_blanks) if known)
        self._words_to_known_words = {
            position: known_index for known_index, position in enumerate(known_positions)
        }
        self._complying_word_lists = [
            index
            for index, word_list in enumerate(self.collapsed_multi_words)
            if self.is_valid_word_list(puzzle, word_list)
        ]
        return bool(self._complying_word_lists)

    def generate_queries(self, puzzle: Puzzle) -> list[QueryStruct]:
        """Build the queries for every word list found fitting by :meth:`complies`."""
        return [
            QueryStruct(self._build_query(self.collapsed_multi_words[index], puzzle), index)
            for index in self._complying_word_lists
        ]

    def _build_query(self, word_list: WordList, puzzle: Puzzle) -> FinalizedQuery:
        queries: FinalizedQuery = []
        for word in puzzle.words:
            letters = []
            unknown_letters = 0
            for letter_map in word.letters:
                known_index = self._words_to_known_words.get(letter_map.ordered_words_index)
                if known_index is None:
                    letters.append("?")
                    unknown_letters += 1
                else:
                    letters.append(letter_map.get_letter(word_list[known_index]))
            query = "".join(letters)
            # An arrangement is only tried if every word agrees with its filters.
            if not all(f.is_valid(query) for f in word.word_filters):
                return []
            queries.append(WordQuery(query, word.dictionary, unknown_letters))
        return queries

    def is_valid_word_list(self, puzzle: Puzzle, word_list: WordList) -> bool:
        """Return True if every letter mapping can be taken from ``word_list``."""
        for word in puzzle.words:
            for letter_map in word.letters:
                known_index = self._words_to_known_words.get(letter_map.ordered_words_index)
                if known_index is None:
                    continue
                known_word = word_list[known_index]
                if letter_map.type is LetterMapType.MIDDLE and len(known_word) % 2 != 1:
                    return False
                if letter_map.letter_index >= len(known_word):
                    return False
        return True