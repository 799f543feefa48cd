"""Shared helpers: word filters, letter mappings and combinatorics."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

WordList = list[str]
MultiWord = list[str]
FilterFunction = Callable[[str], bool]


@dataclass(frozen=True)
class Filter:
    """A predicate on words together with the outcome it has to produce."""

    satisfy: bool
    function: FilterFunction

    def __call__(self, word: str) -> bool:
        return self.is_valid(word)

    def is_valid(self, word: str) -> bool:
        """Return True if the predicate's result on ``word`` equals ``satisfy``."""
        return bool(self.function(word)) == self.satisfy


class LetterMapType(Enum):
    """Where a letter is taken from within a word."""

    FRONT = "front"
    BACK = "back"
    MIDDLE = "middle"


@dataclass(frozen=True)
class LetterMap:
    """Maps one letter of a puzzle word to a letter of an ordered known word."""

    type: LetterMapType
    letter_index: int
    ordered_words_index: int

    def get_letter(self, word: str) -> str:
        """Return the letter of ``word`` this mapping points at."""
        if self.type is LetterMapType.MIDDLE:
            if not word:
                raise IndexError("cannot take the middle letter of an empty word")
            return word[len(word) // 2]
        if not 0 <= self.letter_index < len(word):
            raise IndexError(
                f"letter index {self.letter_index} out of range for {word!r}"
            )
        if self.type is LetterMapType.BACK:
            return word[len(word) - self.letter_index - 1]
        return word[self.letter_index]


def get_all_combinations(limits: Sequence[int]) -> list[list[int]]:
    """Return every index vector whose i-th entry lies in ``range(limits[i])``.

    The all-zero vector comes first; later positions vary slowest.
    """
    combinations: list[list[int]] = [[0] * len(limits)]
    for position, limit in enumerate(limits):
        if limit == 1:
            continue
        existing = list(combinations)
        for combination in existing:
            for value in range(1, limit):
                copy = list(combination)
                copy[position] = value
                combinations.append(copy)
    return combinations


def get_word_value(word: str) -> int:
    """Sum of alphabet positions of the letters; a '?' counts as 1."""
    value = 0
    for letter in word:
        if letter == "?":
            value += 1
        else:
            value += ord(letter.lower()) - ord("a") + 1
    return value


def collapse_multi_words(multiwords: Sequence[Sequence[str]]) -> list[WordList]:
    """Expand alternatives: one word list for each choice of alternative per word."""
    limits = [len(alternatives) for alternatives in multiwords]
    return [
        [alternatives[choice] for alternatives, choice in zip(multiwords, combination)]
        for combination in get_all_combinations(limits)
    ]


def n_choose_k(n: int, k: int) -> int:
    """Binomial coefficient."""
    return math.comb(n, k)


def split_string(string: str, split_at: str) -> list[str]:
    """Split on ``split_at``; a trailing empty segment is dropped."""
    segments = string.split(split_at)
    if segments and segments[-1] == "":
        segments.pop()
    return segments


def find_base_path(file_name: str) -> str:
    """Return the directory part of ``file_name`` including the final slash."""
    return file_name[: file_name.rfind("/") + 1]