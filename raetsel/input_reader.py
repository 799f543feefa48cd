"""Reading puzzle configuration files and solution lists."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass, field

from raetsel.anagram_dictionary import AnagramDictionary
from raetsel.dictionary import Dictionary, DictType, Word
from raetsel.multi_word_dictionary import MultiWordTreeDictionary
from raetsel.tree_dictionary import TreeDictionary
from raetsel.utilities import (
    Filter,
    LetterMap,
    LetterMapType,
    MultiWord,
    find_base_path,
    split_string,
)

_LETTER_MAP_PATTERN = re.compile(r"([FBM]\d*)P(\d+)")
_INT_PATTERN = re.compile(r"\s*[+-]?\d+")
_SPACE = " \t\n\v\f\r"

_DICTIONARY_CLASSES: dict[DictType, type[Dictionary]] = {
    DictType.SINGLE_WORD: TreeDictionary,
    DictType.MULTI_WORD: MultiWordTreeDictionary,
    DictType.ANAGRAM: AnagramDictionary,
}


class MissingDictionaryError(LookupError):
    """A word refers to a dictionary that the configuration does not define."""


@dataclass
class FilterSettings:
    satisfy: bool = True
    regex: str = ""


@dataclass
class DictSettings:
    name: str = ""
    filename: str = ""
    filters: list[FilterSettings] = field(default_factory=list)
    type: DictType = DictType.SINGLE_WORD
    print_words: bool = False


@dataclass
class WordSettings:
    dictionary_name: str = ""
    letters: list[LetterMap] = field(default_factory=list)
    filters: list[FilterSettings] = field(default_factory=list)


@dataclass
class GeneralSettings:
    detail_level: int = 0
    min_matches: int = 0
    total_words: int = 0
    show_matches: bool = False
    show_configuration: bool = False
    words_file: str = ""


@dataclass
class Puzzle:
    """Everything needed to search for a solution."""

    words: list[Word] = field(default_factory=list)
    input_words: list[MultiWord] = field(default_factory=list)
    dictionaries: dict[str, Dictionary] = field(default_factory=dict)
    min_matches: int = 0
    total_words: int = 0
    detail_level: int = 0
    show_matches: bool = False
    show_configuration: bool = False


def trim_string(string: str, whitespace: str = " \t\n") -> str:
    """Strip the characters in ``whitespace`` from both ends."""
    return string.strip(whitespace)


def _parse_int(value: str) -> int:
    match = _INT_PATTERN.match(value)
    if match is None:
        raise ValueError(f"expected an integer, got {value!r}")
    return int(match.group())


def _warn_if_missing(filename: str) -> None:
    if not os.path.isfile(filename):
        print(
            f"It appears that no file {filename} relative to your working directory exists.",
            file=sys.stderr,
        )


class _CharStream:
    """Character reader over configuration text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def __bool__(self) -> bool:
        return self._pos < len(self._text)

    def get(self) -> str:
        if self._pos >= len(self._text):
            return ""
        char = self._text[self._pos]
        self._pos += 1
        return char

    def read_until(self, delim: str) -> str:
        end = self._text.find(delim, self._pos)
        if end == -1:
            segment = self._text[self._pos:]
            self._pos = len(self._text)
        else:
            segment = self._text[self._pos:end]
            self._pos = end + 1
        return segment

    def read_value(self, delim: str) -> str:
        return trim_string(self.read_until(delim))

    def peek_non_space(self) -> str:
        while self._pos < len(self._text) and self._text[self._pos] in _SPACE:
            self._pos += 1
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def eat(self) -> str:
        self.peek_non_space()
        return self.get()

    def skip_optional_semicolon(self) -> None:
        if self.peek_non_space() == ";":
            self.eat()

    def close_block(self) -> None:
        self.eat()
        self.skip_optional_semicolon()

    def in_block(self) -> bool:
        return bool(self) and self.peek_non_space() != "}"


def _parse_filter(stream: _CharStream) -> FilterSettings:
    settings = FilterSettings()
    while stream.in_block():
        variable = stream.read_value("=")
        value = stream.read_value(";")
        if variable == "satisfy":
            settings.satisfy = value == "true"
        elif variable == "regex":
            settings.regex = value
        else:
            print(f"Unknown filter option '{variable}' with value '{value}'")
            continue
        print(f"Set Filter {variable} to {value}.")
    stream.close_block()
    return settings


def _parse_filter_list(stream: _CharStream) -> list[FilterSettings]:
    stream.eat()
    filters = []
    while stream and stream.get() != "]":
        filters.append(_parse_filter(stream))
    stream.skip_optional_semicolon()
    return filters


def parse_letters(letter_maps: str) -> list[LetterMap]:
    """Parse mappings such as ``F1P2; B2P1; MP3`` separated by ';'."""
    maps = []
    for segment in split_string(letter_maps, ";"):
        text = trim_string(segment)
        if not text:
            continue
        match = _LETTER_MAP_PATTERN.fullmatch(text)
        if match is None:
            raise ValueError(f"malformed letter mapping {text!r}")
        mapping, word_number = match.groups()
        word_index = int(word_number) - 1
        if word_index < 0:
            raise ValueError(f"word numbers start at 1 in {text!r}")
        if mapping[0] == "M":
            maps.append(LetterMap(LetterMapType.MIDDLE, 0, word_index))
            continue
        letter_index = int(mapping[1:]) - 1
        if letter_index < 0:
            raise ValueError(f"letter numbers start at 1 in {text!r}")
        kind = LetterMapType.BACK if mapping[0] == "B" else LetterMapType.FRONT
        maps.append(LetterMap(kind, letter_index, word_index))
    return maps


def _parse_word(stream: _CharStream) -> WordSettings:
    settings = WordSettings()
    while stream.in_block():
        variable = stream.read_value("=")
        if variable == "letters":
            stream.eat()
            settings.letters = parse_letters(stream.read_until("]"))
            stream.skip_optional_semicolon()
        elif variable == "filters":
            settings.filters = _parse_filter_list(stream)
        else:
            value = stream.read_value(";")
            if variable == "dictionary":
                settings.dictionary_name = value
            else:
                print(f"Unknown word option '{variable}' with value '{value}'")
    stream.close_block()
    return settings


def _parse_dictionary(stream: _CharStream) -> DictSettings:
    settings = DictSettings()
    while stream.in_block():
        variable = stream.read_value("=")
        if variable == "filters":
            settings.filters = _parse_filter_list(stream)
            continue
        value = stream.read_value(";")
        if variable == "name":
            settings.name = value
        elif variable == "print_words":
            settings.print_words = value == "true"
        elif variable == "filename":
            settings.filename = value
        elif variable == "type":
            try:
                settings.type = DictType(value)
            except ValueError:
                print(f"Unknown dictionary type '{value}'")
        else:
            print(f"Unknown dictionary option '{variable}' with value '{value}'")
            continue
        print(f"Set Dictionary {variable} to {value}.")
    stream.close_block()
    return settings


def _parse_settings(stream: _CharStream) -> GeneralSettings:
    settings = GeneralSettings()
    while stream.in_block():
        variable = stream.read_value("=")
        value = stream.read_value(";")
        if variable == "detail":
            settings.detail_level = _parse_int(value)
        elif variable == "min_matches":
            settings.min_matches = _parse_int(value)
        elif variable == "show_matches":
            settings.show_matches = value == "true"
        elif variable == "total_words":
            settings.total_words = _parse_int(value)
        elif variable == "show_config":
            settings.show_configuration = value == "true"
        elif variable == "words_file":
            settings.words_file = value
        else:
            print(f"Unknown general setting: '{variable}' with value '{value}'.")
            continue
        print(f"Set {variable} to {value}.")
    stream.close_block()
    return settings


def _build_filters(settings: list[FilterSettings]) -> list[Filter]:
    return [Filter(f.satisfy, re.compile(f.regex).fullmatch) for f in settings]


def construct_word(settings: WordSettings, dicts: dict[str, Dictionary]) -> Word:
    """Build a puzzle word, resolving its dictionary by name."""
    dictionary = dicts.get(settings.dictionary_name)
    if dictionary is None:
        raise MissingDictionaryError(
            f"Missing dictionary of name '{settings.dictionary_name}'."
        )
    return Word(list(settings.letters), _build_filters(settings.filters), dictionary)


def read_solutions_list(filename: str) -> list[MultiWord]:
    """Read known words: one per line, alternatives separated by ','.

    Empty lines and lines starting with '#' are skipped.
    """
    _warn_if_missing(filename)
    try:
        with open(filename, encoding="utf-8", newline="") as handle:
            content = handle.read()
    except OSError:
        return []
    return [
        split_string(line, ",")
        for line in split_string(content, "\n")
        if line and not line.startswith("#")
    ]


def _build_dictionary(settings: DictSettings, base_path: str) -> Dictionary:
    filters = _build_filters(settings.filters)
    dict_file = base_path + settings.filename
    _warn_if_missing(dict_file)
    dictionary = _DICTIONARY_CLASSES[settings.type](settings.print_words)
    return dictionary.construct(dict_file, filters)


def read_puzzle(puzzle_config_file: str) -> Puzzle:
    """Read a puzzle configuration; referenced files are relative to it."""
    base_path = find_base_path(puzzle_config_file)
    with open(puzzle_config_file, encoding="utf-8") as handle:
        stream = _CharStream(handle.read())
    pending_words: list[WordSettings] = []
    dicts: dict[str, Dictionary] = {}
    settings = GeneralSettings()
    while stream:
        block_type = stream.read_value("{")
        if not block_type:
            break
        if block_type == "dictionary":
            parsed = _parse_dictionary(stream)
            dicts[parsed.name] = _build_dictionary(parsed, base_path)
        elif block_type == "word":
            # Words are resolved later so dictionaries may be declared after them.
            pending_words.append(_parse_word(stream))
        elif block_type == "general":
            settings = _parse_settings(stream)
    print("Finished loading dictionaries and puzzle input.")
    words = [construct_word(word, dicts) for word in pending_words]
    return Puzzle(
        words=words,
        input_words=read_solutions_list(base_path + settings.words_file),
        dictionaries=dicts,
        min_matches=settings.min_matches,
        total_words=settings.total_words,
        detail_level=settings.detail_level,
        show_matches=settings.show_matches,
        show_configuration=settings.show_configuration,
    )