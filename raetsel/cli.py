"""Command-line search for word puzzle solutions."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence

from raetsel.dictionary import Dictionary, WordQuery
from raetsel.input_reader import MissingDictionaryError, Puzzle, read_puzzle
from raetsel.options import OptionParser
from raetsel.query_manager import QueryManager, QueryStruct
from raetsel.utilities import split_string


def single_query(query: WordQuery) -> bool:
    """Return True if the query's dictionary holds a matching word."""
    return query.dictionary.has_word(query)


def check_query(query: Sequence[WordQuery], min_matches: int) -> bool:
    """Return True if at least ``min_matches`` of the queries find a word.

    Queries with fewer unknowns are tried first; the search stops once
    the goal can no longer be reached.
    """
    ordered = sorted(query, key=lambda q: q.query_string.count("?"))
    matched_words = 0
    for position, word_query in enumerate(ordered):
        if min_matches - matched_words > len(ordered) - position:
            return False
        if word_query.dictionary.has_word(word_query):
            matched_words += 1
    return matched_words >= min_matches


def format_matched(queries: Iterable[WordQuery]) -> str:
    """One '+' or '-' per letter for each query, depending on whether it matched."""
    return "".join(
        ("+" if single_query(q) else "-") * len(q.query_string) + " " for q in queries
    )


def format_matches(queries: Sequence[WordQuery]) -> list[str]:
    """Lines listing the matches of each query in columns."""
    matches = [q.dictionary.get_words(q) for q in queries]
    rows = max((len(found) for found in matches), default=0)
    return [
        "".join(
            (found[row] if row < len(found) else " " * len(q.query_string)) + " "
            for q, found in zip(queries, matches)
        )
        for row in range(rows)
    ]


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def test_dictionary(dictionary: Dictionary, lines: Iterable[str]) -> Iterator[str]:
    """Answer each input line as a query against ``dictionary``."""
    for line in lines:
        text = _strip_newline(line)
        query = WordQuery(text, dictionary, text.count("?"))
        yield "1" if dictionary.has_word(query) else "0"
        found = dictionary.get_words(query)
        if found:
            yield "".join(f"{word} " for word in found)


def query_test_mode(puzzle: Puzzle, lines: Iterable[str]) -> Iterator[str]:
    """Check space-separated queries, one for each puzzle word, line by line."""
    for line in lines:
        parts = split_string(_strip_newline(line), " ")
        if len(parts) != len(puzzle.words):
            yield (
                f"A query needs to consist of {len(puzzle.words)} words "
                f"({len(parts)} words were given)."
            )
            continue
        word_queries = [
            WordQuery(part, word.dictionary, part.count("?"))
            for part, word in zip(parts, puzzle.words)
        ]
        if puzzle.show_matches:
            yield from format_matches(word_queries)
        else:
            yield format_matched(word_queries)


def _show_result(puzzle: Puzzle, query: Sequence[WordQuery]) -> None:
    if puzzle.show_matches:
        for line in format_matches(query):
            print(line)
    else:
        print(format_matched(query))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the solver; returns the process exit status."""
    parser = OptionParser(sys.argv[1:] if argv is None else argv)
    puzzle_file = "puzzle_config.txt"
    if parser.has_option_value("-f"):
        puzzle_file = parser.get_option_value("-f")
    print("Reading puzzle file")
    try:
        puzzle = read_puzzle(puzzle_file)
    except MissingDictionaryError as error:
        print(error)
        return 1
    except OSError as error:
        print(f"Cannot read puzzle file {puzzle_file}: {error}", file=sys.stderr)
        return 1

    if parser.has_option("-i"):
        print("Entering interactive mode. Simply enter a query below.")
        for line in query_test_mode(puzzle, sys.stdin):
            print(line)
    if parser.has_option_value("-t"):
        name = parser.get_option_value("-t")
        if name not in puzzle.dictionaries:
            print(f"No Dictionary of name {name} was defined.")
            return 0
        print(f"Entering Dictionary Test Mode for {name}")
        for line in test_dictionary(puzzle.dictionaries[name], sys.stdin):
            print(line)

    print("Constructing word manager")
    try:
        manager = QueryManager(puzzle.input_words, puzzle.total_words)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    word_lists = len(manager.collapsed_multi_words)
    print(
        f"There are ({puzzle.total_words} choose {len(puzzle.input_words)}) * "
        f"{word_lists} = {manager.total_possibilities} possible configurations."
    )

    successes: list[tuple[QueryStruct, list[bool]]] = []
    last_percentage = 0
    while not manager.finished:
        percentage = (
            (manager.past_orderings + 1) * 100 * word_lists // manager.total_possibilities
        )
        while last_percentage <= percentage:
            print("#" if last_percentage % 10 else "|", end="", flush=True)
            last_percentage += 1
        if manager.complies(puzzle):
            for query_struct in manager.generate_queries(puzzle):
                if check_query(query_struct.query, puzzle.min_matches):
                    successes.append((query_struct, list(manager.non_blanks)))
        manager.next_ordering()

    print(
        f"\n{len(successes)} orderings matching at least "
        f"{puzzle.min_matches} words were found!"
    )
    for query_struct, non_blanks in successes:
        print("".join(f"{q.query_string} " for q in query_struct.query))
        _show_result(puzzle, query_struct.query)
        if puzzle.show_configuration:
            print("".join(f"{int(flag)} " for flag in non_blanks))
    return 0


if __name__ == "__main__":
    sys.exit(main())