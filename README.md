# raetsel

A solver for letter-extraction word puzzles. You have a set of known answers
and a number of slots. Some slots hold the known answers and the rest stay
blank. The hidden words are formed from chosen letters of the answers in the
slots: the first letter of the answer in slot 3, the second-to-last letter of
the answer in slot 1, and so on. `raetsel` tries every placement of the known
answers among the slots and every alternative spelling of each answer. It
turns each arrangement into letter patterns and checks them against your
dictionaries. A letter that comes from a blank slot becomes `?`.

## Installation

```
pip install .
```

The package has no dependencies outside the standard library. To run the
tests:

```
pip install .[test]
pytest
```

## Usage

```
raetsel -f path/to/puzzle_config.txt
```

If `-f` is not given, `puzzle_config.txt` in the working directory is read.
Dictionary and word-list file names in the configuration are taken relative to
the directory that holds the configuration file. A missing dictionary or
word-list file gives a warning on standard error and counts as empty.

Other options:

- `-i`: interactive mode. Each line you enter on standard input is one pattern
  per hidden word, separated by single spaces, with `?` for unknown letters.
  For each word the output is a row of `+` (matched) or `-` (not matched), one
  sign per letter. If `show_matches` is on, the matching words are listed in
  columns instead.
- `-t NAME`: dictionary test mode. For each line entered, it prints `1` or `0`
  to say whether the dictionary named `NAME` matches the pattern, followed by
  the matching words if there are any. If no dictionary of that name is
  defined, the program says so and stops.

Once standard input ends, the interactive and test modes hand over to the full
search. The search shows a progress bar. When it finishes, it lists every
arrangement in which at least `min_matches` hidden words were found. For each
one it prints the patterns and then the `+`/`-` rows or the matches. If
`show_config` is on, it also prints which slots held known answers (`1`) and
which were blank (`0`).

`raetsel` exits with status 1 in these cases: the configuration file cannot be
read, a word refers to a dictionary that is not defined, or there are more
known answers than `total_words`.

## Configuration file

A configuration file is a series of blocks: `general { ... }`,
`dictionary { ... }` and `word { ... }`. Each holds `key = value;` entries.
Word blocks may come before the dictionaries they refer to. Unknown keys are
reported and ignored.

```
general {
    total_words = 8;
    min_matches = 2;
    show_matches = true;
    show_config = false;
    words_file = solutions.txt;
}

dictionary {
    name = german;
    filename = words.txt;
    type = single_word;
    filters = [{ regex = [a-z]+; satisfy = true; }];
}

word {
    dictionary = german;
    letters = [F1P1; B2P3; MP5];
}
```

- `type` takes one of three values:
  - `single_word`: the default. The pattern must be one dictionary word.
  - `multi_word`: the pattern may be covered by several dictionary words in a
    row.
  - `anagram`: the known letters and one free letter per `?` may appear in any
    order.
- Lookups ignore case.
- A letter reference has one of three forms:
  - `F<n>P<k>`: the n-th letter from the front of the answer in slot k.
  - `B<n>P<k>`: the n-th letter from the back of the answer in slot k.
  - `MP<k>`: the middle letter of the answer in slot k. The answer must have
    an odd length.

  Numbers start at 1, and a malformed reference is an error. An arrangement is
  skipped if one of its answers is too short for a reference.
- `filters` hold regular expressions in a dictionary or word block. A
  dictionary entry or a word's pattern must match the whole expression
  (`satisfy = true`, the default) or must not match it (`satisfy = false`).
  An arrangement is skipped if a word's pattern fails one of that word's
  filters.
- `print_words = true` in a dictionary block prints every word as it is loaded.
- The words file holds one known answer per line. Alternative spellings go on
  the same line, separated by commas. Empty lines and lines starting with `#`
  are ignored.

## Using it as a library

The command is built from a few modules.

- `raetsel.input_reader.read_puzzle(path)` returns a `Puzzle` dataclass that
  holds the words, the known answers, the dictionaries and the settings.
- `raetsel.query_manager.QueryManager` steps through the placements:
  - `complies(puzzle)` checks whether any spelling combination fits the
    current placement.
  - `generate_queries(puzzle)` builds the `WordQuery` objects for those that
    fit.
  - `next_ordering()` moves on and returns `True` once every placement has
    been visited.
- `raetsel.cli.check_query(queries, min_matches)` reports whether enough of
  the queries find a word.
- There are three dictionary classes:
  - `TreeDictionary` in `raetsel.tree_dictionary`
  - `MultiWordTreeDictionary` in `raetsel.multi_word_dictionary`
  - `AnagramDictionary` in `raetsel.anagram_dictionary`

  They share the interface of `raetsel.dictionary.Dictionary`: `add_word`,
  `has_word`, `get_words` and `construct(filename, filters)`.

## Limitations

- There is no help option. Unrecognised command-line arguments are ignored.
- The `detail` setting is read but has no effect.