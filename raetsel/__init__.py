"""Solver for letter-extraction word puzzles, with trie, multi-word and anagram dictionaries."""

__version__ = "0.1.0"