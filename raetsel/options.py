"""Minimal command-line option lookup."""

from __future__ import annotations

from collections.abc import Iterable


class OptionParser:
    """Looks up flags and the token following them in an argument list."""

    def __init__(self, argv: Iterable[str]) -> None:
        self.tokens = list(argv)

    def has_option(self, option: str) -> bool:
        """Return True if ``option`` occurs among the tokens."""
        return option in self.tokens

    def has_option_value(self, option: str) -> bool:
        """Return True if ``option`` occurs and is followed by another token."""
        if option not in self.tokens:
            return False
        return self.tokens.index(option) + 1 < len(self.tokens)

    def get_option_value(self, option: str) -> str:
        """Return the token after the first occurrence of ``option``."""
        if not self.has_option_value(option):
            raise KeyError(f"option {option} has no value")
        return self.tokens[self.tokens.index(option) + 1]