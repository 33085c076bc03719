"""Character classes used to split text into words.

Every predicate accepts either a one-character string or an integer
code (such as an element of a ``bytes`` object).
"""

from __future__ import annotations

Char = str | int


def _code(char: Char) -> int:
    return char if isinstance(char, int) else ord(char)


def is_lowercase(char: Char) -> bool:
    """Return True for an ASCII lowercase letter."""
    return ord("a") <= _code(char) <= ord("z")


def is_uppercase(char: Char) -> bool:
    """Return True for an ASCII uppercase letter."""
    return ord("A") <= _code(char) <= ord("Z")


def is_apostrophe(char: Char) -> bool:
    """Return True for a straight apostrophe."""
    return _code(char) == ord("'")


def is_dash(char: Char) -> bool:
    """Return True for a hyphen-minus."""
    return _code(char) == ord("-")


def is_valid_char(char: Char) -> bool:
    """Return True for a character that may appear anywhere in a word."""
    return is_lowercase(char) or is_uppercase(char) or is_apostrophe(char)