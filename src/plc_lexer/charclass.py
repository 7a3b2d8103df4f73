"""
Character Classes
=================

Predicates used by the lexer's lookahead primitives. Each predicate takes a
single character and answers whether it belongs to the class; the lexer
composes them positionally, one predicate per character of lookahead:

    lexer.peek(is_digit, is_dot)               # "1."
    lexer.match(literal("="), literal("="))    # "=="

Only ASCII letters and digits count: the lexer does no Unicode
normalization, and str.isalpha()/str.isdigit() would accept far more.
"""

import string
from typing import Callable

CharClass = Callable[[str], bool]

# Characters skipped between tokens: space, backspace, newline, return, tab
WHITESPACE = frozenset(" \b\n\r\t")

IDENTIFIER_START = frozenset(string.ascii_letters + "@")
IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "_-")
DIGITS = frozenset(string.digits)

# Characters allowed after a backslash
ESCAPE_TARGETS = frozenset("bnrt'\"\\")


def literal(expected: str) -> CharClass:
    """Return a predicate matching exactly one fixed character."""

    def is_expected(char: str) -> bool:
        return char == expected

    is_expected.__name__ = f"is_{expected!r}"
    return is_expected


def is_whitespace(char: str) -> bool:
    return char in WHITESPACE


def is_identifier_start(char: str) -> bool:
    """Letter or '@'."""
    return char in IDENTIFIER_START


def is_identifier_char(char: str) -> bool:
    """Letter, digit, underscore or hyphen."""
    return char in IDENTIFIER_CHARS


def is_digit(char: str) -> bool:
    return char in DIGITS


def is_number_start(char: str) -> bool:
    """Digit or '-' (optional sign)."""
    return char in DIGITS or char == "-"


def is_escape_target(char: str) -> bool:
    return char in ESCAPE_TARGETS


def is_any(char: str) -> bool:
    # The peek bounds check guarantees a character is present.
    return True


def is_character_body(char: str) -> bool:
    """Plain character allowed inside '...': anything but quote or line break."""
    return char not in "'\n\r"


def is_string_body(char: str) -> bool:
    """Plain character allowed inside "...": anything but backslash, quote or line break."""
    return char not in "\\\"\n\r"


is_minus = literal("-")
is_zero = literal("0")
is_dot = literal(".")
is_single_quote = literal("'")
is_double_quote = literal('"')
is_backslash = literal("\\")
