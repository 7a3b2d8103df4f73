"""
Token Definitions
=================

Token kinds and the immutable Token value produced by the lexer.

A token records the exact source text it was built from, so the parser
can recover any value it needs (numbers are never converted here) and
diagnostics can point back at the original input.

Example
-------
>>> from plc_lexer import lex
>>> lex("x = 1.5")
[Token(IDENTIFIER, 'x', 0), Token(OPERATOR, '=', 2), Token(DECIMAL, '1.5', 4)]
"""

from dataclasses import dataclass
from enum import Enum, auto


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token types for the language.

    Keywords are not distinguished from identifiers at this stage, and
    every operator or punctuation character shares the OPERATOR type;
    the parser inspects the literal to tell them apart.
    """

    IDENTIFIER = auto()  # let, x, @name, snake_case, kebab-case
    INTEGER = auto()     # 0, 42, -7
    DECIMAL = auto()     # 1.5, -0.25
    CHARACTER = auto()   # 'a', '\n'
    STRING = auto()      # "hello", "a\tb"
    OPERATOR = auto()    # !=, ==, &&, ||, or any single character


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    Represents a single token from the source code.

    This is an immutable data class. Two tokens are equal when their type,
    literal and index are equal, so lexing the same input twice yields
    equal lists.

    Attributes:
        type: The TokenType classification
        literal: The exact source text, including quotes for CHARACTER/STRING
        index: Offset of the first character in the source (0-indexed)
    """
    type: TokenType
    literal: str
    index: int

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.literal!r}, {self.index})"

    @property
    def end(self) -> int:
        """Offset just past the last character of the token."""
        return self.index + len(self.literal)

    def to_dict(self) -> dict:
        """Return a JSON-serialisable representation."""
        return {
            "type": self.type.name,
            "literal": self.literal,
            "index": self.index,
        }
