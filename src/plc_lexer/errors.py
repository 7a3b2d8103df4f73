"""
PLC Lexer Error Hierarchy
=========================

This module defines the exception hierarchy for the lexer. All exceptions
inherit from PlcError, allowing callers to catch every lexer-related error
with a single except clause if desired.

Exception Hierarchy
-------------------
PlcError (base)
└── LexError (any lexical rule violation)
    ├── InvalidCharacterError - no token can start at this position
    ├── LeadingZeroError - integer part starts with a redundant 0
    ├── TrailingDecimalPointError - number ends in a bare '.'
    ├── InvalidCharacterLiteralError - bad body in a character literal
    ├── UnterminatedCharacterError - missing closing '
    ├── InvalidStringError - bad character or end of input in a string
    ├── InvalidEscapeError - backslash expected but absent
    └── InvalidEscapeTargetError - unknown character after backslash

Positions
---------
Every LexError carries the absolute 0-based index into the original source
of the character that broke the rule (not the start of the token). Line and
column information is derived on demand by plc_lexer.diagnostics, which
renders messages in this format:

    filename:line:column: error: description
        source_line_text
        ^
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from plc_lexer.tokens import Token


# =============================================================================
# Base Exception Class
# =============================================================================

class PlcError(Exception):
    """
    Base exception for all PLC lexer errors.

        try:
            tokens = lex(source)
        except PlcError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a human-readable location in source code.

    Produced by plc_lexer.diagnostics from an absolute index; the lexer
    itself only ever reports indices.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexer Exceptions
# =============================================================================

class LexError(PlcError):
    """
    Base exception for lexical errors.

    Lexing stops at the first violation, so a run produces at most one
    LexError. The tokens recognised before the failure are attached for
    diagnostics; they are not a usable partial result.

    Attributes:
        message: The error description
        index: Absolute index of the offending character
        hint: A suggestion for fixing the error (optional)
        tokens: Tokens lexed before the failure
    """

    def __init__(
        self,
        message: str,
        index: int,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.index = index
        self.hint = hint
        self.tokens: list["Token"] = []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with index and hint.

        Example output:
            error at index 2: expected digit after decimal point
            hint: write '1.0' or '1' instead of '1.'
        """
        parts = [f"error at index {self.index}: {self.message}"]

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class InvalidCharacterError(LexError):
    """
    No token can start at the current position.

    Dispatch falls through to the operator recognizer for any character,
    so in practice this is only reachable when the input is exhausted.
    """

    def __init__(self, index: int):
        super().__init__("invalid character", index)


class LeadingZeroError(LexError):
    """
    Integer part with a redundant leading zero.

    Example:
        007     ; Error at index 1
    """

    def __init__(self, index: int):
        super().__init__(
            "leading zero in number literal",
            index,
            hint="remove the leading '0'",
        )


class TrailingDecimalPointError(LexError):
    """
    Decimal point not followed by a digit.

    Example:
        1.      ; Error at index 2
    """

    def __init__(self, index: int):
        super().__init__(
            "expected digit after decimal point",
            index,
            hint="a decimal literal cannot end in '.'",
        )


class InvalidCharacterLiteralError(LexError):
    """
    Character literal body is neither an escape nor a plain character.

    Examples:
        ''      ; empty literal
        '       ; end of input after the opening quote
    """

    def __init__(self, index: int):
        super().__init__(
            "invalid character literal",
            index,
            hint="a character literal holds exactly one character or escape",
        )


class UnterminatedCharacterError(LexError):
    """
    Character literal body is not followed by a closing quote.

    Example:
        'ab'    ; Error at index 2
    """

    def __init__(self, index: int):
        super().__init__(
            "expected closing quote in character literal",
            index,
            hint="add closing \"'\" to complete the character literal",
        )


class InvalidStringError(LexError):
    """
    Invalid character in a string literal.

    Raised for a raw newline or carriage return inside the string, and
    when the input ends before the closing quote.
    """

    def __init__(self, index: int, message: str = "invalid character in string literal"):
        super().__init__(
            message,
            index,
            hint="strings must be closed on the same line; use \\n for newlines",
        )


class InvalidEscapeError(LexError):
    """Backslash expected at the start of an escape sequence."""

    def __init__(self, index: int):
        super().__init__("expected '\\' to start escape sequence", index)


class InvalidEscapeTargetError(LexError):
    """
    Unknown escape sequence.

    Valid escapes are \\b, \\n, \\r, \\t, \\', \\" and \\\\.
    """

    def __init__(self, index: int):
        super().__init__(
            "invalid escape sequence",
            index,
            hint="valid escapes are \\b \\n \\r \\t \\' \\\" \\\\",
        )
