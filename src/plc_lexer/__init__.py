"""
PLC Lexer - Tokenizer for a Small Programming Language
======================================================

This package converts source text into an ordered list of typed tokens
for a downstream parser.

Main Components
---------------
- **lexer**: The Lexer state machine and the lex() entry point
- **tokens**: TokenType and the immutable Token value
- **cursor**: CharStream, the position/length bookkeeping over the source
- **charclass**: Character-class predicates used for lookahead
- **errors**: LexError and one subclass per lexical rule
- **diagnostics**: Line/column translation and caret-style messages

Quick Start
-----------
    >>> from plc_lexer import lex
    >>> lex('print("hi");')
    [Token(IDENTIFIER, 'print', 0), Token(OPERATOR, '(', 5), Token(STRING, '"hi"', 6), Token(OPERATOR, ')', 10), Token(OPERATOR, ';', 11)]

Or use the command-line tool:
    $ plclex program.plc
    $ echo 'let x = 1;' | plclex --json
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from plc_lexer.tokens import Token, TokenType
from plc_lexer.cursor import CharStream
from plc_lexer.lexer import Lexer, lex
from plc_lexer.errors import (
    PlcError,
    SourceLocation,
    LexError,
    InvalidCharacterError,
    LeadingZeroError,
    TrailingDecimalPointError,
    InvalidCharacterLiteralError,
    UnterminatedCharacterError,
    InvalidStringError,
    InvalidEscapeError,
    InvalidEscapeTargetError,
)
from plc_lexer.diagnostics import format_error, locate

__all__ = [
    # Version info
    "__version__",
    # Lexer
    "Lexer",
    "lex",
    "CharStream",
    "Token",
    "TokenType",
    # Exception hierarchy
    "PlcError",
    "LexError",
    "InvalidCharacterError",
    "LeadingZeroError",
    "TrailingDecimalPointError",
    "InvalidCharacterLiteralError",
    "UnterminatedCharacterError",
    "InvalidStringError",
    "InvalidEscapeError",
    "InvalidEscapeTargetError",
    # Diagnostics
    "SourceLocation",
    "format_error",
    "locate",
]
