"""
PLC Lexer (Tokenizer)
=====================

This module converts source text into a list of tokens for the parser.

The lexer is a small dispatch state machine. lex() skips whitespace and
asks lex_token() for each token; lex_token() looks at the next character
without consuming anything and hands over to one of five recognizers.
Recognizers consume characters through peek()/match(), which test a run of
character-class predicates against the upcoming input, and finish by
emitting the consumed span as a Token.

Token Categories
----------------
| Type       | First character | Examples              |
|------------|-----------------|-----------------------|
| IDENTIFIER | letter or @     | let, @x, snake_case   |
| INTEGER    | digit or -      | 0, 42, -7             |
| DECIMAL    | digit or -      | 1.5, -0.25            |
| CHARACTER  | '               | 'a', '\\n'            |
| STRING     | "               | "hi", "a\\tb"         |
| OPERATOR   | anything else   | !=, ==, &&, ||, +, ;  |

Escape Sequences
----------------
\\b, \\n, \\r, \\t, \\', \\" and \\\\ are valid inside character and
string literals. The literal text is kept verbatim; escapes are not
translated.

Errors
------
The first violation raises a LexError subclass carrying the absolute index
of the offending character. There is no recovery.

Example Usage
-------------
>>> from plc_lexer.lexer import Lexer
>>> Lexer("let x = 1;").lex()
[Token(IDENTIFIER, 'let', 0), Token(IDENTIFIER, 'x', 4), Token(OPERATOR, '=', 6), Token(INTEGER, '1', 8), Token(OPERATOR, ';', 9)]
"""

import logging

from plc_lexer.charclass import (
    CharClass,
    is_any,
    is_backslash,
    is_character_body,
    is_digit,
    is_dot,
    is_double_quote,
    is_escape_target,
    is_identifier_char,
    is_identifier_start,
    is_minus,
    is_number_start,
    is_single_quote,
    is_string_body,
    is_whitespace,
    is_zero,
    literal,
)
from plc_lexer.cursor import CharStream
from plc_lexer.errors import (
    InvalidCharacterError,
    InvalidCharacterLiteralError,
    InvalidEscapeError,
    InvalidEscapeTargetError,
    InvalidStringError,
    LeadingZeroError,
    LexError,
    TrailingDecimalPointError,
    UnterminatedCharacterError,
)
from plc_lexer.tokens import Token, TokenType

logger = logging.getLogger(__name__)

# Two-character operators, tried in order before the single-character fallback
TWO_CHAR_OPERATORS = tuple(
    tuple(literal(c) for c in operator)
    for operator in ("!=", "==", "&&", "||")
)


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes source text.

    A Lexer is single-use: it owns one CharStream over one input and
    consumes it. Create a new Lexer (or call plc_lexer.lex) for each run.

    Usage:
        tokens = Lexer(source).lex()

    Attributes:
        chars: The CharStream over the source text
    """

    def __init__(self, input: str):
        self.chars = CharStream(input)

    def lex(self) -> list[Token]:
        """
        Lex the whole input, skipping whitespace between tokens.

        Returns:
            Tokens in source order

        Raises:
            LexError: At the first lexical rule violation. The tokens lexed
                so far are attached as ``error.tokens``.
        """
        logger.debug(f"Lexing {len(self.chars.input)} characters")
        tokens: list[Token] = []

        try:
            while self.chars.has(0):
                if self.match(is_whitespace):
                    self.chars.skip()
                else:
                    tokens.append(self.lex_token())
        except LexError as e:
            e.tokens = tokens
            logger.debug(f"Lexing failed after {len(tokens)} tokens: {e.message} at index {e.index}")
            raise

        logger.debug(f"Lexed {len(tokens)} tokens")
        return tokens

    def lex_token(self) -> Token:
        """
        Lex the next token.

        Dispatch uses peek() only, so the stream is untouched until the
        chosen recognizer starts consuming.
        """
        if self.peek(is_identifier_start):
            return self.lex_identifier()
        if self.peek(is_number_start):
            return self.lex_number()
        if self.peek(is_single_quote):
            return self.lex_character()
        if self.peek(is_double_quote):
            return self.lex_string()
        if self.peek(is_any):
            return self.lex_operator()
        raise InvalidCharacterError(self.chars.position)

    # =========================================================================
    # Recognizers
    # =========================================================================

    def lex_identifier(self) -> Token:
        """Letter or '@', then any run of letters, digits, '_' and '-'."""
        self.match(is_identifier_start)
        while self.match(is_identifier_char):
            pass
        return self.chars.emit(TokenType.IDENTIFIER)

    def lex_number(self) -> Token:
        """
        Lex an INTEGER or DECIMAL literal.

        Grammar: ``-? digits ('.' digits)?`` where the integer part may not
        start with 0 unless it is exactly 0. The sign is part of the literal.
        """
        self.match(is_minus)

        if self.peek(is_zero, is_digit):
            # Point at the digit that makes the zero redundant
            raise LeadingZeroError(self.chars.position + 1)

        while self.match(is_digit):
            pass

        if not self.match(is_dot):
            return self.chars.emit(TokenType.INTEGER)

        if not self.peek(is_digit):
            raise TrailingDecimalPointError(self.chars.position)

        while self.match(is_digit):
            pass
        return self.chars.emit(TokenType.DECIMAL)

    def lex_character(self) -> Token:
        """Lex a character literal: one plain character or one escape between quotes."""
        self.match(is_single_quote)

        if self.peek(is_backslash):
            self.lex_escape()
        elif not self.match(is_character_body):
            raise InvalidCharacterLiteralError(self.chars.position)

        if not self.match(is_single_quote):
            raise UnterminatedCharacterError(self.chars.position)
        return self.chars.emit(TokenType.CHARACTER)

    def lex_string(self) -> Token:
        """Lex a single-line string literal with escapes."""
        self.match(is_double_quote)

        while not self.peek(is_double_quote):
            if not self.chars.has(0):
                raise InvalidStringError(
                    self.chars.position,
                    "unterminated string literal",
                )
            if self.peek(is_backslash):
                self.lex_escape()
            elif not self.match(is_string_body):
                raise InvalidStringError(self.chars.position)

        self.match(is_double_quote)
        return self.chars.emit(TokenType.STRING)

    def lex_escape(self) -> None:
        """
        Consume a backslash and its target character.

        Contributes both characters to the enclosing literal; emits nothing.
        """
        if not self.match(is_backslash):
            raise InvalidEscapeError(self.chars.position)
        if not self.match(is_escape_target):
            raise InvalidEscapeTargetError(self.chars.position)

    def lex_operator(self) -> Token:
        """Lex one of the two-character operators, or any single character."""
        for operator in TWO_CHAR_OPERATORS:
            if self.match(*operator):
                return self.chars.emit(TokenType.OPERATOR)

        self.match(is_any)
        return self.chars.emit(TokenType.OPERATOR)

    # =========================================================================
    # Lookahead Primitives
    # =========================================================================

    def peek(self, *patterns: CharClass) -> bool:
        """
        Return True if the next characters match the patterns, one each.

        For example, ``peek(is_digit, is_dot)`` is True when the next two
        characters are a digit followed by '.'. Never consumes input.
        """
        for offset, pattern in enumerate(patterns):
            if not self.chars.has(offset) or not pattern(self.chars.get(offset)):
                return False
        return True

    def match(self, *patterns: CharClass) -> bool:
        """
        Like peek(), but consume the matched characters on success.

        Matching is all-or-nothing: on failure nothing is consumed.
        """
        if not self.peek(*patterns):
            return False
        for _ in patterns:
            self.chars.advance()
        return True


def lex(source: str) -> list[Token]:
    """
    Lex a complete source string.

    Convenience wrapper around ``Lexer(source).lex()``.
    """
    return Lexer(source).lex()
