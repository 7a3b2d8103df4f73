"""
Character Stream
================

Bookkeeping for the lexer: the immutable source text, the position of the
next unconsumed character, and the length of the token being built.

The span ``source[index - length:index]`` is always the token in progress.
advance() grows it by one character, skip() discards it (whitespace), and
emit() turns it into a Token and starts a new, empty span.
"""

from plc_lexer.tokens import Token, TokenType


class CharStream:
    """
    Cursor over a single source string.

    A CharStream belongs to exactly one Lexer for the duration of one lex
    run and is never shared.

    Attributes:
        input: The source text being lexed
    """

    def __init__(self, input: str):
        self.input = input
        self._index = 0
        self._length = 0

    @property
    def position(self) -> int:
        """Absolute index of the next unconsumed character."""
        return self._index

    @property
    def pending(self) -> str:
        """Text consumed since the last emit() or skip()."""
        return self.input[self._index - self._length:self._index]

    def has(self, offset: int) -> bool:
        return self._index + offset < len(self.input)

    def get(self, offset: int) -> str:
        return self.input[self._index + offset]

    def advance(self) -> None:
        self._index += 1
        self._length += 1

    def skip(self) -> None:
        self._length = 0

    def emit(self, type: TokenType) -> Token:
        start = self._index - self._length
        self.skip()
        return Token(type, self.input[start:self._index], start)
