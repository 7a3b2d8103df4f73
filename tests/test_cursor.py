"""
Tests for CharStream
====================

These tests verify the cursor bookkeeping the lexer relies on: bounded
lookahead, span tracking, and token emission.
"""

from plc_lexer.cursor import CharStream
from plc_lexer.tokens import Token, TokenType


class TestLookahead:
    """Tests for has() and get()."""

    def test_has_within_bounds(self):
        chars = CharStream("ab")
        assert chars.has(0)
        assert chars.has(1)
        assert not chars.has(2)

    def test_has_on_empty_input(self):
        assert not CharStream("").has(0)

    def test_get_is_relative_to_position(self):
        chars = CharStream("abc")
        chars.advance()
        assert chars.get(0) == "b"
        assert chars.get(1) == "c"
        assert chars.has(1)
        assert not chars.has(2)

    def test_lookahead_does_not_mutate(self):
        chars = CharStream("abc")
        chars.has(5)
        chars.get(2)
        assert chars.position == 0
        assert chars.pending == ""


class TestSpans:
    """Tests for advance(), skip() and emit()."""

    def test_advance_grows_pending_span(self):
        chars = CharStream("let")
        chars.advance()
        chars.advance()
        assert chars.position == 2
        assert chars.pending == "le"

    def test_skip_discards_span_but_keeps_position(self):
        chars = CharStream("  x")
        chars.advance()
        chars.advance()
        chars.skip()
        assert chars.position == 2
        assert chars.pending == ""

    def test_emit_builds_token_from_span(self):
        chars = CharStream(" ab")
        chars.advance()
        chars.skip()
        chars.advance()
        chars.advance()
        token = chars.emit(TokenType.IDENTIFIER)
        assert token == Token(TokenType.IDENTIFIER, "ab", 1)
        assert chars.pending == ""
        assert chars.position == 3

    def test_consecutive_emits(self):
        """Each emit starts a fresh span at the current position."""
        chars = CharStream("!=+")
        chars.advance()
        chars.advance()
        first = chars.emit(TokenType.OPERATOR)
        chars.advance()
        second = chars.emit(TokenType.OPERATOR)
        assert first == Token(TokenType.OPERATOR, "!=", 0)
        assert second == Token(TokenType.OPERATOR, "+", 2)
