"""Tests for the top-level tokenize() API."""

from __future__ import annotations

import io

import pytest

from calclex import InvalidCharacterError, Token, TokenKind, tokenize


class TestTokenize:
    def test_string_input(self) -> None:
        assert list(tokenize("x**2")) == [
            Token(TokenKind.IDENTIFIER, "x", 1, 1),
            Token(TokenKind.EXPONENT_OP, "**", 1, 2),
            Token(TokenKind.REAL, "2", 1, 4),
        ]

    def test_stream_input_is_closed(self) -> None:
        stream = io.StringIO("a = 1")
        assert [t.text for t in tokenize(stream)] == ["a", "=", "1"]
        assert stream.closed

    def test_lazy(self) -> None:
        """Tokens are produced on demand; an error later in the input waits."""
        tokens = tokenize("a b @")
        assert next(tokens).text == "a"
        assert next(tokens).text == "b"

    def test_source_file_propagates(self) -> None:
        token = next(tokenize("x", source_file="prog.calc"))
        assert token.source_file == "prog.calc"
        assert str(token.location) == "prog.calc:1:1"

    def test_empty_input(self) -> None:
        assert list(tokenize("")) == []

    def test_close_before_first_pull_closes_stream(self) -> None:
        stream = io.StringIO("a b")
        tokens = tokenize(stream)
        tokens.close()
        assert stream.closed
        assert list(tokens) == []

    def test_stream_closed_after_error(self) -> None:
        stream = io.StringIO("a @")
        tokens = tokenize(stream)
        with pytest.raises(InvalidCharacterError):
            list(tokens)
        assert stream.closed
