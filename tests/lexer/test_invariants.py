"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from calclex.config import LexerConfig
from calclex.errors import InvalidCharacterError
from calclex.lexer import Lexer
from calclex.tokens import TokenKind

# Every character here can start a token, so scanning never fails
VALID_ALPHABET = "abxyzAB019+-*/=() \t\n"

valid_programs = st.text(alphabet=VALID_ALPHABET, max_size=300)


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(valid_programs)
    @settings(max_examples=200)
    def test_tokens_reproduce_input_without_whitespace(self, source: str) -> None:
        """No character is lost or duplicated across token boundaries."""
        tokens = list(Lexer(source))
        expected = "".join(c for c in source if c not in " \t\n")
        assert "".join(t.text for t in tokens) == expected

    @given(valid_programs)
    @settings(max_examples=200)
    def test_keep_whitespace_reproduces_input(self, source: str) -> None:
        tokens = list(Lexer(source, config=LexerConfig(keep_whitespace=True)))
        assert "".join(t.text for t in tokens) == source

    @given(valid_programs)
    @settings(max_examples=100)
    def test_no_whitespace_tokens_by_default(self, source: str) -> None:
        assert all(t.kind is not TokenKind.WHITESPACE for t in Lexer(source))

    @given(valid_programs)
    @settings(max_examples=100)
    def test_no_empty_tokens(self, source: str) -> None:
        assert all(t.text for t in Lexer(source))

    @given(valid_programs)
    @settings(max_examples=100)
    def test_positions_strictly_increase(self, source: str) -> None:
        starts = [(t.line, t.column) for t in Lexer(source)]
        assert starts == sorted(starts)
        assert len(set(starts)) == len(starts)

    @given(valid_programs)
    @settings(max_examples=200)
    def test_positions_point_at_token_text(self, source: str) -> None:
        """line/column locate the token's first character in the source."""
        lines = source.split("\n")
        for token in Lexer(source):
            line = lines[token.line - 1]
            start = token.column - 1
            assert line[start : start + len(token.text)] == token.text


class TestMaximalMunchInvariants:
    """Each emitted token is a complete token on its own."""

    @given(valid_programs)
    @settings(max_examples=100)
    def test_relexing_token_text_is_stable(self, source: str) -> None:
        for token in Lexer(source):
            relexed = list(Lexer(token.text))
            assert len(relexed) == 1
            assert relexed[0].kind is token.kind
            assert relexed[0].text == token.text


class TestInvalidInput:
    """Arbitrary text either tokenizes or stops at one invalid character."""

    @given(st.text(max_size=200))
    @settings(max_examples=200)
    def test_fails_only_with_invalid_character(self, source: str) -> None:
        lexer = Lexer(source)
        try:
            for _ in lexer:
                pass
        except InvalidCharacterError as err:
            assert len(err.character) == 1
            assert err.character not in VALID_ALPHABET
            assert err.line >= 1
            assert err.column >= 1
        assert list(lexer) == []
