"""Tests for character sources."""

from __future__ import annotations

import io

import pytest

from calclex.lexer import Lexer
from calclex.source import CharacterSource, StreamSource, StringSource, as_source


class TestStringSource:
    def test_peek_does_not_consume(self) -> None:
        src = StringSource("ab")
        assert src.peek() == "a"
        assert src.peek() == "a"
        assert src.read() == "a"
        assert src.peek() == "b"

    def test_end_of_input(self) -> None:
        src = StringSource("a")
        src.read()
        assert src.peek() == ""
        assert src.read() == ""

    def test_close(self) -> None:
        src = StringSource("a")
        assert not src.closed
        src.close()
        assert src.closed

    def test_closed_source_is_exhausted(self) -> None:
        src = StringSource("abc")
        src.read()
        src.close()
        assert src.peek() == ""
        assert src.read() == ""


class TestStreamSource:
    def test_reads_one_character_at_a_time(self) -> None:
        stream = io.StringIO("xyz")
        src = StreamSource(stream)
        assert src.peek() == "x"
        # Only the peeked character has left the stream
        assert stream.tell() == 1
        assert src.read() == "x"
        assert src.read() == "y"
        assert stream.tell() == 2

    def test_end_of_stream_is_sticky(self) -> None:
        src = StreamSource(io.StringIO(""))
        assert src.peek() == ""
        assert src.read() == ""
        assert src.peek() == ""

    def test_owned_stream_closed(self) -> None:
        stream = io.StringIO("x")
        StreamSource(stream).close()
        assert stream.closed

    def test_borrowed_stream_not_closed(self) -> None:
        stream = io.StringIO("x")
        src = StreamSource(stream, owns_stream=False)
        src.close()
        assert src.closed
        assert not stream.closed

    def test_close_is_idempotent(self) -> None:
        src = StreamSource(io.StringIO("x"))
        src.close()
        src.close()
        assert src.peek() == ""

    def test_lexer_over_file(self, tmp_path) -> None:
        path = tmp_path / "prog.calc"
        path.write_text("r = 2.5\narea = r ** 2\n", encoding="utf-8")
        with path.open(encoding="utf-8") as f:
            tokens = list(Lexer(StreamSource(f, owns_stream=False)))
        assert [t.text for t in tokens] == ["r", "=", "2.5", "area", "=", "r", "**", "2"]
        assert (tokens[3].line, tokens[3].column) == (2, 1)


class TestAsSource:
    def test_wraps_string(self) -> None:
        assert isinstance(as_source("x"), StringSource)

    def test_wraps_text_stream(self) -> None:
        assert isinstance(as_source(io.StringIO("x")), StreamSource)

    def test_existing_source_untouched(self) -> None:
        src = StringSource("x")
        assert as_source(src) is src

    def test_custom_source_accepted(self) -> None:
        class ListSource:
            def __init__(self, chars: list[str]) -> None:
                self.chars = chars

            def peek(self) -> str:
                return self.chars[0] if self.chars else ""

            def read(self) -> str:
                return self.chars.pop(0) if self.chars else ""

            def close(self) -> None:
                pass

        src = ListSource(list("a+b"))
        assert isinstance(src, CharacterSource)
        assert as_source(src) is src
        assert [t.text for t in Lexer(src)] == ["a", "+", "b"]

    def test_binary_stream_rejected(self) -> None:
        with pytest.raises(TypeError):
            as_source(io.BytesIO(b"x"))

    def test_unsupported_type_rejected(self) -> None:
        with pytest.raises(TypeError):
            as_source(42)  # type: ignore[arg-type]
