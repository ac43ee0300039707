"""Character sources feeding the lexer.

A character source hands out one character at a time with a single character
of lookahead: ``peek()`` looks without consuming, ``read()`` consumes. Both
return the empty string at end of stream.

Thread Safety:
Sources are single-owner. One lexer reads from a source for the whole run.

"""

from __future__ import annotations

import io
from typing import Protocol, TextIO, runtime_checkable


@runtime_checkable
class CharacterSource(Protocol):
    """Protocol for anything the lexer can scan."""

    def peek(self) -> str:
        """Return the next character without consuming it ("" at end)."""
        ...

    def read(self) -> str:
        """Consume and return the next character ("" at end)."""
        ...

    def close(self) -> None:
        """Release any underlying resource."""
        ...


class StringSource:
    """Character source over an in-memory string.

    Usage:
            >>> src = StringSource("ab")
            >>> src.peek(), src.read(), src.read(), src.peek()
            ('a', 'a', 'b', '')

    """

    __slots__ = ("_text", "_text_len", "_pos", "_closed")

    def __init__(self, text: str) -> None:
        self._text = text
        self._text_len = len(text)
        self._pos = 0
        self._closed = False

    def peek(self) -> str:
        if self._pos >= self._text_len:
            return ""
        return self._text[self._pos]

    def read(self) -> str:
        if self._pos >= self._text_len:
            return ""
        char = self._text[self._pos]
        self._pos += 1
        return char

    def close(self) -> None:
        self._closed = True
        self._pos = self._text_len

    @property
    def closed(self) -> bool:
        return self._closed


class StreamSource:
    """Character source over a text stream (a file, ``sys.stdin``, StringIO).

    Holds at most one buffered lookahead character, so the stream is never
    read ahead of what ``peek()`` demands. Blocking, if any, happens inside
    the stream's own ``read``.

    Args:
        stream: Text stream opened for reading
        owns_stream: Close the stream when this source is closed
    """

    __slots__ = ("_stream", "_owns_stream", "_lookahead", "_closed")

    def __init__(self, stream: TextIO, *, owns_stream: bool = True) -> None:
        self._stream = stream
        self._owns_stream = owns_stream
        self._lookahead: str | None = None
        self._closed = False

    def peek(self) -> str:
        if self._lookahead is None:
            self._lookahead = self._stream.read(1)
        return self._lookahead

    def read(self) -> str:
        char = self.peek()
        # End of stream stays sticky: keep "" buffered
        if char:
            self._lookahead = None
        return char

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._lookahead = ""
        if self._owns_stream:
            self._stream.close()

    @property
    def closed(self) -> bool:
        return self._closed


def as_source(obj: str | TextIO | CharacterSource) -> CharacterSource:
    """Wrap a string or text stream as a character source.

    Existing character sources are returned untouched.

    Raises:
        TypeError: If obj is none of the accepted types.
    """
    if isinstance(obj, str):
        return StringSource(obj)
    if isinstance(obj, (io.BufferedIOBase, io.RawIOBase)):
        raise TypeError("Binary streams must be wrapped in a text stream (io.TextIOWrapper)")
    if isinstance(obj, io.IOBase) or not isinstance(obj, CharacterSource):
        if hasattr(obj, "read"):
            return StreamSource(obj)  # type: ignore[arg-type]
        raise TypeError(f"Cannot scan object of type {type(obj).__name__}")
    return obj


__all__ = [
    "CharacterSource",
    "StreamSource",
    "StringSource",
    "as_source",
]
