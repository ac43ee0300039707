"""Lexeme accumulator for the scanning engine.

Appends characters to a list and joins once when the token is finalized:
O(n) total vs O(n²) for repeated string concatenation.

Thread Safety:
Each Lexer owns its own buffer. No shared mutable state.

"""

from __future__ import annotations


class LexemeBuffer:
    """Characters of the token currently being built.

    Also remembers where the token started, since a token is positioned at
    its first character rather than where it is finalized.

    Usage:
            >>> buf = LexemeBuffer()
            >>> buf.append("x", line=1, column=1)
            >>> buf.append("1", line=1, column=2)
            >>> buf.build(), buf.start_line, buf.start_column
            ('x1', 1, 1)

    """

    __slots__ = ("_chars", "start_line", "start_column")

    def __init__(self) -> None:
        self._chars: list[str] = []
        self.start_line = 0
        self.start_column = 0

    def append(self, char: str, *, line: int, column: int) -> None:
        """Append a character; the first one fixes the token start."""
        if not self._chars:
            self.start_line = line
            self.start_column = column
        self._chars.append(char)

    def build(self) -> str:
        """Join all characters into the lexeme text."""
        return "".join(self._chars)

    def clear(self) -> None:
        self._chars.clear()
        self.start_line = 0
        self.start_column = 0

    def __len__(self) -> int:
        return len(self._chars)

    def __bool__(self) -> bool:
        return bool(self._chars)
