"""Token and TokenKind definitions for the calclex lexer.

The lexer produces a stream of Token objects that a parser consumes.
Each Token has a kind, its source text, and the position of its first
character.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from calclex.location import SourceLocation


class TokenKind(Enum):
    """Token kinds produced by the lexer."""

    IDENTIFIER = auto()  # letter followed by letters and digits
    REAL = auto()  # 12, 12.34, 12.
    WHITESPACE = auto()  # recognized, never surfaced by default

    # Punctuation
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    EQUALS = auto()  # =

    # Operators
    PLUS = auto()  # +
    MINUS = auto()  # -
    STAR = auto()  # *
    EXPONENT_OP = auto()  # **
    SLASH = auto()  # /


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Tokens are the leaves of the parse tree a later parser stage builds, so
    each one carries a ``children`` tuple that is always empty here.

    Attributes:
        kind: The token kind (from TokenKind enum)
        text: Exact source text of the token (never the lookahead character)
        line: Line of the token's first character (1-indexed)
        column: Column of the token's first character (1-indexed)
        source_file: Optional name of the input
        children: Child nodes; empty for tokens

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    kind: TokenKind
    text: str
    line: int
    column: int
    source_file: str | None = field(default=None, compare=False)
    children: tuple[Token, ...] = ()

    @property
    def location(self) -> SourceLocation:
        """Source location of the token's first character."""
        return SourceLocation(self.line, self.column, self.source_file)

    @property
    def is_leaf(self) -> bool:
        """True when the token has no children (always, at the lexing stage)."""
        return not self.children

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        text = self.text
        if len(text) > 20:
            text = text[:17] + "..."
        return f"Token({self.kind.name}, {text!r}, {self.line}:{self.column})"
