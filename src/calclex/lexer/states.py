"""Scanner states for the calclex DFA.

Every state except START is accepting: if the lookahead character does not
extend the token being built, the state is finalized into its TokenKind.
START has no kind and is never finalized.
"""

from __future__ import annotations

from enum import Enum, auto

from calclex.tokens import TokenKind


class ScannerState(Enum):
    """DFA states of the scanning engine."""

    START = auto()  # Between tokens
    REAL_INT = auto()  # Digits before the decimal point
    REAL_FRAC = auto()  # Digits after the decimal point
    PLUS = auto()
    MINUS = auto()
    STAR = auto()  # * seen, may become **
    EXPONENT = auto()  # **
    SLASH = auto()
    EQUALS = auto()
    IDENTIFIER = auto()
    LPAREN = auto()
    RPAREN = auto()
    WHITESPACE = auto()

    @property
    def kind(self) -> TokenKind | None:
        """TokenKind this state finalizes into (None for START)."""
        return STATE_KINDS.get(self)

    @property
    def is_accepting(self) -> bool:
        return self is not ScannerState.START


STATE_KINDS: dict[ScannerState, TokenKind] = {
    ScannerState.REAL_INT: TokenKind.REAL,
    ScannerState.REAL_FRAC: TokenKind.REAL,
    ScannerState.PLUS: TokenKind.PLUS,
    ScannerState.MINUS: TokenKind.MINUS,
    ScannerState.STAR: TokenKind.STAR,
    ScannerState.EXPONENT: TokenKind.EXPONENT_OP,
    ScannerState.SLASH: TokenKind.SLASH,
    ScannerState.EQUALS: TokenKind.EQUALS,
    ScannerState.IDENTIFIER: TokenKind.IDENTIFIER,
    ScannerState.LPAREN: TokenKind.LPAREN,
    ScannerState.RPAREN: TokenKind.RPAREN,
    ScannerState.WHITESPACE: TokenKind.WHITESPACE,
}

# Single-character tokens reachable from START
OPERATOR_STATES: dict[str, ScannerState] = {
    "+": ScannerState.PLUS,
    "-": ScannerState.MINUS,
    "*": ScannerState.STAR,
    "/": ScannerState.SLASH,
    "=": ScannerState.EQUALS,
    "(": ScannerState.LPAREN,
    ")": ScannerState.RPAREN,
}
