"""Transition function of the calclex DFA.

``transition`` is pure: it looks at the current state and the lookahead
character and decides the next state and whether the character is consumed.
A non-consuming step always leads back to START and tells the engine to
finalize the token built so far.

Transition table:

    START        + - * / = ( )   -> matching single-character state
                 letter          -> IDENTIFIER
                 digit           -> REAL_INT
                 whitespace      -> WHITESPACE
                 anything else   -> no transition (invalid character)
    REAL_INT     digit -> REAL_INT, "." -> REAL_FRAC, else finalize
    REAL_FRAC    digit -> REAL_FRAC, else finalize
    STAR         "*" -> EXPONENT, else finalize
    IDENTIFIER   letter or digit -> IDENTIFIER, else finalize
    (others)     always finalize
"""

from __future__ import annotations

from typing import NamedTuple

from calclex.charsets import DECIMAL_POINT, DIGITS, IDENTIFIER_CHARS, LETTERS, WHITESPACE
from calclex.lexer.states import OPERATOR_STATES, ScannerState


class Step(NamedTuple):
    """Outcome of one DFA step."""

    next_state: ScannerState
    consumes: bool


# Shared finalize step: emit the pending token, keep the lookahead
FINALIZE = Step(ScannerState.START, False)


def transition(state: ScannerState, char: str) -> Step | None:
    """Decide the DFA step for ``(state, char)``.

    Args:
        state: Current scanner state.
        char: Lookahead character (a single character, never empty).

    Returns:
        The step to take, or None when START has no transition for char.
    """
    if state is ScannerState.START:
        return _from_start(char)

    if state is ScannerState.REAL_INT:
        if char in DIGITS:
            return Step(ScannerState.REAL_INT, True)
        if char == DECIMAL_POINT:
            return Step(ScannerState.REAL_FRAC, True)
        return FINALIZE

    if state is ScannerState.REAL_FRAC:
        if char in DIGITS:
            return Step(ScannerState.REAL_FRAC, True)
        return FINALIZE

    if state is ScannerState.STAR:
        if char == "*":
            return Step(ScannerState.EXPONENT, True)
        return FINALIZE

    if state is ScannerState.IDENTIFIER:
        if char in IDENTIFIER_CHARS:
            return Step(ScannerState.IDENTIFIER, True)
        return FINALIZE

    # Single-character tokens: PLUS, MINUS, EXPONENT, SLASH, EQUALS,
    # LPAREN, RPAREN, WHITESPACE
    return FINALIZE


def _from_start(char: str) -> Step | None:
    """Transitions out of START; every one of them consumes."""
    op_state = OPERATOR_STATES.get(char)
    if op_state is not None:
        return Step(op_state, True)
    if char in LETTERS:
        return Step(ScannerState.IDENTIFIER, True)
    if char in DIGITS:
        return Step(ScannerState.REAL_INT, True)
    if char in WHITESPACE:
        return Step(ScannerState.WHITESPACE, True)
    return None
