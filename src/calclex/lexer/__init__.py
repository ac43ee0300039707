"""DFA scanning engine for the calclex expression language.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, ScannerState, results
├── core.py              # Lexer class (engine loop, positions, iteration)
├── states.py            # ScannerState enum, state -> TokenKind table
├── transitions.py       # Pure transition(state, char) -> Step function
├── lexeme.py            # Lexeme accumulator with start position
└── results.py           # Emitted / Failed / Finished variants

Usage:
    >>> from calclex.lexer import Lexer
    >>> for token in Lexer("a = 1"):
    ...     print(token)
Token(IDENTIFIER, 'a', 1:1)
Token(EQUALS, '=', 1:3)
Token(REAL, '1', 1:5)

"""

from calclex.lexer.core import Lexer
from calclex.lexer.results import Emitted, Failed, Finished, ScanResult
from calclex.lexer.states import ScannerState
from calclex.lexer.transitions import Step, transition

__all__ = [
    "Emitted",
    "Failed",
    "Finished",
    "Lexer",
    "ScanResult",
    "ScannerState",
    "Step",
    "transition",
]
