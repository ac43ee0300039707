"""Result variants returned by ``Lexer.advance()``.

``advance()`` reports each pull as exactly one of:

- Emitted: a token is ready
- Failed: scanning stopped on a lexical error
- Finished: the input is exhausted

Callers can tell normal termination from failure with a ``match`` statement
instead of exception handling.

Example:
    >>> match lexer.advance():
    ...     case Emitted(token):
    ...         handle(token)
    ...     case Failed(error):
    ...         report(error)
    ...     case Finished():
    ...         pass

"""

from __future__ import annotations

from dataclasses import dataclass

from calclex.errors import LexicalError
from calclex.tokens import Token


@dataclass(frozen=True, slots=True)
class Emitted:
    """A token produced by the lexer."""

    token: Token


@dataclass(frozen=True, slots=True)
class Failed:
    """The lexer stopped on an error; no further tokens follow."""

    error: LexicalError


@dataclass(frozen=True, slots=True)
class Finished:
    """The input is exhausted; no further tokens follow."""


ScanResult = Emitted | Failed | Finished

__all__ = ["Emitted", "Failed", "Finished", "ScanResult"]
