"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Identifiers are ASCII only; Unicode letters are rejected as invalid
characters.

Usage:
    from calclex.charsets import LETTERS

    if char in LETTERS:  # O(1) lookup
        ...
"""

import string

LETTERS: frozenset[str] = frozenset(string.ascii_letters)

DIGITS: frozenset[str] = frozenset(string.digits)

# Characters that may continue an identifier
IDENTIFIER_CHARS: frozenset[str] = LETTERS | DIGITS

WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")

DECIMAL_POINT = "."

NEWLINE = "\n"
