"""
calclex: lexer for a small arithmetic/assignment language.

Turns a character stream into a lazy sequence of classified, positioned
tokens: identifiers, real numbers, parentheses, ``=`` and ``+ - * / **``.
Whitespace separates tokens and is dropped from the output.

Quick Start:
    >>> from calclex import tokenize
    >>> [t.text for t in tokenize("area = (w + 2) ** 2")]
    ['area', '=', '(', 'w', '+', '2', ')', '**', '2']

    >>> # Result values instead of exceptions
    >>> from calclex import Lexer, Failed
    >>> lexer = Lexer("a @ b")
    >>> lexer.advance()
    Emitted(token=Token(IDENTIFIER, 'a', 1:1))
    >>> isinstance(lexer.advance(), Failed)
    True

Installation:
    pip install calclex              # Core lexer (zero deps)
"""

from typing import TextIO

from calclex.config import (
    LexerConfig,
    get_lexer_config,
    lexer_config_context,
    reset_lexer_config,
    set_lexer_config,
)
from calclex.errors import CalclexError, InvalidCharacterError, LexicalError
from calclex.lexer import (
    Emitted,
    Failed,
    Finished,
    Lexer,
    ScannerState,
    ScanResult,
)
from calclex.location import SourceLocation
from calclex.source import CharacterSource, StreamSource, StringSource, as_source
from calclex.tokens import Token, TokenKind

__version__ = "0.1.0"


def tokenize(
    source: str | TextIO | CharacterSource,
    *,
    source_file: str | None = None,
    config: LexerConfig | None = None,
) -> Lexer:
    """Tokenize text or a text stream.

    Returns the Lexer as a lazy token iterator. The underlying source is
    closed when iteration ends for any reason, or when ``close()`` is
    called on the returned iterator, even before the first pull.

    Args:
        source: Text, text stream, or CharacterSource to scan
        source_file: Optional input name for tokens and error messages
        config: Lexer options; defaults to the active context config

    Returns:
        Lexer yielding tokens in source order, whitespace excluded

    Raises:
        InvalidCharacterError: On the first character that starts no token
    """
    return Lexer(source, source_file=source_file, config=config)


__all__ = [
    "CalclexError",
    "CharacterSource",
    "Emitted",
    "Failed",
    "Finished",
    "InvalidCharacterError",
    "Lexer",
    "LexerConfig",
    "LexicalError",
    "ScanResult",
    "ScannerState",
    "SourceLocation",
    "StreamSource",
    "StringSource",
    "Token",
    "TokenKind",
    "__version__",
    "as_source",
    "get_lexer_config",
    "lexer_config_context",
    "reset_lexer_config",
    "set_lexer_config",
    "tokenize",
]
