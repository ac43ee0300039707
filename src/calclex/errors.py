"""Exception classes for calclex.

Provides standardized exceptions for error handling throughout calclex.
"""

from __future__ import annotations

from calclex.location import SourceLocation


class CalclexError(Exception):
    """Base exception for all calclex errors.

    Subclass this for specific error categories.
    """

    pass


class LexicalError(CalclexError):
    """Error during tokenization.

    Raised when the scanner cannot classify the input at some position.
    The message is used as given; only the input name, when known, is
    prefixed.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lexical error with optional location.

        Args:
            message: Error description
            line: Line number where error occurred (1-indexed)
            column: Column where error occurred (1-indexed)
            source_file: Name of the input (optional)
        """
        self.message = message
        self.line = line
        self.column = column
        self.source_file = source_file

        prefix = f"{source_file}: " if source_file else ""
        super().__init__(f"{prefix}{message}")

    @property
    def location(self) -> SourceLocation | None:
        """Location of the error, if line and column are known."""
        if self.line is None or self.column is None:
            return None
        return SourceLocation(self.line, self.column, self.source_file)


class InvalidCharacterError(LexicalError):
    """A character that cannot start any token.

    Raised from the start state only; scanning stops at the first one.
    """

    def __init__(
        self,
        character: str,
        line: int,
        column: int,
        source_file: str | None = None,
    ) -> None:
        """Initialize invalid character error.

        Args:
            character: The offending character
            line: Line of the character (1-indexed)
            column: Column of the character (1-indexed)
            source_file: Name of the input (optional)
        """
        self.character = character
        super().__init__(
            f"Invalid character '{_printable(character)}' at line {line} column {column}",
            line,
            column,
            source_file,
        )


def _printable(char: str) -> str:
    """Escape control characters (tab, carriage return) for display."""
    return char if char.isprintable() else repr(char)[1:-1]
