"""Source location tracking for tokens and error messages.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a character in the scanned input.

    All positions are 1-indexed (line and column start at 1).

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        source_file: Name of the input, when known (e.g. "<stdin>")

    Examples:
            >>> loc = SourceLocation(line=2, column=5)
            >>> str(loc)
            '2:5'

            >>> str(SourceLocation(1, 1, "input.calc"))
            'input.calc:1:1'

    """

    line: int
    column: int
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.calc:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"
