"""DFA scanning engine with one character of lookahead.

Implements maximal munch: a token keeps growing while the lookahead
character extends it, and is finalized the moment it does not. The
lookahead character is left in the source, so the next token starts
exactly where the previous one ended.

Thread Safety:
Lexer instances are single-use. Create one per character source.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from types import TracebackType
from typing import TextIO

from calclex.charsets import NEWLINE
from calclex.config import LexerConfig, get_lexer_config
from calclex.errors import InvalidCharacterError
from calclex.lexer.lexeme import LexemeBuffer
from calclex.lexer.results import Emitted, Failed, Finished, ScanResult
from calclex.lexer.states import ScannerState
from calclex.lexer.transitions import transition
from calclex.location import SourceLocation
from calclex.source import CharacterSource, as_source
from calclex.tokens import Token, TokenKind
from calclex.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer:
    """Pull-based tokenizer for the calclex expression language.

    Each ``next()`` runs the DFA until a token is ready, the input is
    exhausted, or an invalid character is met. State, lexeme and position
    survive between pulls, so scanning resumes exactly where it paused.

    Usage:
            >>> for token in Lexer("x**2"):
            ...     print(token)
        Token(IDENTIFIER, 'x', 1:1)
        Token(EXPONENT_OP, '**', 1:2)
        Token(REAL, '2', 1:4)

    Errors end the sequence: ``next()`` raises InvalidCharacterError once,
    then StopIteration. ``advance()`` reports the same outcomes as result
    values instead.

    Thread Safety:
        Lexer instances are single-use and not restartable.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_config",
        "_state",
        "_lexeme",
        "_line",
        "_column",
        "_done",
    )

    def __init__(
        self,
        source: str | TextIO | CharacterSource,
        source_file: str | None = None,
        config: LexerConfig | None = None,
    ) -> None:
        """Initialize lexer over a character source.

        Args:
            source: Text, text stream, or CharacterSource to scan
            source_file: Optional input name for tokens and error messages
            config: Lexer options; defaults to the active context config
        """
        self._source = as_source(source)
        self._source_file = source_file
        self._config = config if config is not None else get_lexer_config()

        self._state = ScannerState.START
        self._lexeme = LexemeBuffer()
        self._line = 1
        self._column = 1
        self._done = False

        logger.debug("Scanning %s", source_file or type(self._source).__name__)

    # =========================================================================
    # Iteration protocol
    # =========================================================================

    def __iter__(self) -> Lexer:
        return self

    def __next__(self) -> Token:
        result = self.advance()
        if isinstance(result, Emitted):
            return result.token
        if isinstance(result, Failed):
            raise result.error
        raise StopIteration

    def advance(self) -> ScanResult:
        """Run the engine until the next visible token or the end of the run.

        Returns:
            Emitted with the next token, Failed with the lexical error that
            stopped the run, or Finished once the input is exhausted. After
            Failed or Finished every further call returns Finished.
        """
        if self._done:
            return Finished()
        return self._scan()

    def tokenize(self) -> Lexer:
        """Return the lexer as its own token iterator.

        The source is closed when the input is exhausted, when an error is
        raised, and when the consumer stops early with ``close()``, even
        before the first token is pulled.
        """
        return self

    # =========================================================================
    # Resource handling
    # =========================================================================

    def close(self) -> None:
        """Close the character source and end the token sequence."""
        self._done = True
        self._source.close()

    def __enter__(self) -> Lexer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # =========================================================================
    # Introspection
    # =========================================================================

    @property
    def state(self) -> ScannerState:
        return self._state

    @property
    def position(self) -> SourceLocation:
        """Location of the next character to be consumed."""
        return SourceLocation(self._line, self._column, self._source_file)

    @property
    def done(self) -> bool:
        return self._done

    # =========================================================================
    # Engine
    # =========================================================================

    def _scan(self) -> ScanResult:
        """Step the DFA until a visible token, end of input, or an error."""
        source = self._source
        keep_whitespace = self._config.keep_whitespace

        while True:
            char = source.peek()
            if not char:
                return self._finish()

            step = transition(self._state, char)
            if step is None:
                return self._fail(char)

            if step.consumes:
                source.read()
                if step.next_state is not ScannerState.START:
                    self._lexeme.append(char, line=self._line, column=self._column)
                self._advance_position(char)
                self._state = step.next_state
                continue

            # Lookahead does not extend the token: finalize, keep the char
            token = self._finalize()
            self._state = step.next_state
            if keep_whitespace or token.kind is not TokenKind.WHITESPACE:
                return Emitted(token)

    def _advance_position(self, char: str) -> None:
        """Account for one consumed character.

        The column always moves first; a consumed newline then moves to
        the start of the next line.
        """
        self._column += 1
        if char == NEWLINE and self._config.count_newlines:
            self._line += 1
            self._column = 1

    def _finalize(self) -> Token:
        """Build a token from the current state and lexeme, then reset the lexeme."""
        kind = self._state.kind
        if kind is None:
            raise RuntimeError("START state cannot be finalized")
        lexeme = self._lexeme
        token = Token(
            kind=kind,
            text=lexeme.build(),
            line=lexeme.start_line,
            column=lexeme.start_column,
            source_file=self._source_file,
        )
        lexeme.clear()
        return token

    def _finish(self) -> ScanResult:
        """Handle end of input, flushing an open token when configured."""
        if self._state.is_accepting and self._config.flush_at_eof:
            token = self._finalize()
            self._state = ScannerState.START
            if self._config.keep_whitespace or token.kind is not TokenKind.WHITESPACE:
                return Emitted(token)

        # Without flushing, a trailing open token is dropped
        self._lexeme.clear()
        self._state = ScannerState.START
        logger.debug("Finished scanning at %s", self.position)
        self.close()
        return Finished()

    def _fail(self, char: str) -> Failed:
        """Stop the run on a character with no transition out of START."""
        self._lexeme.clear()
        logger.debug("Stopped scanning at %s", self.position)
        self.close()
        return Failed(
            InvalidCharacterError(char, self._line, self._column, self._source_file)
        )
