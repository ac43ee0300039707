"""ContextVar-based lexer configuration for calclex.

Provides context-local configuration using Python's ContextVars (PEP 567).
A Lexer built without an explicit config snapshots the active one at
construction time.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from calclex.config import LexerConfig, lexer_config_context

    with lexer_config_context(LexerConfig(flush_at_eof=False)):
        tokens = list(Lexer("a = 1"))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexerConfig:
    """Immutable lexer configuration.

    Attributes:
        flush_at_eof: Emit a token still open when the input ends. When False,
            a trailing token is only emitted if one more non-extending
            character follows it (the historical behavior).
        count_newlines: Advance the line counter on each consumed newline.
            When False the line stays at 1 for the whole input, reproducing
            the historical position tracking.
        keep_whitespace: Surface WHITESPACE tokens instead of filtering them.

    """

    flush_at_eof: bool = True
    count_newlines: bool = True
    keep_whitespace: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexerConfig":
        """Create LexerConfig from dictionary.

        Only includes keys that are valid LexerConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> LexerConfig.from_dict({"flush_at_eof": False, "other": 1})
            LexerConfig(flush_at_eof=False, count_newlines=True, keep_whitespace=False)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexerConfig = LexerConfig()

_lexer_config: ContextVar[LexerConfig] = ContextVar(
    "lexer_config",
    default=_DEFAULT_CONFIG,
)


def get_lexer_config() -> LexerConfig:
    """Get current lexer configuration (context-local)."""
    return _lexer_config.get()


def set_lexer_config(config: LexerConfig) -> None:
    """Set lexer configuration for current context."""
    _lexer_config.set(config)


def reset_lexer_config() -> None:
    """Reset to default configuration."""
    _lexer_config.set(_DEFAULT_CONFIG)


@contextmanager
def lexer_config_context(config: LexerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lexer_config_context(LexerConfig(keep_whitespace=True)):
        ...     get_lexer_config().keep_whitespace
        True
        >>> get_lexer_config().keep_whitespace
        False

    """
    previous = _lexer_config.get()
    _lexer_config.set(config)
    try:
        yield
    finally:
        _lexer_config.set(previous)


__all__ = [
    "LexerConfig",
    "get_lexer_config",
    "set_lexer_config",
    "reset_lexer_config",
    "lexer_config_context",
]
