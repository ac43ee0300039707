"""Tests for ContextVar-based lexer configuration."""

import pytest

from calclex import (
    Lexer,
    LexerConfig,
    get_lexer_config,
    lexer_config_context,
    reset_lexer_config,
    set_lexer_config,
)


class TestLexerConfigDataclass:
    """Test LexerConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = LexerConfig()
        assert config.flush_at_eof is True
        assert config.count_newlines is True
        assert config.keep_whitespace is False

    def test_immutability(self) -> None:
        config = LexerConfig()
        with pytest.raises(AttributeError):
            config.flush_at_eof = False  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = LexerConfig.from_dict({"keep_whitespace": True, "unknown_key": 1})
        assert config == LexerConfig(keep_whitespace=True)


class TestContextConfig:
    """Context-local default config."""

    def setup_method(self) -> None:
        reset_lexer_config()

    def teardown_method(self) -> None:
        reset_lexer_config()

    def test_default_config(self) -> None:
        assert get_lexer_config() == LexerConfig()

    def test_set_and_reset(self) -> None:
        set_lexer_config(LexerConfig(flush_at_eof=False))
        assert get_lexer_config().flush_at_eof is False
        reset_lexer_config()
        assert get_lexer_config().flush_at_eof is True

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with lexer_config_context(LexerConfig(keep_whitespace=True)):
                raise RuntimeError("boom")
        assert get_lexer_config().keep_whitespace is False

    def test_lexer_reads_context_config(self) -> None:
        with lexer_config_context(LexerConfig(flush_at_eof=False)):
            lexer = Lexer("a = 1")
        # Config is captured at construction
        assert [t.text for t in lexer] == ["a", "="]

    def test_explicit_config_wins(self) -> None:
        with lexer_config_context(LexerConfig(flush_at_eof=False)):
            tokens = list(Lexer("a = 1", config=LexerConfig()))
        assert [t.text for t in tokens] == ["a", "=", "1"]

