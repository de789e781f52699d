# =============================================================================
# test_config.py - Lexer Configuration Tests
# =============================================================================

import pytest

from trlang.config import (
    DEFAULT_PLACEHOLDER,
    LexerConfig,
    get_default_config,
    set_default_config,
)
from trlang.errors import InvalidStatementPositionError
from trlang.lexer import Lexer, lex_source


class TestLexerConfig:
    """Test configuration defaults and environment overrides."""

    def test_defaults(self):
        config = LexerConfig()
        assert config.encoding == "utf-8"
        assert config.check_positions is True
        assert config.placeholder == DEFAULT_PLACEHOLDER == "\x07"

    def test_from_env_encoding(self, monkeypatch):
        monkeypatch.setenv("TRLEX_ENCODING", "latin-1")
        assert LexerConfig.from_env().encoding == "latin-1"

    def test_from_env_no_check(self, monkeypatch):
        for value in ("1", "true", "YES"):
            monkeypatch.setenv("TRLEX_NO_CHECK", value)
            assert LexerConfig.from_env().check_positions is False

    @pytest.mark.parametrize("value", ["0", "no", "on"])
    def test_from_env_no_check_falsy(self, monkeypatch, value):
        """Only 1, true and yes disable the check."""
        monkeypatch.setenv("TRLEX_NO_CHECK", value)
        assert LexerConfig.from_env().check_positions is True

    def test_from_env_empty(self):
        assert LexerConfig.from_env() == LexerConfig()


class TestPlaceholder:
    """The placeholder must be one non-whitespace character."""

    @pytest.mark.parametrize("value", ["", "ab", " ", "\t", "\x0c"])
    def test_rejected(self, value):
        with pytest.raises(ValueError):
            LexerConfig(placeholder=value)

    @pytest.mark.parametrize("value", ["\x00", "\x07", "~"])
    def test_accepted(self, value):
        assert LexerConfig(placeholder=value).placeholder == value


class TestDefaultConfig:
    """Test the global default configuration."""

    def test_default_is_cached(self):
        assert get_default_config() is get_default_config()

    def test_default_ignores_env(self, monkeypatch):
        """Environment variables only affect the CLI."""
        monkeypatch.setenv("TRLEX_NO_CHECK", "1")
        monkeypatch.setenv("TRLEX_ENCODING", "latin-1")
        assert get_default_config() == LexerConfig()

    def test_library_validates_with_env_set(self, monkeypatch):
        """TRLEX_NO_CHECK never disables validation for library callers."""
        monkeypatch.setenv("TRLEX_NO_CHECK", "1")
        with pytest.raises(InvalidStatementPositionError):
            lex_source("int")
        with pytest.raises(InvalidStatementPositionError):
            Lexer().lex_source("int")

    def test_set_default_used_by_lexer(self):
        config = LexerConfig(check_positions=False)
        set_default_config(config)
        assert Lexer().config is config
        assert Lexer().lex_source("int")[0].value == "int"
