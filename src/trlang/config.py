"""
TR Lexer - Configuration
========================

Lexer configuration. Configuration can come from:
- Default values (defined here)
- Environment variables, read only by the trlex CLI through from_env()
- Command-line flags (applied by the CLI on top of from_env())

Library callers get plain LexerConfig() defaults unless they pass a
config or call set_default_config().

Environment variables (all optional):
    TRLEX_ENCODING: Encoding used to read source files (default: utf-8)
    TRLEX_NO_CHECK: Skip statement position validation (1/true/yes)
"""

from dataclasses import dataclass
from typing import Optional
import os


# Placeholder substituted for spaces inside quoted literals. BEL is not
# expected to appear in TR source text.
DEFAULT_PLACEHOLDER = "\x07"

_TRUTHY = ("1", "true", "yes")


@dataclass
class LexerConfig:
    """
    Configuration for a lexer run.

    Attributes:
        encoding: Encoding used when reading source files
        check_positions: Run the statement position validator after
            classification (default: True)
        placeholder: Sentinel character protecting spaces inside literals
    """

    encoding: str = "utf-8"
    check_positions: bool = True
    placeholder: str = DEFAULT_PLACEHOLDER

    def __post_init__(self) -> None:
        # The placeholder must survive the whitespace split as one character
        if len(self.placeholder) != 1 or self.placeholder.isspace():
            raise ValueError(
                f"placeholder must be a single non-whitespace character, "
                f"got {self.placeholder!r}"
            )

    @classmethod
    def from_env(cls) -> "LexerConfig":
        """
        Create LexerConfig from environment variables.

        Returns:
            LexerConfig with values from environment variables
        """
        config = cls()

        if encoding := os.environ.get("TRLEX_ENCODING"):
            config.encoding = encoding

        if no_check := os.environ.get("TRLEX_NO_CHECK"):
            config.check_positions = no_check.strip().lower() not in _TRUTHY

        return config


# =============================================================================
# Global default configuration
# =============================================================================

_default_config: Optional[LexerConfig] = None


def get_default_config() -> LexerConfig:
    """
    Get the default lexer configuration.

    Plain defaults; the environment is not consulted.
    """
    global _default_config
    if _default_config is None:
        _default_config = LexerConfig()
    return _default_config


def set_default_config(config: Optional[LexerConfig]) -> None:
    """Set (or with None, reset) the default lexer configuration."""
    global _default_config
    _default_config = config
