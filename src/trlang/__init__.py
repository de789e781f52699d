"""
TR Language Toolchain
=====================

This package provides the lexical analyzer for TR, a small line
oriented, stack/statement based language. Each TR statement fills up to
four slots by position on the line:

    <return> <function> <argument1> <argument2>

The lexer classifies every whitespace-separated segment into a token
kind and checks that each token sits in a slot legal for its kind.

Quick Start
-----------
    >>> from trlang import lex_file
    >>> for token in lex_file("program.tr"):
    ...     print(token)

Or use the command-line tool:
    $ trlex program.tr
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from trlang.config import LexerConfig
from trlang.errors import (
    TRError,
    ErrorKind,
    SourceLocation,
    LexerError,
    UnknownTokenError,
    InvalidStatementPositionError,
    InvalidCharConstantError,
)
from trlang.lexer import (
    Lexer,
    Token,
    TokenKind,
    StatementPosition,
    lex_file,
    lex_lines,
    lex_source,
)

__all__ = [
    "__version__",
    # Configuration
    "LexerConfig",
    # Exception hierarchy
    "TRError",
    "ErrorKind",
    "SourceLocation",
    "LexerError",
    "UnknownTokenError",
    "InvalidStatementPositionError",
    "InvalidCharConstantError",
    # Lexer
    "Lexer",
    "Token",
    "TokenKind",
    "StatementPosition",
    "lex_file",
    "lex_lines",
    "lex_source",
]
