"""
TR Lexer Package
================

Lexical analysis for TR, a line oriented stack/statement language.

- preprocessor: comment stripping and literal space protection
- classifier: segment splitting and token classification
- validator: statement position checks
- lexer: the Lexer facade wiring the three together
"""

from trlang.lexer.tokens import (
    Token,
    TokenKind,
    StatementPosition,
    KEYWORDS,
    STACK_OPERATIONS,
    BASIC_TYPES,
    SYMBOLS,
)
from trlang.lexer.preprocessor import preprocess_line, restore_spaces
from trlang.lexer.classifier import classify_segment, classify_line, tokenize
from trlang.lexer.validator import check_positions, check_token
from trlang.lexer.lexer import Lexer, lex_file, lex_lines, lex_source

__all__ = [
    # Tokens
    "Token",
    "TokenKind",
    "StatementPosition",
    "KEYWORDS",
    "STACK_OPERATIONS",
    "BASIC_TYPES",
    "SYMBOLS",
    # Stages
    "preprocess_line",
    "restore_spaces",
    "classify_segment",
    "classify_line",
    "tokenize",
    "check_positions",
    "check_token",
    # Facade
    "Lexer",
    "lex_file",
    "lex_lines",
    "lex_source",
]
