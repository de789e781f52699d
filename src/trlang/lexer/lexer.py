"""
TR Lexer
========

Runs the full lexical analysis of a TR source: line preprocessing and
segment classification, then statement position validation.

Pipeline
--------
    raw lines → preprocess_line → classify_line → check_positions → tokens

Any error aborts the whole run; no partial token list is returned.

Example Usage
-------------
>>> from trlang.lexer import Lexer
>>> lexer = Lexer()
>>> for token in lexer.lex_source("x add a b"):
...     print(token)
1. <Identifier|x> Return
1. <Keyword|add> Function
1. <Identifier|a> Argument1
1. <Identifier|b> Argument2
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from trlang.config import LexerConfig, get_default_config
from trlang.errors import LexerError
from trlang.lexer.classifier import tokenize
from trlang.lexer.tokens import Token
from trlang.lexer.validator import check_positions

logger = logging.getLogger(__name__)


class Lexer:
    """
    Tokenizes and validates TR source.

    Usage:
        lexer = Lexer()
        tokens = lexer.lex_file("program.tr")

    Attributes:
        config: The LexerConfig in effect for this lexer
    """

    def __init__(self, config: Optional[LexerConfig] = None):
        self.config = config if config is not None else get_default_config()

    def tokenize_lines(
        self,
        lines: Iterable[str],
        filename: str = "<input>",
    ) -> list[Token]:
        """
        Classify all lines without checking statement positions.

        Raises:
            UnknownTokenError: On the first unrecognized segment
        """
        return list(tokenize(lines, filename, self.config.placeholder))

    def check(self, tokens: Sequence[Token]) -> Sequence[Token]:
        """Validate statement positions of a classified token sequence."""
        return check_positions(tokens)

    def lex(
        self,
        lines: Iterable[str],
        filename: str = "<input>",
    ) -> list[Token]:
        """
        Tokenize and, unless disabled in the config, validate lines.

        Errors raised here carry the filename and the offending raw
        source line.

        Raises:
            LexerError: On the first lexical or positional error
        """
        lines = list(lines)
        try:
            tokens = self.tokenize_lines(lines, filename)
            if self.config.check_positions:
                self.check(tokens)
        except LexerError as e:
            source_line = None
            if 1 <= e.line <= len(lines):
                source_line = lines[e.line - 1].rstrip("\r\n")
            raise e.with_context(filename, source_line) from e

        logger.debug(f"{filename}: {len(tokens)} token(s) from {len(lines)} line(s)")
        return tokens

    def lex_source(self, source: str, filename: str = "<input>") -> list[Token]:
        """
        Lex a source string.

        Lines end at a line feed only, the same as lex_file(). Form
        feeds and lone carriage returns are plain whitespace.
        """
        lines = [line.rstrip("\r\n") for line in source.split("\n")]
        return self.lex(lines, filename)

    def lex_file(self, path: Union[str, Path]) -> list[Token]:
        """
        Lex a source file.

        The file is read once, line by line, and closed before
        validation starts.

        Raises:
            OSError: If the file cannot be opened or read
            UnicodeDecodeError: If the file is not valid in the
                configured encoding
            LexerError: On the first lexical or positional error
        """
        path = Path(path)
        logger.debug(f"Reading {path} ({self.config.encoding})")
        with path.open("r", encoding=self.config.encoding, newline="\n") as f:
            lines = [line.rstrip("\r\n") for line in f]
        return self.lex(lines, str(path))


# =============================================================================
# Convenience Functions
# =============================================================================

def lex_lines(
    lines: Iterable[str],
    filename: str = "<input>",
    config: Optional[LexerConfig] = None,
) -> list[Token]:
    """Lex an iterable of raw source lines."""
    return Lexer(config).lex(lines, filename)


def lex_source(
    source: str,
    filename: str = "<input>",
    config: Optional[LexerConfig] = None,
) -> list[Token]:
    """Lex a source string."""
    return Lexer(config).lex_source(source, filename)


def lex_file(
    path: Union[str, Path],
    config: Optional[LexerConfig] = None,
) -> list[Token]:
    """Lex a source file."""
    return Lexer(config).lex_file(path)
