"""
TR Segment Classifier
=====================

Splits preprocessed lines into segments and classifies each segment
into a TokenKind, assigning statement slots with a cyclic counter.

Recognizer Precedence
---------------------
Recognizers are tried in this order; the first match wins:

| Order | Kind        | Accepted text                     |
|-------|-------------|-----------------------------------|
| 1     | Keyword     | copy, add, if, while, ...         |
| 2     | Stack       | push, pop                         |
| 3     | BasicType   | int, float, char, struct, ...     |
| 4     | Identifier  | [_a-zA-Z][_a-zA-Z0-9]*            |
| 5     | Integer     | [+-]?[1-9][0-9]* or 0             |
| 6     | FloatPoint  | [+-]?[1-9][0-9]*.[0-9]+           |
| 7     | CharConst   | '...'                             |
| 8     | StringConst | "..."                             |
| 9     | Symbol      | $ . * @                           |

Integers with leading zeros ('007') and floats with a zero integer part
('0.5') are not accepted by any recognizer.
"""

import logging
import re
from typing import Iterable, Iterator, Optional

from trlang.config import DEFAULT_PLACEHOLDER
from trlang.errors import UnknownTokenError
from trlang.lexer.preprocessor import preprocess_line, restore_spaces
from trlang.lexer.tokens import (
    BASIC_TYPES,
    KEYWORDS,
    STACK_OPERATIONS,
    SYMBOLS,
    StatementPosition,
    Token,
    TokenKind,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Recognizer Patterns
# =============================================================================

SEGMENT_SPLIT_PATTERN = re.compile(r"\s+")

IDENTIFIER_PATTERN = re.compile(r"[_a-zA-Z][_a-zA-Z0-9]*")
INTEGER_PATTERN = re.compile(r"[+-]?[1-9][0-9]*|0")
FLOAT_POINT_PATTERN = re.compile(r"[+-]?[1-9][0-9]*\.[0-9]+")
CHAR_CONST_PATTERN = re.compile(r"'.*'")
STRING_CONST_PATTERN = re.compile(r"\".*\"")

# Kinds whose value is the segment with its surrounding quotes removed
_QUOTED_KINDS = (TokenKind.CHAR_CONST, TokenKind.STRING_CONST)


def classify_segment(segment: str) -> Optional[TokenKind]:
    """
    Return the TokenKind of a single segment, or None if nothing matches.

    Args:
        segment: A non-empty, whitespace-free segment of a preprocessed line
    """
    if segment in KEYWORDS:
        return TokenKind.KEYWORD
    if segment in STACK_OPERATIONS:
        return TokenKind.STACK
    if segment in BASIC_TYPES:
        return TokenKind.BASIC_TYPE
    if IDENTIFIER_PATTERN.fullmatch(segment):
        return TokenKind.IDENTIFIER
    if INTEGER_PATTERN.fullmatch(segment):
        return TokenKind.INTEGER
    if FLOAT_POINT_PATTERN.fullmatch(segment):
        return TokenKind.FLOAT_POINT
    if CHAR_CONST_PATTERN.fullmatch(segment):
        return TokenKind.CHAR_CONST
    if STRING_CONST_PATTERN.fullmatch(segment):
        return TokenKind.STRING_CONST
    if segment in SYMBOLS:
        return TokenKind.SYMBOL
    return None


def split_segments(line: str) -> list[str]:
    """Split a preprocessed line on whitespace runs, dropping empty segments."""
    return [s for s in SEGMENT_SPLIT_PATTERN.split(line) if s]


def classify_line(
    line: str,
    line_number: int,
    filename: str = "<input>",
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> list[Token]:
    """
    Classify every segment of one preprocessed line.

    The statement position starts at RETURN and advances after each
    token, wrapping every four tokens.

    Args:
        line: Output of preprocess_line()
        line_number: 1-based line number for the tokens
        filename: Source name recorded on each token
        placeholder: Placeholder used when the line was preprocessed

    Returns:
        Tokens of this line, in order

    Raises:
        UnknownTokenError: If a segment matches no recognizer
    """
    tokens = []
    position = StatementPosition.RETURN

    for segment in split_segments(line):
        kind = classify_segment(segment)
        if kind is None:
            raise UnknownTokenError(
                f"Token not recognized: {restore_spaces(segment, placeholder)}",
                line_number,
            )

        value = segment[1:-1] if kind in _QUOTED_KINDS else segment
        tokens.append(Token(
            value=restore_spaces(value, placeholder),
            line=line_number,
            kind=kind,
            statement_pos=position,
            filename=filename,
        ))
        position = position.next()

    return tokens


def tokenize(
    lines: Iterable[str],
    filename: str = "<input>",
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> Iterator[Token]:
    """
    Preprocess and classify raw source lines.

    Lines are numbered from 1. Position state is reset for every line.

    Raises:
        UnknownTokenError: On the first unrecognized segment. Tokens of
            that line are never yielded.
    """
    for line_number, raw_line in enumerate(lines, start=1):
        line = preprocess_line(raw_line, placeholder)
        line_tokens = classify_line(line, line_number, filename, placeholder)
        if line_tokens:
            logger.debug(f"{filename}:{line_number}: {len(line_tokens)} token(s)")
        yield from line_tokens
