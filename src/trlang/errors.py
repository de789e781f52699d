"""
TR Lexer Error Hierarchy
========================

This module defines the exception hierarchy for the TR toolchain.
All exceptions inherit from TRError, allowing callers to catch all
lexer-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
TRError (base)
└── LexerError (lexical analysis)
    ├── UnknownTokenError - segment matched no token recognizer
    ├── InvalidStatementPositionError - token in a forbidden statement slot
    └── InvalidCharConstantError - char constant longer than one character

Every lexer error is tagged with an ErrorKind so that callers which only
care about the category (for example to pick an exit code or to compare
against expected failures in tests) do not need to match on classes.

Error messages follow this format:
    filename:line: error: description
        source_line_text
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# =============================================================================
# Error Kinds
# =============================================================================

class ErrorKind(Enum):
    """Category tag carried by every lexer error."""
    UNKNOWN_TOKEN = "UnknownToken"
    INVALID_STATEMENT_POSITION = "InvalidStatementPosition"
    INVALID_CHAR_CONSTANT = "InvalidCharConstant"


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    TR is line oriented and tokens are produced from whitespace-split
    segments, so only the line is tracked.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
    """
    filename: str
    line: int

    def __str__(self) -> str:
        """Format as 'filename:line' for error messages."""
        return f"{self.filename}:{self.line}"


# =============================================================================
# Base Exception Class
# =============================================================================

class TRError(Exception):
    """
    Base exception for all TR toolchain errors.

    All exceptions in the package inherit from this class, allowing callers
    to catch all TR-related errors with a single except clause:

        try:
            tokens = lex_file("program.tr")
        except TRError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Lexer Exceptions
# =============================================================================

class LexerError(TRError):
    """
    Base exception for all lexer errors.

    Carries the error kind, a human readable description and the
    offending line number. Formatting adds the location prefix, the
    source line and an optional hint.

    Attributes:
        kind: The ErrorKind tag for this error
        description: The error description
        line: Line number where the error occurred (1-indexed)
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    kind: ErrorKind

    def __init__(
        self,
        description: str,
        line: int,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.description = description
        self.line = line
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            prog.tr:3: error: Token not recognized: 007
                x copy 007
            hint: integers cannot have leading zeros
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.description}")
        else:
            parts.append(f"line {self.line}: error: {self.description}")

        if self.source_line is not None:
            parts.append(f"    {self.source_line}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)

    def with_context(
        self,
        filename: str,
        source_line: Optional[str] = None,
    ) -> "LexerError":
        """
        Return a copy of this error carrying file and source line context.

        The classifier and validator only know line numbers; the lexer
        facade attaches the filename and the raw source text afterwards.
        """
        return type(self)(
            self.description,
            self.line,
            location=SourceLocation(filename, self.line),
            hint=self.hint,
            source_line=source_line,
        )


class UnknownTokenError(LexerError):
    """
    A segment matched none of the token recognizers.

    The description contains the original segment text with protected
    spaces restored.

    Example:
        x copy 007      # leading zeros are not a valid integer
    """
    kind = ErrorKind.UNKNOWN_TOKEN


class InvalidStatementPositionError(LexerError):
    """
    A token appeared in a statement slot that is not legal for it.

    Example:
        int             # a type cannot be the return of a statement
    """
    kind = ErrorKind.INVALID_STATEMENT_POSITION


class InvalidCharConstantError(LexerError):
    """
    A char constant holds more than one character.

    A single character or one backslash escape ('\\n') is accepted.
    """
    kind = ErrorKind.INVALID_CHAR_CONSTANT
