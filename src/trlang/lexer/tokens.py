"""
TR Token Definitions
====================

Token kinds, statement positions and the immutable Token record
produced by the segment classifier.

Every TR statement is made of up to four slots, filled strictly by
ordinal position on the line:

    <return> <function> <argument1> <argument2>

    x        add        a           b

A fifth token on the same line starts a new statement at the Return
slot again.
"""

from dataclasses import dataclass
from enum import Enum

from trlang.errors import SourceLocation


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Lexical categories of TR.

    Kinds are mutually exclusive; the classifier assigns the first
    matching one in a fixed precedence order.
    """
    BASIC_TYPE = "BasicType"        # int, float, char, struct, array, func
    STACK = "Stack"                 # push, pop
    KEYWORD = "Keyword"             # copy, add, if, while, ...
    INTEGER = "Integer"             # 0, 42, -7
    FLOAT_POINT = "FloatPoint"      # 3.14, -1.5
    CHAR_CONST = "CharConst"        # 'a'
    STRING_CONST = "StringConst"    # "hello"
    IDENTIFIER = "Identifier"       # names
    SYMBOL = "Symbol"               # $ . * @

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Statement Position
# =============================================================================

class StatementPosition(Enum):
    """The four slots of a statement, in line order."""
    RETURN = "Return"
    FUNCTION = "Function"
    ARGUMENT1 = "Argument1"
    ARGUMENT2 = "Argument2"

    def next(self) -> "StatementPosition":
        """Return the slot following this one, wrapping back to RETURN."""
        return _NEXT_POSITION[self]

    def __str__(self) -> str:
        return self.value


_NEXT_POSITION = {
    StatementPosition.RETURN: StatementPosition.FUNCTION,
    StatementPosition.FUNCTION: StatementPosition.ARGUMENT1,
    StatementPosition.ARGUMENT1: StatementPosition.ARGUMENT2,
    StatementPosition.ARGUMENT2: StatementPosition.RETURN,
}


# =============================================================================
# Keyword Sets
# =============================================================================

KEYWORDS: frozenset[str] = frozenset({
    # Data
    "copy", "type", "size",
    # Arithmetic
    "add", "sum", "minus", "mult", "div", "mod",
    # Logic and comparison
    "land", "lor", "eq", "diff", "grt", "lst", "not", "and", "or", "xor",
    # Control flow
    "end", "if", "elif", "else", "while",
    # Functions
    "arg", "ret", "return",
    # Modules (recognized only, never resolved)
    "import", "use",
})

STACK_OPERATIONS: frozenset[str] = frozenset({"push", "pop"})

BASIC_TYPES: frozenset[str] = frozenset({
    "int", "float", "char", "struct", "array", "func",
})

SYMBOLS: frozenset[str] = frozenset({"$", ".", "*", "@"})


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified TR token.

    Attributes:
        value: Literal text; quotes stripped for char and string constants
        line: Line number in source (1-indexed)
        kind: The TokenKind classification
        statement_pos: Slot occupied on the line, by ordinal position only
        filename: Name of the source file
    """
    value: str
    line: int
    kind: TokenKind
    statement_pos: StatementPosition
    filename: str = "<input>"

    def format(self) -> str:
        """Format as '<line>. <<kind>|<value>> <position>'."""
        return f"{self.line}. <{self.kind}|{self.value}> {self.statement_pos}"

    def __str__(self) -> str:
        return self.format()

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line)
