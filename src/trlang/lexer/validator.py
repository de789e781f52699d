"""
TR Statement Position Validator
===============================

Checks that every token sits in a statement slot that is legal for its
kind. The check runs over the whole token stream in order and stops at
the first violation.

Slot Rules
----------
| Kind                        | Return | Function | Arg1 | Arg2 |
|-----------------------------|--------|----------|------|------|
| BasicType                   | no     | yes      | yes  | yes  |
| Stack, Keyword              | no     | yes      | no   | no   |
| Integer, FloatPoint, String | no     | no       | yes  | yes  |
| CharConst                   | no     | no       | yes  | yes  |
| Identifier                  | yes    | yes      | yes  | yes  |
| Symbol '.'                  | yes    | no       | no   | no   |
| Symbol '*', '$', '@'        | yes    | no       | yes  | yes  |

Char constants must additionally hold one character, or one backslash
escape such as '\\n'.
"""

import logging
from typing import Sequence

from trlang.errors import InvalidCharConstantError, InvalidStatementPositionError
from trlang.lexer.tokens import StatementPosition, Token, TokenKind

logger = logging.getLogger(__name__)


# Human readable names used in constant error messages
_CONSTANT_NAMES = {
    TokenKind.INTEGER: "integer constant",
    TokenKind.FLOAT_POINT: "float point constant",
    TokenKind.STRING_CONST: "string constant",
    TokenKind.CHAR_CONST: "char constant",
}

# Symbols that may fill any slot but the function slot
_OPERAND_SYMBOLS = ("*", "$", "@")


def _quote(token: Token) -> str:
    """Quote a token value the way it is written in source."""
    if token.kind is TokenKind.CHAR_CONST:
        return f"'{token.value}'"
    return f'"{token.value}"'


def _position_error(token: Token, message: str) -> InvalidStatementPositionError:
    return InvalidStatementPositionError(message, token.line)


def is_valid_char_constant(value: str) -> bool:
    """
    Return True if a char constant value has an acceptable length.

    The rule rejects a two character value unless it starts with a
    backslash, and anything longer. An empty value is accepted.
    """
    if (len(value) == 2 and value[0] != "\\") or len(value) > 2:
        return False
    return True


def check_token(token: Token) -> None:
    """
    Validate a single token against the slot rules.

    Raises:
        InvalidStatementPositionError: If the token is in a forbidden slot
        InvalidCharConstantError: If a char constant is too long
    """
    kind = token.kind
    pos = token.statement_pos

    if kind is TokenKind.BASIC_TYPE:
        if pos is StatementPosition.RETURN:
            raise _position_error(
                token,
                f'The type "{token.value}" cannot be the return of a statement',
            )

    elif kind in (TokenKind.STACK, TokenKind.KEYWORD):
        if pos is not StatementPosition.FUNCTION:
            raise _position_error(
                token,
                f'The keyword "{token.value}" must be the functions of a statement',
            )

    elif kind in _CONSTANT_NAMES:
        # Char constant length is checked in every slot
        if kind is TokenKind.CHAR_CONST and not is_valid_char_constant(token.value):
            raise InvalidCharConstantError(
                "The size of char constants must be 1",
                token.line,
                hint="use a string constant for more than one character",
            )

        name = _CONSTANT_NAMES[kind]
        if pos is StatementPosition.RETURN:
            raise _position_error(
                token,
                f"The {name} {_quote(token)} cannot be the return of a statement",
            )
        if pos is StatementPosition.FUNCTION:
            raise _position_error(
                token,
                f"The {name} {_quote(token)} cannot be the function of a statement",
            )

    elif kind is TokenKind.SYMBOL:
        if token.value == ".":
            if pos is not StatementPosition.RETURN:
                raise _position_error(
                    token,
                    'The symbol "." must be the return of a statement',
                )
        elif token.value in _OPERAND_SYMBOLS:
            if pos is StatementPosition.FUNCTION:
                raise _position_error(
                    token,
                    f'The symbol "{token.value}" cannot be the function of a statement',
                )

    # Identifiers may appear in any slot


def check_positions(tokens: Sequence[Token]) -> Sequence[Token]:
    """
    Validate a full token sequence, failing on the first violation.

    Args:
        tokens: Tokens in source order, as produced by the classifier

    Returns:
        The same sequence, unchanged

    Raises:
        InvalidStatementPositionError: First token in a forbidden slot
        InvalidCharConstantError: First char constant that is too long
    """
    for token in tokens:
        check_token(token)

    logger.debug(f"Statement positions valid for {len(tokens)} token(s)")
    return tokens
