"""
TR Line Preprocessor
====================

Prepares a raw source line for whitespace splitting:

1. Trim surrounding whitespace
2. Strip a trailing '//' comment
3. Protect spaces inside quoted literals

Step 3 replaces every space inside a "..." or '...' span with a
placeholder character so that `push "hello world"` splits into two
segments instead of three. The classifier restores the spaces when it
builds the token value.

Example:
    >>> preprocess_line('  x push "a b" // note')
    'x push "a\\x07b"'
"""

import re

from trlang.config import DEFAULT_PLACEHOLDER


# Everything from the first '//' to the end of the line
COMMENT_PATTERN = re.compile(r"//.*$")

# Greedy same-line quoted spans, double or single quoted
QUOTED_SPAN_PATTERN = re.compile(r"(\".*\")|('.*')")


def strip_comment(line: str) -> str:
    """
    Remove a trailing comment from a line.

    The line is returned unchanged when it holds no comment marker,
    otherwise the comment is removed and the rest trimmed.
    """
    if not COMMENT_PATTERN.search(line):
        return line
    return COMMENT_PATTERN.sub("", line).strip()


def protect_spaces(line: str, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    """
    Replace spaces inside quoted spans with the placeholder.

    Unterminated quotes never match and are left untouched.
    """
    return QUOTED_SPAN_PATTERN.sub(
        lambda match: match.group(0).replace(" ", placeholder),
        line,
    )


def restore_spaces(text: str, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    """Turn placeholder characters back into spaces."""
    return text.replace(placeholder, " ")


def preprocess_line(line: str, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    """Run trim, comment stripping and space protection on one raw line."""
    line = line.strip()
    line = strip_comment(line)
    return protect_spaces(line, placeholder)
