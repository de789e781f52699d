#!/usr/bin/env python3
"""
TR Lexer Demo
=============

This script demonstrates how to use the TR lexer to:
1. Tokenize a source file
2. Group tokens into statements by line
3. Handle lexical errors

Usage:
    python examples/lex_demo.py
"""

from itertools import groupby
from pathlib import Path

from trlang import LexerError, lex_file, lex_source


def main():
    # ==========================================================================
    # 1. Tokenize the sample program
    # ==========================================================================
    source = Path(__file__).parent / "simple_example.tr"
    tokens = lex_file(source)
    print(f"{source.name}: {len(tokens)} tokens")

    # ==========================================================================
    # 2. Print each line's tokens side by side
    # ==========================================================================
    for line, line_tokens in groupby(tokens, key=lambda t: t.line):
        slots = "  ".join(f"{t.statement_pos}={t.value!r}" for t in line_tokens)
        print(f"{line:3d}: {slots}")

    # ==========================================================================
    # 3. Errors stop the whole run
    # ==========================================================================
    for bad in ("x copy 007", "int", "x copy 'ab'"):
        try:
            lex_source(bad, filename="<demo>")
        except LexerError as e:
            print(f"{e.kind.value}: {e.description}")


if __name__ == "__main__":
    main()
