"""
TR Command-Line Interface
=========================

This package provides command-line tools for TR:

- **trlex**: lexical analyzer, prints the token list of a source file

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["trlex"]
