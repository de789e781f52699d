"""
trlex - TR Lexer Command-Line Interface
=======================================

This module implements the command-line interface for the TR lexer.
It tokenizes a TR source file and prints the token list, or reports
the first lexical error.

Usage Examples
--------------
Tokenize a file:
    $ trlex program.tr

Skip statement position checks:
    $ trlex --no-check program.tr

Verbose mode:
    $ trlex -v program.tr

Output Format
-------------
    Tokens: [
        1. <Identifier|x> Return
        1. <Keyword|copy> Function
        1. <Identifier|a> Argument1
    ]
"""

import logging
from pathlib import Path

import click

from trlang import __version__
from trlang.cli.errors import handle_cli_exception
from trlang.config import LexerConfig
from trlang.lexer import Lexer

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--check/--no-check",
    default=None,
    help="Enable/disable statement position validation. "
         "Default: enabled, or disabled by TRLEX_NO_CHECK.",
)
@click.option(
    "-e", "--encoding",
    default=None,
    help="Source file encoding (default: utf-8, or TRLEX_ENCODING)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="trlex")
def main(
    input_file: Path,
    check: bool | None,
    encoding: str | None,
    verbose: bool,
) -> None:
    """
    Tokenize a TR source file.

    INPUT_FILE is the TR source file (.tr) to tokenize.

    Every token is printed with its line, kind, value and statement
    slot. The first unknown token or misplaced token stops the run.

    \b
    Examples:
        trlex program.tr             # Print tokens
        trlex --no-check program.tr  # Classification only
        trlex -v program.tr          # Verbose output
    """
    setup_logging(verbose)

    config = LexerConfig.from_env()
    if check is not None:
        config.check_positions = check
    if encoding is not None:
        config.encoding = encoding
    logger.debug(f"Lexer config: {config}")

    try:
        if verbose:
            click.echo(f"Tokenizing {input_file}...")
            if not config.check_positions:
                click.echo("Statement position validation: disabled")

        tokens = Lexer(config).lex_file(input_file)

        click.echo("Tokens: [")
        for token in tokens:
            click.echo(f"\t{token.format()}")
        click.echo("]")

        if verbose:
            click.echo(f"Tokenized: {len(tokens)} tokens")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
