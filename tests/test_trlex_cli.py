# =============================================================================
# test_trlex_cli.py - trlex Command-Line Tests
# =============================================================================
# Tests for the trlex click command: output format and exit codes.
# =============================================================================

import errno

from click.testing import CliRunner

from trlang.cli.errors import ExitCode
from trlang.cli.trlex import main
from trlang.lexer import Lexer


def run(*args: str):
    """Invoke trlex with the given arguments."""
    runner = CliRunner()
    return runner.invoke(main, list(args))


class TestTrlexCLI:
    """Tests for the trlex CLI tool."""

    def test_cli_help(self):
        result = run("--help")
        assert result.exit_code == 0
        assert "Tokenize a TR source file" in result.output

    def test_cli_version(self):
        result = run("--version")
        assert result.exit_code == 0
        assert "trlex" in result.output

    def test_prints_tokens(self, write_source):
        path = write_source("x copy a b\n. end\n")
        result = run(str(path))
        assert result.exit_code == ExitCode.SUCCESS
        assert result.output.splitlines() == [
            "Tokens: [",
            "\t1. <Identifier|x> Return",
            "\t1. <Keyword|copy> Function",
            "\t1. <Identifier|a> Argument1",
            "\t1. <Identifier|b> Argument2",
            "\t2. <Symbol|.> Return",
            "\t2. <Keyword|end> Function",
            "]",
        ]

    def test_empty_file(self, write_source):
        path = write_source("")
        result = run(str(path))
        assert result.exit_code == 0
        assert result.output.splitlines() == ["Tokens: [", "]"]

    def test_lex_error_exit_code(self, write_source):
        path = write_source("x copy 007\n")
        result = run(str(path))
        assert result.exit_code == ExitCode.LEX_ERROR
        assert "Token not recognized: 007" in result.output
        assert "Tokens: [" not in result.output

    def test_position_error_exit_code(self, write_source):
        path = write_source("int\n")
        result = run(str(path))
        assert result.exit_code == ExitCode.LEX_ERROR
        assert 'The type "int" cannot be the return of a statement' in result.output

    def test_no_check(self, write_source):
        path = write_source("int\n")
        result = run("--no-check", str(path))
        assert result.exit_code == 0
        assert "\t1. <BasicType|int> Return" in result.output

    def test_no_check_from_env(self, write_source, monkeypatch):
        monkeypatch.setenv("TRLEX_NO_CHECK", "1")
        path = write_source("int\n")
        assert run(str(path)).exit_code == 0
        assert run("--check", str(path)).exit_code == ExitCode.LEX_ERROR

    def test_missing_file(self, tmp_path):
        result = run(str(tmp_path / "missing.tr"))
        assert result.exit_code == 2

    def test_bad_encoding(self, tmp_path):
        path = tmp_path / "latin.tr"
        path.write_bytes('x copy "café"\n'.encode("latin-1"))
        result = run(str(path))
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "cannot decode" in result.output

    def test_encoding_option(self, tmp_path):
        path = tmp_path / "latin.tr"
        path.write_bytes('x copy "café"\n'.encode("latin-1"))
        result = run("-e", "latin-1", str(path))
        assert result.exit_code == 0
        assert "<StringConst|café> Argument1" in result.output

    def test_unknown_encoding(self, write_source):
        """An unknown codec name is an argument error."""
        path = write_source("x copy a\n")
        result = run("-e", "bogus-enc", str(path))
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "unknown encoding: bogus-enc" in result.output
        assert "Internal error" not in result.output

    def test_read_failure(self, write_source, monkeypatch):
        """I/O errors while reading are reported as unreadable input."""
        def fail_read(self, path):
            raise OSError(errno.EIO, "Input/output error", str(path))

        monkeypatch.setattr(Lexer, "lex_file", fail_read)
        path = write_source("x copy a\n")
        result = run(str(path))
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "Input/output error" in result.output
        assert "Internal error" not in result.output

    def test_verbose(self, write_source):
        path = write_source("x copy a b\n")
        result = run("-v", str(path))
        assert result.exit_code == 0
        assert "Tokenizing" in result.output
        assert "Tokenized: 4 tokens" in result.output
