"""
Shared pytest fixtures for the TR lexer tests.
"""

from pathlib import Path

import pytest

from trlang.config import set_default_config


@pytest.fixture(autouse=True)
def reset_default_config(monkeypatch):
    """Isolate every test from TRLEX_* variables and cached config."""
    monkeypatch.delenv("TRLEX_ENCODING", raising=False)
    monkeypatch.delenv("TRLEX_NO_CHECK", raising=False)
    set_default_config(None)
    yield
    set_default_config(None)


@pytest.fixture
def write_source(tmp_path):
    """Write TR source text to a file and return its path."""
    def _write(text: str, name: str = "program.tr") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
