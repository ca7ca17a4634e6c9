"""Shared pytest fixtures for iocheck tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from iocheck.core.config import CheckerConfig
from iocheck.core.lexer import tokenize
from iocheck.core.parser_impl import Parser

SCANNER_DECL = "Scanner sc = new Scanner(System.in);"
HELLO_WORLD = 'System.out.println("Hello, World!");'


@pytest.fixture
def make_parser() -> Callable[..., Parser]:
    """Return a factory that tokenizes source text and wraps it in a Parser."""

    def _make(source: str, config: CheckerConfig | None = None) -> Parser:
        return Parser(tokenize(source), config)

    return _make


@pytest.fixture
def two_statement_source() -> str:
    """A Scanner declaration followed by a println call."""
    return f"{SCANNER_DECL}\n{HELLO_WORLD}\n"


@pytest.fixture
def source_file(tmp_path: Path, two_statement_source: str) -> Path:
    """Write the two-statement source to a file."""
    path = tmp_path / "Main.java"
    path.write_text(two_statement_source, encoding="utf-8")
    return path
