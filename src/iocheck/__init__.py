"""
iocheck - syntax checker for Java-style console I/O statements.

Validates print/println calls and Scanner/BufferedReader declarations
and reports human-readable diagnostics.
"""

from __future__ import annotations

from ._version import __version__
from .core import (
    CheckerConfig,
    CheckerError,
    CheckResult,
    ConfigError,
    LexicalError,
    ParseError,
    ParseReport,
    Parser,
    SourceError,
    StatementTrace,
    Token,
    TokenKind,
    check_file,
    check_text,
    load_config,
    parse_tokens,
    tokenize,
)

__all__ = [
    "__version__",
    "CheckResult",
    "CheckerConfig",
    "CheckerError",
    "ConfigError",
    "LexicalError",
    "ParseError",
    "ParseReport",
    "Parser",
    "SourceError",
    "StatementTrace",
    "Token",
    "TokenKind",
    "check_file",
    "check_text",
    "load_config",
    "parse_tokens",
    "tokenize",
]
