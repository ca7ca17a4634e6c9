"""
iocheck core: lexer, parser, reporting, and configuration.
"""

from .checker import check_file, check_text
from .config import CheckerConfig, load_config
from .errors import CheckerError, ConfigError, LexicalError, ParseError, SourceError
from .lexer import Token, TokenKind, tokenize
from .parser_impl import Parser, parse_tokens
from .report import CheckResult, ParseReport, StatementTrace

__all__ = [
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
