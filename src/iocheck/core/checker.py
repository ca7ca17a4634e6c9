"""
Check pipeline: tokenize, parse, and collect diagnostics.

Bad source text never raises out of this module; undecodable input and
lexical errors are folded into the CheckResult alongside syntax errors.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import CheckerConfig
from .errors import LexicalError, SourceError
from .lexer import tokenize
from .parser_impl import parse_tokens
from .report import CheckResult

logger = logging.getLogger(__name__)


def decode_source(raw: bytes, file: Path | None = None) -> str:
    """
    Decode source bytes as UTF-8.

    Raises:
        SourceError: Located at the first byte that is not valid UTF-8
            (the column counts bytes)
    """
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        line = raw.count(b"\n", 0, e.start) + 1
        column = e.start - raw.rfind(b"\n", 0, e.start)
        message = f"Source is not valid UTF-8: {e.reason} (byte 0x{raw[e.start]:02x})"
        raise SourceError(message, line, column, file) from e


def check_text(
    text: str,
    config: CheckerConfig | None = None,
    source_name: str = "<input>",
    file: Path | None = None,
) -> CheckResult:
    """
    Check a source buffer.

    Args:
        text: Source text
        config: Optional checker configuration
        source_name: Name used in log messages and diagnostics
        file: Optional path of the source (for error context)

    Returns:
        CheckResult with tokens, parse report, and any lexical error
    """
    try:
        tokens = tokenize(text, file)
    except LexicalError as e:
        logger.warning("%s: lexical error at %d:%d", source_name, e.line, e.column)
        return CheckResult(source_name=source_name, lexical_error=e)

    report = parse_tokens(tokens, config)
    logger.info(
        "%s: %d statement(s) parsed, %d syntax error(s)",
        source_name,
        report.statement_count,
        len(report.diagnostics),
    )
    return CheckResult(source_name=source_name, tokens=tokens, report=report)


def check_file(path: Path, config: CheckerConfig | None = None) -> CheckResult:
    """
    Check a source file.

    Args:
        path: File to read as UTF-8
        config: Optional checker configuration

    Returns:
        CheckResult for the file contents, or carrying a SourceError when
        the file is not valid UTF-8
    """
    try:
        text = decode_source(path.read_bytes(), path)
    except SourceError as e:
        logger.warning("%s: %s", path, e.message)
        return CheckResult(source_name=str(path), source_error=e)
    return check_text(text, config, source_name=str(path), file=path)
