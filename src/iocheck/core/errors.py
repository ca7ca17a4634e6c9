"""
Error types for iocheck tokenizing, parsing, and configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .lexer import Token


class CheckerError(Exception):
    """Base exception for all iocheck errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ConfigError(CheckerError):
    """
    Raised when a configuration file cannot be read or validated.

    Examples:
    - Malformed TOML
    - Unknown configuration keys
    - Values of the wrong type
    """

    pass


@dataclass
class ErrorContext:
    """
    Source location of an error.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source line echoed under the location
        file: Optional path of the checked file
    """

    line: int
    column: int
    snippet: str | None = None
    file: Path | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "Main.java:3:14"
        """
        location = f"{self.line}:{self.column}"
        if self.file:
            location = f"{self.file}:{location}"

        if self.snippet is not None:
            return f"{location}\n{self.format_snippet()}"
        return location

    def format_snippet(self, indent: str = "    ") -> str:
        """Echo the source line with a caret under the error column."""
        if self.snippet is None:
            return ""
        marker = " " * (self.column - 1) + "^"
        return f"{indent}{self.snippet}\n{indent}{marker}"


class LexicalErrorKind(StrEnum):
    """Reasons a tokenize call can fail."""

    UNKNOWN_CHARACTER = "unknown_character"
    UNTERMINATED_STRING = "unterminated_string"
    MALFORMED_NUMBER = "malformed_number"


class LexicalError(CheckerError):
    """
    Raised when source text contains input no lexical category accepts.

    A lexical error aborts the whole tokenize call; the caller gets no
    partial token list.
    """

    def __init__(
        self,
        kind: LexicalErrorKind,
        message: str,
        text: str,
        line: int,
        column: int,
        source_line: str = "",
        hints: list[str] | None = None,
        file: Path | None = None,
    ):
        self.kind = kind
        self.text = text
        self.line = line
        self.column = column
        self.source_line = source_line
        self.hints = hints or []
        self.location = ErrorContext(line=line, column=column, snippet=source_line, file=file)
        super().__init__(message, self.location)

    def _format_message(self) -> str:
        lines = [
            f"Lexical error at line {self.line} (column {self.column}): {self.message}",
            self.location.format_snippet(),
        ]
        if self.hints:
            lines.append("Possible fixes:")
            lines.extend(f"  - {hint}" for hint in self.hints)
        return "\n".join(lines)


class ParseError(CheckerError):
    """
    Raised when a statement does not match the statement grammar.

    Parse errors are recoverable: the statement loop records them and
    resumes one token further on.
    """

    def __init__(self, message: str, token: Token | None = None):
        self.token = token
        self.line = token.line if token else None
        self.column = token.column if token else None
        context = ErrorContext(line=token.line, column=token.column) if token else None
        super().__init__(message, context)

    def _format_message(self) -> str:
        if self.token is None:
            return f"Syntax error at end of input: {self.message}"
        return (
            f"Syntax error at line {self.token.line} (column {self.token.column}): "
            f"{self.message} (Found: '{self.token.text}')"
        )


class SourceError(CheckerError):
    """
    Raised when a source file cannot be decoded as UTF-8 text.

    Like lexical errors, it is folded into the check result rather than
    propagated out of the checker pipeline.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        file: Path | None = None,
    ):
        self.line = line
        self.column = column
        context = None
        if line is not None and column is not None:
            context = ErrorContext(line=line, column=column, file=file)
        super().__init__(message, context)


@dataclass
class Diagnostic:
    """
    A reportable problem in a form every output format can render.

    Attributes:
        severity: Always "error" for now; kept for the vscode format
        message: The full diagnostic text
        line: Line number, or None when no location is known
        column: Column number, or None when no location is known
    """

    message: str
    line: int | None = None
    column: int | None = None
    severity: str = "error"
    hints: list[str] = field(default_factory=list)

    @classmethod
    def from_error(
        cls,
        error: LexicalError | ParseError | SourceError,
        end_token: Token | None = None,
    ) -> Diagnostic:
        """
        Build a diagnostic from an error.

        Errors raised at end of input carry no location; they are placed at
        `end_token` (the last token of the source) when one is given.
        """
        hints = error.hints if isinstance(error, LexicalError) else []
        line, column = error.line, error.column
        if line is None and end_token is not None:
            line, column = end_token.line, end_token.column
        return cls(message=str(error), line=line, column=column, hints=hints)
