"""
Result types for iocheck runs.

A successful statement parse yields a StatementTrace: the token span the
grammar recognized, with no further structure synthesized. A parse run
yields a ParseReport; a full check (tokenize + parse) yields a CheckResult.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from .errors import Diagnostic, LexicalError, ParseError, SourceError
from .lexer import Token, TokenKind

TRACE_HEADER = "Parsed statement:"
SUCCESS_SUMMARY = "Parsing successful. Total statements parsed: {count}"
EMPTY_SUMMARY = "No valid statements parsed."


class StatementForm(StrEnum):
    """Grammar form a statement was recognized as."""

    PRINT = "print"
    PRINTLN = "println"
    SCANNER = "scanner"
    BUFFERED_READER = "buffered_reader"
    READ_CALL = "read_call"


def render_token(token: Token) -> str:
    """Render one trace line for a token."""
    text = "\\n" if token.kind == TokenKind.NEWLINE else token.text
    return f'  Token Type: {token.kind.value}, Value: "{text}"'


class StatementTrace(BaseModel):
    """
    Token span of one successfully parsed statement.

    Attributes:
        start: Index of the first token of the statement
        end: Index one past the terminating semicolon
        form: Which grammar form matched
        tokens: The tokens in [start, end)
    """

    model_config = ConfigDict(frozen=True)

    start: int
    end: int
    form: StatementForm
    tokens: list[Token] = Field(default_factory=list)

    @property
    def line(self) -> int:
        return self.tokens[0].line if self.tokens else 0

    @property
    def text(self) -> str:
        """Statement tokens joined back into compact source form."""
        return " ".join(t.text for t in self.tokens if t.kind != TokenKind.NEWLINE)

    def render(self) -> str:
        lines = [TRACE_HEADER]
        lines.extend(render_token(token) for token in self.tokens)
        return "\n".join(lines)


class ParseReport(BaseModel):
    """Outcome of one parse_all run."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    traces: list[StatementTrace] = Field(default_factory=list)
    diagnostics: list[ParseError] = Field(default_factory=list)
    recovery_steps: int = 0

    @property
    def statement_count(self) -> int:
        return len(self.traces)

    @property
    def summary(self) -> str:
        if self.statement_count:
            return SUCCESS_SUMMARY.format(count=self.statement_count)
        return EMPTY_SUMMARY


class CheckResult(BaseModel):
    """Outcome of checking one source buffer."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    source_name: str = "<input>"
    tokens: list[Token] = Field(default_factory=list)
    report: ParseReport | None = None
    lexical_error: LexicalError | None = None
    source_error: SourceError | None = None

    @property
    def ok(self) -> bool:
        if self.source_error is not None or self.lexical_error is not None:
            return False
        return self.report is not None and not self.report.diagnostics

    @property
    def statement_count(self) -> int:
        return self.report.statement_count if self.report else 0

    @property
    def summary(self) -> str:
        if self.report is None:
            return EMPTY_SUMMARY
        return self.report.summary

    @property
    def end_token(self) -> Token | None:
        """Last significant token, where end-of-input errors are reported."""
        for token in reversed(self.tokens):
            if token.kind != TokenKind.NEWLINE:
                return token
        return None

    @property
    def diagnostics(self) -> list[Diagnostic]:
        if self.source_error is not None:
            return [Diagnostic.from_error(self.source_error)]
        if self.lexical_error is not None:
            return [Diagnostic.from_error(self.lexical_error)]
        if self.report is None:
            return []
        end_token = self.end_token
        return [Diagnostic.from_error(error, end_token) for error in self.report.diagnostics]
