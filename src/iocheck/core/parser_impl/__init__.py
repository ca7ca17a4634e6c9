"""
iocheck statement parser package.

The parser is built from mixins that separate the grammar by statement kind.

The main exports are:
- Parser: The complete parser class
- parse_tokens: Convenience function to run the statement loop over a token list

Usage:
    from iocheck.core.parser_impl import parse_tokens

    report = parse_tokens(tokenize(text))
"""

from __future__ import annotations

import logging

from ..config import CheckerConfig
from ..errors import ParseError
from ..lexer import Token
from ..report import ParseReport, StatementTrace
from .base import BaseParser
from .expressions import ExpressionParserMixin
from .input import InputStatementParserMixin
from .output import OutputStatementParserMixin

logger = logging.getLogger(__name__)


class Parser(
    BaseParser,
    ExpressionParserMixin,
    OutputStatementParserMixin,
    InputStatementParserMixin,
):
    """
    Complete statement parser.

    - ExpressionParserMixin: call-argument expressions
    - OutputStatementParserMixin: System.out.print / println calls
    - InputStatementParserMixin: Scanner / BufferedReader declarations and read calls
    """

    def parse_statement(self) -> StatementTrace:
        """
        Parse one statement: an output statement, else an input statement.

        When both fail, the output statement's error is raised even if the
        input statement's error is more specific.
        """
        try:
            return self.parse_output_statement()
        except ParseError as output_error:
            try:
                return self.parse_input_statement()
            except ParseError as input_error:
                logger.debug("Input alternative also failed: %s", input_error.message)
                raise output_error from None

    def parse_all(self) -> ParseReport:
        """
        Parse statements until the token list is exhausted.

        A failed statement is recorded and the cursor moves on by exactly
        one token, so the loop ends after at most len(tokens) recoveries.

        Returns:
            ParseReport with one trace per parsed statement and every syntax error
        """
        report = ParseReport()

        while True:
            self.skip_insignificant()
            if self.at_end():
                break

            try:
                trace = self.parse_statement()
            except ParseError as e:
                report.diagnostics.append(e)
                report.recovery_steps += 1
                logger.debug("Recovering at token %d: %s", self.pos, e.message)
                self.advance()
                continue

            report.traces.append(trace)
            logger.debug("Parsed %s statement at tokens [%d, %d)", trace.form.value, trace.start, trace.end)

        return report


def parse_tokens(tokens: list[Token], config: CheckerConfig | None = None) -> ParseReport:
    """
    Convenience function to parse a token list.

    Args:
        tokens: Tokens from the lexer
        config: Optional checker configuration

    Returns:
        ParseReport for the whole token list
    """
    parser = Parser(tokens, config)
    return parser.parse_all()


__all__ = [
    "Parser",
    "parse_tokens",
]
