"""
Input statement parser mixin.

Grammar:

    scanner_decl  → "Scanner" IDENT "=" "new" "Scanner" "(" ("System" "." "in" | IDENT) ")" ";"
    reader_decl   → "BufferedReader" IDENT "=" "new" "BufferedReader"
                    "(" "new" "InputStreamReader" "(" "System" "." "in" ")" ")" ";"
    read_call     → TYPE IDENT "=" IDENT "." READ_METHOD "(" ")" ";"

The forms are tried in configured order, each as its own cursor transaction.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ..config import InputForm
from ..errors import ParseError
from ..lexer import TokenKind
from ..report import StatementForm, StatementTrace

logger = logging.getLogger(__name__)

STANDARD_INPUT = ("System", "in")

PRIMITIVE_TYPES = frozenset({"int", "double", "long", "float", "boolean", "char", "short", "byte"})

READ_METHODS = frozenset({"nextInt", "nextDouble", "nextLine", "readLine"})


def _error_rank(error: ParseError) -> tuple[float, float]:
    """Order errors by how far into the input they were raised."""
    if error.token is None:
        return (float("inf"), float("inf"))
    return (error.token.line, error.token.column)


class InputStatementParserMixin:
    """Parser mixin for Scanner/BufferedReader declarations and read calls."""

    if TYPE_CHECKING:
        pos: Any
        config: Any
        attempt: Any
        match_dotted: Any
        match_literal: Any
        match_kind: Any
        expect_literal: Any
        expect_kind: Any
        skip_insignificant: Any
        current_token: Any
        error: Any
        make_trace: Any

    def parse_input_statement(self) -> StatementTrace:
        """
        Parse an input declaration.

        Returns:
            Trace of the consumed statement

        Raises:
            ParseError: If no form matches. The error of the form that got
                furthest is raised; on a tie the earlier form wins. The
                cursor is left where it was before the call.
        """
        forms: dict[InputForm, Callable[[], None]] = {
            InputForm.SCANNER: self._parse_scanner,
            InputForm.BUFFERED_READER: self._parse_buffered_reader,
            InputForm.READ_CALL: self._parse_read_call,
        }

        failures: list[ParseError] = []
        for form in self.config.input_forms:
            try:
                with self.attempt():
                    self.skip_insignificant()
                    start = self.pos
                    forms[form]()
            except ParseError as e:
                logger.debug("Input form %s failed: %s", form.value, e.message)
                failures.append(e)
                continue
            return self.make_trace(start, StatementForm(form.value))

        if not failures:
            raise self.error("No input statement forms are enabled")
        raise max(failures, key=_error_rank)

    def _parse_scanner(self) -> None:
        """Scanner sc = new Scanner(System.in);"""
        self.expect_literal("Scanner", "Expected 'Scanner' or 'BufferedReader' declaration")
        self.expect_kind(TokenKind.IDENTIFIER, "Expected a variable name after 'Scanner'")
        self.expect_literal("=", "Expected '=' after Scanner variable name")
        self.expect_literal("new", "Expected 'new' after '='")
        self.expect_literal("Scanner", "Expected 'Scanner' after 'new'")
        self.expect_literal("(", "Expected '(' after 'new Scanner'")
        self.skip_insignificant()
        if not (self.match_dotted(STANDARD_INPUT) or self.match_kind(TokenKind.IDENTIFIER)):
            raise self.error("Expected 'System.in' or a variable as the Scanner source")
        self.expect_literal(")", "Expected ')' to close 'new Scanner('")
        self.expect_literal(";", "Expected semicolon at the end of Scanner declaration")

    def _parse_buffered_reader(self) -> None:
        """BufferedReader br = new BufferedReader(new InputStreamReader(System.in));"""
        self.expect_literal("BufferedReader", "Expected 'Scanner' or 'BufferedReader' declaration")
        self.expect_kind(TokenKind.IDENTIFIER, "Expected a variable name after 'BufferedReader'")
        self.expect_literal("=", "Expected '=' after BufferedReader variable name")
        self.expect_literal("new", "Expected 'new' after '='")
        self.expect_literal("BufferedReader", "Expected 'BufferedReader' after 'new'")
        self.expect_literal("(", "Expected '(' after 'new BufferedReader'")
        self.expect_literal("new", "Expected 'new InputStreamReader' inside 'new BufferedReader('")
        self.expect_literal("InputStreamReader", "Expected 'InputStreamReader' after 'new'")
        self.expect_literal("(", "Expected '(' after 'new InputStreamReader'")
        self.skip_insignificant()
        if not self.match_dotted(STANDARD_INPUT):
            raise self.error("Expected 'System.in' as the InputStreamReader source")
        self.expect_literal(")", "Expected ')' to close 'new InputStreamReader('")
        self.expect_literal(")", "Expected ')' to close 'new BufferedReader('")
        self.expect_literal(";", "Expected semicolon at the end of BufferedReader declaration")

    def _parse_read_call(self) -> None:
        """int n = sc.nextInt();"""
        self.skip_insignificant()
        token = self.current_token()
        is_type = token is not None and (
            token.kind == TokenKind.IDENTIFIER
            or (token.kind == TokenKind.KEYWORD and token.text in PRIMITIVE_TYPES)
        )
        if not is_type:
            raise self.error("Expected a type name to start a read declaration")
        self.pos += 1

        self.expect_kind(TokenKind.IDENTIFIER, f"Expected a variable name after '{token.text}'")
        self.expect_literal("=", "Expected '=' after variable name")
        self.expect_kind(TokenKind.IDENTIFIER, "Expected a reader variable after '='")
        self.expect_literal(".", "Expected '.' after reader variable")
        self.skip_insignificant()
        method = self.current_token()
        if method is None or method.text not in READ_METHODS:
            raise self.error("Expected one of " + ", ".join(sorted(READ_METHODS)))
        self.pos += 1
        self.expect_literal("(", f"Expected '(' after '{method.text}'")
        self.expect_literal(")", f"Expected ')' after '{method.text}('")
        self.expect_literal(";", "Expected semicolon at the end of read declaration")
