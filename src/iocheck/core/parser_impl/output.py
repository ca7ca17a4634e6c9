"""
Output statement parser mixin.

Grammar:

    output_stmt → "System" "." MEMBER "." ("print" | "println") "(" expression? ")" ";"

MEMBER is one of the configured output members (out, err by default).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..report import StatementForm, StatementTrace

OUTPUT_OBJECT = "System"
PRINT_METHODS = {"print": StatementForm.PRINT, "println": StatementForm.PRINTLN}


class OutputStatementParserMixin:
    """Parser mixin for print/println calls."""

    if TYPE_CHECKING:
        pos: Any
        config: Any
        attempt: Any
        match_dotted: Any
        match_literal: Any
        expect_literal: Any
        skip_insignificant: Any
        parse_expression: Any
        current_token: Any
        error: Any
        make_trace: Any

    def parse_output_statement(self) -> StatementTrace:
        """
        Parse a `System.out.print(...)` or `System.out.println(...)` statement.

        Returns:
            Trace of the consumed statement

        Raises:
            ParseError: If the statement is malformed; the cursor is left
                where it was before the call
        """
        with self.attempt():
            self.skip_insignificant()
            start = self.pos
            stream = self._match_output_stream()
            if stream is None:
                prefix = f"{OUTPUT_OBJECT}.{self.config.output_members[0]}"
                raise self.error(f"Expected '{prefix}.print' or '{prefix}.println'")

            self.expect_literal(".", f"Expected '.' after '{stream}'")
            self.skip_insignificant()
            token = self.current_token()
            if token is None or token.text not in PRINT_METHODS:
                raise self.error(f"Expected 'print' or 'println' after '{stream}.'")
            self.pos += 1
            method = token.text
            call = f"{stream}.{method}"

            self.expect_literal("(", f"Expected '(' after '{call}'")
            # The argument is optional: print() and println() are both accepted
            if self.parse_expression():
                self.expect_literal(")", "Expected closing parenthesis after expression")
            else:
                self.expect_literal(")", f"Expected an expression or ')' after '{call}('")
            self.expect_literal(";", f"Expected ';' at the end of {method} statement")

        return self.make_trace(start, PRINT_METHODS[method])

    def _match_output_stream(self) -> str | None:
        """Match `System.<member>` for the first configured member that fits."""
        for member in self.config.output_members:
            if self.match_dotted((OUTPUT_OBJECT, member)):
                return f"{OUTPUT_OBJECT}.{member}"
        return None
