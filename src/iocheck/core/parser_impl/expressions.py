"""
Expression parser mixin.

Expressions only appear as opaque call arguments, so the grammar is flat:
no precedence and no evaluation, just a check that terms and operators
alternate.

Grammar:

    expression → term (OPERATOR term)*
    term       → UNARY_OP* (STRING | BOOLEAN | IDENTIFIER | INTEGER | FLOAT
                            | CHAR | "(" expression ")")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..lexer import TokenKind

BINARY_OPERATORS = frozenset(
    {
        "+",
        "-",
        "*",
        "/",
        "=",
        "<",
        ">",
        "!",
        "&",
        "|",
        "^",
        "%",
        "~",
        "?",
        ">=",
        "<=",
        "==",
        "!=",
        "&&",
        "||",
    }
)

UNARY_OPERATORS = frozenset({"-", "+", "!", "~"})

TERM_KINDS = (
    TokenKind.STRING_LITERAL,
    TokenKind.BOOLEAN_LITERAL,
    TokenKind.IDENTIFIER,
    TokenKind.INTEGER_LITERAL,
    TokenKind.FLOAT_LITERAL,
    TokenKind.CHAR_LITERAL,
)


class ExpressionParserMixin:
    """Parser mixin for call-argument expressions."""

    if TYPE_CHECKING:
        pos: Any
        current_token: Any
        match_kind: Any
        match_literal: Any
        skip_insignificant: Any
        error: Any

    def parse_expression(self) -> bool:
        """
        Parse an expression if one starts at the cursor.

        Returns:
            False, with nothing consumed, when no term starts here

        Raises:
            ParseError: If an operator is not followed by a term
        """
        if not self.parse_term():
            return False

        while True:
            saved = self.pos
            self.skip_insignificant()
            token = self.current_token()
            if token is None or token.kind != TokenKind.OPERATOR or token.text not in BINARY_OPERATORS:
                self.pos = saved
                return True
            self.pos += 1
            if not self.parse_term():
                raise self.error(f"Expected a term after operator '{token.text}'")

    def parse_term(self) -> bool:
        """
        Parse a single term if one starts at the cursor.

        Returns:
            False, with nothing consumed, when the current token cannot start a term

        Raises:
            ParseError: If a parenthesized expression is empty or unclosed
        """
        saved = self.pos
        self.skip_insignificant()

        while (token := self.current_token()) is not None and (
            token.kind == TokenKind.OPERATOR and token.text in UNARY_OPERATORS
        ):
            self.pos += 1
            self.skip_insignificant()

        if self.match_kind(*TERM_KINDS):
            return True

        if self.match_literal("("):
            if not self.parse_expression():
                raise self.error("Expected an expression after '('")
            self.skip_insignificant()
            if not self.match_literal(")"):
                raise self.error("Expected ')' to close parenthesized expression")
            return True

        self.pos = saved
        return False
