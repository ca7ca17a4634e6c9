"""
Base parser class for console I/O statements.

Provides the token cursor and the matching primitives used by all parser mixins.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import AbstractContextManager, contextmanager
from typing import Protocol, runtime_checkable

from ..config import CheckerConfig
from ..errors import ParseError
from ..lexer import Token, TokenKind
from ..report import StatementForm, StatementTrace

logger = logging.getLogger(__name__)

INSIGNIFICANT_KINDS = frozenset({TokenKind.NEWLINE})


@runtime_checkable
class ParserProtocol(Protocol):
    """
    Protocol defining the interface available to parser mixins.

    This allows mypy to understand that mixins will have access to
    BaseParser methods when combined in the final Parser class.
    """

    tokens: list[Token]
    pos: int
    config: CheckerConfig

    def current_token(self) -> Token | None: ...
    def advance(self) -> Token | None: ...
    def at_end(self) -> bool: ...
    def match_literal(self, value: str) -> bool: ...
    def match_kind(self, *kinds: TokenKind) -> bool: ...
    def match_dotted(self, words: Sequence[str] | str) -> bool: ...
    def expect_literal(self, value: str, message: str) -> Token: ...
    def skip_insignificant(self) -> None: ...
    def attempt(self) -> AbstractContextManager[None]: ...
    def error(self, message: str) -> ParseError: ...
    def make_trace(self, start: int, form: StatementForm) -> StatementTrace: ...

    # Cross-mixin grammar rules
    def parse_expression(self) -> bool: ...
    def parse_term(self) -> bool: ...


class BaseParser:
    """
    Base parser class with cursor manipulation utilities.

    The cursor (`pos`) only moves forward, except when a failed attempt
    rolls it back to a value saved before that attempt.
    """

    def __init__(self, tokens: list[Token], config: CheckerConfig | None = None):
        """
        Initialize parser.

        Args:
            tokens: List of tokens from lexer
            config: Optional checker configuration
        """
        self.tokens = tokens
        self.config = config or CheckerConfig()
        self.pos = 0

    def current_token(self) -> Token | None:
        """Get current token, or None at end of input."""
        if self.pos >= len(self.tokens):
            return None
        return self.tokens[self.pos]

    def peek_token(self, offset: int = 1) -> Token | None:
        """Peek ahead at token."""
        pos = self.pos + offset
        if pos >= len(self.tokens):
            return None
        return self.tokens[pos]

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def advance(self) -> Token | None:
        """Consume and return current token."""
        token = self.current_token()
        if token is not None:
            self.pos += 1
        return token

    def match_literal(self, value: str) -> bool:
        """Consume the current token iff its text equals value."""
        token = self.current_token()
        if token is not None and token.text == value:
            self.pos += 1
            return True
        return False

    def match_kind(self, *kinds: TokenKind) -> bool:
        """Consume the current token iff it is one of the given kinds."""
        token = self.current_token()
        if token is not None and token.kind in kinds:
            self.pos += 1
            return True
        return False

    def match_dotted(self, words: Sequence[str] | str) -> bool:
        """
        Match a dotted name such as `System.in` as a unit.

        Each word must be followed by a `.` separator token except the
        last. On any mismatch the cursor is restored and nothing is consumed.
        """
        if isinstance(words, str):
            words = words.split(".")

        saved = self.pos
        for i, word in enumerate(words):
            if i > 0:
                self.skip_insignificant()
                if not self.match_literal("."):
                    self.pos = saved
                    return False
                self.skip_insignificant()
            if not self.match_literal(word):
                self.pos = saved
                return False
        return True

    def expect_literal(self, value: str, message: str) -> Token:
        """
        Expect a token with the given text and consume it.

        Raises:
            ParseError: If the current token doesn't match
        """
        self.skip_insignificant()
        token = self.current_token()
        if token is None or token.text != value:
            raise self.error(message)
        self.pos += 1
        return token

    def expect_kind(self, kind: TokenKind, message: str) -> Token:
        """
        Expect a token of the given kind and consume it.

        Raises:
            ParseError: If the current token doesn't match
        """
        self.skip_insignificant()
        token = self.current_token()
        if token is None or token.kind != kind:
            raise self.error(message)
        self.pos += 1
        return token

    def skip_insignificant(self) -> None:
        """Skip any NEWLINE tokens."""
        while (token := self.current_token()) is not None and token.kind in INSIGNIFICANT_KINDS:
            self.pos += 1

    @contextmanager
    def attempt(self) -> Iterator[None]:
        """
        Run a parse attempt as a transaction on the cursor.

        If the body raises ParseError the cursor is rolled back to its
        value on entry and the error propagates; otherwise the advance is kept.
        """
        saved = self.pos
        try:
            yield
        except ParseError:
            logger.debug("Backtracking from token %d to %d", self.pos, saved)
            self.pos = saved
            raise

    def error(self, message: str) -> ParseError:
        """Build a ParseError located at the current token."""
        return ParseError(message, self.current_token())

    def make_trace(self, start: int, form: StatementForm) -> StatementTrace:
        """Build the trace for the tokens consumed since start."""
        return StatementTrace(start=start, end=self.pos, form=form, tokens=self.tokens[start : self.pos])
