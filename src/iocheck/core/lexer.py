"""
Lexer/Tokenizer for Java-style console I/O statements.

Converts raw source text into a list of tokens with source location tracking.
Words are scanned in full and then classified by set lookup in a fixed
priority order (keyword, I/O class, I/O method, boolean, identifier), so
`System` is always an I/O class name while `Systems` is an identifier.
Newlines are kept as NEWLINE tokens; other whitespace is dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from .errors import LexicalError, LexicalErrorKind

logger = logging.getLogger(__name__)


class TokenKind(StrEnum):
    """Token kinds produced by the lexer."""

    KEYWORD = "KEYWORD"
    IO_CLASS = "IO_CLASS"
    IO_METHOD = "IO_METHOD"
    IDENTIFIER = "IDENTIFIER"
    OPERATOR = "OPERATOR"
    SEPARATOR = "SEPARATOR"
    STRING_LITERAL = "STRING_LITERAL"
    INTEGER_LITERAL = "INTEGER_LITERAL"
    FLOAT_LITERAL = "FLOAT_LITERAL"
    BOOLEAN_LITERAL = "BOOLEAN_LITERAL"
    CHAR_LITERAL = "CHAR_LITERAL"
    NEWLINE = "NEWLINE"
    UNKNOWN = "UNKNOWN"


KEYWORDS = frozenset(
    {
        "abstract",
        "assert",
        "boolean",
        "break",
        "byte",
        "case",
        "catch",
        "char",
        "class",
        "const",
        "continue",
        "default",
        "do",
        "double",
        "else",
        "enum",
        "extends",
        "final",
        "finally",
        "float",
        "for",
        "goto",
        "if",
        "implements",
        "import",
        "instanceof",
        "int",
        "interface",
        "long",
        "native",
        "new",
        "package",
        "private",
        "protected",
        "public",
        "return",
        "short",
        "static",
        "strictfp",
        "super",
        "switch",
        "synchronized",
        "this",
        "throw",
        "throws",
        "transient",
        "try",
        "void",
        "volatile",
        "while",
    }
)

IO_CLASS_NAMES = frozenset({"System", "Scanner", "BufferedReader", "PrintWriter"})

IO_METHOD_NAMES = frozenset(
    {"out", "in", "err", "println", "print", "readLine", "nextInt", "nextDouble", "nextLine"}
)

BOOLEAN_LITERALS = frozenset({"true", "false"})

# Checked before the single-character operators (maximal munch)
TWO_CHAR_OPERATORS = frozenset({">=", "<=", "==", "!=", "&&", "||"})

OPERATORS = frozenset("+-*/=<>!&|^%~?")

SEPARATORS = frozenset("(){}[].;,")

CHAR_ESCAPES = frozenset('nrtbf"\'')

# Dropped without emitting a token; "\n" is handled separately
WHITESPACE = frozenset(" \t\r\f\v")

# Word classification, highest priority first
WORD_CLASSES: tuple[tuple[frozenset[str], TokenKind], ...] = (
    (KEYWORDS, TokenKind.KEYWORD),
    (IO_CLASS_NAMES, TokenKind.IO_CLASS),
    (IO_METHOD_NAMES, TokenKind.IO_METHOD),
    (BOOLEAN_LITERALS, TokenKind.BOOLEAN_LITERAL),
)


def classify_word(word: str) -> TokenKind:
    """Classify a scanned word by set lookup in priority order."""
    for members, kind in WORD_CLASSES:
        if word in members:
            return kind
    return TokenKind.IDENTIFIER


def _is_word_start(ch: str) -> bool:
    return ch.isascii() and (ch.isalpha() or ch in "_$")


def _is_word_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch in "_$")


@dataclass(frozen=True)
class Token:
    """
    A single token of source text.

    Attributes:
        kind: Kind of token
        text: The matched substring
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    kind: TokenKind
    text: str
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.kind.value}, {self.text!r}, {self.line}:{self.column})"


class Lexer:
    """
    Lexer for console I/O statements.

    Converts source text into a list of tokens with line/column tracking.
    """

    def __init__(self, text: str, file: Path | None = None):
        """
        Initialize lexer.

        Args:
            text: Source text to tokenize
            file: Optional source file path (for error reporting)
        """
        self.text = text
        self.file = file
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def peek_char(self, offset: int = 1) -> str | None:
        """Peek ahead at character."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return None
        return self.text[pos]

    def advance(self) -> str:
        """Consume one character, updating line/column."""
        ch = self.text[self.pos]
        if ch == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1
        return ch

    def source_line(self, line: int) -> str:
        """Return the text of a 1-indexed source line."""
        lines = self.text.split("\n")
        if 1 <= line <= len(lines):
            return lines[line - 1].rstrip("\r")
        return ""

    def error(
        self,
        kind: LexicalErrorKind,
        message: str,
        text: str,
        line: int,
        column: int,
    ) -> LexicalError:
        """Build a LexicalError with the echoed source line and fix hints."""
        return LexicalError(
            kind,
            message,
            text,
            line,
            column,
            source_line=self.source_line(line),
            hints=suggest_fixes(kind, text),
            file=self.file,
        )

    def emit(self, kind: TokenKind, text: str, line: int, column: int) -> None:
        self.tokens.append(Token(kind, text, line, column))

    def read_word(self) -> str:
        """Read a full identifier-shaped word."""
        start = self.pos
        while (ch := self.current_char()) is not None and _is_word_char(ch):
            self.advance()
        return self.text[start : self.pos]

    def read_string(self, line: int, column: int) -> str:
        """Read a double-quoted string literal, quotes included."""
        start = self.pos
        self.advance()  # opening quote
        while (ch := self.current_char()) is not None and ch != '"':
            self.advance()

        if self.current_char() is None:
            raise self.error(
                LexicalErrorKind.UNTERMINATED_STRING,
                "Unterminated string literal",
                self.text[start : start + 1],
                line,
                column,
            )

        self.advance()  # closing quote
        return self.text[start : self.pos]

    def read_number(self, line: int, column: int) -> tuple[str, TokenKind]:
        """
        Read an integer or float literal.

        A float needs digits on both sides of the point. A digit run glued to
        identifier characters (e.g. `123var`) is malformed.
        """
        start = self.pos
        kind = TokenKind.INTEGER_LITERAL
        while (ch := self.current_char()) is not None and ch.isdigit():
            self.advance()

        nxt = self.peek_char()
        if self.current_char() == "." and nxt is not None and nxt.isdigit():
            kind = TokenKind.FLOAT_LITERAL
            self.advance()
            while (ch := self.current_char()) is not None and ch.isdigit():
                self.advance()

        ch = self.current_char()
        if ch is not None and _is_word_char(ch):
            self.read_word()
            raise self.error(
                LexicalErrorKind.MALFORMED_NUMBER,
                "Malformed numeric literal",
                self.text[start : self.pos],
                line,
                column,
            )

        return self.text[start : self.pos], kind

    def tokenize(self) -> list[Token]:
        """
        Tokenize the entire source text.

        Returns:
            List of tokens in source order (no EOF marker)

        Raises:
            LexicalError: If any input matches no lexical category
        """
        while (ch := self.current_char()) is not None:
            token_line = self.line
            token_col = self.column

            # Words: keywords, I/O names, booleans, identifiers
            if _is_word_start(ch):
                word = self.read_word()
                self.emit(classify_word(word), word, token_line, token_col)

            # Operators (two-character forms first)
            elif ch + (self.peek_char() or "") in TWO_CHAR_OPERATORS:
                text = self.advance() + self.advance()
                self.emit(TokenKind.OPERATOR, text, token_line, token_col)

            elif ch in OPERATORS:
                self.advance()
                self.emit(TokenKind.OPERATOR, ch, token_line, token_col)

            elif ch in SEPARATORS:
                self.advance()
                self.emit(TokenKind.SEPARATOR, ch, token_line, token_col)

            # Strings
            elif ch == '"':
                text = self.read_string(token_line, token_col)
                self.emit(TokenKind.STRING_LITERAL, text, token_line, token_col)

            # Numbers
            elif ch.isdigit():
                text, kind = self.read_number(token_line, token_col)
                self.emit(kind, text, token_line, token_col)

            # Escape sequences outside strings (\n, \t, ...)
            elif ch == "\\" and self.peek_char() in CHAR_ESCAPES:
                text = self.advance() + self.advance()
                self.emit(TokenKind.CHAR_LITERAL, text, token_line, token_col)

            elif ch == "\n":
                self.advance()
                self.emit(TokenKind.NEWLINE, "\n", token_line, token_col)

            elif ch in WHITESPACE:
                self.advance()

            else:
                raise self.error(
                    LexicalErrorKind.UNKNOWN_CHARACTER,
                    f"Unexpected character: {ch!r}",
                    ch,
                    token_line,
                    token_col,
                )

        logger.debug("Tokenized %d characters into %d tokens", len(self.text), len(self.tokens))
        return self.tokens


def suggest_fixes(kind: LexicalErrorKind, text: str) -> list[str]:
    """Return a short list of likely fixes for a lexical error."""
    if kind == LexicalErrorKind.UNTERMINATED_STRING:
        return [
            'add the closing double quote (")',
            "string literals cannot contain an unescaped double quote",
        ]
    if kind == LexicalErrorKind.MALFORMED_NUMBER:
        return [
            "identifiers cannot start with a digit",
            "separate the number from the following name with an operator or space",
        ]

    hints: list[str] = []
    if text in ("'", "`"):
        hints.append("use double quotes for string literals")
    elif text == "#":
        hints.append("comments use // or /* */, which are not supported here")
    elif text == "@":
        hints.append("annotations are not supported in statements")
    elif text == "\\":
        hints.append('escape sequences are \\n, \\r, \\t, \\b, \\f, \\" and \\\'')
    elif not text.isascii():
        hints.append("identifiers must use ASCII letters, digits, '_' or '$'")
    hints.append("remove the stray character")
    return hints


def tokenize(text: str, file: Path | None = None) -> list[Token]:
    """
    Convenience function to tokenize source text.

    Args:
        text: Source text
        file: Optional source file path

    Returns:
        List of tokens
    """
    lexer = Lexer(text, file)
    return lexer.tokenize()
