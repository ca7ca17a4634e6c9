"""Tests for the iocheck lexer.

Covers:
- Word classification priority (keywords, I/O names, booleans, identifiers)
- Operators, separators, literals
- Line/column tracking and NEWLINE tokens
- Lexical errors and their rendered context
"""

from __future__ import annotations

import pytest

from iocheck.core.errors import LexicalError, LexicalErrorKind
from iocheck.core.lexer import Lexer, Token, TokenKind, classify_word, tokenize


def kinds(source: str) -> list[TokenKind]:
    return [t.kind for t in tokenize(source)]


class TestHelloWorld:
    """The canonical println statement."""

    def test_kinds_and_texts(self) -> None:
        tokens = tokenize('System.out.println("Hello, World!");')
        assert [(t.kind, t.text) for t in tokens] == [
            (TokenKind.IO_CLASS, "System"),
            (TokenKind.SEPARATOR, "."),
            (TokenKind.IO_METHOD, "out"),
            (TokenKind.SEPARATOR, "."),
            (TokenKind.IO_METHOD, "println"),
            (TokenKind.SEPARATOR, "("),
            (TokenKind.STRING_LITERAL, '"Hello, World!"'),
            (TokenKind.SEPARATOR, ")"),
            (TokenKind.SEPARATOR, ";"),
        ]

    def test_columns(self) -> None:
        tokens = tokenize('System.out.println("Hello, World!");')
        assert [t.column for t in tokens] == [1, 7, 8, 11, 12, 19, 20, 35, 36]
        assert all(t.line == 1 for t in tokens)

    def test_no_newline_or_unknown(self) -> None:
        found = set(kinds('System.out.println("Hello, World!");'))
        assert TokenKind.NEWLINE not in found
        assert TokenKind.UNKNOWN not in found


class TestClassification:
    """Words are classified by set lookup in priority order."""

    def test_io_class_beats_identifier(self) -> None:
        assert kinds("System Systems") == [TokenKind.IO_CLASS, TokenKind.IDENTIFIER]

    def test_variable_named_like_io_class_is_still_io_class(self) -> None:
        tokens = tokenize("Scanner System")
        assert tokens[1].kind == TokenKind.IO_CLASS

    def test_prefix_of_longer_word_is_not_split(self) -> None:
        # Longest word wins, then reclassification
        tokens = tokenize("interval truex output Scanner2")
        assert [t.kind for t in tokens] == [TokenKind.IDENTIFIER] * 4
        assert [t.text for t in tokens] == ["interval", "truex", "output", "Scanner2"]

    def test_keywords(self) -> None:
        assert kinds("new int while class") == [TokenKind.KEYWORD] * 4

    def test_io_methods(self) -> None:
        assert kinds("out in err print println readLine nextInt") == [TokenKind.IO_METHOD] * 7

    def test_booleans(self) -> None:
        assert kinds("true false") == [TokenKind.BOOLEAN_LITERAL] * 2

    def test_identifier_characters(self) -> None:
        tokens = tokenize("_tmp $value sc2")
        assert [t.kind for t in tokens] == [TokenKind.IDENTIFIER] * 3

    @pytest.mark.parametrize(
        "word,expected",
        [
            ("new", TokenKind.KEYWORD),
            ("BufferedReader", TokenKind.IO_CLASS),
            ("nextDouble", TokenKind.IO_METHOD),
            ("false", TokenKind.BOOLEAN_LITERAL),
            ("InputStreamReader", TokenKind.IDENTIFIER),
        ],
    )
    def test_classify_word(self, word: str, expected: TokenKind) -> None:
        assert classify_word(word) == expected


class TestSymbols:
    """Operators and separators."""

    def test_single_char_operators(self) -> None:
        source = "+ - * / = < > ! & | ^ % ~ ?"
        tokens = tokenize(source)
        assert all(t.kind == TokenKind.OPERATOR for t in tokens)
        assert [t.text for t in tokens] == source.split()

    def test_two_char_operators(self) -> None:
        tokens = tokenize("a>=b<=c==d!=e&&f||g")
        ops = [t.text for t in tokens if t.kind == TokenKind.OPERATOR]
        assert ops == [">=", "<=", "==", "!=", "&&", "||"]

    def test_separators(self) -> None:
        tokens = tokenize("(){}[].;,")
        assert all(t.kind == TokenKind.SEPARATOR for t in tokens)
        assert len(tokens) == 9


class TestLiterals:
    """Numeric, string, and escape literals."""

    def test_integer_and_float(self) -> None:
        tokens = tokenize("42 3.14")
        assert tokens[0] == Token(TokenKind.INTEGER_LITERAL, "42", 1, 1)
        assert tokens[1] == Token(TokenKind.FLOAT_LITERAL, "3.14", 1, 4)

    def test_trailing_point_is_a_separator(self) -> None:
        assert kinds("1.") == [TokenKind.INTEGER_LITERAL, TokenKind.SEPARATOR]

    def test_string_keeps_quotes_and_backslashes(self) -> None:
        tokens = tokenize('"a\\nb"')
        assert tokens == [Token(TokenKind.STRING_LITERAL, '"a\\nb"', 1, 1)]

    def test_empty_string(self) -> None:
        assert tokenize('""') == [Token(TokenKind.STRING_LITERAL, '""', 1, 1)]

    def test_char_escape_outside_string(self) -> None:
        tokens = tokenize("\\n \\t")
        assert [(t.kind, t.text) for t in tokens] == [
            (TokenKind.CHAR_LITERAL, "\\n"),
            (TokenKind.CHAR_LITERAL, "\\t"),
        ]


class TestPositions:
    """Line/column tracking."""

    def test_newline_tokens(self) -> None:
        tokens = tokenize("a\n  b")
        assert tokens == [
            Token(TokenKind.IDENTIFIER, "a", 1, 1),
            Token(TokenKind.NEWLINE, "\n", 1, 2),
            Token(TokenKind.IDENTIFIER, "b", 2, 3),
        ]

    def test_crlf_line_endings(self) -> None:
        tokens = tokenize("a\r\nb")
        assert [t.kind for t in tokens] == [TokenKind.IDENTIFIER, TokenKind.NEWLINE, TokenKind.IDENTIFIER]
        assert (tokens[2].line, tokens[2].column) == (2, 1)

    def test_tabs_count_as_one_column(self) -> None:
        tokens = tokenize("\tx")
        assert tokens[0].column == 2

    def test_string_spanning_lines(self) -> None:
        tokens = tokenize('"a\nb" x')
        assert tokens[0].kind == TokenKind.STRING_LITERAL
        assert (tokens[1].line, tokens[1].column) == (2, 4)

    def test_whitespace_only(self) -> None:
        assert tokenize("   \t ") == []
        assert tokenize("") == []

    def test_idempotent(self) -> None:
        source = 'Scanner sc = new Scanner(System.in);\nSystem.out.println("x" + 1);'
        assert tokenize(source) == tokenize(source)


class TestLexicalErrors:
    """Unknown characters, unterminated strings, malformed numbers."""

    def test_hash_position(self) -> None:
        with pytest.raises(LexicalError) as exc_info:
            tokenize("int x = 5;\nclass #MyClass {}")
        err = exc_info.value
        assert err.kind == LexicalErrorKind.UNKNOWN_CHARACTER
        assert (err.line, err.column) == (2, 7)
        assert err.text == "#"

    def test_hash_message_has_context_and_caret(self) -> None:
        with pytest.raises(LexicalError) as exc_info:
            tokenize("int x = 5;\nclass #MyClass {}")
        message = str(exc_info.value)
        assert message.startswith("Lexical error at line 2 (column 7): Unexpected character: '#'")
        assert "    class #MyClass {}\n" + " " * 10 + "^" in message
        assert "Possible fixes:" in message
        assert "  - remove the stray character" in message

    def test_hash_after_number(self) -> None:
        with pytest.raises(LexicalError) as exc_info:
            tokenize("int x = 5 # comment")
        assert exc_info.value.column == 11

    def test_single_quote_suggests_double_quotes(self) -> None:
        with pytest.raises(LexicalError) as exc_info:
            tokenize("System.out.println('hi');")
        assert exc_info.value.column == 20
        assert "use double quotes for string literals" in exc_info.value.hints

    def test_unterminated_string(self) -> None:
        with pytest.raises(LexicalError) as exc_info:
            tokenize('System.out.println("oops);')
        err = exc_info.value
        assert err.kind == LexicalErrorKind.UNTERMINATED_STRING
        assert (err.line, err.column) == (1, 20)

    def test_malformed_number(self) -> None:
        with pytest.raises(LexicalError) as exc_info:
            tokenize("int 123var = 5;")
        err = exc_info.value
        assert err.kind == LexicalErrorKind.MALFORMED_NUMBER
        assert err.text == "123var"
        assert err.column == 5

    def test_non_ascii_letter(self) -> None:
        with pytest.raises(LexicalError):
            tokenize("int café = 1;")

    def test_no_partial_result(self) -> None:
        lexer = Lexer("a b #")
        with pytest.raises(LexicalError):
            lexer.tokenize()
        # The lexer got as far as the error; callers never see these tokens
        assert len(lexer.tokens) == 2
