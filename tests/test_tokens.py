"""
Tests for the TinyScript token model and scan diagnostics.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from tinyscript.lexer.tokens import (
    Token, TokenKind, StringLiteral, NumberLiteral, KEYWORDS,
)
from tinyscript.lexer.errors import (
    ScanError, ERROR_CODES, create_unexpected_character_error,
    create_unterminated_string_error,
)


class TestToken(unittest.TestCase):

    def test_str_without_literal(self):
        token = Token(TokenKind.LEFT_PAREN, "(", None, 1)
        self.assertEqual(str(token), "LEFT_PAREN ( null")

    def test_str_with_literals(self):
        string = Token(TokenKind.STRING, '"hi"', StringLiteral("hi"), 1)
        number = Token(TokenKind.NUMBER, "2.50", NumberLiteral("2.50"), 3)

        self.assertEqual(str(string), 'STRING "hi" hi')
        self.assertEqual(str(number), "NUMBER 2.50 2.50")

    def test_str_end_of_file(self):
        token = Token(TokenKind.END_OF_FILE, "", None, 7)
        self.assertEqual(str(token), "END_OF_FILE  null")

    def test_empty_string_literal_is_not_null(self):
        token = Token(TokenKind.STRING, '""', StringLiteral(""), 1)
        self.assertEqual(str(token), 'STRING "" ')

    def test_token_is_immutable(self):
        token = Token(TokenKind.PLUS, "+", None, 1)
        with self.assertRaises(AttributeError):
            token.line = 2

    def test_predicates(self):
        ident = Token(TokenKind.IDENTIFIER, "x", None, 1)
        keyword = Token(TokenKind.WHILE, "while", None, 1)
        operator = Token(TokenKind.GREATER_EQUAL, ">=", None, 1)
        number = Token(TokenKind.NUMBER, "1", NumberLiteral("1"), 1)

        self.assertTrue(ident.is_identifier)
        self.assertFalse(ident.is_keyword)
        self.assertTrue(keyword.is_keyword)
        self.assertFalse(keyword.is_operator)
        self.assertTrue(operator.is_operator)
        self.assertTrue(Token(TokenKind.SLASH, "/", None, 1).is_operator)
        self.assertTrue(number.is_literal)
        self.assertFalse(operator.is_literal)
        self.assertFalse(Token(TokenKind.TRUE, "true", None, 1).is_literal)


class TestLiteralVariants(unittest.TestCase):

    def test_number_value(self):
        self.assertEqual(NumberLiteral("42").value, 42)
        self.assertIsInstance(NumberLiteral("42").value, int)
        self.assertEqual(NumberLiteral("0.25").value, 0.25)

    def test_literals_compare_as_text(self):
        self.assertEqual(StringLiteral("abc"), "abc")
        self.assertEqual(NumberLiteral("1.5"), "1.5")

    def test_repr_shows_variant(self):
        self.assertEqual(repr(StringLiteral("a")), "StringLiteral('a')")
        self.assertEqual(repr(NumberLiteral("1")), "NumberLiteral('1')")


class TestKeywordTable(unittest.TestCase):

    def test_reserved_words(self):
        self.assertEqual(
            set(KEYWORDS),
            {"if", "else", "while", "for", "return", "true", "false"},
        )
        self.assertIs(KEYWORDS["return"], TokenKind.RETURN)

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            KEYWORDS["var"] = TokenKind.IDENTIFIER


class TestScanErrors(unittest.TestCase):

    def test_format(self):
        error = ScanError(line=4, message="Unterminated string.")
        self.assertEqual(str(error), "[line 4] Error: Unterminated string.")

    def test_unexpected_character(self):
        error = create_unexpected_character_error("$", 2)

        self.assertEqual(error.line, 2)
        self.assertEqual(error.message, "Unexpected character: $")
        self.assertIn(error.code, ERROR_CODES)

    def test_non_printable_character(self):
        error = create_unexpected_character_error("\x07", 1)
        self.assertEqual(error.message, "Unexpected character: U+0007")

    def test_unterminated_string(self):
        error = create_unterminated_string_error(9)

        self.assertEqual(str(error), "[line 9] Error: Unterminated string.")
        self.assertEqual(error.code, "L002")


if __name__ == '__main__':
    unittest.main()
