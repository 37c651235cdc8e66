"""
Tests for per-character classification in the VScript lexer.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from vscript.lexer.classifier import CharClass, char_class, scan_lexeme
from vscript.lexer.tokens import TokenType, KEYWORDS


class TestCharClass(unittest.TestCase):
    """Every character lands in exactly one class."""

    def test_classes(self):
        cases = {
            ' ': CharClass.WHITESPACE,
            '\t': CharClass.WHITESPACE,
            '{': CharClass.PUNCTUATION,
            ':': CharClass.PUNCTUATION,
            '-': CharClass.OPERATOR,
            '=': CharClass.OPERATOR,
            '"': CharClass.QUOTE,
            '7': CharClass.DIGIT,
            'q': CharClass.LETTER,
            'Z': CharClass.LETTER,
            '_': CharClass.UNRECOGNIZED,
            '@': CharClass.UNRECOGNIZED,
            'é': CharClass.UNRECOGNIZED,
        }
        for ch, expected in cases.items():
            with self.subTest(ch=ch):
                self.assertEqual(char_class(ch), expected)


class TestScanLexeme(unittest.TestCase):
    """scan_lexeme returns the lexeme and the cursor past it."""

    def scan(self, line, start=0):
        return scan_lexeme(line, start, KEYWORDS)

    def test_arrow_consumes_two_characters(self):
        lexeme = self.scan("a->b", 1)
        self.assertEqual(lexeme.type, TokenType.ARROW)
        self.assertEqual(lexeme.value, "->")
        self.assertEqual((lexeme.start, lexeme.end), (1, 3))

    def test_minus_at_end_of_line(self):
        lexeme = self.scan("x-", 1)
        self.assertEqual(lexeme.type, TokenType.MINUS)
        self.assertEqual(lexeme.end, 2)

    def test_minus_before_other_character(self):
        lexeme = self.scan("-1")
        self.assertEqual(lexeme.type, TokenType.MINUS)
        self.assertEqual(lexeme.end, 1)

    def test_number_stops_at_letter(self):
        lexeme = self.scan("12a")
        self.assertEqual(lexeme.type, TokenType.NUMBER)
        self.assertEqual(lexeme.value, "12")
        self.assertEqual(lexeme.end, 2)

    def test_identifier_includes_digits_and_underscores(self):
        lexeme = self.scan("foo_1 bar")
        self.assertEqual(lexeme.type, TokenType.IDENT)
        self.assertEqual(lexeme.value, "foo_1")
        self.assertEqual(lexeme.end, 5)

    def test_keyword_lookup_uses_given_table(self):
        self.assertEqual(self.scan("return").type, TokenType.KEYWORD)
        self.assertEqual(scan_lexeme("return", 0, {}).type, TokenType.IDENT)
        self.assertEqual(scan_lexeme("let", 0, {"let": object()}).type, TokenType.KEYWORD)

    def test_keyword_prefix_is_identifier(self):
        self.assertEqual(self.scan("fnord").type, TokenType.IDENT)

    def test_terminated_string(self):
        lexeme = self.scan('"hi_2" x')
        self.assertEqual(lexeme.type, TokenType.STRING)
        self.assertEqual(lexeme.value, "hi_2")
        self.assertEqual(lexeme.end, 6)
        self.assertIsNone(lexeme.error_column)

    def test_empty_string(self):
        lexeme = self.scan('""')
        self.assertEqual(lexeme.value, "")
        self.assertEqual(lexeme.end, 2)
        self.assertIsNone(lexeme.error_column)

    def test_unterminated_string_at_end_of_line(self):
        lexeme = self.scan('"abc')
        self.assertEqual(lexeme.type, TokenType.STRING)
        self.assertEqual(lexeme.value, "abc")
        self.assertEqual(lexeme.error_column, 4)
        self.assertEqual(lexeme.end, 4)

    def test_string_body_stops_at_space(self):
        lexeme = self.scan('"two words"')
        self.assertEqual(lexeme.value, "two")
        self.assertEqual(lexeme.error_column, 4)
        self.assertEqual(lexeme.end, 4)

    def test_lone_quote_still_advances(self):
        lexeme = self.scan('"')
        self.assertEqual(lexeme.value, "")
        self.assertEqual(lexeme.error_column, 1)
        self.assertEqual(lexeme.end, 1)

    def test_whitespace_and_unrecognized_produce_no_token(self):
        for line, kind in ((" ", CharClass.WHITESPACE), ("#", CharClass.UNRECOGNIZED)):
            with self.subTest(line=line):
                lexeme = self.scan(line)
                self.assertEqual(lexeme.kind, kind)
                self.assertFalse(lexeme.produces_token)
                self.assertEqual(lexeme.end, 1)


if __name__ == "__main__":
    unittest.main()
