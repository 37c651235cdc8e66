"""
Tests for VScript token and position types.

Author: xwest
"""

import unittest
import sys
import os
import dataclasses

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from vscript.lexer.tokens import Token, TokenType, Position, Keyword, KEYWORDS


class TestPosition(unittest.TestCase):

    def test_renders_one_based(self):
        self.assertEqual(str(Position("main.vs", column=0, row=0)), "main.vs:1:1")
        self.assertEqual(str(Position("main.vs", column=4, row=2)), "main.vs:3:5")

    def test_is_immutable(self):
        pos = Position("main.vs", 0, 0)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            pos.row = 3


class TestToken(unittest.TestCase):

    def test_dump_format(self):
        token = Token(TokenType.OCURLY, Position("a.vs", 9, 0), "{")
        self.assertEqual(str(token), "<OCurly a.vs:1:10> {")

    def test_display_names(self):
        self.assertEqual(TokenType.NONE.display_name, "None")
        self.assertEqual(TokenType.CPAREN.display_name, "CParen")
        self.assertEqual(TokenType.IDENT.display_name, "Ident")
        for token_type in TokenType:
            self.assertTrue(token_type.display_name)

    def test_error_marker(self):
        ok = Token(TokenType.STRING, Position("a.vs", 0, 0), "x")
        bad = Token(TokenType.STRING, Position("a.vs", 0, 0), "x", error="L002")
        self.assertFalse(ok.is_error)
        self.assertTrue(bad.is_error)
        self.assertIn("L002", repr(bad))

    def test_category_helpers(self):
        pos = Position("a.vs", 0, 0)
        self.assertTrue(Token(TokenType.KEYWORD, pos, "fn").is_keyword)
        self.assertTrue(Token(TokenType.NUMBER, pos, "1").is_literal)
        self.assertTrue(Token(TokenType.IDENT, pos, "x").is_identifier)
        self.assertFalse(Token(TokenType.PLUS, pos, "+").is_literal)


class TestKeywordTable(unittest.TestCase):

    def test_contents(self):
        self.assertEqual(dict(KEYWORDS), {"fn": Keyword.FN, "return": Keyword.RETURN})

    def test_read_only(self):
        with self.assertRaises(TypeError):
            KEYWORDS["let"] = Keyword.FN


if __name__ == "__main__":
    unittest.main()
