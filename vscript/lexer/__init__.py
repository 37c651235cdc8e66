"""
VScript Lexer Package

Implements the lexical analyzer (tokenizer) for the VScript language.

Key Features:
- Line-by-line scanning; tokens never span lines
- Keyword table injected per lexer instance
- Pure, testable per-character classification
- Diagnostics that never abort a scan
- Source position tracking (0-based, rendered 1-based)

Author: xwest
"""

from .tokens import Token, TokenType, Position, Keyword, KEYWORDS
from .classifier import CharClass, Lexeme, char_class, scan_lexeme
from .lexer import (
    Lexer, UnrecognizedPolicy, open_source, tokenize_lines, tokenize_string, tokenize_file
)
from .errors import Diagnostic, LexerError, LexerWarning

__all__ = [
    "Lexer",
    "UnrecognizedPolicy",
    "Token",
    "TokenType",
    "Position",
    "Keyword",
    "KEYWORDS",
    "CharClass",
    "Lexeme",
    "char_class",
    "scan_lexeme",
    "open_source",
    "tokenize_lines",
    "tokenize_string",
    "tokenize_file",
    "Diagnostic",
    "LexerError",
    "LexerWarning",
]
