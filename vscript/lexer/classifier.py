"""
Character classification for the VScript lexer.

``scan_lexeme`` is a pure step: given a line and a cursor it returns the
lexeme found there and the cursor just past it. The lexer calls it until
the line is exhausted.

Character sets are ASCII only.
"""

import string
from enum import Enum, auto
from typing import Mapping, NamedTuple, Optional

from .tokens import TokenType, PUNCTUATION, OPERATORS

WHITESPACE = frozenset(" \t\n\r\v\f")
DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)
WORD_CHARS = LETTERS | DIGITS | {"_"}
QUOTE = '"'


class CharClass(Enum):
    """What kind of lexeme a character starts."""
    WHITESPACE = auto()
    PUNCTUATION = auto()
    OPERATOR = auto()
    QUOTE = auto()
    DIGIT = auto()
    LETTER = auto()
    UNRECOGNIZED = auto()


class Lexeme(NamedTuple):
    """
    Result of one scan step.

    ``end`` is one past the last consumed character and always greater
    than ``start``. ``type`` is ``TokenType.NONE`` for whitespace and
    unrecognized characters. ``error_column`` is set when a string
    literal is missing its closing quote.
    """
    kind: CharClass
    type: TokenType
    value: str
    start: int
    end: int
    error_column: Optional[int] = None

    @property
    def produces_token(self) -> bool:
        return self.type is not TokenType.NONE


def char_class(ch: str) -> CharClass:
    """Classify a single character."""
    if ch in WHITESPACE:
        return CharClass.WHITESPACE
    if ch in PUNCTUATION:
        return CharClass.PUNCTUATION
    if ch in OPERATORS:
        return CharClass.OPERATOR
    if ch == QUOTE:
        return CharClass.QUOTE
    if ch in DIGITS:
        return CharClass.DIGIT
    if ch in LETTERS:
        return CharClass.LETTER
    return CharClass.UNRECOGNIZED


def _skip_while(line: str, pos: int, accepted) -> int:
    while pos < len(line) and line[pos] in accepted:
        pos += 1
    return pos


def scan_lexeme(line: str, start: int, keywords: Mapping[str, object]) -> Lexeme:
    """
    Scan the lexeme beginning at ``line[start]``.

    Args:
        line: One source line without its terminator
        start: Cursor position, must be a valid index into ``line``
        keywords: Reserved spellings, consulted for identifier-shaped lexemes

    Returns:
        The lexeme and the cursor past it
    """
    ch = line[start]
    kind = char_class(ch)

    if kind is CharClass.PUNCTUATION:
        return Lexeme(kind, PUNCTUATION[ch], ch, start, start + 1)

    if kind is CharClass.OPERATOR:
        if ch == "-" and line.startswith(">", start + 1):
            return Lexeme(kind, TokenType.ARROW, "->", start, start + 2)
        return Lexeme(kind, OPERATORS[ch], ch, start, start + 1)

    if kind is CharClass.QUOTE:
        body_end = _skip_while(line, start + 1, WORD_CHARS)
        body = line[start + 1:body_end]
        if line.startswith(QUOTE, body_end):
            return Lexeme(kind, TokenType.STRING, body, start, body_end + 1)
        # Unterminated; resume scanning where the closing quote was expected
        return Lexeme(kind, TokenType.STRING, body, start, body_end, error_column=body_end)

    if kind is CharClass.DIGIT:
        end = _skip_while(line, start, DIGITS)
        return Lexeme(kind, TokenType.NUMBER, line[start:end], start, end)

    if kind is CharClass.LETTER:
        end = _skip_while(line, start, WORD_CHARS)
        word = line[start:end]
        token_type = TokenType.KEYWORD if word in keywords else TokenType.IDENT
        return Lexeme(kind, token_type, word, start, end)

    # Whitespace and unrecognized characters consume one character
    return Lexeme(kind, TokenType.NONE, ch, start, start + 1)
