"""
Token definitions for the VScript lexer.

This module defines the token types recognized by VScript:
- Keywords (fn, return)
- Identifiers and literals (strings, numbers)
- Operators and punctuation

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


class TokenType(Enum):
    """
    Enumeration of all token types in VScript.

    The set is closed: every character either maps to one of these
    or is dropped by the lexer.
    """

    NONE = auto()                   # Uninitialized / sentinel

    # ========================================================================
    # Identifiers and Keywords
    # ========================================================================
    KEYWORD = auto()                # fn, return
    IDENT = auto()                  # variable_name

    # ========================================================================
    # Punctuation
    # ========================================================================
    OCURLY = auto()                 # {
    CCURLY = auto()                 # }
    OPAREN = auto()                 # (
    CPAREN = auto()                 # )
    COLON = auto()                  # :
    SEMICOLON = auto()              # ;
    ARROW = auto()                  # ->

    # ========================================================================
    # Literals
    # ========================================================================
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42

    # ========================================================================
    # Operators
    # ========================================================================
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /
    EQUALS = auto()                 # =

    @property
    def display_name(self) -> str:
        """Name used in token dumps and diagnostics (e.g. ``OCurly``)."""
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    TokenType.NONE: "None",
    TokenType.KEYWORD: "Keyword",
    TokenType.IDENT: "Ident",
    TokenType.OCURLY: "OCurly",
    TokenType.CCURLY: "CCurly",
    TokenType.OPAREN: "OParen",
    TokenType.CPAREN: "CParen",
    TokenType.COLON: "Colon",
    TokenType.SEMICOLON: "Semicolon",
    TokenType.ARROW: "Arrow",
    TokenType.STRING: "String",
    TokenType.NUMBER: "Number",
    TokenType.PLUS: "Plus",
    TokenType.MINUS: "Minus",
    TokenType.MULTIPLY: "Multiply",
    TokenType.DIVIDE: "Divide",
    TokenType.EQUALS: "Equals",
}


class Keyword(Enum):
    """Reserved words of the language."""
    FN = auto()
    RETURN = auto()


@dataclass(frozen=True)
class Position:
    """
    A location in a source unit.

    ``column`` and ``row`` are 0-based; ``str()`` renders them 1-based
    for humans.
    """
    filename: str
    column: int
    row: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.row + 1}:{self.column + 1}"

    def __repr__(self) -> str:
        return f"Position({self.filename!r}, column={self.column}, row={self.row})"


@dataclass(frozen=True)
class Token:
    """
    A lexical token in VScript.

    ``value`` is the exact matched text. For string literals it is the
    body without the quotes. ``error`` holds a diagnostic code when the
    token was produced from malformed input (e.g. an unterminated string).
    """
    type: TokenType
    position: Position
    value: str = ""
    error: Optional[str] = None

    def __str__(self) -> str:
        return f"<{self.type.display_name} {self.position}> {self.value}"

    def __repr__(self) -> str:
        if self.error is not None:
            return (f"Token({self.type.name}, {self.value!r}, "
                    f"{self.position!r}, error={self.error!r})")
        return f"Token({self.type.name}, {self.value!r}, {self.position!r})"

    @property
    def is_error(self) -> bool:
        """Check if this token was produced from malformed input."""
        return self.error is not None

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type == TokenType.KEYWORD

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in (TokenType.STRING, TokenType.NUMBER)

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENT


# Reserved spellings. Read-only; lexers receive it as a constructor argument.
KEYWORDS: Mapping[str, Keyword] = MappingProxyType({
    "fn": Keyword.FN,
    "return": Keyword.RETURN,
})

PUNCTUATION = {
    "{": TokenType.OCURLY,
    "}": TokenType.CCURLY,
    "(": TokenType.OPAREN,
    ")": TokenType.CPAREN,
    ";": TokenType.SEMICOLON,
    ":": TokenType.COLON,
}

# '-' is resolved by the classifier since it may start an arrow
OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "=": TokenType.EQUALS,
}
