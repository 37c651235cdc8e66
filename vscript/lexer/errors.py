"""
Error handling for the VScript lexer.

Diagnostics carry a source position and render as a single line so they
can be interleaved with the token dump.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass
from .tokens import Position, TokenType

UNRECOGNIZED_CHARACTER = "L001"
UNTERMINATED_STRING = "L002"

ERROR_CODES = {
    UNRECOGNIZED_CHARACTER: "Unrecognized character",
    UNTERMINATED_STRING: "Unterminated string literal",
}


@dataclass
class Diagnostic:
    """Base class for lexer diagnostics (errors, warnings)."""
    message: str
    location: Position
    severity: str  # "error" or "warning"
    code: Optional[str] = None
    expected: Optional[TokenType] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        if self.expected is not None:
            return f"{self.location}, Expected {self.expected.display_name}, {self.message}"
        return f"{self.location}, {self.severity}: {self.message}"

    def describe(self) -> str:
        """One-line form followed by the error category and any help text."""
        result = str(self)
        if self.code is not None:
            result += f"\n  [{self.code}] {ERROR_CODES.get(self.code, self.severity)}"
        if self.help_text:
            result += f"\n  help: {self.help_text}"
        return result


class LexerError(Exception):
    """
    Lexical error with its diagnostic attached.

    The scanner records these instead of raising them; only the strict
    convenience functions raise one once the whole input has been read.
    """

    def __init__(
        self,
        message: str,
        location: Position,
        code: Optional[str] = None,
        expected: Optional[TokenType] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            expected=expected,
            help_text=help_text,
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexerWarning:
    """
    Represents a lexer warning that doesn't stop compilation.
    """

    def __init__(
        self,
        message: str,
        location: Position,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


def create_unrecognized_character_warning(char: str, location: Position) -> LexerWarning:
    """Create a warning for a character no token rule accepts."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in VScript source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerWarning(
        message=f"Unrecognized character: {char!r}",
        location=location,
        code=UNRECOGNIZED_CHARACTER,
        help_text=help_text,
    )
