"""
VScript Lexer - turns source lines into tokens

Works strictly one line at a time, so no token ever spans a line break.
The per-character rules live in classifier.py; this module owns the
scan loop, row bookkeeping and diagnostics.

xwest
"""

import io
import logging
import os
import sys
from enum import Enum
from typing import IO, Iterable, List, Mapping, Optional, Tuple, Union

from .tokens import Token, TokenType, Position, Keyword, KEYWORDS
from .classifier import CharClass, scan_lexeme
from .errors import (
    LexerError, LexerWarning, UNTERMINATED_STRING, create_unrecognized_character_warning
)

logger = logging.getLogger(__name__)


class UnrecognizedPolicy(Enum):
    """What to do with characters that no token rule accepts."""
    SKIP = "skip"   # drop silently
    WARN = "warn"   # drop and record a LexerWarning


class Lexer:
    """
    VScript lexical analyzer for one source unit.

    Feed lines in file order with ``scan``; read the result from ``tokens``.
    The row counter advances once per scanned line, including blank ones.
    """

    def __init__(
        self,
        filename: str,
        keywords: Mapping[str, Keyword] = KEYWORDS,
        diagnostic_stream: Optional[IO[str]] = None,
        unrecognized: UnrecognizedPolicy = UnrecognizedPolicy.SKIP,
    ):
        """
        Initialize the lexer.

        Args:
            filename: Name of the source unit, used verbatim in positions
            keywords: Reserved spellings mapped to their keyword identity
            diagnostic_stream: Where error lines are written (stdout if None)
            unrecognized: Policy for characters no rule accepts
        """
        self.filename = filename
        self.keywords = keywords
        self.diagnostic_stream = diagnostic_stream
        self.unrecognized = UnrecognizedPolicy(unrecognized)
        self._row = 0
        self._tokens: List[Token] = []
        self.errors: List[LexerError] = []
        self.warnings: List[LexerWarning] = []

    @property
    def row(self) -> int:
        """Number of lines scanned so far (0-based row of the next line)."""
        return self._row

    @property
    def tokens(self) -> Tuple[Token, ...]:
        """Tokens accumulated so far, in source order."""
        return tuple(self._tokens)

    def scan(self, line: str) -> List[Token]:
        """
        Scan one line and append its tokens.

        Args:
            line: Source line; a trailing line terminator is ignored

        Returns:
            The tokens produced for this line
        """
        line = line.rstrip("\r\n")
        produced: List[Token] = []
        cursor = 0

        while cursor < len(line):
            lexeme = scan_lexeme(line, cursor, self.keywords)
            cursor = lexeme.end

            if lexeme.kind is CharClass.UNRECOGNIZED:
                self._unrecognized(lexeme.value, Position(self.filename, lexeme.start, self._row))
                continue
            if not lexeme.produces_token:
                continue

            error_code = None
            if lexeme.error_column is not None:
                error = self.report_error(
                    TokenType.STRING,
                    "unterminated string literal",
                    Position(self.filename, lexeme.error_column, self._row),
                    code=UNTERMINATED_STRING,
                )
                error_code = error.diagnostic.code

            token = Token(
                lexeme.type,
                Position(self.filename, lexeme.start, self._row),
                lexeme.value,
                error_code,
            )
            produced.append(token)

        self._tokens.extend(produced)
        logger.debug("%s:%d: %d token(s)", self.filename, self._row + 1, len(produced))
        self._row += 1
        return produced

    def scan_lines(self, lines: Iterable[str]) -> "Lexer":
        """Scan every line in order. Returns self for chaining."""
        for line in lines:
            self.scan(line)
        return self

    def report_error(
        self, expected: TokenType, message: str, at: Position, code: Optional[str] = None
    ) -> LexerError:
        """
        Record and print a diagnostic. Never raises.

        The line goes to the diagnostic stream so it interleaves with
        whatever else the driver prints there.
        """
        error = LexerError(message, at, code=code, expected=expected)
        self.errors.append(error)
        logger.debug("lexical error %s: %s", error.diagnostic.code, error.diagnostic)

        stream = self.diagnostic_stream if self.diagnostic_stream is not None else sys.stdout
        print(error.diagnostic, file=stream)
        return error

    def _unrecognized(self, char: str, at: Position):
        if self.unrecognized is UnrecognizedPolicy.SKIP:
            return
        warning = create_unrecognized_character_warning(char, at)
        self.warnings.append(warning)
        logger.debug("lexical warning %s: %s", warning.diagnostic.code, warning.diagnostic)

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if lexer encountered any warnings."""
        return len(self.warnings) > 0

    def get_diagnostics(self) -> List[Union[LexerError, LexerWarning]]:
        """Get all diagnostics (errors and warnings)."""
        return self.errors + self.warnings


def open_source(filepath: str) -> IO[str]:
    """
    Open a source file for line-by-line scanning.

    Lines end at "\n" only, and bytes that are not valid UTF-8 decode to
    U+FFFD, which the classifier treats as an unrecognized character.
    """
    return open(filepath, "r", encoding="utf-8", errors="replace", newline="\n")


def tokenize_lines(lines: Iterable[str], filename: str = "<string>", **options) -> Lexer:
    """
    Scan a sequence of lines with a fresh lexer.

    Args:
        lines: Source lines in file order
        filename: Source unit name for positions
        **options: Passed through to ``Lexer``

    Returns:
        The lexer, holding tokens and diagnostics
    """
    return Lexer(filename, **options).scan_lines(lines)


def tokenize_string(source: str, filename: str = "<string>", strict: bool = False, **options) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting
        strict: Raise the first error once the whole source is scanned
        **options: Passed through to ``Lexer``

    Returns:
        List of tokens

    Raises:
        LexerError: In strict mode, if any lexical error was reported
    """
    # Only "\n" ends a line; \f, \v and friends stay in-line whitespace
    lexer = tokenize_lines(io.StringIO(source), filename, **options)

    if strict and lexer.has_errors():
        raise lexer.errors[0]

    return list(lexer.tokens)


def tokenize_file(filepath: str, strict: bool = False, **options) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Positions use the file's base name, not the full path.

    Raises:
        LexerError: In strict mode, if any lexical error was reported
        OSError: If file cannot be read
    """
    with open_source(filepath) as f:
        source = f.read()

    return tokenize_string(source, os.path.basename(filepath), strict=strict, **options)
