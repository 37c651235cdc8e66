"""
VScript Toolchain Package

Front end for the VScript programming language. Only the lexical stage
exists so far; a parser and later stages will consume its token stream.

Architecture:
    vscript/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # Token dump driver

Author: xwest
License: MIT
"""

__version__ = "0.1.0a0"
__build_id__ = "v0.1a"
__author__ = "xwest"
__email__ = "dev@vscript.org"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, Position

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "Position",

    # Version info
    "__version__",
    "__build_id__",
    "__author__",
    "__email__",
    "__license__",
]
