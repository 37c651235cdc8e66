#!/usr/bin/env python3
"""
Token dump driver for VScript.

Reads one source file, feeds it to the lexer line by line and prints
every token followed by the token count. Lexical diagnostics are printed
to stdout while scanning, ahead of the dump.

Usage:
    vscript hello.vs
    vscript --strict hello.vs
"""

import argparse
import logging
import os
import sys

from . import __build_id__
from .lexer import Lexer, UnrecognizedPolicy, open_source


def print_help():
    parser = build_parser()
    print(f"VScript {__build_id__}")
    print(parser.format_help(), end="")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vscript",
        description="Tokenize a VScript source file and dump its tokens",
        add_help=True,
    )
    parser.add_argument('file', nargs='?',
                        help='Source file to tokenize')
    parser.add_argument('--strict', action='store_true',
                        help='Exit with status 2 if any lexical error was reported')
    parser.add_argument('--warn-unrecognized', action='store_true',
                        help='Record unrecognized characters as warnings instead of dropping them silently')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log lexer activity to stderr')
    parser.add_argument('--version', action='version',
                        version=f"VScript {__build_id__}")
    return parser


def main(argv=None) -> int:
    """Main entry point for the vscript command"""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not args.file:
        print_help()
        return 1

    try:
        stream = open_source(args.file)
    except OSError:
        print_help()
        return 1

    policy = UnrecognizedPolicy.WARN if args.warn_unrecognized else UnrecognizedPolicy.SKIP
    lexer = Lexer(os.path.basename(args.file), diagnostic_stream=sys.stdout, unrecognized=policy)

    with stream:
        for line in stream:
            lexer.scan(line)

    for warning in lexer.warnings:
        print(warning.diagnostic.describe(), file=sys.stderr)

    for token in lexer.tokens:
        print(token)

    print(len(lexer.tokens))

    if args.strict and lexer.has_errors():
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
