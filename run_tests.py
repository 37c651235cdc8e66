#!/usr/bin/env python3
"""
Main test runner for the VScript lexer tests.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_all_tests():
    """Run a quick lexing smoke check, then the unit tests."""

    print("VScript Lexer Test Suite")
    print("=" * 60)

    try:
        from vscript.lexer import tokenize_string
    except ImportError as e:
        print(f"Failed to import lexer: {e}")
        return False

    code = "fn add(a: int) -> int {\n    return a + 1;\n}"
    tokens = tokenize_string(code, "smoke.vs", strict=True)
    print(f"Smoke test: {len(tokens)} tokens")
    print()

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
