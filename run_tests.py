#!/usr/bin/env python3
"""
Main test runner for TinyScript tests.

Runs a quick smoke scan first, then the unittest suites under tests/.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_scan():
    """Scan a small program end to end and print the token stream."""

    print("🚀 TinyScript Test Suite")
    print("=" * 60)

    try:
        from tinyscript.lexer import Scanner, TokenKind

        print("✅ Scanner imported successfully")
        print()

    except ImportError as e:
        print(f"❌ Failed to import scanner: {e}")
        return False

    print("Testing a simple scan...")
    code = """
    // factorial, the long way
    if (n <= 1) {
        return 1;
    } else {
        return n * fact(n - 1.5);
    }
    """

    scanner = Scanner(code)
    tokens = scanner.scan_tokens()
    print(f"     Generated {len(tokens)} tokens over {scanner.line} lines")

    if scanner.has_errors():
        print(f"     ❌ Unexpected scan errors: {len(scanner.errors)}")
        for error in scanner.errors:
            print(f"        {error}")
        return False

    if tokens[-1].kind != TokenKind.END_OF_FILE:
        print("     ❌ Token stream is not terminated by END_OF_FILE")
        return False

    print("     ✅ Smoke scan successful")
    print()

    print("  ❌ Testing error recovery...")
    scanner = Scanner('x = @ 1;\n"open')
    scanner.scan_tokens()
    if len(scanner.errors) != 2:
        print(f"     ❌ Expected 2 errors, got {len(scanner.errors)}")
        return False
    print(f"     ✅ Recovered from {len(scanner.errors)} expected errors")
    print()

    return True


def run_unit_tests():
    """Discover and run the unittest suites under tests/."""
    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_smoke_scan() and run_unit_tests()
    if success:
        print("🎉 All tests PASSED!")
    sys.exit(0 if success else 1)
