#!/usr/bin/env python3
"""
Main test runner for the Lox lexer.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)

SAMPLE = """
// A small Lox program
class Counter {
    init() { this.count = 0; }
    bump() {
        this.count = this.count + 1;
        return this.count >= 10 or this.count == 3.5;
    }
}
/* block
   comment */
var c = Counter();
while (!nil) { print "tick"; c.bump(); }
"""


def run_all_tests():
    """Scan a sample program, then run the unittest suite."""

    print("🚀 Lox Lexer Test Suite")
    print("=" * 60)

    try:
        from lox.lexer import Lexer
        print("✅ Lexer module imported successfully")
    except ImportError as e:
        print(f"❌ Failed to import lexer: {e}")
        return False

    print("  🔧 Scanning sample program...")
    tokens, errors = Lexer(SAMPLE, "<sample>").scan()
    if errors:
        print(f"     ❌ Lexical errors: {len(errors)}")
        for error in errors:
            print(f"        {error.message}")
        return False
    print(f"     Generated {len(tokens)} tokens over {tokens[-1].line} lines")
    print()

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=1).run(suite)

    print()
    if result.wasSuccessful():
        print("🎉 All tests PASSED!")
    else:
        print("❌ Some tests FAILED")
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
