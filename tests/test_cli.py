"""
Tests for the lox-scan command line driver.

Author: xwest
"""

import unittest
import sys
import os
import io
import logging
import tempfile
from contextlib import redirect_stdout, redirect_stderr

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.cli import main, EXIT_OK, EXIT_USAGE, EXIT_OPEN_FAILED, EXIT_LEX_ERRORS


class TestCli(unittest.TestCase):
    """Run the driver against temporary source files."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()
        logging.getLogger("lox").setLevel(logging.NOTSET)

    def _write(self, text: str) -> str:
        path = os.path.join(self.tmpdir.name, "script.lox")
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        return path

    def _run(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_clean_file(self):
        path = self._write("(\n)\n")
        code, out, err = self._run([path])

        self.assertEqual(code, EXIT_OK)
        self.assertEqual(err, "")
        self.assertIn(f"Opening file: {path}", out)
        self.assertIn("File is 4 chars", out)
        self.assertIn("Token type: LEFT_PAREN\nLexeme: (\nLiteral: \nLine: 1", out)
        self.assertIn("Token type: RIGHT_PAREN\nLexeme: )\nLiteral: \nLine: 2", out)
        self.assertIn("Token type: EOF", out)
        self.assertIn("File is 2 lines", out)

    def test_quiet_skips_tokens(self):
        path = self._write("var a;")
        code, out, _ = self._run(["--quiet", path])

        self.assertEqual(code, EXIT_OK)
        self.assertNotIn("Token type:", out)

    def test_lexical_errors(self):
        path = self._write("var a = 1.2.3;\n@")
        code, out, err = self._run([path])

        self.assertEqual(code, EXIT_LEX_ERRORS)
        self.assertIn("multiple '.' in number", err)
        self.assertIn("unexpected char '@' at line 2", err)
        self.assertIn("Token type: SEMICOLON", out)

    def test_carriage_returns_are_not_newlines(self):
        path = self._write("(\r)\r\n")
        code, out, _ = self._run([path])

        self.assertEqual(code, EXIT_OK)
        self.assertIn("File is 5 chars", out)
        self.assertIn("Token type: RIGHT_PAREN\nLexeme: )\nLiteral: \nLine: 1", out)
        self.assertIn("File is 1 lines", out)

    def test_line_count_precedes_tokens(self):
        path = self._write("(\n)\n")
        _, out, _ = self._run([path])

        self.assertLess(out.index("File is 2 lines"), out.index("Token type: LEFT_PAREN"))

    def test_verbose_enables_debug_logging(self):
        path = self._write("var a;")
        with self.assertLogs("lox.lexer.lexer", "DEBUG") as logs:
            code, _, _ = self._run(["--verbose", path])

        self.assertEqual(code, EXIT_OK)
        self.assertEqual(logging.getLogger("lox").level, logging.DEBUG)
        self.assertTrue(any("4 tokens" in line for line in logs.output))

    def test_default_log_level_is_warning(self):
        path = self._write("var a;")
        self._run(["--quiet", path])

        self.assertEqual(logging.getLogger("lox").level, logging.WARNING)

    def test_missing_file(self):
        path = os.path.join(self.tmpdir.name, "missing.lox")
        code, out, _ = self._run([path])

        self.assertEqual(code, EXIT_OPEN_FAILED)
        self.assertIn("Failed opening file:", out)

    def test_bad_usage(self):
        for argv in ([], ["a.lox", "b.lox"]):
            with self.subTest(argv=argv):
                with self.assertRaises(SystemExit) as ctx:
                    self._run(argv)
                self.assertEqual(ctx.exception.code, EXIT_USAGE)


if __name__ == '__main__':
    unittest.main()
