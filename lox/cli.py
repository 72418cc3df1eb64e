"""
lox-scan: scan a Lox source file and print its tokens.

Exit codes:
    0   scanned cleanly
    1   bad usage
    2   file could not be opened or read
    65  lexical errors were reported
"""

import argparse
import logging
import sys
from typing import List, Optional

from .lexer import scan

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_OPEN_FAILED = 2
EXIT_LEX_ERRORS = 65


class _UsageParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad usage with exit code 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _UsageParser(prog="lox-scan", description="Scan a Lox source file and print its tokens")
    parser.add_argument("file", help="Path to a Lox source file")
    parser.add_argument("-q", "--quiet", action="store_true", help="Don't print the token listing")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def read_source(path: str) -> str:
    # newline="" keeps lone \r and \r\n as written; only \n ends a line
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s:%(name)s:%(message)s")
    # basicConfig is a no-op when the root logger is already configured
    logging.getLogger("lox").setLevel(level)

    print(f"Opening file: {args.file}")
    try:
        source = read_source(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Failed opening file: {e}")
        return EXIT_OPEN_FAILED

    print(f"File is {len(source)} chars")

    tokens, errors = scan(source, args.file)

    # The EOF token sits on the last line counted
    print(f"File is {tokens[-1].line - 1} lines")

    if not args.quiet:
        for token in tokens:
            print(token)

    for error in errors:
        print(error, end="", file=sys.stderr)

    return EXIT_LEX_ERRORS if errors else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
