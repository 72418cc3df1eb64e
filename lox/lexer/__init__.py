"""
Lox Lexer Package

Implements a from-scratch lexical analyzer (scanner) for the Lox language.

Key Features:
- Maximal-munch recognition of one and two character operators
- Line and block comments (block comments do not nest)
- String, number, identifier and keyword literals
- Line tracking across multi-line strings and comments
- Errors are collected, never fatal to the scan

Author: xwest
"""

from .tokens import Token, TokenType, KEYWORDS, render_source
from .lexer import Lexer, ScanResult, scan, tokenize_string
from .errors import LexerError, SourceLocation, Diagnostic

__all__ = [
    "Lexer",
    "ScanResult",
    "scan",
    "tokenize_string",
    "render_source",
    "Token",
    "TokenType",
    "KEYWORDS",
    "SourceLocation",
    "Diagnostic",
    "LexerError",
]
