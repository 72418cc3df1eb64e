"""
Lox Front End Package

Lexical analysis for the Lox scripting language.

Architecture:
    lox/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # lox-scan command line driver

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .lexer import Lexer, scan

__all__ = [
    # Core
    "Lexer",
    "scan",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
