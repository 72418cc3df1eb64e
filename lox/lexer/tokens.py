"""
Token definitions for the Lox lexer.

This module defines all token types the scanner can produce:
- Single-character punctuation
- One or two character operators
- Literals (identifiers, strings, numbers)
- Reserved words
- End of input

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Iterable


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # breakfast, x2
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 3.14

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()                    # End of input


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Lox language.

    Punctuation and operators carry their raw text in ``lexeme``. Literal
    tokens (strings, numbers, identifiers and keywords) leave ``lexeme``
    empty and carry their text in ``literal`` instead.
    """
    type: TokenType
    lexeme: str
    literal: str
    line: int

    def __str__(self) -> str:
        return (f"Token type: {self.type.name}\n"
                f"Lexeme: {self.lexeme}\n"
                f"Literal: {self.literal}\n"
                f"Line: {self.line}")

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.literal!r}, {self.line})")

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in LITERAL_TYPES

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.type in KEYWORD_TYPES

    @property
    def source_text(self) -> str:
        """Text that scans back to a token of the same type."""
        if self.type == TokenType.STRING:
            return f'"{self.literal}"'
        if self.type == TokenType.EOF:
            return ""
        return self.lexeme or self.literal


def render_source(tokens: Iterable[Token]) -> str:
    """Join the source text of each token with single spaces."""
    return " ".join(t.source_text for t in tokens if t.type != TokenType.EOF)


# Lookup tables for token recognition

SINGLE_CHAR_TOKENS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Base character -> (one-char type, type when followed by '=')
EQUAL_SUFFIX_TOKENS = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

KEYWORDS = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())

LITERAL_TYPES = frozenset({TokenType.IDENTIFIER, TokenType.STRING, TokenType.NUMBER})

WHITESPACE = frozenset(" \t\r")
