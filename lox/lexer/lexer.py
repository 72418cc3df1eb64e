"""
Lox Lexer - turns source text into tokens

One forward pass over the source with a single character of lookahead.
Errors are collected as we go so the whole file gets scanned even when
something in the middle is broken.

xwest
"""

import logging
import string
from typing import List, NamedTuple, Optional, Tuple

from .tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, EQUAL_SUFFIX_TOKENS, WHITESPACE
)
from .errors import (
    LexerError, SourceLocation, create_unexpected_character_error,
    create_unterminated_string_error, create_malformed_number_error,
    create_unterminated_comment_error
)

logger = logging.getLogger(__name__)

_DIGITS = frozenset(string.digits)
_ALPHA = frozenset(string.ascii_letters)
_ALNUM = _ALPHA | _DIGITS


class ScanResult(NamedTuple):
    """Tokens and errors produced by one scan."""
    tokens: Tuple[Token, ...]
    errors: Tuple[LexerError, ...]

    def has_errors(self) -> bool:
        return len(self.errors) > 0


class Lexer:
    """
    Lox lexical analyzer.

    Converts source text into a sequence of tokens terminated by EOF.
    Lexical errors are recorded and scanning continues to the end of input.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def scan(self) -> ScanResult:
        """
        Scan the entire source.

        Returns:
            ScanResult with the tokens (ending in EOF) and any lexical errors
        """
        self.pos = 0
        self.line = 1
        self.tokens.clear()
        self.errors.clear()

        while not self._is_at_end():
            try:
                self._scan_token()
            except LexerError as e:
                # The offending character is already consumed
                self._record(e)

        self.tokens.append(Token(TokenType.EOF, "", "", self.line))

        logger.debug(
            "Scanned %s: %d tokens, %d errors, %d lines",
            self.filename, len(self.tokens), len(self.errors), self.line
        )
        return ScanResult(tuple(self.tokens), tuple(self.errors))

    def tokenize(self) -> List[Token]:
        """Scan the source and return just the tokens."""
        return list(self.scan().tokens)

    def _scan_token(self):
        """Consume one lexeme starting at the cursor."""
        c = self._advance()

        if c in WHITESPACE or c == '\n':
            return

        if c in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[c], c)
            return

        # ! = < > take an optional trailing '='
        if c in EQUAL_SUFFIX_TOKENS:
            single, double = EQUAL_SUFFIX_TOKENS[c]
            if self._match('='):
                self._add_token(double, c + '=')
            else:
                self._add_token(single, c)
            return

        if c == '/':
            if self._match('/'):
                self._skip_line_comment()
            elif self._match('*'):
                self._skip_block_comment()
            else:
                self._add_token(TokenType.SLASH, c)
            return

        if c == '"':
            self._tokenize_string()
            return

        if c in _DIGITS:
            self._tokenize_number(c)
            return

        if c in _ALPHA:
            self._tokenize_identifier_or_keyword(c)
            return

        raise create_unexpected_character_error(c, self._location())

    def _skip_line_comment(self):
        """Skip to just past the next newline, or to end of input."""
        while not self._is_at_end():
            if self._advance() == '\n':
                break

    def _skip_block_comment(self):
        """Skip a /* */ comment. An inner /* has no effect."""
        start_line = self.line
        while not self._is_at_end():
            if self._advance() == '*' and self._match('/'):
                return
        self._record(create_unterminated_comment_error(self._location(start_line)))

    def _tokenize_string(self):
        """Tokenize a string literal. The opening quote is already consumed."""
        start_line = self.line
        value_parts = []

        while not self._is_at_end():
            c = self._advance()
            if c == '"':
                self._add_token(TokenType.STRING, "", ''.join(value_parts), start_line)
                return
            value_parts.append(c)

        self._record(create_unterminated_string_error(self._location(start_line)))

    def _tokenize_number(self, first: str):
        """Tokenize a number literal starting with digit ``first``."""
        digits = [first]
        seen_dot = False

        while not self._is_at_end():
            c = self._peek()
            if c in _DIGITS:
                digits.append(self._advance())
            elif c == '.' and not seen_dot:
                seen_dot = True
                digits.append(self._advance())
            elif c == '.':
                self._skip_malformed_number_tail()
                break
            else:
                break

        self._add_token(TokenType.NUMBER, "", ''.join(digits))

    def _skip_malformed_number_tail(self):
        """Drop the rest of a numeral after an extra '.', one error per dot."""
        while self._peek() in _DIGITS or self._peek() == '.':
            if self._advance() == '.':
                self._record(create_malformed_number_error(self._location()))

    def _tokenize_identifier_or_keyword(self, first: str):
        """Tokenize an identifier or reserved word starting with ``first``."""
        chars = [first]
        while self._peek() in _ALNUM:
            chars.append(self._advance())

        text = ''.join(chars)
        token_type = KEYWORDS.get(text, TokenType.IDENTIFIER)
        self._add_token(token_type, "", text)

    def _add_token(self, token_type: TokenType, lexeme: str, literal: str = "", line: Optional[int] = None):
        self.tokens.append(Token(token_type, lexeme, literal, self.line if line is None else line))

    def _record(self, error: LexerError):
        logger.debug("Lexical error at %s: %s", error.diagnostic.location, error.message)
        self.errors.append(error)

    def _location(self, line: Optional[int] = None) -> SourceLocation:
        return SourceLocation(self.filename, self.line if line is None else line)

    def _is_at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _advance(self) -> str:
        """Consume one character, counting newlines."""
        c = self.source[self.pos]
        self.pos += 1
        if c == '\n':
            self.line += 1
        return c

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is ``expected``."""
        if self._is_at_end() or self.source[self.pos] != expected:
            return False
        self._advance()
        return True

    def _peek(self) -> str:
        """Look at the next character without consuming it."""
        if self._is_at_end():
            return '\0'
        return self.source[self.pos]

    def has_errors(self) -> bool:
        """Check if the last scan recorded any errors."""
        return len(self.errors) > 0


def scan(source: str, filename: str = "<string>") -> ScanResult:
    """
    Scan a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        ScanResult of tokens and lexical errors
    """
    return Lexer(source, filename).scan()


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If any lexical error was recorded
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        # Raise the first error encountered
        raise lexer.errors[0]

    return tokens
