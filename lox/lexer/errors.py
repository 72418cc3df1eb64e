"""
Error handling for the Lox lexer.

Lexical errors are recorded by the scanner rather than raised out of it,
so a single pass can report every problem in the file. Each error carries
a diagnostic with its source location and an error code.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """A line in a named source buffer."""
    filename: str
    line: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}"


@dataclass
class Diagnostic:
    """Location, code and help text for one lexical error."""
    message: str
    location: SourceLocation
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        prefix = "ERROR"
        if self.code:
            prefix += f"[{self.code}]"
        result = f"{prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    A lexical error found while scanning.

    The scanner collects these instead of stopping; callers that want
    fail-fast behaviour can raise one directly.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def line(self) -> int:
        return self.diagnostic.location.line

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


# Error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
    "L003": "Malformed number literal",
    "L004": "Unterminated block comment",
}


def create_unexpected_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character that cannot start a token."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Lox source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"unexpected char '{char}' at line {location.line}",
        location=location,
        code="L001",
        help_text=help_text
    )


def create_unterminated_string_error(location: SourceLocation) -> LexerError:
    """Create an error for a string literal that runs to end of input."""
    return LexerError(
        message="unterminated string",
        location=location,
        code="L002",
        help_text="String literals must be closed with a matching '\"' quote."
    )


def create_malformed_number_error(location: SourceLocation) -> LexerError:
    """Create an error for a number with more than one decimal point."""
    return LexerError(
        message="multiple '.' in number",
        location=location,
        code="L003",
        help_text="A number literal may contain at most one '.'.",
        suggestions=["Remove the extra '.'", "Separate the values with an operator"]
    )


def create_unterminated_comment_error(location: SourceLocation) -> LexerError:
    """Create an error for a block comment that runs to end of input."""
    return LexerError(
        message="unterminated block comment",
        location=location,
        code="L004",
        help_text="Block comments must be closed with '*/'. They do not nest."
    )
