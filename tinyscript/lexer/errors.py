"""
Error handling for the TinyScript lexer.

Scan errors are plain values collected by the scanner, never raised, so a
single pass can report every problem in a file.

Author: xwest
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ScanError:
    """A diagnostic recorded while scanning. Does not stop the scan."""
    line: int
    message: str
    code: Optional[str] = None

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


# Error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
}


def create_unexpected_character_error(char: str, line: int) -> ScanError:
    """Create an error for a character that starts no valid token."""
    if char.isprintable():
        message = f"Unexpected character: {char}"
    else:
        message = f"Unexpected character: U+{ord(char):04X}"
    return ScanError(line=line, message=message, code="L001")


def create_unterminated_string_error(line: int) -> ScanError:
    """Create an error for a string literal still open at end of input."""
    return ScanError(line=line, message="Unterminated string.", code="L002")
