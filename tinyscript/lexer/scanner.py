"""
TinyScript Scanner - turns source text into tokens

Hand-written state machine, one character of lookahead (two for numbers).
Bad input never aborts the scan: the problem is recorded in ``errors`` and
scanning resumes with the next character.

xwest
"""

from typing import List, Optional, Tuple

from .tokens import (
    Token, TokenKind, StringLiteral, NumberLiteral, Literal,
    KEYWORDS, SINGLE_CHAR_TOKENS, EQUAL_SUFFIX_TOKENS,
)
from .errors import (
    ScanError, create_unexpected_character_error,
    create_unterminated_string_error,
)
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Returned by peek()/peek_next() past the end of the source
SENTINEL = '\0'


def _is_digit(char: str) -> bool:
    return '0' <= char <= '9'


def _is_alpha(char: str) -> bool:
    return 'a' <= char <= 'z' or 'A' <= char <= 'Z' or char == '_'


def _is_alphanumeric(char: str) -> bool:
    return _is_alpha(char) or _is_digit(char)


class Scanner:
    """
    TinyScript lexical analyzer.

    Converts one source text into a list of tokens terminated by
    END_OF_FILE, collecting diagnostics in ``errors`` along the way.
    """

    def __init__(self, source: str):
        """
        Initialize the scanner with source code.

        Args:
            source: Complete source text, already loaded into memory
        """
        self.source = source
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens: List[Token] = []
        self.errors: List[ScanError] = []

        # Line on which the lexeme at self.start begins
        self._start_line = 1

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens, always ending with exactly one END_OF_FILE token
        """
        self.start = 0
        self.current = 0
        self.line = 1
        self._start_line = 1
        self.tokens = []
        self.errors = []

        while not self.is_at_end():
            self.start = self.current
            self._start_line = self.line
            self._scan_token()

        self.tokens.append(Token(TokenKind.END_OF_FILE, "", None, self.line))

        logger.debug(
            "Scanned %d token(s) over %d line(s) with %d error(s)",
            len(self.tokens), self.line, len(self.errors),
        )
        return self.tokens

    def _scan_token(self):
        """Recognize a single token starting at self.start."""
        char = self.advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in EQUAL_SUFFIX_TOKENS:
            with_equal, without_equal = EQUAL_SUFFIX_TOKENS[char]
            self._add_token(with_equal if self.match('=') else without_equal)
        elif char == '/':
            if self.match('/'):
                # Line comment runs up to, not including, the newline
                while self.peek() != '\n' and not self.is_at_end():
                    self.advance()
            else:
                self._add_token(TokenKind.SLASH)
        elif char in (' ', '\r', '\t'):
            pass
        elif char == '\n':
            self.line += 1
        elif char == '"':
            self._string()
        elif _is_digit(char):
            self._number()
        elif _is_alpha(char):
            self._identifier()
        else:
            self._error(create_unexpected_character_error(char, self.line))

    def _string(self):
        """
        Scan a string literal; the opening quote is already consumed.

        An unterminated literal is reported on the line of the last source
        character, so a trailing newline does not count.
        """
        while self.peek() != '"' and not self.is_at_end():
            char = self.advance()
            if char == '\\' and not self.is_at_end():
                # The escaped character never closes the literal
                char = self.advance()
            if char == '\n':
                self.line += 1

        if self.is_at_end():
            last_line = self.line - 1 if self.source.endswith('\n') else self.line
            self._error(create_unterminated_string_error(last_line))
            return

        self.advance()  # Closing quote

        content = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenKind.STRING, StringLiteral(content))

    def _number(self):
        """Scan a decimal number; the first digit is already consumed."""
        while _is_digit(self.peek()):
            self.advance()

        # A '.' only belongs to the number when a digit follows it
        if self.peek() == '.' and _is_digit(self.peek_next()):
            self.advance()
            while _is_digit(self.peek()):
                self.advance()

        lexeme = self.source[self.start:self.current]
        self._add_token(TokenKind.NUMBER, NumberLiteral(lexeme))

    def _identifier(self):
        """Scan an identifier or reserved keyword."""
        while _is_alphanumeric(self.peek()):
            self.advance()

        text = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(text, TokenKind.IDENTIFIER))

    def _add_token(self, kind: TokenKind, literal: Optional[Literal] = None):
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(kind, lexeme, literal, self._start_line))

    def _error(self, error: ScanError):
        logger.debug("Recorded %s: %s", error.code, error)
        self.errors.append(error)

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def advance(self) -> str:
        """Consume and return the next character. Caller checks is_at_end()."""
        char = self.source[self.current]
        self.current += 1
        return char

    def match(self, expected: str) -> bool:
        """Consume the next character only if it equals ``expected``."""
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def peek(self) -> str:
        if self.is_at_end():
            return SENTINEL
        return self.source[self.current]

    def peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return SENTINEL
        return self.source[self.current + 1]

    def has_errors(self) -> bool:
        """Check if the scanner recorded any errors."""
        return len(self.errors) > 0


def scan(source: str) -> Tuple[List[Token], List[ScanError]]:
    """
    Scan a source string in one pass.

    Args:
        source: Complete source text

    Returns:
        (tokens, errors): tokens always end with END_OF_FILE; errors are in
        detection order and empty for valid input
    """
    scanner = Scanner(source)
    tokens = scanner.scan_tokens()
    return tokens, scanner.errors
