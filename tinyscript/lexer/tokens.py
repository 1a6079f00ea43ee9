"""
Token definitions for the TinyScript lexer.

This module defines all token kinds supported by TinyScript, including:
- Single character punctuation and operators
- One or two character comparison operators
- Literals (identifiers, strings, numbers)
- Reserved keywords

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional, Tuple, Union


class TokenKind(Enum):
    """
    Enumeration of all token kinds in TinyScript.

    Organized by category; the set is closed.
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
    IDENTIFIER = auto()             # counter, _tmp, x1
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 3.14

    # ========================================================================
    # Keywords
    # ========================================================================
    IF = auto()                     # if
    ELSE = auto()                   # else
    WHILE = auto()                  # while
    FOR = auto()                    # for
    RETURN = auto()                 # return
    TRUE = auto()                   # true
    FALSE = auto()                  # false

    # ========================================================================
    # Special Tokens
    # ========================================================================
    END_OF_FILE = auto()            # End of input


class StringLiteral(str):
    """Literal payload of a STRING token: the text between the quotes."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"StringLiteral({str.__repr__(self)})"


class NumberLiteral(str):
    """
    Literal payload of a NUMBER token.

    Holds the matched digits exactly as written (``"7"``, ``"123.45"``);
    ``value`` gives the parsed number.
    """

    __slots__ = ()

    @property
    def value(self) -> Union[int, float]:
        if '.' in self:
            return float(self)
        return int(self)

    def __repr__(self) -> str:
        return f"NumberLiteral({str.__repr__(self)})"


Literal = Union[StringLiteral, NumberLiteral]


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the TinyScript language.

    Carries the token kind, the raw lexeme, an optional literal payload
    (STRING and NUMBER only) and the line the lexeme starts on.
    """
    kind: TokenKind
    lexeme: str                     # Raw text from source
    literal: Optional[Literal]      # None for everything but STRING/NUMBER
    line: int

    def __str__(self) -> str:
        literal = "null" if self.literal is None else str(self.literal)
        return f"{self.kind.name} {self.lexeme} {literal}"

    def __repr__(self) -> str:
        return (f"Token({self.kind.name}, {self.lexeme!r}, "
                f"{self.literal!r}, {self.line})")

    @property
    def is_literal(self) -> bool:
        """Check if this token carries a literal payload."""
        return self.kind in (TokenKind.STRING, TokenKind.NUMBER)

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved keyword."""
        return self.kind in KEYWORD_KINDS

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator or punctuation mark."""
        return self.kind in OPERATOR_KINDS

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.kind == TokenKind.IDENTIFIER


# Lookup tables used by the scanner (read-only).

KEYWORDS = MappingProxyType({
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "while": TokenKind.WHILE,
    "for": TokenKind.FOR,
    "return": TokenKind.RETURN,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
})

# '/' is not listed: it may open a line comment.
SINGLE_CHAR_TOKENS = MappingProxyType({
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
})

# char -> (kind when followed by '=', kind otherwise)
EQUAL_SUFFIX_TOKENS: "MappingProxyType[str, Tuple[TokenKind, TokenKind]]" = MappingProxyType({
    "!": (TokenKind.BANG_EQUAL, TokenKind.BANG),
    "=": (TokenKind.EQUAL_EQUAL, TokenKind.EQUAL),
    "<": (TokenKind.LESS_EQUAL, TokenKind.LESS),
    ">": (TokenKind.GREATER_EQUAL, TokenKind.GREATER),
})

KEYWORD_KINDS = frozenset(KEYWORDS.values())

OPERATOR_KINDS = frozenset(
    set(SINGLE_CHAR_TOKENS.values())
    | {kind for pair in EQUAL_SUFFIX_TOKENS.values() for kind in pair}
    | {TokenKind.SLASH}
)
