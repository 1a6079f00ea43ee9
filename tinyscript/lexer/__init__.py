"""
TinyScript Lexer Package

Single-pass scanner for TinyScript source text.

Key Features:
- One and two character operators with maximal munch (==, !=, <=, >=)
- Line comments, string and decimal number literals
- Reserved keywords distinguished from identifiers
- Line tracking for diagnostics
- Error recovery: bad input is recorded and skipped, never fatal

Author: xwest
"""

from .tokens import Token, TokenKind, StringLiteral, NumberLiteral, KEYWORDS
from .scanner import Scanner, scan
from .errors import ScanError

__all__ = [
    "Scanner",
    "scan",
    "Token",
    "TokenKind",
    "StringLiteral",
    "NumberLiteral",
    "KEYWORDS",
    "ScanError",
]
