"""
TinyScript Package

Front end for the TinyScript language, a small C-like scripting language.
The package currently stops at lexical analysis: source text goes in, a flat
token stream plus diagnostics comes out.

Architecture:
    tinyscript/
    ├── lexer/           # Tokens, scanner and scan diagnostics
    ├── utils/           # Logging helpers
    └── cli.py           # `tinyscript tokenize <file>`

Author: xwest
License: MIT
"""

from .version import __version__, __author__, __email__, __license__

from .lexer import Scanner, Token, TokenKind, ScanError, scan

__all__ = [
    # Core classes
    "Scanner",
    "Token",
    "TokenKind",
    "ScanError",
    "scan",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
