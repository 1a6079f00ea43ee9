"""
Command line entry point for TinyScript.

Usage:
    tinyscript tokenize <filename>

Prints one token per line on stdout and one diagnostic per line on stderr.
Exit status is 0 for a clean scan, 65 when the source had lexical errors and
1 for usage or I/O problems.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .lexer import scan
from .utils.logger import get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_DATA_ERROR = 65

COMMANDS = ("tokenize",)


def read_file_contents(filename: str) -> str:
    """
    Read a source file exactly as stored. Raises OSError.

    Line endings are not translated and bytes that are not valid UTF-8 map to
    lone surrogates, so the scanner sees (and reports) every original byte.
    """
    with open(filename, 'r', encoding='utf-8', errors='surrogateescape', newline='') as f:
        return f.read()


def tokenize(filename: str) -> int:
    """Scan ``filename`` and print its tokens. Returns the exit status."""
    try:
        source = read_file_contents(filename)
    except OSError as e:
        logger.debug("Failed to read %s: %s", filename, e)
        print(f"Error reading file: {filename}", file=sys.stderr)
        return EXIT_FAILURE

    tokens, errors = scan(source)

    for error in errors:
        print(error, file=sys.stderr)
    for token in tokens:
        print(token)

    if errors:
        logger.info("%s: %d lexical error(s)", filename, len(errors))
        return EXIT_DATA_ERROR
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinyscript",
        description="TinyScript front end",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    tinyscript tokenize program.ts             # Print the token stream
    tinyscript tokenize program.ts --verbose   # Also log scanner activity
        """
    )
    parser.add_argument('command', help=f"Command to run ({', '.join(COMMANDS)})")
    parser.add_argument('filename', help='Source file to process')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging on stderr')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the ``tinyscript`` command."""
    args = build_parser().parse_args(argv)

    # Write undecodable source bytes back out unchanged
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(errors="surrogateescape")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "tokenize":
        return tokenize(args.filename)

    print(f"Unknown command: {args.command}", file=sys.stderr)
    return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
