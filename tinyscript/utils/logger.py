"""Logging helpers for TinyScript.

Thin wrapper over the standard library so every module logs under the
``tinyscript`` namespace.

Example:
    >>> from tinyscript.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning source")
"""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name, prefixed with ``tinyscript.``.

    Example:
        >>> get_logger("scanner").name
        'tinyscript.scanner'
    """
    if not (name == "tinyscript" or name.startswith("tinyscript.")):
        name = f"tinyscript.{name}"
    return logging.getLogger(name)
