"""Minimal logging utilities for abbrmarkup.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from abbrmarkup.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering tree")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "abbrmarkup." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'abbrmarkup.mymodule'
    """
    if not (name == "abbrmarkup" or name.startswith("abbrmarkup.")):
        name = f"abbrmarkup.{name}"
    return logging.getLogger(name)
