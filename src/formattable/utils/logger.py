"""Minimal logging utilities for formattable.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from formattable.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rejected fragment")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "formattable." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'formattable.mymodule'
    """
    if not (name == "formattable" or name.startswith("formattable.")):
        name = f"formattable.{name}"
    return logging.getLogger(name)
