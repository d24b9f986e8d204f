"""Minimal logging utilities for codewriter.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications decide where records go.

Example:
    >>> from codewriter.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Writing block")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "codewriter." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("presets")
        >>> logger.name
        'codewriter.presets'
    """
    if not (name == "codewriter" or name.startswith("codewriter.")):
        name = f"codewriter.{name}"
    return logging.getLogger(name)
