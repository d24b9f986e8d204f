"""Utility modules for codewriter.

Provides:
- logger: get_logger for logging
"""

from codewriter.utils.logger import get_logger

__all__ = [
    "get_logger",
]
