"""Utility modules for formattable.

Provides:
- text: escape_braces for literal template text
- logger: get_logger for logging
"""

from formattable.utils.logger import get_logger
from formattable.utils.text import escape_braces

__all__ = [
    "escape_braces",
    "get_logger",
]
