"""Utility modules for mdpreview.

Provides:
- logger: get_logger for logging
"""

from mdpreview.utils.logger import get_logger

__all__ = [
    "get_logger",
]
