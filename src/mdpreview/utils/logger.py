"""Logger lookup for mdpreview modules.

mdpreview installs no handlers. The block scanner (``mdpreview.scanner.core``)
writes DEBUG records only: the line count of each scanned document and a
record for every unterminated code fence it drops at end of input. To see
them, raise the package logger's level:

    >>> import logging
    >>> logging.basicConfig()
    >>> logging.getLogger("mdpreview").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``mdpreview`` namespace.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("scanner").name
        'mdpreview.scanner'
    """
    if not (name == "mdpreview" or name.startswith("mdpreview.")):
        name = f"mdpreview.{name}"
    return logging.getLogger(name)
