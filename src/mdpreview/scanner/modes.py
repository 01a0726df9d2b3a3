"""Scanner operating modes."""

from __future__ import annotations

from enum import Enum, auto


class ScannerMode(Enum):
    """Scanner operating modes.

    The scanner switches between modes on fence lines:
    - BLOCK: Classifying lines into block elements
    - CODE_FENCE: Inside a fenced code block, collecting lines verbatim

    """

    BLOCK = auto()
    CODE_FENCE = auto()


# Opening and closing fences are both recognized by this prefix
# (after surrounding whitespace is stripped).
FENCE_MARKER = "```"
