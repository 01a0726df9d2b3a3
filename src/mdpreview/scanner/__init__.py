"""Line-oriented block scanner for mdpreview.

Architecture:
scanner/
├── __init__.py          # Re-exports BlockScanner, ScannerMode
├── core.py              # BlockScanner (mixin composition + line loop)
├── modes.py             # ScannerMode enum, fence marker
└── classifiers/         # Line classification mixins
    ├── fence.py         # Fenced code open/close and accumulation
    ├── heading.py       # # headers
    └── media.py         # Video, image, link

Usage:
    >>> from mdpreview.scanner import BlockScanner
    >>> elements = list(BlockScanner("# Hello").scan())

"""

from mdpreview.scanner.core import BlockScanner, split_lines
from mdpreview.scanner.modes import ScannerMode

__all__ = ["BlockScanner", "ScannerMode", "split_lines"]
