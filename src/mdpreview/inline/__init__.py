"""Inline span resolution for paragraph lines.

Architecture:
inline/
├── __init__.py          # Re-exports resolve, collect_matches
├── core.py              # Match collection and span construction
├── claims.py            # ClaimRegistry (exclude ranges)
└── patterns.py          # Pattern families in priority order

"""

from mdpreview.inline.claims import ClaimRegistry
from mdpreview.inline.core import collect_matches, resolve
from mdpreview.inline.patterns import ALL_FAMILIES, PatternFamily, families_for

__all__ = [
    "ALL_FAMILIES",
    "ClaimRegistry",
    "PatternFamily",
    "collect_matches",
    "families_for",
    "resolve",
]
