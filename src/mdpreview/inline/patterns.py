"""Inline pattern families.

Each family pairs an InlineKind with one or more compiled patterns. Families
are evaluated in rank order; a family's matches may never overlap a range
already claimed by an earlier family (or an earlier pattern of the same
family).

Every pattern captures the inner text in a group named ``text``. Matching
is non-greedy, so the shortest span wins. For bold and italic, a delimiter
preceded by a backslash neither opens nor closes a span.

Thread Safety:
All patterns are compiled at import time and never mutated.

"""

import re
from dataclasses import dataclass

from mdpreview.config import ParseConfig
from mdpreview.nodes import InlineKind

# Inner text: an escaped character or any character other than a backslash,
# shortest first. A lone backslash can only be consumed as an escape.
_ESCAPABLE_TEXT = r"(?P<text>(?:\\.|[^\\\n])+?)"


def _escaped_delimited(delimiter: str) -> re.Pattern[str]:
    d = re.escape(delimiter)
    return re.compile(rf"(?<!\\){d}{_ESCAPABLE_TEXT}(?<!\\){d}")


def _delimited(delimiter: str) -> re.Pattern[str]:
    d = re.escape(delimiter)
    return re.compile(rf"{d}(?P<text>.+?){d}")


@dataclass(frozen=True, slots=True)
class PatternFamily:
    """A group of patterns producing one inline kind.

    Attributes:
        kind: InlineKind assigned to matches
        patterns: Patterns tried in order
        rank: Evaluation order (lower claims first)

    """

    kind: InlineKind
    patterns: tuple[re.Pattern[str], ...]
    rank: int


BOLD = PatternFamily(
    kind=InlineKind.BOLD,
    patterns=(_escaped_delimited("**"), _escaped_delimited("__")),
    rank=0,
)

ITALIC = PatternFamily(
    kind=InlineKind.ITALIC,
    patterns=(_escaped_delimited("*"), _escaped_delimited("_")),
    rank=1,
)

STRIKETHROUGH = PatternFamily(
    kind=InlineKind.STRIKETHROUGH,
    patterns=(_delimited("~~"),),
    rank=2,
)

UNDERLINE = PatternFamily(
    kind=InlineKind.UNDERLINE,
    patterns=(_delimited("&"),),
    rank=3,
)

SPOILER = PatternFamily(
    kind=InlineKind.SPOILER,
    patterns=(_delimited("||"),),
    rank=4,
)

ALL_FAMILIES: tuple[PatternFamily, ...] = (BOLD, ITALIC, STRIKETHROUGH, UNDERLINE, SPOILER)


def families_for(config: ParseConfig) -> tuple[PatternFamily, ...]:
    """Return the families enabled by config, in rank order.

    Bold and italic are always enabled.
    """
    disabled: set[InlineKind] = set()
    if not config.strikethrough_enabled:
        disabled.add(InlineKind.STRIKETHROUGH)
    if not config.underline_enabled:
        disabled.add(InlineKind.UNDERLINE)
    if not config.spoiler_enabled:
        disabled.add(InlineKind.SPOILER)
    if not disabled:
        return ALL_FAMILIES
    return tuple(f for f in ALL_FAMILIES if f.kind not in disabled)
