"""Overlap-aware inline span resolution.

Turns one paragraph line into an ordered sequence of InlineSpan runs:

1. Collect matches family by family (bold, italic, strikethrough,
   underline, spoiler). A candidate overlapping an already-claimed range
   is rejected and the search resumes past it, so a valid construct later
   in the line is still found.
2. Sort surviving matches by start offset.
3. Walk the sorted matches, emitting NORMAL runs for the gaps and styled
   runs (inner text only) for the matches.

Invariant: the emitted runs cover the line exactly once. Re-inserting each
styled run's delimiters and concatenating reproduces the line.

Thread Safety:
Pure functions over module-level read-only patterns. Safe to call from
any thread.

"""

from __future__ import annotations

from collections.abc import Iterable

from mdpreview.config import get_parse_config
from mdpreview.inline.claims import ClaimRegistry
from mdpreview.inline.patterns import PatternFamily, families_for
from mdpreview.nodes import InlineKind, InlineSpan
from mdpreview.tokens import InlineMatch


def collect_matches(
    line: str, families: Iterable[PatternFamily] | None = None
) -> list[InlineMatch]:
    """Find non-overlapping inline matches in a line.

    Args:
        line: Paragraph line
        families: Pattern families in priority order (defaults to those
            enabled by the active ParseConfig)

    Returns:
        Matches sorted by start offset. No two matches overlap.
    """
    if families is None:
        families = families_for(get_parse_config())

    claims = ClaimRegistry()
    matches: list[InlineMatch] = []
    line_len = len(line)

    for family in families:
        for pattern in family.patterns:
            pos = 0
            while pos < line_len:
                m = pattern.search(line, pos)
                if m is None:
                    break
                start, end = m.span()
                if claims.overlaps(start, end):
                    pos = claims.end_of_claim_at(start) or start + 1
                    continue
                claims.claim(start, end)
                matches.append(
                    InlineMatch(
                        kind=family.kind,
                        text=m.group("text"),
                        start=start,
                        length=end - start,
                        rank=family.rank,
                    )
                )
                pos = end

    matches.sort(key=InlineMatch.sort_key)
    return matches


def resolve(line: str) -> list[InlineSpan]:
    """Resolve a paragraph line into inline spans.

    Args:
        line: Paragraph line

    Returns:
        Ordered spans; empty for an empty line, a single NORMAL span when
        nothing matches.

    Example:
        >>> [(s.kind.name, s.text) for s in resolve("**bold** and *italic*")]
        [('BOLD', 'bold'), ('NORMAL', ' and '), ('ITALIC', 'italic')]
    """
    if not line:
        return []

    spans: list[InlineSpan] = []
    cursor = 0
    for match in collect_matches(line):
        if cursor < match.start:
            spans.append(InlineSpan(InlineKind.NORMAL, line[cursor : match.start]))
        spans.append(InlineSpan(match.kind, match.text))
        cursor = match.end

    if cursor < len(line):
        spans.append(InlineSpan(InlineKind.NORMAL, line[cursor:]))

    return spans
