"""Unit tests for ClaimRegistry and InlineMatch."""

from __future__ import annotations

from mdpreview.inline.claims import ClaimRegistry
from mdpreview.nodes import InlineKind
from mdpreview.tokens import InlineMatch


class TestInlineMatch:
    """Tests for InlineMatch dataclass."""

    def test_end(self):
        match = InlineMatch(kind=InlineKind.BOLD, text="x", start=3, length=5)
        assert match.end == 8

    def test_match_is_slotted(self):
        match = InlineMatch(kind=InlineKind.BOLD, text="x", start=0, length=5)
        assert hasattr(match, "__slots__")

    def test_sort_key_prefers_longer_then_rank(self):
        short = InlineMatch(kind=InlineKind.ITALIC, text="a", start=0, length=3, rank=1)
        long = InlineMatch(kind=InlineKind.SPOILER, text="abc", start=0, length=7, rank=4)
        tie = InlineMatch(kind=InlineKind.BOLD, text="abc", start=0, length=7, rank=0)
        ordered = sorted([short, long, tie], key=InlineMatch.sort_key)
        assert ordered == [tie, long, short]


class TestClaimRegistry:
    """Tests for ClaimRegistry."""

    def test_empty_registry(self):
        claims = ClaimRegistry()
        assert claims.ranges == []
        assert not claims.overlaps(0, 100)

    def test_contained_range_overlaps(self):
        claims = ClaimRegistry()
        claims.claim(0, 8)
        assert claims.overlaps(2, 5)

    def test_partial_overlap(self):
        claims = ClaimRegistry()
        claims.claim(0, 8)
        assert claims.overlaps(7, 14)
        assert claims.overlaps(-2, 1)

    def test_adjacent_ranges_do_not_overlap(self):
        claims = ClaimRegistry()
        claims.claim(4, 8)
        assert not claims.overlaps(8, 12)
        assert not claims.overlaps(0, 4)

    def test_enclosing_range_overlaps(self):
        claims = ClaimRegistry()
        claims.claim(4, 6)
        assert claims.overlaps(0, 10)

    def test_end_of_claim_at(self):
        claims = ClaimRegistry()
        claims.claim(2, 5)
        claims.claim(10, 12)
        assert claims.end_of_claim_at(2) == 5
        assert claims.end_of_claim_at(4) == 5
        assert claims.end_of_claim_at(5) is None
        assert claims.end_of_claim_at(11) == 12
        assert claims.end_of_claim_at(0) is None
