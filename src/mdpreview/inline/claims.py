"""Claim registry for inline exclude ranges.

Tracks the character ranges already taken by accepted inline matches so
lower-priority patterns cannot match across them.

Thread Safety:
ClaimRegistry instances are single-use per resolve() call.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class ClaimRegistry:
    """Half-open ``[start, end)`` ranges claimed by accepted matches.

    Claims never overlap each other, since a range is only claimed after
    overlaps() returned False for it.

    Usage:
        claims = ClaimRegistry()
        claims.claim(0, 8)
        claims.overlaps(7, 14)  # True
        claims.overlaps(13, 21)  # False

    Complexity:
        - claim(): O(1)
        - overlaps(): O(k) for k claims
        - end_of_claim_at(): O(k)

    """

    ranges: list[tuple[int, int]] = field(default_factory=list)

    def claim(self, start: int, end: int) -> None:
        """Record ``[start, end)`` as taken."""
        self.ranges.append((start, end))

    def overlaps(self, start: int, end: int) -> bool:
        """Check whether ``[start, end)`` shares any character with a claim."""
        return any(start < claimed_end and claimed_start < end for claimed_start, claimed_end in self.ranges)

    def end_of_claim_at(self, pos: int) -> int | None:
        """Return the end of the claim containing pos, or None if pos is free."""
        for claimed_start, claimed_end in self.ranges:
            if claimed_start <= pos < claimed_end:
                return claimed_end
        return None
