"""Transient match records for the inline resolver.

An InlineMatch records where a styled construct was found in a paragraph
line. Matches exist only while a line is being resolved and are turned
into InlineSpan runs before the resolver returns.

Offsets are Python ``str`` indices (Unicode code points), the same unit
the ``re`` module reports, so slicing the source line with them is exact.

"""

from dataclasses import dataclass

from mdpreview.nodes import InlineKind


@dataclass(frozen=True, slots=True)
class InlineMatch:
    """A styled construct found in a line.

    Attributes:
        kind: Styling of the construct.
        text: Inner text with delimiters stripped.
        start: Offset of the opening delimiter.
        length: Length of the whole construct, delimiters included.
        rank: Priority of the pattern family that produced the match
            (lower claims first).

    """

    kind: InlineKind
    text: str
    start: int
    length: int
    rank: int = 0

    @property
    def end(self) -> int:
        """Offset just past the closing delimiter."""
        return self.start + self.length

    def sort_key(self) -> tuple[int, int, int]:
        return (self.start, -self.length, self.rank)
