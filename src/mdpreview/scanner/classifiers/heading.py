"""Header classifier mixin."""

import re

from mdpreview.nodes import Header

# One or more #, whitespace, then at least one character of content.
_HEADER_RE = re.compile(r"^(#+)\s+(?P<content>.+)$")


class HeadingClassifierMixin:
    """Mixin providing header classification."""

    def _try_classify_header(self, line: str) -> Header | None:
        """Try to classify line as a header.

        Unlike CommonMark there is no upper bound on the number of #
        characters: ``####### x`` is a level 7 header. Deciding how to
        present levels beyond 6 is left to the renderer.

        Args:
            line: Raw line, not stripped

        Returns:
            Header if the line matches, None otherwise.
        """
        match = _HEADER_RE.match(line)
        if match is None:
            return None
        return Header(level=len(match.group(1)), content=match.group("content").strip())
