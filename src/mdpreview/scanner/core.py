"""Line-oriented block scanner.

Splits the source into lines and classifies each line into at most one
block element. Classification is first-match-wins in a fixed order:
fence, code content, header, video, image, link, paragraph.

Thread Safety:
BlockScanner instances are single-use. Create one per source string.
All state is instance-local; compiled patterns are module-level and
read-only.

"""

from __future__ import annotations

import re
from collections.abc import Iterator

from mdpreview.inline import resolve
from mdpreview.nodes import BlockElement, Paragraph
from mdpreview.scanner.classifiers import (
    FenceClassifierMixin,
    HeadingClassifierMixin,
    MediaClassifierMixin,
)
from mdpreview.scanner.modes import ScannerMode
from mdpreview.utils.logger import get_logger

logger = get_logger(__name__)

# \r\n must be tried before \r so a Windows line ending is one break.
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def split_lines(source: str) -> list[str]:
    """Split source on any of ``\\r\\n``, ``\\r`` or ``\\n``.

    Unlike str.splitlines(), form feeds, vertical tabs and Unicode line
    separators stay inside the line, and a trailing break yields a final
    empty line.
    """
    return _LINE_BREAK_RE.split(source)


class BlockScanner(
    FenceClassifierMixin,
    HeadingClassifierMixin,
    MediaClassifierMixin,
):
    """Classifies source lines into block elements.

    Usage:
            >>> scanner = BlockScanner("# Hello\\n\\nWorld")
            >>> for element in scanner.scan():
            ...     print(element)
        Header(level=1, content='Hello')
        Paragraph(raw_text='World', inlines=(InlineSpan(kind=<InlineKind.NORMAL: 1>, text='World'),))

    Thread Safety:
        BlockScanner instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_mode",
        "_fence_language",  # Language from the opening fence, None if absent
        "_code_lines",  # Lines collected since the opening fence
    )

    def __init__(self, source: str) -> None:
        """Initialize scanner with source text.

        Args:
            source: Markdown source text
        """
        self._source = source
        self._mode = ScannerMode.BLOCK
        self._fence_language: str | None = None
        self._code_lines: list[str] = []

    def scan(self) -> Iterator[BlockElement]:
        """Scan the source and yield block elements in document order.

        Never raises; lines that match no construct become paragraphs and
        blank lines produce nothing. A code block still open at the end of
        input is dropped.

        Yields:
            Block elements in document order.
        """
        if not self._source:
            return

        lines = split_lines(self._source)
        logger.debug("Scanning %d lines", len(lines))

        for line in lines:
            element = self._classify(line)
            if element is not None:
                yield element

        if self._mode is ScannerMode.CODE_FENCE:
            logger.debug(
                "Dropping unterminated code block (%d lines, language=%r)",
                len(self._code_lines),
                self._fence_language,
            )
            self._reset_fence()

    def _classify(self, line: str) -> BlockElement | None:
        """Classify one line, updating fence state as a side effect."""
        if self._is_fence(line):
            return self._toggle_fence(line)

        if self._mode is ScannerMode.CODE_FENCE:
            self._collect_code_line(line)
            return None

        element = (
            self._try_classify_header(line)
            or self._try_classify_video(line)
            or self._try_classify_image(line)
            or self._try_classify_link(line)
        )
        if element is not None:
            return element

        if not line.strip():
            return None
        return Paragraph(raw_text=line, inlines=tuple(resolve(line)))
