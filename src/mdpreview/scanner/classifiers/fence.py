"""Fenced code block classifier mixin."""

from mdpreview.config import get_parse_config
from mdpreview.nodes import CodeBlock
from mdpreview.scanner.modes import FENCE_MARKER, ScannerMode


class FenceClassifierMixin:
    """Mixin providing fenced code block detection and accumulation."""

    # These will be set by the BlockScanner class
    _mode: ScannerMode
    _fence_language: str | None
    _code_lines: list[str]

    def _is_fence(self, line: str) -> bool:
        """Check if line opens or closes a fenced code block.

        Any line whose stripped content starts with three backticks is a
        fence, whatever follows the backticks.
        """
        return line.strip().startswith(FENCE_MARKER)

    def _toggle_fence(self, line: str) -> CodeBlock | None:
        """Open or close a code block on a fence line.

        Opening fence: the text after the backticks, stripped, becomes the
        language (None when empty). Closing fence: the accumulated lines are
        joined with ``\\n`` and the accumulator resets. Text after a closing
        fence's backticks is ignored.

        Args:
            line: A line for which _is_fence() is True

        Returns:
            CodeBlock when the fence closes a block, None when it opens one.
        """
        if self._mode is ScannerMode.CODE_FENCE:
            language = self._fence_language or get_parse_config().default_code_language
            block = CodeBlock(language=language, code="\n".join(self._code_lines))
            self._reset_fence()
            return block

        info = line.strip()[len(FENCE_MARKER) :].strip()
        self._fence_language = info or None
        self._code_lines = []
        self._mode = ScannerMode.CODE_FENCE
        return None

    def _collect_code_line(self, line: str) -> None:
        """Append a line inside a code block verbatim."""
        self._code_lines.append(line)

    def _reset_fence(self) -> None:
        self._mode = ScannerMode.BLOCK
        self._fence_language = None
        self._code_lines = []
