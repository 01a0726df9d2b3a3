"""
mdpreview — Markdown-to-elements parser for live previews

Converts a practical subset of Markdown into a flat, ordered list of typed,
immutable elements that a preview pane can render one by one.

Quick Start:
    >>> from mdpreview import parse
    >>> parse("# Hello")
    [Header(level=1, content='Hello')]

    >>> from mdpreview.serialization import dump
    >>> print(dump(parse("**bold** and *italic*")))
    Paragraph raw_text='**bold** and *italic*' inlines=[Bold:'bold', Normal:' and ', Italic:'italic']

Supported constructs:
    Block level (one per line): ``# header``, fenced code blocks,
    ``![video](url) "caption"``, ``![alt](url)``, ``[text](url)``,
    paragraphs.
    Inline (inside paragraphs): ``**bold**``/``__bold__``,
    ``*italic*``/``_italic_``, ``~~strike~~``, ``&underline&``,
    ``||spoiler||``.

Parsing never raises. Anything that doesn't match a construct is kept as
plain paragraph text.
"""

from mdpreview.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from mdpreview.errors import MdPreviewError, SerializationError
from mdpreview.inline import resolve
from mdpreview.nodes import (
    BlockElement,
    BoldText,
    CodeBlock,
    Element,
    Header,
    HorizontalRule,
    Image,
    InlineKind,
    InlineSpan,
    ItalicText,
    Link,
    ListItem,
    MarkdownElement,
    Paragraph,
    Quote,
    SpoilerText,
    StrikethroughText,
    UnderlineText,
    Video,
)
from mdpreview.sample import SAMPLE_DOCUMENT
from mdpreview.scanner import BlockScanner
from mdpreview.serialization import dump, from_json, to_json
from mdpreview.text import extract_text

__version__ = "0.1.0"


def parse(source: str, *, config: ParseConfig | None = None) -> list[MarkdownElement]:
    """Parse Markdown source into an ordered list of elements.

    Args:
        source: Markdown source text; any mix of ``\\r\\n``, ``\\r`` and
            ``\\n`` line endings
        config: Parse configuration for this call (defaults to the
            context's active config, see parse_config_context)

    Returns:
        Elements in document order. Empty for empty input.

    Example:
        >>> parse("```js\\ncode\\n```")
        [CodeBlock(language='js', code='code')]

    Thread Safety:
        Safe to call concurrently; config is scoped to the calling context.
    """
    if config is None:
        return list(BlockScanner(source).scan())
    with parse_config_context(config):
        return list(BlockScanner(source).scan())


__all__ = [
    # Main API
    "parse",
    "resolve",
    "SAMPLE_DOCUMENT",
    "__version__",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    # Errors
    "MdPreviewError",
    "SerializationError",
    # Scanner
    "BlockScanner",
    # Elements
    "BlockElement",
    "BoldText",
    "CodeBlock",
    "Element",
    "Header",
    "HorizontalRule",
    "Image",
    "InlineKind",
    "InlineSpan",
    "ItalicText",
    "Link",
    "ListItem",
    "MarkdownElement",
    "Paragraph",
    "Quote",
    "SpoilerText",
    "StrikethroughText",
    "UnderlineText",
    "Video",
    # Helpers
    "dump",
    "extract_text",
    "from_json",
    "to_json",
]
