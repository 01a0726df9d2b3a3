"""Extract plain text from mdpreview elements.

Example:
    >>> from mdpreview import parse
    >>> from mdpreview.text import extract_text
    >>> [extract_text(e) for e in parse("# Hello\\n**bold** move")]
    ['Hello', 'bold move']
"""

from typing import assert_never

from mdpreview.nodes import (
    BoldText,
    CodeBlock,
    Header,
    HorizontalRule,
    Image,
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


def extract_text(element: MarkdownElement) -> str:
    """Extract plain text from any element.

    Paragraphs concatenate their span texts (delimiters dropped). Media
    elements contribute their alt text, links their label.

    Args:
        element: Any element variant.

    Returns:
        Plain text content.

    """
    match element:
        case Header():
            return element.content
        case Paragraph():
            return "".join(span.text for span in element.inlines)
        case CodeBlock():
            return element.code
        case Image() | Video():
            return element.alt_text
        case Link():
            return element.text
        case (
            BoldText()
            | ItalicText()
            | StrikethroughText()
            | UnderlineText()
            | Quote()
            | ListItem()
            | SpoilerText()
        ):
            return element.text
        case HorizontalRule():
            return ""
        case _:
            assert_never(element)
