"""Typed elements for mdpreview.

All elements are frozen dataclasses with slots for:
- Immutability: safe to share the parsed result across threads
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: Python 3.10+ match statements work naturally

Element Hierarchy:
Element (base)
├── Block elements (emitted by the scanner)
│   ├── Header
│   ├── Image
│   ├── Video
│   ├── Link
│   ├── CodeBlock
│   └── Paragraph
└── Renderer-only elements (never emitted by the scanner)
    ├── BoldText
    ├── ItalicText
    ├── StrikethroughText
    ├── UnderlineText
    ├── Quote
    ├── ListItem
    ├── HorizontalRule
    └── SpoilerText

Paragraphs carry their styling as a tuple of InlineSpan runs rather than
child elements.

Thread Safety:
All elements are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import TypeAlias


class InlineKind(Enum):
    """Styling of an inline run inside a paragraph."""

    NORMAL = auto()
    BOLD = auto()  # **text** or __text__
    ITALIC = auto()  # *text* or _text_
    STRIKETHROUGH = auto()  # ~~text~~
    UNDERLINE = auto()  # &text&
    SPOILER = auto()  # ||text||


@dataclass(frozen=True, slots=True)
class InlineSpan:
    """A styled or plain run of text within a paragraph line.

    Styled spans hold the inner text with delimiters stripped.

    """

    kind: InlineKind
    text: str


# =============================================================================
# Base Element
# =============================================================================


@dataclass(frozen=True, slots=True)
class Element:
    """Base class for all elements."""


# =============================================================================
# Block Elements
# =============================================================================


@dataclass(frozen=True, slots=True)
class Header(Element):
    """ATX-style header.

    Markdown: # Title
    The level is the number of leading # characters and is not clamped,
    so ``####### x`` is a level 7 header.

    """

    level: int
    content: str


@dataclass(frozen=True, slots=True)
class Image(Element):
    """Image.

    Markdown: ![alt](url)

    """

    url: str
    alt_text: str


@dataclass(frozen=True, slots=True)
class Video(Element):
    """Embedded video.

    Markdown: ![video](url) "caption"

    """

    url: str
    alt_text: str


@dataclass(frozen=True, slots=True)
class Link(Element):
    """Hyperlink.

    Markdown: [text](url)

    """

    url: str
    text: str


@dataclass(frozen=True, slots=True)
class CodeBlock(Element):
    """Fenced code block.

    Lines between the fences are kept verbatim and joined with ``\\n``.

    """

    language: str
    code: str


@dataclass(frozen=True, slots=True)
class Paragraph(Element):
    """A line of body text.

    Concatenating ``inlines`` with their delimiters restored reproduces
    ``raw_text`` exactly.

    """

    raw_text: str
    inlines: tuple[InlineSpan, ...] = ()


# =============================================================================
# Renderer-only Elements
# =============================================================================


@dataclass(frozen=True, slots=True)
class BoldText(Element):
    text: str


@dataclass(frozen=True, slots=True)
class ItalicText(Element):
    text: str


@dataclass(frozen=True, slots=True)
class StrikethroughText(Element):
    text: str


@dataclass(frozen=True, slots=True)
class UnderlineText(Element):
    text: str


@dataclass(frozen=True, slots=True)
class Quote(Element):
    """Block quote.

    Markdown: > text

    """

    text: str


@dataclass(frozen=True, slots=True)
class ListItem(Element):
    """List item.

    Markdown: - text, * text, + text, or 1. text

    """

    text: str
    is_ordered: bool = False
    number: int | None = None


@dataclass(frozen=True, slots=True)
class HorizontalRule(Element):
    """Horizontal rule.

    Markdown: ---, ***, or ___

    """


@dataclass(frozen=True, slots=True)
class SpoilerText(Element):
    text: str


# =============================================================================
# Type Aliases
# =============================================================================

BlockElement: TypeAlias = Header | Image | Video | Link | CodeBlock | Paragraph

MarkdownElement: TypeAlias = (
    Header
    | Image
    | Video
    | Link
    | CodeBlock
    | Paragraph
    | BoldText
    | ItalicText
    | StrikethroughText
    | UnderlineText
    | Quote
    | ListItem
    | HorizontalRule
    | SpoilerText
)
