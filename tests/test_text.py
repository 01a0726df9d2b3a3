"""Tests for extract_text()."""

import pytest

from mdpreview import parse
from mdpreview.nodes import (
    BoldText,
    CodeBlock,
    Header,
    HorizontalRule,
    Image,
    ItalicText,
    Link,
    ListItem,
    Quote,
    SpoilerText,
    StrikethroughText,
    UnderlineText,
    Video,
)
from mdpreview.text import extract_text


class TestExtractTextBlocks:
    """extract_text on scanner-emitted elements."""

    def test_header(self) -> None:
        assert extract_text(Header(level=3, content="Title")) == "Title"

    def test_paragraph_drops_delimiters(self) -> None:
        (para,) = parse("**bold**, *it*, ~~gone~~, &u& and ||p||")
        assert extract_text(para) == "bold, it, gone, u and p"

    def test_escaped_paragraph_keeps_backslashes(self) -> None:
        (para,) = parse(r"\*\*x\*\*")
        assert extract_text(para) == r"\*\*x\*\*"

    def test_code_block(self) -> None:
        assert extract_text(CodeBlock(language="py", code="a\nb")) == "a\nb"

    def test_media(self) -> None:
        assert extract_text(Image(url="x.png", alt_text="description")) == "description"
        assert extract_text(Video(url="x.mp4", alt_text="caption")) == "caption"

    def test_link(self) -> None:
        assert extract_text(Link(url="https://example.com", text="click")) == "click"


class TestExtractTextRendererOnly:
    """extract_text on elements the scanner never emits."""

    @pytest.mark.parametrize(
        "element",
        [
            BoldText(text="t"),
            ItalicText(text="t"),
            StrikethroughText(text="t"),
            UnderlineText(text="t"),
            Quote(text="t"),
            ListItem(text="t", is_ordered=True, number=2),
            SpoilerText(text="t"),
        ],
    )
    def test_text_field(self, element) -> None:  # type: ignore[no-untyped-def]
        assert extract_text(element) == "t"

    def test_horizontal_rule(self) -> None:
        assert extract_text(HorizontalRule()) == ""
