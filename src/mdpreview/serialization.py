"""Element serialization and diagnostic dumps.

Converts elements to/from JSON-compatible dicts. Useful for:
- Handing parse results to a renderer in another process
- Debugging and inspection (dump() gives one line per element)

All JSON output is deterministic (sorted keys).

Example:
    from mdpreview import parse
    from mdpreview.serialization import dump, from_json, to_json

    elements = parse("# Hello **World**")
    restored = from_json(to_json(elements))
    assert restored == elements
    print(dump(elements))

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from mdpreview.errors import SerializationError
from mdpreview.nodes import (
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

# Registry of element type names to classes for deserialization
_ELEMENT_TYPES: dict[str, type[Element]] = {
    cls.__name__: cls
    for cls in (
        Header,
        Image,
        Video,
        Link,
        CodeBlock,
        Paragraph,
        BoldText,
        ItalicText,
        StrikethroughText,
        UnderlineText,
        Quote,
        ListItem,
        HorizontalRule,
        SpoilerText,
    )
}


def to_dict(element: MarkdownElement) -> dict[str, Any]:
    """Convert an element to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Args:
        element: Any mdpreview element.

    Returns:
        Dict with ``_type`` and all element fields.

    """
    result: dict[str, Any] = {"_type": type(element).__name__}
    for f in fields(element):
        result[f.name] = _serialize_value(getattr(element, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, InlineSpan):
        return {"kind": value.kind.name, "text": value.text}
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, bool, None
    return value


def from_dict(data: dict[str, Any]) -> MarkdownElement:
    """Reconstruct a typed element from a dict.

    Args:
        data: Dict with ``_type`` and element fields (as produced by to_dict).

    Returns:
        Typed element (frozen dataclass).

    Raises:
        SerializationError: If ``_type`` is missing or unknown, a required
            field is missing, or an inline span is malformed.

    """
    type_name = data.get("_type")
    if type_name is None:
        raise SerializationError("Missing '_type' field in serialized element")

    element_cls = _ELEMENT_TYPES.get(type_name)
    if element_cls is None:
        raise SerializationError(f"Unknown element type: {type_name!r}", type_name=type_name)

    kwargs: dict[str, Any] = {}
    for f in fields(element_cls):
        if f.name not in data:
            continue
        raw = data[f.name]
        if f.name == "inlines":
            raw = tuple(_deserialize_span(span) for span in raw)
        kwargs[f.name] = raw

    try:
        return element_cls(**kwargs)  # type: ignore[return-value]
    except TypeError as e:
        raise SerializationError(f"Invalid {type_name} fields: {e}", type_name=type_name) from e


def _deserialize_span(data: dict[str, Any]) -> InlineSpan:
    try:
        return InlineSpan(kind=InlineKind[data["kind"]], text=data["text"])
    except (KeyError, TypeError) as e:
        raise SerializationError(f"Invalid inline span: {data!r}") from e


def to_json(elements: list[MarkdownElement], *, indent: int | None = None) -> str:
    """Serialize a parse result to a JSON string.

    Args:
        elements: Elements as returned by parse().
        indent: JSON indentation (None for compact).

    Returns:
        Deterministic JSON string (sorted keys).

    """
    return json.dumps([to_dict(e) for e in elements], sort_keys=True, indent=indent)


def from_json(data: str) -> list[MarkdownElement]:
    """Deserialize a parse result from a JSON string.

    Raises:
        SerializationError: If an entry cannot be reconstructed (see from_dict).

    """
    return [from_dict(item) for item in json.loads(data)]


def format_element(element: MarkdownElement) -> str:
    """Format one element as ``TypeName field=value ...``.

    Inline spans render as ``Kind:'text'``.
    """
    parts = [type(element).__name__]
    for f in fields(element):
        parts.append(f"{f.name}={_format_value(getattr(element, f.name))}")
    return " ".join(parts)


def _format_value(value: Any) -> str:
    if isinstance(value, InlineSpan):
        return f"{value.kind.name.title()}:{value.text!r}"
    if isinstance(value, tuple):
        return "[" + ", ".join(_format_value(v) for v in value) + "]"
    if isinstance(value, str):
        return repr(value)
    return str(value)


def dump(elements: list[MarkdownElement]) -> str:
    """Render a parse result as text, one line per element.

    Example:
        >>> print(dump(parse("# Title\\n**hi** there")))
        Header level=1 content='Title'
        Paragraph raw_text='**hi** there' inlines=[Bold:'hi', Normal:' there']

    """
    return "\n".join(format_element(e) for e in elements)
