"""Exception classes for mdpreview.

Parsing itself never raises: malformed input degrades to plain paragraph
text. These exceptions cover the surrounding helpers.
"""

from __future__ import annotations


class MdPreviewError(Exception):
    """Base exception for all mdpreview errors.

    Subclass this for specific error categories.
    """

    pass


class SerializationError(MdPreviewError, ValueError):
    """Error while reconstructing elements from serialized data.

    Raised when a ``_type`` discriminator is missing or names an unknown
    element type.
    """

    def __init__(self, message: str, type_name: str | None = None) -> None:
        """Initialize serialization error.

        Args:
            message: Error description
            type_name: The offending ``_type`` value, if any
        """
        self.type_name = type_name
        super().__init__(message)
