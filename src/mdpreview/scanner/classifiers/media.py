"""Video, image and link classifier mixin.

The three constructs share a bracket/paren grammar and are tried in a fixed
order: video, then image, then link. A video line is also a syntactically
valid image, and every image contains a valid link after its ``!``, so each
classifier must run before the next one gets a chance at the line.

Patterns are searched anywhere in the line. Text around the construct is
not kept.
"""

import re

from mdpreview.nodes import Image, Link, Video

_VIDEO_RE = re.compile(r'!\[video\]\((?P<url>[^)]+)\)\s*"(?P<alt>[^"]+)"')
_IMAGE_RE = re.compile(r"!\[(?P<alt>[^\]]+)\]\((?P<url>[^)]+)\)")
_LINK_RE = re.compile(r"\[(?P<text>[^\]]+)\]\((?P<url>[^)]+)\)")

# Alt text that marks an image line as a video embed.
VIDEO_ALT = "video"


class MediaClassifierMixin:
    """Mixin providing video, image and link classification."""

    def _try_classify_video(self, line: str) -> Video | None:
        """Try to classify line as a video embed: ``![video](url) "caption"``."""
        match = _VIDEO_RE.search(line)
        if match is None:
            return None
        return Video(url=match.group("url"), alt_text=match.group("alt"))

    def _try_classify_image(self, line: str) -> Image | None:
        """Try to classify line as an image: ``![alt](url)``.

        An image whose alt text is ``video`` (any case) is never an Image.
        Such a line only becomes a Video when it also carries a quoted
        caption; otherwise it falls through to the link rule.
        """
        match = _IMAGE_RE.search(line)
        if match is None or match.group("alt").lower() == VIDEO_ALT:
            return None
        return Image(url=match.group("url"), alt_text=match.group("alt"))

    def _try_classify_link(self, line: str) -> Link | None:
        """Try to classify line as a link: ``[text](url)``."""
        match = _LINK_RE.search(line)
        if match is None:
            return None
        return Link(url=match.group("url"), text=match.group("text"))
