"""Line classification mixins for the block scanner.

Each mixin provides pure classification of a single line into a block
element, or None when the line does not match.
"""

from mdpreview.scanner.classifiers.fence import FenceClassifierMixin
from mdpreview.scanner.classifiers.heading import HeadingClassifierMixin
from mdpreview.scanner.classifiers.media import MediaClassifierMixin

__all__ = [
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
    "MediaClassifierMixin",
]
