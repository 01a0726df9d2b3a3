"""Parse the built-in sample document and print one line per element."""

from mdpreview import SAMPLE_DOCUMENT, parse
from mdpreview.serialization import dump

elements = parse(SAMPLE_DOCUMENT)
print(dump(elements))
