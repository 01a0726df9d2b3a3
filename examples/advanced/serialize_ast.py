"""Hand parsed elements to another process — JSON round-trip."""

from mdpreview import parse
from mdpreview.serialization import from_json, to_json

elements = parse("# Cached document\n\nThese elements can be **serialized** and restored.")

json_str = to_json(elements)
restored = from_json(json_str)

print("Original == restored:", elements == restored)
print("JSON length:", len(json_str), "chars")
