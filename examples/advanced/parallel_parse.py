"""Thread-safe by construction — parse 1000 docs in parallel."""

from concurrent.futures import ThreadPoolExecutor

from mdpreview import parse

docs = ["# Doc " + str(i) + "\n\nContent with **bold** text " + str(i) for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(parse, docs))

print(f"Parsed {len(results)} documents in parallel")
print("First doc elements:", len(results[0]))
print("Last doc elements:", len(results[-1]))
