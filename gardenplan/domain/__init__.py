"""Domain layer (pure logic).

- Keep placement edits and seasonal calculations here.
- Avoid I/O: no DB sessions, no HTTP/FastAPI, no caches.
- Prefer deterministic functions (ids and "today" passed in as arguments).
"""
