"""
NoteKeeper Backend — Middleware Package
========================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    Request ID runs first so the access log line carries the ID; the
    response passes back through the same chain in reverse.
"""
