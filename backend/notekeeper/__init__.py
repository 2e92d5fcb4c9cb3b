"""
NoteKeeper Backend — Application Package Initializer
=====================================================

What: Marks the `notekeeper` directory as a Python package.
Who:  Imported by uvicorn (`notekeeper.main:app`), pytest, and `python -m notekeeper`.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP verbs, paths, status codes
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← ID parsing, create/update rules
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Note record + Pydantic contracts
    ├─────────────────────────────────────┤
    │          Store (In-Memory)          │  ← Lock-guarded collection + ID counter
    └─────────────────────────────────────┘

    Nothing is persisted. Restarting the process resets the collection to
    the seed notes.
"""

__version__ = "1.0.0"
