"""
NoteKeeper Backend — Note Domain Model
=======================================

What:  The record held in the in-memory collection.
Who:   Created and copied by NoteStore; converted to NoteResponse by NoteService.

Lifecycle:
    1. Created on POST /notes (id assigned by the store, never by the client)
    2. Title/content replaced on PUT /notes/{id} (id preserved)
    3. Removed on DELETE /notes/{id}; its id is never handed out again

Invariant: every note in the collection has an id > 0 equal to its key.
"""

from dataclasses import dataclass, replace


@dataclass
class Note:
    """A short text record identified by a server-assigned integer id."""

    id: int
    title: str
    content: str

    def copy(self) -> "Note":
        return replace(self)
