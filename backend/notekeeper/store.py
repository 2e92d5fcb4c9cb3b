"""
NoteKeeper Backend — In-Memory Note Store
==========================================

What:  Owns the note collection and the ID counter.
How:   A dict keyed by note id plus an integer counter, both touched only
       while holding a threading.Lock.
Who:   One instance per application (created in main.create_app), used
       exclusively through NoteService.

Concurrency:
    Route handlers may overlap (async handlers on the event loop, sync code
    in the threadpool), so every operation below is a single critical section.
    Notes are copied on the way in and out; no caller ever holds a reference
    into the collection.
"""

import logging
import threading
from typing import Dict, Iterable, List, Optional

from notekeeper.models.note import Note

logger = logging.getLogger(__name__)


class NoteStore:
    """
    Lock-guarded collection of notes with a monotonic ID counter.

    The counter starts at the number of seeded notes and is incremented
    exactly once per successful create. Deleted ids are never reused.
    """

    def __init__(self) -> None:
        self._notes: Dict[int, Note] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def seed(self, notes: Iterable[Note]) -> None:
        """Load notes with fixed ids and move the counter past the highest one."""
        with self._lock:
            for note in notes:
                if note.id <= 0:
                    raise ValueError(f"Seed note id must be positive, got {note.id}")
                self._notes[note.id] = note.copy()
                self._last_id = max(self._last_id, note.id)
        logger.debug("Seeded %d notes (last id %d)", len(self._notes), self._last_id)

    def list(self) -> List[Note]:
        with self._lock:
            return [note.copy() for note in self._notes.values()]

    def get(self, note_id: int) -> Optional[Note]:
        with self._lock:
            note = self._notes.get(note_id)
            return note.copy() if note is not None else None

    def create(self, title: str, content: str) -> Note:
        with self._lock:
            self._last_id += 1
            note = Note(id=self._last_id, title=title, content=content)
            self._notes[note.id] = note
            return note.copy()

    def update(self, note_id: int, title: str, content: str) -> Optional[Note]:
        """Replace title and content; returns None when the id is absent."""
        with self._lock:
            if note_id not in self._notes:
                return None
            note = Note(id=note_id, title=title, content=content)
            self._notes[note_id] = note
            return note.copy()

    def delete(self, note_id: int) -> bool:
        with self._lock:
            return self._notes.pop(note_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._notes)

    @property
    def last_id(self) -> int:
        with self._lock:
            return self._last_id
