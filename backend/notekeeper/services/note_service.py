"""
NoteKeeper Backend — Note Service (Business Logic)
===================================================

What:  CRUD operations on notes, independent of HTTP concerns.
How:   Parses raw path ids, enforces the create/update rules, and delegates
       storage to NoteStore. Failures are raised as application exceptions
       and turned into HTTP responses by the global handlers in main.py.
Who:   Called by the route handlers in routes/notes.py.

ID handling:
    Path ids arrive as strings so a non-numeric id can be reported as
    "Invalid ID" (400) rather than FastAPI's generic 422.
    - "abc", "1.5", "1_0", " 1", "" → ValidationError  (400)
    - "0", "-3", unknown id          → NotFoundError    (404)
"""

import logging
import re
from typing import List

from notekeeper.exceptions import NotFoundError, ValidationError
from notekeeper.models.note import Note
from notekeeper.schemas.note import NotePayload, NoteResponse
from notekeeper.store import NoteStore

logger = logging.getLogger(__name__)

# ASCII digits only: no whitespace, underscores or Unicode digits
_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - list_notes():  every note, insertion order
        - get_note():    single note with Invalid ID / not found handling
        - create_note(): rejects client ids, stores with the next id
        - update_note(): replaces title/content, id preserved
        - delete_note(): removes the note; its id is never reused
    """

    def __init__(self, store: NoteStore):
        self.store = store

    @staticmethod
    def parse_id(raw_id: str) -> int:
        """
        Convert a path segment into a note id.

        Raises:
            ValidationError: raw_id is not a base-10 integer
        """
        if not isinstance(raw_id, str) or not _ID_PATTERN.fullmatch(raw_id):
            raise ValidationError(message="Invalid ID", field="id", context={"raw_id": raw_id})
        return int(raw_id)

    def list_notes(self) -> List[NoteResponse]:
        return [self._to_response(note) for note in self.store.list()]

    def get_note(self, raw_id: str) -> NoteResponse:
        """
        Retrieve a single note.

        Raises:
            ValidationError: non-numeric id (→ 400)
            NotFoundError:   no note with that id (→ 404)
        """
        note_id = self.parse_id(raw_id)
        note = self.store.get(note_id) if note_id > 0 else None
        if note is None:
            raise NotFoundError(resource="note", resource_id=note_id)
        return self._to_response(note)

    def create_note(self, payload: NotePayload) -> NoteResponse:
        """
        Store a new note under the next id.

        The collection is left untouched when the payload carries an id.

        Raises:
            ValidationError: payload.id is set and non-zero (→ 400)
        """
        if payload.has_client_id:
            raise ValidationError(
                message="ID must not be supplied",
                field="id",
                context={"supplied_id": payload.id},
            )
        note = self.store.create(title=payload.title, content=payload.content)
        logger.info("Note %d created", note.id)
        return self._to_response(note)

    def update_note(self, raw_id: str, payload: NotePayload) -> NoteResponse:
        """
        Replace title and content of an existing note; the path id wins over
        any id in the body.

        Raises:
            ValidationError: non-numeric id (→ 400)
            NotFoundError:   no note with that id (→ 404)
        """
        note_id = self.parse_id(raw_id)
        note = None
        if note_id > 0:
            note = self.store.update(note_id, title=payload.title, content=payload.content)
        if note is None:
            raise NotFoundError(resource="note", resource_id=note_id)
        logger.info("Note %d updated", note.id)
        return self._to_response(note)

    def delete_note(self, raw_id: str) -> None:
        note_id = self.parse_id(raw_id)
        if note_id <= 0 or not self.store.delete(note_id):
            raise NotFoundError(resource="note", resource_id=note_id)
        logger.info("Note %d deleted", note_id)

    @staticmethod
    def _to_response(note: Note) -> NoteResponse:
        return NoteResponse.model_validate(note)
