"""Notes loaded into the store at startup (ids 1-4, counter starts at 4)."""

from typing import List

from notekeeper.models.note import Note

SEED_NOTES: List[Note] = [
    Note(id=1, title="First Note", content="Just a note"),
    Note(id=2, title="Shopping List", content="Milk, eggs, bread and coffee"),
    Note(id=3, title="Meeting", content="Team sync on Monday at 10am"),
    Note(id=4, title="Ideas", content="Add tags to notes someday"),
]
