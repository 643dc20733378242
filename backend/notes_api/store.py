"""
Notes API — In-Memory Note Store
==================================

What:  The authoritative, lock-guarded collection of notes.
Why:   Every request reads or writes the same collection, so all access goes
       through one object that serializes operations.
How:   A plain list kept in insertion order, guarded by a single threading.Lock.
       Each operation holds the lock for its whole duration.
Who:   Built by create_app(); handed to route handlers by routes.dependencies.
When:  Created once per application instance; lives until the process exits.

Concurrency Model:
    One coarse lock covers the entire list (no per-note locks). Operations
    are therefore atomic with respect to each other and appear in the order
    the lock was acquired. The lock only ever wraps in-memory list work,
    never I/O or an await, so holding it from an async handler does not
    stall the event loop for longer than the list manipulation itself.

    If anything raises inside a critical section, the `with` block releases
    the lock and the exception propagates. Each mutation is a single list
    operation, so the list is never left half-updated.

Lookup:
    Linear scan by id. Ids are caller-assigned and not checked for
    uniqueness on create; get/update/delete always act on the first match.
"""

import logging
import threading
from typing import Iterable, List, Optional

from notes_api.exceptions import NoteNotFoundError
from notes_api.schemas.note import Note

logger = logging.getLogger(__name__)


# Loaded at startup when settings.seed_notes is enabled
SEED_NOTES = (
    Note(id=1, text="FastAPI seems to be a handy back-end framework"),
    Note(id=2, text="Web application is supposed to be properly tested"),
)


class NoteStore:
    """
    Concurrency-safe, insertion-ordered collection of Note records.

    Operations:
        - list_notes():          snapshot of every note, in insertion order
        - get_note(id):          first note with id, or NoteNotFoundError
        - create_note(note):     append, always succeeds
        - update_note(id, note): replace first match in place
        - delete_note(id):       remove and return first match

    Usage:
        store = NoteStore(SEED_NOTES)
        store.create_note(Note(id=3, text="hello"))
        store.get_note(3)
    """

    def __init__(self, notes: Optional[Iterable[Note]] = None):
        self._notes: List[Note] = list(notes or [])
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._notes)

    def _index_of(self, note_id: int) -> int:
        """Position of the first note with note_id. Caller must hold the lock."""
        for index, note in enumerate(self._notes):
            if note.id == note_id:
                return index
        raise NoteNotFoundError(note_id)

    def list_notes(self) -> List[Note]:
        """Return a snapshot of all notes in insertion order."""
        with self._lock:
            return list(self._notes)

    def get_note(self, note_id: int) -> Note:
        """
        Return the first note whose id matches.

        Raises:
            NoteNotFoundError: No note has this id
        """
        with self._lock:
            return self._notes[self._index_of(note_id)]

    def create_note(self, note: Note) -> Note:
        """
        Append a note to the end of the collection.

        Duplicate ids are accepted; the earlier note keeps answering
        id-based lookups until it is deleted.
        """
        with self._lock:
            self._notes.append(note)
            logger.debug("Created note %d (store size %d)", note.id, len(self._notes))
        return note

    def update_note(self, note_id: int, note: Note) -> Note:
        """
        Replace the first note with note_id, keeping its position.

        The stored record is `note` as given. If its id differs from
        note_id the note is effectively renamed.

        Raises:
            NoteNotFoundError: No note has note_id
        """
        with self._lock:
            index = self._index_of(note_id)
            self._notes[index] = note
            logger.debug("Updated note %d at position %d (now id %d)", note_id, index, note.id)
        return note

    def delete_note(self, note_id: int) -> Note:
        """
        Remove the first note with note_id and return it.

        Remaining notes keep their relative order.

        Raises:
            NoteNotFoundError: No note has note_id
        """
        with self._lock:
            deleted = self._notes.pop(self._index_of(note_id))
            logger.debug("Deleted note %d (store size %d)", note_id, len(self._notes))
        return deleted

