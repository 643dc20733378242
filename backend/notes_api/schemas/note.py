"""
Notes API — Pydantic Note Schemas
===================================

What:  Pydantic models for the note record and the not-found error body.
Why:   Strict input validation, automatic serialization, and OpenAPI doc generation.
How:   FastAPI validates request bodies against Note and serializes both
       Note and NoteError responses. NoteStore stores Note instances directly.

Design Decision:
    Success and failure travel as two distinct types: a handler either
    returns a Note or the store raises NoteNotFoundError, which the global
    handler renders as a NoteError. Neither type knows about HTTP.
"""

from pydantic import BaseModel, Field

# Note ids are unsigned 32-bit integers
NOTE_ID_MIN = 0
NOTE_ID_MAX = 2**32 - 1


class Note(BaseModel):
    """
    What:  A single note: caller-assigned id plus free-form text.
    Who:   Request body of POST/PUT /notes, response body of every
           successful note endpoint, and the record NoteStore holds.

    Fields are strict: a string, float or boolean id is a malformed body,
    not something to coerce into an integer.

    Frozen so that snapshots handed out by NoteStore.list_notes() can never
    be modified behind the store's lock.
    """
    id: int = Field(
        strict=True,
        ge=NOTE_ID_MIN,
        le=NOTE_ID_MAX,
        description="Caller-assigned note identifier (unsigned 32-bit)",
    )
    text: str = Field(strict=True, description="Note text")

    model_config = {"frozen": True}


class NoteError(BaseModel):
    """
    What:  Error body for a note id that does not exist.
    Who:   Returned with 404 by GET, PUT and DELETE /notes/{id}.

    Example:
        {"id": 7, "err": "note not found"}
    """
    id: int = Field(description="The id that was requested")
    err: str = Field(description="Human-readable error message")
