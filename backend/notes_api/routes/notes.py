"""
Notes API — Notes Route Handlers
==================================

What:  CRUD endpoints for notes under /notes.
Why:   Exposes the NoteStore over HTTP.
How:   FastAPI validates path ids and JSON bodies against the Note schema,
       handlers delegate to the injected NoteStore, and NoteNotFoundError
       is rendered as a 404 NoteError by the global exception handler.

Endpoint Inventory:
    GET    /notes          list every note          → 200
    GET    /notes/{id}     fetch one note           → 200 | 404
    POST   /notes          create a note            → 201
    PUT    /notes/{id}     replace a note           → 200 | 404
    DELETE /notes/{id}     delete a note            → 200 | 404

Malformed bodies and out-of-range ids never reach the store: FastAPI
answers them with 422 during request validation.
"""

import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, status

from notes_api.routes.dependencies import get_note_store
from notes_api.schemas.note import NOTE_ID_MAX, NOTE_ID_MIN, Note, NoteError
from notes_api.store import NoteStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Notes"])

# Shared path parameter type for /notes/{note_id}
NoteId = Annotated[
    int,
    Path(ge=NOTE_ID_MIN, le=NOTE_ID_MAX, description="Note identifier (unsigned 32-bit)"),
]

NOT_FOUND_RESPONSE = {404: {"description": "Note not found", "model": NoteError}}


@router.get(
    "/notes",
    response_model=List[Note],
    summary="List all notes",
    description="Returns every stored note in insertion order.",
)
async def list_notes(store: NoteStore = Depends(get_note_store)) -> List[Note]:
    return store.list_notes()


@router.get(
    "/notes/{note_id}",
    response_model=Note,
    responses=NOT_FOUND_RESPONSE,
    summary="Get a single note by id",
)
async def get_note(
    note_id: NoteId,
    store: NoteStore = Depends(get_note_store),
) -> Note:
    """
    Return the note with the given id.

    If several notes share the id, the earliest created one is returned.
    """
    return store.get_note(note_id)


@router.post(
    "/notes",
    response_model=Note,
    status_code=status.HTTP_201_CREATED,
    summary="Create a note",
    description=(
        "Appends the note to the store. The id is supplied by the client and "
        "is not checked for uniqueness."
    ),
)
async def create_note(
    note: Note,
    store: NoteStore = Depends(get_note_store),
) -> Note:
    created = store.create_note(note)
    logger.info("Note %d created", created.id)
    return created


@router.put(
    "/notes/{note_id}",
    response_model=Note,
    responses=NOT_FOUND_RESPONSE,
    summary="Replace a note",
    description=(
        "Replaces the note with the given id, keeping its position. The stored "
        "record takes the id from the body, which may differ from the path id."
    ),
)
async def update_note(
    note: Note,
    note_id: NoteId,
    store: NoteStore = Depends(get_note_store),
) -> Note:
    updated = store.update_note(note_id, note)
    if updated.id != note_id:
        logger.info("Note %d replaced and renamed to %d", note_id, updated.id)
    else:
        logger.info("Note %d replaced", note_id)
    return updated


@router.delete(
    "/notes/{note_id}",
    response_model=Note,
    responses=NOT_FOUND_RESPONSE,
    summary="Delete a note",
    description="Removes the note with the given id and returns the deleted record.",
)
async def delete_note(
    note_id: NoteId,
    store: NoteStore = Depends(get_note_store),
) -> Note:
    deleted = store.delete_note(note_id)
    logger.info("Note %d deleted", note_id)
    return deleted
