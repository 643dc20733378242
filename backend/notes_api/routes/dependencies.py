"""
Notes API — Route Dependencies
================================

What:  FastAPI dependencies shared by the route modules.
Why:   Keeps HTTP-specific wiring out of the store module; NoteStore itself
       knows nothing about requests.
"""

from fastapi import Request

from notes_api.store import NoteStore


def get_note_store(request: Request) -> NoteStore:
    """
    Provide the NoteStore owned by the application serving this request.

    create_app() attaches the store to app.state, so each app instance (and
    each test app) serves exactly the store it was built with.

    Example usage in a route:
        @router.get("/notes")
        async def list_notes(store: NoteStore = Depends(get_note_store)):
            return store.list_notes()
    """
    return request.app.state.note_store
