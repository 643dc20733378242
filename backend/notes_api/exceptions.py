"""
Notes API — Custom Exception Hierarchy
========================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Custom exceptions let the store report failures without knowing
       anything about HTTP. Global exception handlers (registered in main.py)
       turn them into structured JSON responses with the right status code.
How:   Each exception class carries a message and optional context dict.
Who:   Raised by NoteStore; caught by the handlers in main.py.

Exception Hierarchy:
    NotesAPIError (base)
    └── NoteNotFoundError   → 404 Not Found, body {"id": ..., "err": ...}

Design Decision:
    The store raises instead of returning sentinel values so every caller
    is forced to deal with a missing note. The HTTP layer decides the
    response shape; the store only says which id was missing.
"""

from typing import Any, Dict, Optional


class NotesAPIError(Exception):
    """
    Base exception for all Notes API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NoteNotFoundError(NotesAPIError):
    """
    Raised when no note in the store carries the requested id.

    When:    get/update/delete with an id that is not present.
    HTTP:    404 Not Found

    The requested id is kept on the exception so the response body can
    echo it back to the client.
    """

    def __init__(
        self,
        note_id: int,
        message: str = "note not found",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["note_id"] = note_id
        super().__init__(message=message, context=ctx)
        self.note_id = note_id
