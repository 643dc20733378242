"""
Notes API — Application Package Initializer
=============================================

What: Marks the `notes_api` directory as a Python package.
Why:  Enables module imports like `from notes_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The service is split into three thin layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Schemas (API Contract)      │  ← Pydantic Note / NoteError
    ├─────────────────────────────────────┤
    │        NoteStore (In-Memory Core)   │  ← Lock-guarded note collection
    └─────────────────────────────────────┘

    Routes never touch the underlying list; they receive a NoteStore through
    FastAPI's dependency injection and translate its results and errors into
    HTTP responses. Nothing is persisted: restarting the process resets the
    store to its seed notes.
"""

__version__ = "1.0.0"
