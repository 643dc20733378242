# Routes package init
"""
Notes API — Routes Package
============================

What:  HTTP route handlers that accept requests and return responses.
How:   Each route module handles a specific resource.

Route Inventory:
    - notes.py:   GET/POST /notes, GET/PUT/DELETE /notes/{id}
    - health.py:  /health_check (liveness check)
    - dependencies.py: get_note_store (injects the app's NoteStore)

Design Principle:
    Routes are THIN: they take validated input from FastAPI, call one
    NoteStore operation, and return the result. Error responses are built
    by the global exception handlers in main.py.
"""
