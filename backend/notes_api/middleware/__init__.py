# Middleware package init
"""
Notes API — Middleware Package
================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request Context] → [CORS] → Route Handler

    1. Request context first: assigns the correlation id and logs the
       response status and duration once the response is built
    2. CORS: FastAPI's CORSMiddleware (handles browser preflight)
"""
