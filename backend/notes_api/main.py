"""
Notes API — FastAPI Application Factory
=========================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes middleware registration, route mounting, exception
       mapping and store construction in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       that owns its own NoteStore.
Who:   Called by uvicorn (uvicorn notes_api.main:app), by `python -m notes_api`
       and by the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌───────────────────────┐ ┌──────────────┐         │
    │  │  Request Context      │→│  CORS        │         │
    │  └───────────────────────┘ └──────────────┘         │
    │                                                     │
    │  Routes:                                            │
    │  ┌────────────────────────┐ ┌────────────────────┐  │
    │  │ /notes, /notes/{id}    │ │ /health_check      │  │
    │  └────────────────────────┘ └────────────────────┘  │
    │                                                     │
    │  app.state.note_store: NoteStore (one per app)      │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ NoteNotFoundError→404 │ Exception→500        │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from notes_api import __version__
from notes_api.config import settings
from notes_api.exceptions import NoteNotFoundError
from notes_api.middleware.request_context import (
    REQUEST_ID_HEADER,
    RequestContextMiddleware,
    request_id_of,
)
from notes_api.routes import health, notes
from notes_api.schemas.note import NoteError
from notes_api.store import SEED_NOTES, NoteStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Level:  settings.log_level
    Output: stdout
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # notes_api.access already logs every request with timing
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and report what the store was seeded with.
    Shutdown: log how many notes are discarded (nothing is persisted).
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("Notes API %s starting up...", __version__)
    logger.info("Note store ready with %d note(s)", len(app.state.note_store))
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info(
        "Notes API shutting down, discarding %d in-memory note(s)",
        len(app.state.note_store),
    )


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        NoteNotFoundError   → 404 {"id": ..., "err": ...}
        Exception           → 500 (unexpected errors, stack trace logged)

    Request validation failures (malformed JSON, out-of-range ids) keep
    FastAPI's default 422 response.

    Security: handlers never put stack traces or internal context in the
    response body. Details are logged server-side.
    """

    @app.exception_handler(NoteNotFoundError)
    async def handle_note_not_found(request: Request, exc: NoteNotFoundError):
        """Requested note id doesn't exist."""
        rid = request_id_of(request)
        logger.info("[%s] Note %d not found (%s %s)", rid, exc.note_id, request.method, request.url.path)
        return JSONResponse(
            status_code=404,
            content=NoteError(id=exc.note_id, err=exc.message).model_dump(),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all for truly unexpected errors.

        The store releases its lock when an operation raises, so the
        request fails with 500 while the process keeps serving.

        Starlette runs this handler outside the middleware stack, so the
        request id header is set here rather than by RequestContextMiddleware.
        """
        rid = request_id_of(request)
        logger.error(
            "[%s] Unexpected error: %s",
            rid,
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
            headers={REQUEST_ID_HEADER: rid} if rid else None,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[NoteStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: NoteStore to serve. When omitted a new store is built,
               seeded with SEED_NOTES if settings.seed_notes is enabled.

    Returns:
        Fully configured FastAPI instance ready to receive requests.

    Why the store is built here (not in lifespan):
        Test clients that skip the lifespan still get a working store, and
        each app instance owns exactly one store.
    """
    if store is None:
        store = NoteStore(SEED_NOTES if settings.seed_notes else ())

    app = FastAPI(
        title="Notes API",
        description="In-memory notes service: list, fetch, create, replace and delete notes.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.note_store = store

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestContext → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(RequestContextMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(notes.router)
    app.include_router(health.router)

    return app


# uvicorn expects `notes_api.main:app` to be importable
app = create_app()
