"""
Notes API — Request Context Middleware
========================================

What:  Gives each request a correlation id and writes one access-log line for it.
Why:   A note request touches the shared store exactly once; one line per
       request, tagged with an id the client also sees, is enough to trace it.
How:   The id is taken from X-Request-ID or generated, kept in
       request.state.request_id (the exception handlers in main.py read it
       from there) and echoed on the response. The access line is logged at a
       level chosen from the status class.

Example line:
    2026-01-15T12:00:00 [WARNING] notes_api.access: GET /notes/7 404 0.4ms [a1b2c3d4]
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("notes_api.access")

REQUEST_ID_HEADER = "X-Request-ID"

# Health checks are polled every few seconds and are not logged
UNLOGGED_PATHS = frozenset({"/health_check"})


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


def request_id_of(request: Request) -> str:
    """Correlation id assigned by RequestContextMiddleware, or "" outside it."""
    return getattr(request.state, "request_id", "")


def access_log_level(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestContextMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        request.state.request_id = rid

        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000

        response.headers[REQUEST_ID_HEADER] = rid

        if request.url.path not in UNLOGGED_PATHS:
            logger.log(
                access_log_level(response.status_code),
                "%s %s %d %.1fms [%s]",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
                rid,
            )
        return response
