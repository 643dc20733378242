"""
Notes API — Health Check Route
==============================

What:  /health_check for process monitors and load balancer checks.
Why:   Lets an orchestrator confirm the process is accepting requests.
How:   GET answers 200; every other method, including HEAD, TRACE and
       non-standard ones, answers 400. Both responses have an empty body
       and never touch the NoteStore.

Why a plain Starlette route (not @router.get):
    FastAPI routes match a fixed method list and answer anything else with
    405 before the handler runs. A Starlette route registered without a
    method list matches every method, so the handler decides the status.
    It is left out of the OpenAPI schema.
"""

from fastapi import APIRouter, Request, Response, status

router = APIRouter(tags=["Health"])


async def health_check(request: Request) -> Response:
    if request.method == "GET":
        return Response(status_code=status.HTTP_200_OK)
    return Response(status_code=status.HTTP_400_BAD_REQUEST)


router.add_route("/health_check", health_check, include_in_schema=False)
