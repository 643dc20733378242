"""
Notes API — Command-Line Entry Point
======================================

Runs the application under uvicorn on the configured host and port:

    python -m notes_api
    notes-api                      (console script)

Equivalent to `uvicorn notes_api.main:app --host 127.0.0.1 --port 8000`.
"""

import uvicorn

from notes_api.config import settings


def main() -> None:
    uvicorn.run(
        "notes_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
