"""
NoteKeeper Backend — CLI Entry Point
=====================================

Usage:
    python -m notekeeper
    BACKEND_PORT=9000 LOG_LEVEL=DEBUG python -m notekeeper

Equivalent to `uvicorn notekeeper.main:app --host $BACKEND_HOST --port $BACKEND_PORT`.
"""

import uvicorn

from notekeeper.config import settings


def main() -> None:
    uvicorn.run(
        "notekeeper.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
