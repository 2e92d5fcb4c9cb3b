"""
NoteKeeper Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() builds a fresh NoteStore (seeded unless disabled), wires
       middleware, exception handlers and routes, and returns the app.
Who:   uvicorn (`uvicorn notekeeper.main:app`), `python -m notekeeper`, and
       the test suite (one app per test for isolated state).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │  Req ID  │→│  Logging        │→│  CORS        │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌───────────────────────────┐ ┌─────────────────┐  │
    │  │ /notes, /notes/{id}       │ │ GET /health     │  │
    │  └───────────────────────────┘ └─────────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ NotFound→404 │ Method→405   │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Every error body has the shape {"error": <message>}.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from notekeeper import __version__
from notekeeper.config import settings
from notekeeper.exceptions import MethodNotAllowedError, NoteKeeperError
from notekeeper.middleware.logging import RequestLoggingMiddleware
from notekeeper.middleware.request_id import RequestIDMiddleware, request_id_var
from notekeeper.routes import health, notes
from notekeeper.seed import SEED_NOTES
from notekeeper.services.note_service import NoteService
from notekeeper.store import NoteStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s

    Called once on startup; force=True replaces any handlers uvicorn or a
    test runner installed first.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("=" * 60)
    logger.info("NoteKeeper Backend starting up...")
    logger.info("Notes in memory: %d", app.state.note_service.store.count())
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # Nothing to flush: the collection is in-memory only
    logger.info("NoteKeeper Backend shut down.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to HTTP status codes and {"error": ...} bodies.

    Handler hierarchy:
        NoteKeeperError subclasses → their status_code (400/404/405)
        RequestValidationError     → 400 (FastAPI would answer 422)
        Starlette HTTPException    → 404 unknown path, 405 unsupported verb
        Exception (fallback)       → 500; route errors are already caught by
                                     RequestLoggingMiddleware, this covers the rest

    `context` on our exceptions is logged, never returned.
    """

    @app.exception_handler(NoteKeeperError)
    async def handle_app_error(request: Request, exc: NoteKeeperError):
        rid = request_id_var.get("")
        logger.warning("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        headers = None
        if isinstance(exc, MethodNotAllowedError) and exc.allowed:
            headers = {"Allow": ", ".join(exc.allowed)}
        return _error_response(exc.status_code, exc.message, headers)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Invalid request body: %s", rid, exc.errors())
        return _error_response(400, "invalid request body")

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 405:
            allow = (exc.headers or {}).get("Allow", "")
            return await handle_app_error(
                request,
                MethodNotAllowedError(
                    method=request.method,
                    allowed=[m.strip() for m in allow.split(",") if m.strip()],
                ),
            )
        if exc.status_code == 404:
            return _error_response(404, "not found")
        return _error_response(exc.status_code, str(exc.detail), exc.headers)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return _error_response(500, "internal server error")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(seed_notes: Optional[bool] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        seed_notes: Load the four seed notes. Defaults to settings.seed_notes.

    Returns:
        A FastAPI instance owning its own NoteStore.
    """
    app = FastAPI(
        title="NoteKeeper API",
        description="Minimal in-memory note-taking service: create, read, update and delete notes.",
        version=__version__,
        lifespan=lifespan,
    )

    if seed_notes is None:
        seed_notes = settings.seed_notes

    store = NoteStore()
    if seed_notes:
        store.seed(SEED_NOTES)
    app.state.note_service = NoteService(store)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added executes first: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(notes.router)
    app.include_router(health.router)

    return app


# uvicorn expects `notekeeper.main:app` to be importable
app = create_app()
