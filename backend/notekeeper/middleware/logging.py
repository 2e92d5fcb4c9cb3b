"""
NoteKeeper Backend — Request Logging Middleware
================================================

What:  One access log line per HTTP request: method, path, status, duration,
       request ID and client address.
When:  Runs inside RequestIDMiddleware, so the request ID is already set.

Unhandled exceptions from a route are turned into a 500 {"error": ...}
response here. Starlette would otherwise hand them to ServerErrorMiddleware,
which sits outside every user middleware, so the response would carry no
X-Request-ID and get no access log line.

Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from notekeeper.middleware.request_id import request_id_var

logger = logging.getLogger("notekeeper.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs each request at a level chosen by response status:
    5xx → ERROR, 4xx → WARNING, everything else → INFO.

    /health is skipped; probes hit it every few seconds.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path == "/health":
            return await self._call_route(request, call_next)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        rid = request_id_var.get("")

        response = await self._call_route(request, call_next)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response

    async def _call_route(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                "[%s] Unexpected error: %s",
                request_id_var.get(""),
                str(exc),
                exc_info=True,
            )
            return JSONResponse(status_code=500, content={"error": "internal server error"})
