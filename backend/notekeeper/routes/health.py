"""
NoteKeeper Backend — Health Check Route
========================================

What:  Liveness endpoint for monitoring and load balancer probes.
How:   There are no external dependencies to probe, so the service is healthy
       whenever it can answer; the response also reports how many notes are
       held in memory.
"""

import time

from fastapi import APIRouter, Request

from notekeeper import __version__
from notekeeper.schemas.note import HealthResponse

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(request: Request) -> HealthResponse:
    store = request.app.state.note_service.store
    return HealthResponse(
        status="healthy",
        version=__version__,
        note_count=store.count(),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
