"""
NoteKeeper Backend — Notes Route Handlers
==========================================

What:  HTTP dispatcher for the /notes resource.
How:   Each verb/path pair delegates to NoteService and sets the status code.

Dispatch table:
    GET    /notes        → list_notes   200
    POST   /notes        → create_note  201
    GET    /notes/{id}   → get_note     200
    PUT    /notes/{id}   → update_note  200
    DELETE /notes/{id}   → delete_note  204 (no body)
    anything else        → 405, raised by Starlette's router and mapped
                           to {"error": "method not allowed"} in main.py

`note_id` is declared as str on purpose: NoteService decides between
"Invalid ID" (400) and "not found" (404).
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from notekeeper.schemas.note import ErrorResponse, NotePayload, NoteResponse
from notekeeper.services.note_service import NoteService

router = APIRouter(prefix="/notes", tags=["Notes"])


def get_note_service(request: Request) -> NoteService:
    """Dependency returning the service bound to this application instance."""
    return request.app.state.note_service


@router.get(
    "",
    response_model=List[NoteResponse],
    summary="List all notes",
)
async def list_notes(service: NoteService = Depends(get_note_service)) -> List[NoteResponse]:
    return service.list_notes()


@router.post(
    "",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "ID supplied or body malformed", "model": ErrorResponse}},
    summary="Create a note",
)
async def create_note(
    payload: NotePayload,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return service.create_note(payload)


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    responses={
        400: {"description": "Invalid ID", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Get a single note by ID",
)
async def get_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return service.get_note(note_id)


@router.put(
    "/{note_id}",
    response_model=NoteResponse,
    responses={
        400: {"description": "Invalid ID or body malformed", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Replace a note's title and content",
)
async def update_note(
    note_id: str,
    payload: NotePayload,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return service.update_note(note_id, payload)


@router.delete(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"description": "Invalid ID", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> Response:
    service.delete_note(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
