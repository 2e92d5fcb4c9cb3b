"""
NoteKeeper Backend — Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract for the /notes resource.
How:   FastAPI validates request bodies against NotePayload and serializes
       responses through NoteResponse. A body that fails validation (bad JSON,
       missing title/content, wrong types) is answered with 400 by the handler
       registered in main.py.
"""

from typing import Optional

from pydantic import BaseModel, Field, StrictInt


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NotePayload(BaseModel):
    """
    Body of POST /notes and PUT /notes/{id}.

    `id` is accepted only so a client-supplied value can be detected and
    rejected on create; 0 and absent are treated the same. On update it is
    ignored in favour of the path id.
    """
    id: Optional[StrictInt] = Field(default=None, description="Must be absent or 0")
    title: str = Field(description="Note title")
    content: str = Field(description="Note body text")

    @property
    def has_client_id(self) -> bool:
        return self.id is not None and self.id != 0


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """A stored note as returned by every /notes endpoint."""
    id: int = Field(description="Server-assigned note identifier")
    title: str
    content: str

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    Error body shared by all endpoints.

    Example:
        {"error": "not found"}
    """
    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    note_count: int = Field(description="Notes currently held in memory")
    uptime_seconds: float = Field(description="Seconds since service started")
