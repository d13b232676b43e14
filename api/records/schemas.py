"""
Pydantic schemas for record endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RecordIn(BaseModel):
    # Clients may post a full APOD payload; only these fields are stored.
    model_config = ConfigDict(extra="ignore")

    explanation: str
    title: str
    url: str


class Record(BaseModel):
    # Tables created by the first release allow NULLs in these columns.
    id: int
    explanation: str | None = None
    title: str | None = None
    url: str | None = None


class DeleteResponse(BaseModel):
    ok: bool = True
    id: int
    message: str = "Record deleted."
