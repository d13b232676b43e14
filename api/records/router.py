"""
Record API endpoints.

Mounted under `/records` (and `/apoddata`, the path older clients use) in
`api/main.py`, so paths here are relative to that prefix.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path, status

from core.db import Database, get_database

from . import repository, schemas

router = APIRouter()

# `apoddata.id` is SERIAL (int4).
MAX_RECORD_ID = 2_147_483_647


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Record not found.")


@router.get("", response_model=list[schemas.Record])
async def list_records(db: Database = Depends(get_database)) -> list[dict]:
    return await repository.list_records(db)


@router.get("/{record_id}", response_model=schemas.Record)
async def get_record(
    record_id: int = Path(..., ge=1, le=MAX_RECORD_ID),
    db: Database = Depends(get_database),
) -> dict:
    row = await repository.get_record(db, record_id)
    if row is None:
        raise _not_found()
    return row


@router.post("", response_model=schemas.Record)
async def create_record(
    payload: schemas.RecordIn,
    db: Database = Depends(get_database),
) -> dict:
    return await repository.insert_record(
        db,
        explanation=payload.explanation,
        title=payload.title,
        url=payload.url,
    )


@router.put("/{record_id}", response_model=schemas.Record)
async def update_record(
    payload: schemas.RecordIn,
    record_id: int = Path(..., ge=1, le=MAX_RECORD_ID),
    db: Database = Depends(get_database),
) -> dict:
    """
    Replace explanation and title of an existing record.

    The body must carry every writable field; `url` is accepted but left as stored.
    """
    row = await repository.update_record(
        db,
        record_id,
        explanation=payload.explanation,
        title=payload.title,
    )
    if row is None:
        raise _not_found()
    return row


@router.delete("/{record_id}", response_model=schemas.DeleteResponse)
async def delete_record(
    record_id: int = Path(..., ge=1, le=MAX_RECORD_ID),
    db: Database = Depends(get_database),
) -> schemas.DeleteResponse:
    deleted = await repository.delete_record(db, record_id)
    if not deleted:
        raise _not_found()
    return schemas.DeleteResponse(id=record_id)
