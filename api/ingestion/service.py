"""
Startup ingestion step.

Runs once, inside the app lifespan, before any request is served:
- fetch today's APOD entry
- insert explanation/title/url as one new record

Any failure propagates and aborts startup; there is no retry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from core import apod
from core.config import Settings
from core.db import Database
from records import repository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IngestResult:
    record_id: int
    date: str
    title: str
    media_type: str


async def ingest_today(
    db: Database,
    settings: Settings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> IngestResult:
    payload = await apod.fetch_apod(
        url=settings.apod_api_url,
        api_key=settings.apod_api_key,
        timeout_s=settings.apod_timeout_s,
        transport=transport,
    )

    # Only explanation/title/url are stored; the rest of the payload is dropped.
    row = await repository.insert_record(
        db,
        explanation=payload.explanation,
        title=payload.title,
        url=payload.url,
    )

    result = IngestResult(
        record_id=int(row["id"]),
        date=payload.date,
        title=payload.title,
        media_type=payload.media_type,
    )
    logger.info(
        "ingestion_complete record_id=%s date=%s media_type=%s title=%s",
        result.record_id,
        result.date,
        result.media_type,
        result.title,
    )
    return result
