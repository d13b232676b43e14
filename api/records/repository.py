"""
Record persistence (raw SQL).

One table, created on startup if absent:
- apoddata(id serial primary key, explanation text, title text, url text)
"""

from __future__ import annotations

from typing import Any

from core.db import Database
from core.errors import RecordStoreError

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS apoddata (
  id SERIAL PRIMARY KEY,
  explanation TEXT NOT NULL,
  title TEXT NOT NULL,
  url TEXT NOT NULL
)
"""


async def ensure_schema(db: Database) -> None:
    await db.execute(CREATE_TABLE_SQL)


async def list_records(db: Database) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, explanation, title, url
        FROM apoddata
        ORDER BY id
        """
    )


async def get_record(db: Database, record_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, explanation, title, url
        FROM apoddata
        WHERE id = $1
        """,
        record_id,
    )


async def insert_record(db: Database, *, explanation: str, title: str, url: str) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO apoddata (explanation, title, url)
        VALUES ($1, $2, $3)
        RETURNING id, explanation, title, url
        """,
        explanation,
        title,
        url,
    )
    if row is None:
        raise RecordStoreError("Failed to insert record.")
    return row


async def update_record(
    db: Database,
    record_id: int,
    *,
    explanation: str,
    title: str,
) -> dict[str, Any] | None:
    """
    Replace explanation and title of one row. Returns None when the id is unknown.
    """
    return await db.fetch_one(
        """
        UPDATE apoddata
        SET explanation = $1,
            title = $2
        WHERE id = $3
        RETURNING id, explanation, title, url
        """,
        explanation,
        title,
        record_id,
    )


async def delete_record(db: Database, record_id: int) -> bool:
    row = await db.fetch_one(
        """
        DELETE FROM apoddata
        WHERE id = $1
        RETURNING id
        """,
        record_id,
    )
    return row is not None
