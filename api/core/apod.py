"""
NASA APOD (Astronomy Picture of the Day) HTTP client.

Used endpoint:
- GET /planetary/apod?api_key=...  -> {"date": "...", "title": "...", "url": "...", ...}
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError


# APOD failures are explicit and separable from other runtime errors.
class ApodError(RuntimeError):
    pass


class ApodPayload(BaseModel):
    # The upstream adds fields over time (e.g. "thumbnail_url"); ignore them.
    model_config = ConfigDict(extra="ignore")

    # Absent for public-domain images.
    copyright: str | None = None
    date: str
    explanation: str
    # Absent for videos.
    hdurl: str | None = None
    # "image" or "video".
    media_type: str
    service_version: str | None = None
    title: str
    url: str


def _normalize_url(url: str) -> str:
    url = (url or "").strip()
    if not url:
        raise ApodError("APOD_API_URL is empty.")
    return url


async def fetch_apod(
    *,
    url: str,
    api_key: str,
    timeout_s: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ApodPayload:
    """
    Fetch today's APOD entry.
    """
    url = _normalize_url(url)
    api_key = (api_key or "").strip()
    if not api_key:
        raise ApodError("APOD_API_KEY is empty.")

    try:
        async with httpx.AsyncClient(timeout=timeout_s, transport=transport) as client:
            resp = await client.get(url, params={"api_key": api_key})
    except httpx.HTTPError as e:
        raise ApodError(f"APOD request failed: {e}") from e

    if not resp.is_success:
        # Avoid dumping huge bodies; include a small snippet.
        body = resp.text[:500]
        raise ApodError(f"APOD request failed: {resp.status_code} {body}")

    try:
        data: Any = resp.json()
    except ValueError as e:
        raise ApodError("APOD returned a non-JSON body.") from e

    if not isinstance(data, dict):
        raise ApodError("APOD returned a non-object JSON body.")

    try:
        return ApodPayload.model_validate(data)
    except ValidationError as e:
        raise ApodError(f"APOD payload has an unexpected shape: {e}") from e
