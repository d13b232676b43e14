"""
Response middleware shared by every route.
"""

from __future__ import annotations

from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response

JSON_CONTENT_TYPE = "application/json"


async def force_json_content_type(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """
    Every response is JSON, whatever the handler (or error handler) returned.
    """
    response = await call_next(request)
    response.headers["content-type"] = JSON_CONTENT_TYPE
    return response


def install_json_middleware(app: FastAPI) -> None:
    app.middleware("http")(force_json_content_type)
