"""
Per-request error mapping.

Nothing raised while serving a request may take the process down:
- invalid request bodies / path params -> 400
- store failures (including a dropped or refused connection) -> 500 with a
  generic detail (the cause is logged)
- anything else -> 500 JSON, so no response falls back to text/plain
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


# Store failures are explicit and separable from other runtime errors.
class RecordStoreError(RuntimeError):
    pass


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("store_error method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error."},
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error."},
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(asyncpg.PostgresError, store_error_handler)
    app.add_exception_handler(RecordStoreError, store_error_handler)
    app.add_exception_handler(asyncpg.InterfaceError, store_error_handler)
    app.add_exception_handler(OSError, store_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
