"""Maps domain errors to HTTP responses.

Every error body has the same shape: ``{"error": "<message>"}``.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from sleep_tracker.domain.errors import (
    DuplicateSleepLogError,
    InvalidSleepLogError,
    SleepLogNotFoundError,
    first_error_message,
)

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the domain-error handlers to *app*."""

    @app.exception_handler(InvalidSleepLogError)
    async def invalid_sleep_log(request: Request, exc: InvalidSleepLogError) -> JSONResponse:
        return _error(400, str(exc))

    @app.exception_handler(DuplicateSleepLogError)
    async def duplicate_sleep_log(request: Request, exc: DuplicateSleepLogError) -> JSONResponse:
        return _error(409, str(exc))

    @app.exception_handler(SleepLogNotFoundError)
    async def sleep_log_not_found(request: Request, exc: SleepLogNotFoundError) -> JSONResponse:
        return _error(404, str(exc))

    @app.exception_handler(RequestValidationError)
    async def request_invalid(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = first_error_message(exc.errors())
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, message)
        return _error(400, message)
