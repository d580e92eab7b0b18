"""Conversion of service errors into JSON responses.

Every error body has the shape ``{"message": str, "error": Any}``, with
``error`` omitted when there is no extra detail.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pharmatrack.exceptions import (
    AuthenticationError,
    DuplicateRecordError,
    PharmaTrackError,
    RecordNotFoundError,
    RecordValidationError,
    StorageError,
)

logger = logging.getLogger(__name__)

STATUS_CODES: dict[type[PharmaTrackError], int] = {
    RecordValidationError: status.HTTP_400_BAD_REQUEST,
    AuthenticationError: status.HTTP_400_BAD_REQUEST,
    RecordNotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateRecordError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(exc: PharmaTrackError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in STATUS_CODES:
            return STATUS_CODES[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str, error: Any = None) -> JSONResponse:
    content: dict[str, Any] = {"message": message}
    if error is not None:
        content["error"] = jsonable_encoder(error)
    return JSONResponse(status_code=status_code, content=content)


async def handle_service_error(request: Request, exc: PharmaTrackError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return error_response(status_code, exc.message, exc.error)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning("%s %s has an invalid body", request.method, request.url.path)
    return error_response(
        status.HTTP_400_BAD_REQUEST, "Invalid request", exc.errors()
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PharmaTrackError, handle_service_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
