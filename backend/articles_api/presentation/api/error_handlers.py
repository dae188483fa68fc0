"""Map domain and framework errors onto the API's JSON error bodies.

Not-found responses use ``{"error": "..."}``; validation failures use
``{"errors": {field: [messages]}}``. Unexpected store failures are logged and
answered with an opaque 500.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from articles_api.domain.exceptions import (
    EntityNotFoundError,
    RecordStoreError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Record was not found"
INTERNAL_ERROR_MESSAGE = "Internal server error"

# Request sections that are not meaningful as error keys.
_LOCATION_SECTIONS = {"body", "path", "query", "header", "cookie"}


async def handle_not_found(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": NOT_FOUND_MESSAGE},
    )


async def handle_validation_failed(request: Request, exc: ValidationFailedError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": exc.errors},
    )


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed path parameters or bodies in the validation error shape."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": _group_request_errors(exc.errors())},
    )


async def handle_store_failure(request: Request, exc: Exception) -> JSONResponse:
    return _internal_error(request, exc, "Record store failure")


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    return _internal_error(request, exc, "Unhandled error")


def _internal_error(request: Request, exc: Exception, label: str) -> JSONResponse:
    logger.error("%s on %s %s", label, request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EntityNotFoundError, handle_not_found)
    app.add_exception_handler(ValidationFailedError, handle_validation_failed)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(RecordStoreError, handle_store_failure)
    app.add_exception_handler(SQLAlchemyError, handle_store_failure)
    app.add_exception_handler(Exception, handle_unexpected_error)


def _group_request_errors(errors: Any) -> dict[str, list[str]]:
    grouped: dict[str, list[str]] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        fields = [part for part in loc if part not in _LOCATION_SECTIONS]
        key = ".".join(fields) or (loc[0] if loc else "request")
        grouped.setdefault(key, []).append(str(error.get("msg", "Invalid value")))
    return grouped
