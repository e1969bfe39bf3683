"""Translate errors raised below the HTTP edge into JSON responses.

Every error body has the ErrorResponse shape: ``detail`` and ``code`` always,
``errors`` for field-level validation failures, and ``resource`` /
``identifier`` when a lookup came back empty.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catalog_admin.domain.errors import DomainError, ValidationError

logger = logging.getLogger(__name__)

HTTP_422_UNPROCESSABLE = 422

ERROR_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": HTTP_422_UNPROCESSABLE,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
}

# Context keys of a DomainError that are safe to echo back to the client
EXPOSED_CONTEXT = ("resource", "identifier")

# Location prefixes FastAPI puts before the field name
_LOCATION_PREFIXES = {"body", "query", "path"}


def status_for(error_code: str) -> int:
    """HTTP status for a domain error code; unknown codes are client errors."""
    return ERROR_STATUS.get(error_code, status.HTTP_400_BAD_REQUEST)


def error_body(
    detail: str,
    code: str,
    errors: list[dict[str, Any]] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    body: dict[str, Any] = {"detail": detail, "code": code}
    if errors:
        body["errors"] = errors
    body.update({key: value for key, value in extra.items() if value is not None})
    return body


def field_path(location: Sequence[Any]) -> str:
    """("body", "name") -> "name"; nested locations are dotted."""
    return ".".join(str(part) for part in location if part not in _LOCATION_PREFIXES)


def _log_client_error(request: Request, message: str, **fields: Any) -> None:
    logger.info(
        message,
        extra={"path": request.url.path, "method": request.method, **fields},
    )


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """
    DomainError -> status from ERROR_STATUS.

    ValidationError field errors are forwarded as ``errors``; the exposed
    context keys (resource, identifier) are copied when the error carries them.
    """
    errors = exc.errors if isinstance(exc, ValidationError) else None
    exposed = {key: exc.context.get(key) for key in EXPOSED_CONTEXT}

    _log_client_error(request, "Client error", error_code=exc.error_code, detail=exc.message)

    return JSONResponse(
        status_code=status_for(exc.error_code),
        content=error_body(exc.message, exc.error_code, errors, **exposed),
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Body shape/type errors detected by pydantic (missing name, non-boolean
    is_active). List query parameters are raw strings and never end up here.
    """
    errors = [
        {"field": field_path(error["loc"]), "message": error["msg"], "code": error["type"]}
        for error in exc.errors()
    ]

    _log_client_error(request, "Request validation error", errors=errors)

    return JSONResponse(
        status_code=HTTP_422_UNPROCESSABLE,
        content=error_body("Invalid request parameters", "VALIDATION_ERROR", errors),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Anything else, e.g. an unreachable database. Logged with traceback, never echoed."""
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("An unexpected error occurred", "INTERNAL_ERROR"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)
