"""
Error bodies and FastAPI exception handlers.

- validation failures -> 400 {"message": ..., "field": ...}
- HTTPException       -> its status with {"message": detail}
- anything else       -> 500 {"message": "Internal Server Error"}, logged
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from folio.contract.schemas import ErrorBody, ValidationErrorBody

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = {"body", "path", "query", "header", "cookie"}


def first_validation_error(exc: RequestValidationError) -> ValidationErrorBody:
    errors = exc.errors()
    if not errors:
        return ValidationErrorBody(message="Invalid request.")

    first = errors[0]
    parts = [str(part) for part in first.get("loc", ()) if isinstance(part, str)]
    if parts and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    field = ".".join(parts) or None
    msg = str(first.get("msg") or "Invalid value.")
    message = f"{field}: {msg}" if field else msg
    return ValidationErrorBody(message=message, field=field)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    body = first_validation_error(exc)
    logger.info("validation_failed path=%s field=%s", request.url.path, body.field)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(exclude_none=True),
    )


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    body = ErrorBody(message=str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorBody(message="Internal Server Error").model_dump(),
    )


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, internal_error_handler)
