"""
Exception handlers.

Maps the shared exception families to HTTP status codes and the
``{"error": ...}`` body. Every authentication failure except a failed
login produces the same ``Unauthorized`` body.
"""

import logging
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from shared.exceptions import (
    AuthenticationError,
    ConflictError,
    NoteboxError,
    NotFoundError,
    ValidationError,
)
from modules.auth.exceptions import InvalidCredentialsError

logger = logging.getLogger(__name__)

UNAUTHORIZED = "Unauthorized"
INTERNAL_ERROR = "Internal server error"


class ErrorResponse(BaseModel):
    """Body of every non-validation error response."""

    error: str


class ValidationErrorResponse(BaseModel):
    """Body of a 400 caused by request parsing."""

    error: str = "Validation Error"
    detail: list[dict]


STATUS_BY_ERROR: dict[type[NoteboxError], int] = {
    AuthenticationError: 401,
    NotFoundError: 404,
    ValidationError: 400,
    ConflictError: 409,
}


def status_for(exc: NoteboxError) -> int:
    """HTTP status for an application error; unknown families are 500."""
    for error_type, status_code in STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status_code
    return 500


def public_message(exc: NoteboxError) -> str:
    """The message a client is allowed to see for ``exc``."""
    if isinstance(exc, InvalidCredentialsError):
        return exc.message
    if isinstance(exc, AuthenticationError):
        return UNAUTHORIZED
    if status_for(exc) == 500:
        return INTERNAL_ERROR
    return exc.message


def _error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def handle_notebox_error(request: Request, exc: NoteboxError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code == 500:
        logger.error("Unhandled application error on %s %s: %s", request.method, request.url.path, exc.to_dict())
    elif status_code == 401:
        logger.info("Unauthenticated request to %s: %s", request.url.path, exc.code)
    return _error_response(status_code, ErrorResponse(error=public_message(exc)))


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    body = ValidationErrorResponse(detail=jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=400, content=body.model_dump())


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error on %s %s", request.method, request.url.path)
    return _error_response(500, ErrorResponse(error=INTERNAL_ERROR))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NoteboxError, handle_notebox_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
