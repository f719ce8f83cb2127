"""Error Handlers — the single translation point from exceptions to HTTP responses.

Invariants:
    - PhonebookError → its http_status with {"error": public_message}
    - bson InvalidId raised by the driver (id not pre-checked) → 400 "Malformatted ID"
    - RequestValidationError (bad JSON body) → 400 with the field messages
    - Exception (catch-all) → 500 "Internal Server Error", detail logged only

Design Decisions:
    - Dispatch on exception type registered with FastAPI, never on message text
    - Extracted from main.py to keep the entry point small
"""

import logging

from bson.errors import InvalidId
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from phonebook.core.errors import (
    INTERNAL_ERROR_MESSAGE, MALFORMATTED_ID_MESSAGE, ErrorSeverity, PhonebookError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_phonebook_error_handler(app)
    _register_invalid_id_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_phonebook_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(PhonebookError)
    async def phonebook_error_handler(request: Request, exc: PhonebookError):
        """Handle all phonebook domain/infrastructure errors."""
        log = (
            logger.error if exc.severity == ErrorSeverity.CRITICAL
            else logger.info
        )
        log(
            f"PhonebookError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "person_id": exc.context.person_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_invalid_id_handler(app: FastAPI) -> None:
    """Register handler for malformed ids rejected by the bson driver."""

    @app.exception_handler(InvalidId)
    async def invalid_id_handler(request: Request, exc: InvalidId):
        logger.warning(
            f"Driver rejected id on {request.url.path}: {exc}",
            extra={"error_code": "INVALID_ID", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": MALFORMATTED_ID_MESSAGE},
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Join field-level messages into one error string."""
    details = "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )
    return {"error": details or "Invalid request data"}
