"""
Exception-to-HTTP mapping for the console API.

Domain errors propagate out of the controllers and are rendered here as
{"error": ..., "details": ...}. UnavailableError never exposes its internal
message.
"""
# Standard library imports
import logging
from typing import Any, Dict, Optional

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ...domain.exceptions import (
    ConsoleError,
    InvalidInputError,
    NotFoundError,
    UnavailableError,
)

logger = logging.getLogger(__name__)


def _error_body(message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"error": message}
    if details:
        body["details"] = details
    return body


async def invalid_input_handler(request: Request, exception: InvalidInputError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(exception.user_message, exception.details),
    )


async def not_found_handler(request: Request, exception: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=_error_body(exception.user_message),
    )


async def unavailable_handler(request: Request, exception: UnavailableError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exception.message}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=_error_body(exception.user_message),
    )


async def console_error_handler(request: Request, exception: ConsoleError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exception.message}", exc_info=exception)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Internal error"),
    )


async def request_validation_handler(request: Request, exception: RequestValidationError) -> JSONResponse:
    fields = {}
    for error in exception.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        fields[".".join(location) or "body"] = error.get("msg", "Invalid value")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("Invalid request", {"fields": fields}),
    )


def register_exception_handlers(application: FastAPI) -> None:
    """Install the handlers; Starlette picks the most specific class first"""
    application.add_exception_handler(InvalidInputError, invalid_input_handler)
    application.add_exception_handler(NotFoundError, not_found_handler)
    application.add_exception_handler(UnavailableError, unavailable_handler)
    application.add_exception_handler(ConsoleError, console_error_handler)
    application.add_exception_handler(RequestValidationError, request_validation_handler)
