"""
Custom exceptions and error handlers for consistent error responses.

Every error leaves the API as `{"message": ..., "error"?: ...}`.
"""

import logging
from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from typing import Optional

logger = logging.getLogger("taxibook.errors")


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500, error: Optional[str] = None):
        self.message = message
        self.status_code = status_code
        self.error = error
        super().__init__(message)


class PersistenceError(AppException):
    """
    Raised when a statement against the store fails.

    `message` names the action that failed ("Error creating customer"),
    `error` carries the driver's description.
    """

    def __init__(self, message: str, error: str):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error=error,
        )


def error_body(message: str, error: Optional[str] = None) -> dict:
    body = {"message": message}
    if error is not None:
        body["error"] = error
    return body


# Global Exception Handlers

async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handler for custom application exceptions."""
    if exc.status_code >= 500:
        logger.error("%s: %s", exc.message, exc.error)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message, exc.error),
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handler for FastAPI HTTPException with standardized format."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Handler for Pydantic validation errors.

    Schema failures are reported as 400, like the explicit presence checks.
    """
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{location}: {err.get('msg')}" if location else err.get("msg"))

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Invalid request", "; ".join(problems)),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handler for unhandled exceptions."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("An internal server error occurred", str(exc)),
    )
