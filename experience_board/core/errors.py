"""
Error taxonomy and FastAPI exception handlers.

Every error body has the shape {"error": <message>}; validation
failures add a "details" list with one entry per violated field.
Store failures are logged with full detail but only a generic
message is returned to the caller.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ExperienceBoardError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)

    def to_content(self) -> Dict[str, Any]:
        return {"error": self.message}


class SubmissionValidationError(ExperienceBoardError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Validation failed"

    def __init__(self, details: List[Dict[str, Any]], message: Optional[str] = None):
        super().__init__(message)
        self.details = details

    def to_content(self) -> Dict[str, Any]:
        return {"error": self.message, "details": self.details}


class AuthError(ExperienceBoardError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized"


class NotFoundError(ExperienceBoardError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Submission not found"


class NoDataError(NotFoundError):
    message = "No data to export"


class InvalidTransitionError(ExperienceBoardError):
    status_code = status.HTTP_409_CONFLICT
    message = "Status transition not allowed"


class StoreError(ExperienceBoardError):
    """The record store call failed. The cause is kept for logging only."""

    message = "Database operation failed"


def format_validation_issues(errors) -> List[Dict[str, Any]]:
    """
    Turn pydantic error dicts into [{field, message, type}].
    The leading "body" location added by FastAPI is dropped.
    """
    issues = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        issues.append({
            "field": ".".join(loc) or "body",
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "value_error"),
        })
    return issues


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to the app."""

    @app.exception_handler(ExperienceBoardError)
    async def board_error_handler(request: Request, exc: ExperienceBoardError):
        if exc.status_code >= 500:
            logger.error(
                "%s %s failed: %s",
                request.method, request.url.path, exc.__cause__ or exc,
            )
        return JSONResponse(status_code=exc.status_code, content=exc.to_content())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Validation failed",
                "details": format_validation_issues(exc.errors()),
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception: %s %s - %s",
            request.method, request.url.path, type(exc).__name__,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"},
        )
