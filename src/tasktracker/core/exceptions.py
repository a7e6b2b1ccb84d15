"""Domain exceptions and the handlers that turn them into JSON responses.

Every error body has the same shape: ``{"message": ..., "request_id": ...}``.
"""

from typing import Any

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.tasktracker.core.logging import get_logger

logger = get_logger(__name__)


class AppError(Exception):
    """Base class for errors that map to a specific HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """A required field is missing or a value is malformed."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    """Entity or compound key does not resolve (or is not visible to the caller)."""

    status_code = status.HTTP_404_NOT_FOUND


class ForbiddenError(AppError):
    """Entity exists but the caller is not its owner."""

    status_code = status.HTTP_403_FORBIDDEN


class ConflictError(AppError):
    """Entity would collide with an existing one."""

    status_code = status.HTTP_409_CONFLICT


class InternalError(AppError):
    """Unexpected failure while talking to the persistence store."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(message: str, **extra: Any) -> dict[str, Any]:
    """Build the standard error payload."""
    return {"message": message, "request_id": correlation_id.get(), **extra}


def _describe_validation_error(error: dict[str, Any]) -> tuple[str, str]:
    """Return (field, human-readable message) for a pydantic error entry."""
    parts = [str(p) for p in error.get("loc", ()) if p not in ("body", "query", "path")]
    field = ".".join(parts)
    if error.get("type") == "missing":
        if not field:
            return "body", "Request body is required."
        return field, f"{field} is required."
    return field or "body", f"{field or 'body'}: {error.get('msg', 'invalid value')}"


def setup_exception_handlers(app: FastAPI) -> None:
    """Register handlers for domain, validation, HTTP and unexpected errors."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        if exc.status_code >= 500:
            # Cause was already logged with its traceback where it was wrapped
            logger.error("Request failed", path=request.url.path, message=exc.message)
        else:
            logger.info(
                "Request rejected",
                path=request.url.path,
                status_code=exc.status_code,
                message=exc.message,
            )
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        described = [_describe_validation_error(e) for e in exc.errors()]
        message = " ".join(msg for _, msg in described) or "Invalid request."
        logger.info("Request validation failed", path=request.url.path, message=message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(
                message,
                errors=[{"field": field, "message": msg} for field, msg in described],
            ),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled exception",
            path=request.url.path,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("Internal server error"),
        )
