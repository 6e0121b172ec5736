"""
Error handling middleware for FastAPI.
Provides centralized exception handling; every error leaves the service in
the ``{status, message, data}`` envelope.
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from pymongo.errors import PyMongoError
import logging

from employee_api.config import Settings
from employee_api.exceptions import AppError
from employee_api.utils.responses import envelope

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


def add_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """
    Add exception handlers to FastAPI application.

    Args:
        app: FastAPI application instance
        settings: Controls whether 500 responses expose exception messages
    """

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        """Handle custom AppError exceptions."""
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            f"{exc.__class__.__name__}: {exc.message}",
            extra={
                "status_code": exc.status_code,
                "details": exc.details,
                "path": request.url.path,
                "method": request.method
            }
        )

        message = exc.message
        if exc.status_code >= 500 and not settings.EXPOSE_ERROR_DETAILS:
            message = GENERIC_ERROR_MESSAGE

        return envelope(exc.status_code, message, exc.data)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error: {exc.errors()}",
            extra={
                "path": request.url.path,
                "method": request.method
            }
        )

        return envelope(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            "Request validation failed",
            exc.errors()
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions."""
        logger.warning(
            f"HTTP {exc.status_code}: {exc.detail}",
            extra={
                "path": request.url.path,
                "method": request.method
            }
        )

        return envelope(exc.status_code, str(exc.detail))

    @app.exception_handler(PyMongoError)
    async def database_error_handler(request: Request, exc: PyMongoError):
        """Handle store failures (connection loss, write errors) raised mid-request."""
        logger.error(
            f"Database error: {str(exc)}",
            exc_info=True,
            extra={
                "path": request.url.path,
                "method": request.method
            }
        )

        message = str(exc) if settings.EXPOSE_ERROR_DETAILS else GENERIC_ERROR_MESSAGE

        return envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, message)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle all other unhandled exceptions."""
        logger.error(
            f"Unhandled exception: {str(exc)}",
            exc_info=True,
            extra={
                "path": request.url.path,
                "method": request.method
            }
        )

        message = str(exc) if settings.EXPOSE_ERROR_DETAILS else GENERIC_ERROR_MESSAGE

        return envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, message)
