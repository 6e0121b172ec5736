"""
Request logging middleware.
Logs method, path, status and duration of every request.
"""
import time
import logging

from fastapi import FastAPI, Request

from employee_api.utils.logger import log_api_response

logger = logging.getLogger("employee_api.access")


def add_request_logging(app: FastAPI) -> None:
    """
    Install the access log middleware.

    Args:
        app: FastAPI application instance
    """

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.perf_counter()
        # Unhandled exceptions propagate past this middleware as a 500
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000
            log_api_response(logger, request.method, request.url.path, status_code, duration_ms)
