"""
Health router.
Root greeting and liveness probe with a database ping.
"""
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse

from employee_api.database import Database
from employee_api.utils.dependencies import get_database

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def root() -> str:
    return "Hello World!"


@router.get("/health", summary="Health check")
async def health(database: Database = Depends(get_database)) -> JSONResponse:
    """Report service status and whether the database answers a ping."""
    if await database.ping():
        return JSONResponse({"status": "healthy", "database": "connected"})

    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unhealthy", "database": "disconnected"}
    )
