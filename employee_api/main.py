"""
Employee API - FastAPI application.

The database handle is created with the application, opened by the lifespan
on startup and closed on shutdown.
"""
from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from employee_api import __version__
from employee_api.config import Settings, get_settings
from employee_api.database import Database
from employee_api.exceptions import DatabaseError
from employee_api.middleware.error_handler import add_exception_handlers
from employee_api.middleware.request_logging import add_request_logging
from employee_api.routers import employees, health
from employee_api.utils.logger import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    setup_logging(app.state.settings)
    database: Database = app.state.database

    try:
        await database.connect()
    except DatabaseError as e:
        # Startup cannot continue without the store
        logger.critical(f"❌ Failed to connect to DB: {e.message}")
        raise

    logger.info(f"🚀 Employee API started, routes under {app.state.settings.API_PREFIX}")
    yield
    await database.close()
    logger.info("Employee API shut down")


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use (defaults to the cached environment settings)
        database: Database handle (defaults to one built from settings)

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Employee API",
        description="CRUD operations over employee records stored in MongoDB.",
        version=__version__,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.database = database or Database(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    add_request_logging(app)
    add_exception_handlers(app, settings)

    app.include_router(health.router)
    app.include_router(employees.router, prefix=settings.API_PREFIX)

    return app


app = create_app()
