"""
MongoDB connection handle.

A single Database instance is opened by the application lifespan, stored on
``app.state.database`` and injected into request handlers.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from employee_api.config import Settings
from employee_api.exceptions import DatabaseError
from employee_api.repositories.employee_repository import EmployeeRepository

logger = logging.getLogger(__name__)


class Collections:
    """Collection names."""

    EMPLOYEES = "employees"


class Database:
    """Owns the motor client for the lifetime of the application."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None

    @property
    def is_connected(self) -> bool:
        return self.db is not None

    async def connect(self) -> None:
        """
        Open the client, verify the server answers and ensure indexes.

        Raises:
            DatabaseError: If the server cannot be reached
        """
        client = AsyncIOMotorClient(
            self.settings.MONGO_URI,
            serverSelectionTimeoutMS=self.settings.MONGO_TIMEOUT_MS
        )
        try:
            await client.admin.command("ping")
            db = client.get_default_database(default=self.settings.DB_NAME)
            await EmployeeRepository(db[Collections.EMPLOYEES]).ensure_indexes()
        except PyMongoError as e:
            client.close()
            raise DatabaseError(f"MongoDB connection failed: {e}") from e

        self.client = client
        self.db = db
        logger.info(f"✅ Db connected successfully: {db.name}")

    async def close(self) -> None:
        if self.client is not None:
            self.client.close()
            logger.info("MongoDB connection closed")
        self.client = None
        self.db = None

    async def ping(self) -> bool:
        """True if the server answers a ping."""
        if self.client is None:
            return False
        try:
            await self.client.admin.command("ping")
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False
        return True

    def get_db(self) -> AsyncIOMotorDatabase:
        """
        Return the connected database.

        Raises:
            DatabaseError: If connect() has not succeeded
        """
        if self.db is None:
            raise DatabaseError("Database is not connected")
        return self.db
