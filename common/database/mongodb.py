"""
Generic MongoDB connection manager.

This module provides async MongoDB connectivity through Motor. A manager is
constructed explicitly by the application, connected during startup and
closed during shutdown; nothing is kept in module-level state.

Example:
    from common.database import MongoDB

    db = MongoDB()
    await db.connect(
        uri="mongodb://localhost:27017/digcard",
        database_name=None,  # use the database named in the URI
    )
    profiles = db.get_collection("profiles")
    ...
    await db.disconnect()
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient

logger = logging.getLogger(__name__)

# Database used when neither the settings nor the URI name one
DEFAULT_DATABASE_NAME = "test"


def mask_uri(uri: str) -> str:
    """Strip credentials from a connection string for logging."""
    return uri.split("@")[-1] if "@" in uri else uri


class MongoDB:
    """Generic MongoDB connection manager - works with any database."""

    def __init__(self):
        self._client: Optional[AsyncIOMotorClient] = None
        self._database_name: Optional[str] = None
        self._initialized: bool = False

    async def connect(
        self,
        uri: str,
        database_name: Optional[str] = None,
    ) -> None:
        """
        Create the Motor client and verify the server answers a ping.

        The client is kept even when the ping fails, so later operations can
        still reach the server once it becomes available.

        Args:
            uri: MongoDB connection string
            database_name: Name of the database to use; defaults to the
                database in the URI, then to ``test``

        Raises:
            pymongo.errors.PyMongoError: If the server cannot be reached
        """
        logger.info(f"Connecting to MongoDB: {mask_uri(uri)}")

        # Timestamps come back as UTC-aware datetimes
        self._client = AsyncIOMotorClient(uri, tz_aware=True)
        if database_name:
            self._database_name = database_name
        else:
            self._database_name = self._client.get_default_database(
                default=DEFAULT_DATABASE_NAME
            ).name
        logger.debug(f"Database name: {self._database_name}")

        try:
            await self._client.admin.command("ping")
            self._initialized = True
            logger.info(f"Successfully connected to MongoDB database: {self._database_name}")
        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise

    async def disconnect(self) -> None:
        """Close the MongoDB connection."""
        if self._client:
            logger.info(f"Disconnecting from MongoDB database: {self._database_name}")
            self._client.close()
            self._client = None
            self._database_name = None
            self._initialized = False
            logger.debug("MongoDB connection closed")

    @property
    def is_connected(self) -> bool:
        """Check if the startup ping succeeded."""
        return self._initialized

    @property
    def client(self) -> Optional[AsyncIOMotorClient]:
        """Get the underlying Motor client."""
        return self._client

    def get_collection(self, name: str):
        """
        Get a raw Motor collection.

        Args:
            name: Collection name

        Returns:
            AsyncIOMotorCollection instance
        """
        if not self._client or not self._database_name:
            logger.error("Attempted to get collection without database connection")
            raise RuntimeError("Database not connected")
        logger.debug(f"Getting collection: {name}")
        return self._client[self._database_name][name]
