"""
usersvc/db/mongo.py

Purpose: MongoDB connection setup

- Wraps one Motor client per application (no module-level singleton)
- Logs the outcome of the startup connection attempt
- Health checks and connection lifecycle management
"""

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from usersvc.core.logging import get_logger

logger = get_logger(__name__)


class MongoConnection:
    """
    Owns the Motor client for the lifetime of the application.

    Constructing this object never touches the network; `connect()` pings
    the server once and logs the result. A failed ping is not fatal: the
    driver keeps trying to reach the server on every subsequent operation.
    """

    def __init__(
        self,
        url: str,
        default_db_name: str,
        users_collection: str = "users",
        server_selection_timeout_ms: int = 5000,
    ):
        self.url = url
        self.default_db_name = default_db_name
        self.users_collection_name = users_collection
        self.server_selection_timeout_ms = server_selection_timeout_ms
        # Raises ConfigurationError or ValueError on a malformed URL
        self.client = AsyncIOMotorClient(
            url,
            serverSelectionTimeoutMS=server_selection_timeout_ms,
        )
        # A database named in the URL wins over the configured default
        self.database: AsyncIOMotorDatabase = self.client.get_default_database(default=default_db_name)

    def users_collection(self) -> AsyncIOMotorCollection:
        """Returns the collection holding user documents."""
        return self.database[self.users_collection_name]

    async def connect(self) -> bool:
        """
        Verifies the connection with a ping.
        Called during application startup.

        Returns:
            True if the server answered, False otherwise
        """
        try:
            await self.client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"MongoDB Error: {e}")
            return False

        logger.info(f"MongoDB Connected: {self.database.name}")
        return True

    async def ping(self) -> bool:
        """
        Checks if the database connection is healthy.

        Returns:
            True if connection is healthy, False otherwise
        """
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"Database health check failed: {str(e)}")
            return False

    def close(self):
        """
        Closes the MongoDB connection.
        Called during application shutdown.
        """
        logger.info("Closing MongoDB connection")
        self.client.close()
