"""
Database Connection Management.

This module handles the MongoDB connection via pymongo.
It provides:
- A single long-lived client (pymongo pools connections internally)
- Access to the users collection
- Health checks
"""
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from edupilot.core.config import get_settings
from edupilot.core.logging_config import get_logger

logger = get_logger(__name__)


class MongoConnection:
    """
    Owns the MongoClient for the lifetime of the process.

    Example:
        >>> db = MongoConnection("mongodb://localhost:27017")
        >>> db.users.find_one({"email": "ana@x.com"})
    """

    def __init__(
        self,
        uri: Optional[str] = None,
        database_name: Optional[str] = None,
        users_collection: Optional[str] = None,
    ):
        """
        Create the client. No network I/O happens until the first operation.

        Args:
            uri: Optional connection string. If not provided, uses settings.
            database_name: Optional database name. If not provided, uses settings.
            users_collection: Optional collection name. If not provided, uses settings.
        """
        settings = get_settings()

        self.client = MongoClient(uri or settings.mongodb_uri)
        self.database = self.client[database_name or settings.mongodb_database]
        self._users_collection = users_collection or settings.users_collection

        logger.info(
            f"MongoDB client initialized: database={self.database.name}, "
            f"collection={self._users_collection}"
        )

    @property
    def users(self) -> Collection:
        """The collection holding user documents."""
        return self.database[self._users_collection]

    def check_connection(self) -> bool:
        """
        Test database connectivity.

        Returns:
            True if the server answered a ping, False otherwise.
        """
        try:
            self.client.admin.command("ping")
            logger.debug("Database connection check: OK")
            return True
        except PyMongoError as e:
            logger.error(f"Database connection check failed: {e}")
            return False

    def close(self):
        """Close the client and its connection pool."""
        self.client.close()
        logger.info("Database connections closed")
