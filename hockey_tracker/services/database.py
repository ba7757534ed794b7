"""MongoDB connection handling for the Hockey Match Tracker."""

import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from ..config import Settings

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when required storage settings are missing."""
    pass


class MongoDatabase:
    """
    MongoDB connection manager.

    The handle is created once by the application, connected on first use and
    closed explicitly on shutdown. It can also be used as a context manager.
    """

    def __init__(
        self,
        uri: str,
        database_name: Optional[str] = None,
        server_selection_timeout_ms: int = 5000,
    ):
        self.uri = uri
        self.database_name = database_name
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self._client: Optional[MongoClient] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoDatabase":
        return cls(
            uri=settings.mongodb_uri,
            database_name=settings.database_name,
            server_selection_timeout_ms=settings.server_selection_timeout_ms,
        )

    def connect(self) -> None:
        """Create the MongoDB client if it does not exist yet."""
        if self._client is None:
            logger.info("Connecting to MongoDB")
            self._client = MongoClient(
                self.uri,
                serverSelectionTimeoutMS=self.server_selection_timeout_ms,
            )

    def close(self) -> None:
        """Close the client and release its connections."""
        if self._client is not None:
            logger.info("Closing MongoDB connection")
            self._client.close()
            self._client = None

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    @property
    def client(self) -> MongoClient:
        """Get the MongoDB client, connecting if necessary."""
        if self._client is None:
            self.connect()
        return self._client  # type: ignore

    @property
    def db(self) -> Database:
        """
        Get the configured database.

        Raises:
            ConfigurationError: If no database name is configured
        """
        if not self.database_name:
            raise ConfigurationError("MONGODB_DATABASE is not set")
        return self.client[self.database_name]

    def collection(self, name: str) -> Collection:
        """Get a collection from the configured database."""
        return self.db[name]

    def __enter__(self) -> "MongoDatabase":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
