"""
Database connection management for MongoDB.
"""
import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database

logger = logging.getLogger(__name__)


class MongoConnection:
    """
    Owned handle around a single MongoClient.

    The process entry point creates one connection, hands the databases it
    returns to the DAOs, and closes it once on shutdown. Use it as a context
    manager to get the close on every exit path:

        with MongoConnection(settings.mongo_uri) as connection:
            db = connection.get_database(settings.db_name)
    """

    def __init__(self, uri: str, client: Optional[MongoClient] = None):
        self.uri = uri
        self._client: Optional[MongoClient] = client

    @property
    def client(self) -> MongoClient:
        if self._client is None:
            raise RuntimeError("MongoConnection is not connected")
        return self._client

    def connect(self) -> MongoClient:
        """Create the MongoDB client if it does not exist yet."""
        if self._client is None:
            logger.debug(f"Opening MongoDB client for {self.uri}")
            self._client = MongoClient(self.uri)
        return self._client

    def close(self) -> None:
        """Close the MongoDB client."""
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.debug("MongoDB client closed")

    def is_connected(self) -> bool:
        return self._client is not None

    def get_database(self, db_name: str) -> Database:
        """Get a specific MongoDB database by name."""
        return self.client[db_name]

    def __enter__(self) -> "MongoConnection":
        self.connect()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
