"""
dbcheck/database.py — Process-wide MongoDB connection and collection accessor.

The shared client is created on first use and torn down by ``close_client``,
which is also registered with :mod:`atexit` the first time a client is built.
Callers of ``get_collection`` own no lifecycle responsibility.
"""

from __future__ import annotations

import atexit
import logging

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from dbcheck.config import (
    FALLBACK_DB_NAME,
    SERVER_SELECTION_TIMEOUT_MS,
    get_db_name,
    get_mongodb_uri,
)
from dbcheck.errors import MissingConnectionString

logger = logging.getLogger(__name__)


_client: MongoClient | None = None
_teardown_registered: bool = False


def create_client(
    uri: str,
    server_selection_timeout_ms: int = SERVER_SELECTION_TIMEOUT_MS,
    connect_timeout_ms: int | None = None,
) -> MongoClient:
    """Build a new (not yet connected) client with transport timeouts."""
    options: dict[str, int] = {"serverSelectionTimeoutMS": server_selection_timeout_ms}
    if connect_timeout_ms is not None:
        options["connectTimeoutMS"] = connect_timeout_ms
    logger.debug("Creating MongoClient with %s", options)
    return MongoClient(uri, **options)


def default_database(client: MongoClient) -> Database:
    """Resolve the database a connection string points at.

    ``MONGODB_DB_NAME`` wins; otherwise the path component of the URI, and
    ``"test"`` when the URI names no database.
    """
    name = get_db_name()
    if name:
        return client[name]
    return client.get_default_database(default=FALLBACK_DB_NAME)


def get_client() -> MongoClient:
    """Return the shared client, creating it on first use with driver defaults."""
    global _client, _teardown_registered
    if _client is None:
        uri = get_mongodb_uri()
        if not uri:
            raise MissingConnectionString("MONGODB_URI is not set in .env")
        _client = MongoClient(uri)
        if not _teardown_registered:
            atexit.register(close_client)
            _teardown_registered = True
        logger.info("Shared MongoDB client initialised")
    return _client


def close_client() -> None:
    """Close the shared client if one is open. Safe to call repeatedly."""
    global _client
    if _client is None:
        return
    client, _client = _client, None
    client.close()
    logger.info("Shared MongoDB client closed")


def get_db() -> Database:
    """Return the default database handle of the shared client."""
    return default_database(get_client())


def get_collection(name: str) -> Collection:
    """Return the named collection of the default database.

    Driver errors propagate unchanged.
    """
    return get_db()[name]
