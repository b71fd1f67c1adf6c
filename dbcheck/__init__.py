"""
dbcheck — MongoDB connection helpers and diagnostics.

Re-exports the public API:
    - get_collection   (shared-connection collection accessor)
    - close_client     (idempotent teardown of the shared connection)
    - classify_error   (driver error → remediation category)
    - mask_uri         (hide the password in a connection string)
"""

from dbcheck.database import close_client, get_client, get_collection, get_db
from dbcheck.diagnostics import mask_uri
from dbcheck.errors import MissingConnectionString, classify_error

__all__ = [
    "close_client",
    "get_client",
    "get_collection",
    "get_db",
    "mask_uri",
    "MissingConnectionString",
    "classify_error",
]
