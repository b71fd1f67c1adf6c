"""
dbcheck/config.py — Single responsibility: load environment variables from .env
and expose them as module-level constants.

Used by the accessor and both CLI scripts.
"""

from dotenv import load_dotenv
import os

load_dotenv()


def _int_env(key: str, default: int) -> int:
    """Read an integer from the environment, falling back on bad values."""
    try:
        return int(os.getenv(key, default))
    except (TypeError, ValueError):
        return default


def get_mongodb_uri() -> str:
    """Return the connection string, or ``""`` when it is not configured.

    Read on every call so scripts see the environment at run time rather than
    at import time.
    """
    return os.getenv("MONGODB_URI", "").strip()


def get_db_name() -> str:
    """Explicit database name override (empty → use the URI's default)."""
    return os.getenv("MONGODB_DB_NAME", "").strip()


SERVER_SELECTION_TIMEOUT_MS: int = _int_env("MONGODB_SERVER_SELECTION_TIMEOUT_MS", 5000)
CONNECT_TIMEOUT_MS: int = _int_env("MONGODB_CONNECT_TIMEOUT_MS", 10000)

# Used when neither MONGODB_DB_NAME nor the URI path names a database
FALLBACK_DB_NAME: str = "test"

PROBE_COLLECTION: str = "_connection_test"
EXPECTED_COLLECTIONS: tuple[str, ...] = ("profile", "users")
