"""
dbcheck/errors.py — Connection error taxonomy and remediation hints.

Errors raised by the driver are classified by exception type and server error
code first; the message text is only consulted when neither says enough.
"""

from __future__ import annotations

from typing import Literal

from pymongo.errors import ConfigurationError, ConnectionFailure, OperationFailure

ErrorKind = Literal["authentication", "network", "auth_mechanism", "unknown"]

# Server error codes
AUTHENTICATION_FAILED = 18

_NETWORK_MARKERS = (
    "enotfound",
    "etimedout",
    "timed out",
    "getaddrinfo",
    "name or service not known",
    "nodename nor servname",
)
_DNS_MARKERS = ("dns", "resolution lifetime expired")


class MissingConnectionString(RuntimeError):
    """MONGODB_URI is empty or unset."""


def classify_error(exc: BaseException) -> ErrorKind:
    """Map a driver exception onto an :data:`ErrorKind`."""
    if isinstance(exc, OperationFailure) and exc.code == AUTHENTICATION_FAILED:
        return "authentication"
    # also covers ServerSelectionTimeoutError, NetworkTimeout, AutoReconnect
    if isinstance(exc, ConnectionFailure):
        return "network"
    message = str(exc)
    if isinstance(exc, ConfigurationError) and any(m in message.lower() for m in _DNS_MARKERS):
        return "network"
    # Atlas code 8000 covers both wrong passwords and mechanism problems,
    # so its text decides
    return classify_message(message)


def classify_message(message: str) -> ErrorKind:
    """Substring fallback for errors that carry no usable type or code.

    Checked in order: authentication, network, auth mechanism. The
    "authentication failed" match is case-sensitive.
    """
    if "authentication failed" in message:
        return "authentication"
    lowered = message.lower()
    if any(m in lowered for m in _NETWORK_MARKERS):
        return "network"
    if "bad auth" in lowered:
        return "auth_mechanism"
    return "unknown"


def error_code(exc: BaseException) -> int | str:
    """Numeric server code of *exc*, or ``"N/A"``."""
    code = getattr(exc, "code", None)
    return code if code is not None else "N/A"


REMEDIATION_HINTS: dict[str, tuple[str, list[str]]] = {
    "authentication": (
        "Authentication failed - Check your username and password",
        [
            "Verify credentials in MongoDB Atlas",
            "Make sure the user has proper permissions",
            "Check if password contains special characters (encode them)",
        ],
    ),
    "network": (
        "Network connection issue",
        [
            "Check your internet connection",
            "Verify the cluster hostname is correct",
            "Check if your IP is whitelisted in MongoDB Atlas",
            "Try accessing MongoDB Atlas from browser",
        ],
    ),
    "auth_mechanism": (
        "Authentication mechanism error",
        [
            "Update your connection string format",
            "Check MongoDB driver version compatibility",
        ],
    ),
    "unknown": (
        "General connection error",
        [
            "Double-check your MONGODB_URI in .env file",
            "Verify MongoDB Atlas cluster is running",
            "Check MongoDB Atlas status page",
        ],
    ),
}
