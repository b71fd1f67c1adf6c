#!/usr/bin/env python3
"""
scripts/quick_db_check.py — Fast MongoDB liveness check.

Connects, pings the server and prints the database name. Nothing more.

Usage:
    python -m scripts.quick_db_check
    python -m scripts.quick_db_check --no-color -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from dbcheck.config import SERVER_SELECTION_TIMEOUT_MS, get_mongodb_uri
from dbcheck.database import create_client, default_database
from dbcheck.formatters import Console

logger = logging.getLogger("quick_db_check")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Quick MongoDB connectivity check")
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colours")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def quick_check(out: Console) -> int:
    """Ping the configured server. Returns the process exit code."""
    uri = get_mongodb_uri()
    if not uri:
        out.error("MONGODB_URI not found in .env file")
        return 1

    out.line("🔍 Testing MongoDB connection...")

    client = None
    try:
        client = create_client(uri, server_selection_timeout_ms=SERVER_SELECTION_TIMEOUT_MS)
        db = default_database(client)
        client.admin.command("ping")

        out.success("MongoDB connection: OK")
        out.line(f"📦 Database: {db.name}")
        return 0
    except Exception as exc:
        logger.debug("Quick check failed", exc_info=True)
        out.error("MongoDB connection: FAILED")
        out.line(f"   Error: {exc}")
        return 1
    finally:
        if client is not None:
            client.close()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s  %(levelname)-7s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )
    return quick_check(Console(color=not args.no_color))


if __name__ == "__main__":
    sys.exit(main())
