"""
dbcheck/formatters.py — Glyph-prefixed console output for the CLI scripts.

Human-readable only; nothing here is meant to be parsed.
"""

from __future__ import annotations

import sys
from typing import TextIO

from dbcheck.errors import REMEDIATION_HINTS, ErrorKind, error_code
from dbcheck.models import DiagnosticReport

RULE = "=" * 60

# ── ANSI colours ────────────────────────────────────────────────────────

RESET = "\x1b[0m"
BRIGHT = "\x1b[1m"
GREEN = "\x1b[32m"
RED = "\x1b[31m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
CYAN = "\x1b[36m"


class Console:
    """Status-line printer with optional colour."""

    def __init__(self, color: bool = True) -> None:
        self.color = color

    def paint(self, colour: str, text: str) -> str:
        return f"{colour}{text}{RESET}" if self.color else text

    def line(self, text: str = "", stream: TextIO | None = None) -> None:
        print(text, file=stream or sys.stdout)

    def success(self, msg: str) -> None:
        self.line(self.paint(GREEN, f"✅ {msg}"))

    def error(self, msg: str) -> None:
        self.line(self.paint(RED, f"❌ {msg}"))

    def warning(self, msg: str) -> None:
        self.line(self.paint(YELLOW, f"⚠️  {msg}"))

    def info(self, msg: str) -> None:
        self.line(self.paint(BLUE, f"ℹ️  {msg}"))

    def title(self, msg: str) -> None:
        self.line("\n" + self.paint(BRIGHT + CYAN, msg))

    def rule(self) -> None:
        self.line(RULE)

    def section(self, msg: str) -> None:
        """Blank line, rule, title, rule."""
        self.line("\n" + RULE)
        self.title(msg)
        self.rule()


# ═════════════════════════════════════════════════════════════════════
# Summary / failure blocks
# ═════════════════════════════════════════════════════════════════════

def print_summary(out: Console, report: DiagnosticReport) -> None:
    """Restate what the comprehensive check found."""
    out.section("📊 Connection Test Summary")
    out.success("Connection Status: SUCCESSFUL")
    out.line(f"   Database: {report.database}")
    out.line(f"   Collections: {report.collection_count}")
    out.line(f"   MongoDB Version: {report.server_version or 'unknown'}")

    missing = report.missing_collections
    if missing:
        out.warning(f"Missing collections: {', '.join(missing)}")
        out.info("These collections will be created automatically when needed")

    failed: list[str] = []
    for operation in ("write", "read", "delete"):
        result = report.permissions.get(operation)
        if result is not None and not result.ok:
            failed.append(operation)
    if failed:
        out.warning(f"Permission checks failed: {', '.join(failed)}")

    out.rule()
    out.success("🎉 Your MongoDB connection is working perfectly!")


def print_error_details(out: Console, exc: BaseException) -> None:
    out.section("🔍 Error Details")
    out.line(out.paint(RED, f"Error Message: {exc}"), stream=sys.stderr)
    out.line(out.paint(RED, f"Error Code: {error_code(exc)}"), stream=sys.stderr)


def print_troubleshooting(out: Console, kind: ErrorKind) -> None:
    """Print the remediation block for an error kind."""
    headline, steps = REMEDIATION_HINTS[kind]
    out.section("💡 Troubleshooting Tips")
    out.warning(headline)
    for i, step in enumerate(steps, 1):
        out.line(f"   {i}. {step}")
    out.rule()
