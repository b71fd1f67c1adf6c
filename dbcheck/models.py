"""
dbcheck/models.py — Result models for the diagnostic checks.
"""

from __future__ import annotations

from typing import Literal, Optional
from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Expected collection check
# ---------------------------------------------------------------------------

class CollectionStatus(BaseModel):
    """Existence and size of one expected application collection."""
    name: str
    exists: bool
    document_count: Optional[int] = None                 # None when absent


# ---------------------------------------------------------------------------
# Permission probe
# ---------------------------------------------------------------------------

class ProbeResult(BaseModel):
    """Outcome of a single write / read / delete probe step."""
    operation: Literal["write", "read", "delete"]
    ok: bool
    detail: str = ""                                     # e.g. "probe document not found"
    error: Optional[str] = None


class PermissionReport(BaseModel):
    """All three probe steps, in execution order."""
    results: list[ProbeResult] = Field(default_factory=list)

    @property
    def all_ok(self) -> bool:
        return bool(self.results) and all(r.ok for r in self.results)

    def get(self, operation: str) -> Optional[ProbeResult]:
        return next((r for r in self.results if r.operation == operation), None)


# ---------------------------------------------------------------------------
# Full diagnostic run
# ---------------------------------------------------------------------------

class DiagnosticReport(BaseModel):
    """Everything the comprehensive check learned about the deployment."""
    database: str
    collections: list[str] = Field(default_factory=list)
    expected: list[CollectionStatus] = Field(default_factory=list)
    permissions: PermissionReport = Field(default_factory=PermissionReport)
    server_version: Optional[str] = None

    @property
    def collection_count(self) -> int:
        return len(self.collections)

    @property
    def missing_collections(self) -> list[str]:
        missing: list[str] = []
        for status in self.expected:
            if not status.exists and status.name not in missing:
                missing.append(status.name)
        return missing
