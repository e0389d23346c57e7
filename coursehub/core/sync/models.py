"""
Sync outcome models.

Every sync operation reports what happened to each platform document
instead of raising: the relational mutation that triggered it has already
committed and cannot be undone.

Dependencies: pydantic
System role: Result contracts of the platform sync engine
"""

from enum import Enum

from pydantic import BaseModel, Field


class SyncStatus(str, Enum):
    """Outcome of one platform document sync."""

    SYNCED = "synced"
    DELETED = "deleted"
    SKIPPED = "skipped"
    FAILED = "failed"


class SyncResult(BaseModel):
    """Outcome for a single platform document."""

    platform_id: int
    document_id: str
    status: SyncStatus
    error: str | None = None


class SyncReport(BaseModel):
    """Per-platform outcomes of a fan-out sync."""

    results: list[SyncResult] = Field(default_factory=list)

    @property
    def synced(self) -> list[int]:
        """Platform ids whose documents were rebuilt and written."""
        return [r.platform_id for r in self.results if r.status == SyncStatus.SYNCED]

    @property
    def failed(self) -> list[int]:
        """Platform ids whose document write failed."""
        return [r.platform_id for r in self.results if r.status == SyncStatus.FAILED]

    @property
    def ok(self) -> bool:
        """True when no platform failed."""
        return not self.failed
