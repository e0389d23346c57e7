"""
Platform projection sync engine.

- PlatformAggregateBuilder: builds a PlatformDocument with one fan-out query
- PlatformSyncService: decides which documents are stale and rewrites them
- SyncResult / SyncReport / SyncStatus: per-platform outcomes
"""

from coursehub.core.sync.aggregate_builder import (
    PlatformAggregateBuilder,
    group_users_by_course,
)
from coursehub.core.sync.models import SyncReport, SyncResult, SyncStatus
from coursehub.core.sync.platform_sync import PlatformSyncService, affected_platform_ids

__all__ = [
    "PlatformAggregateBuilder",
    "group_users_by_course",
    "PlatformSyncService",
    "affected_platform_ids",
    "SyncReport",
    "SyncResult",
    "SyncStatus",
]
