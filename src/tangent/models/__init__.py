"""Data models for Tangent."""

from tangent.models.recent import (
    MAX_TIMESTAMP,
    RecentFileEntry,
    RecentFileList,
)

__all__ = [
    "MAX_TIMESTAMP",
    "RecentFileEntry",
    "RecentFileList",
]
