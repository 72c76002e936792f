"""Recent file entry model and the persisted list format."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

MAX_TIMESTAMP = 2**64 - 1


class RecentFileEntry(BaseModel):
    """A previously opened notebook: path, display name and last access time.

    Identity is ``path`` only. ``name`` is a caller-supplied label and is not
    checked against the path; ``timestamp`` is meant to be epoch milliseconds.
    Validation is strict: the persisted JSON must carry a string path and
    name and an integer timestamp.
    """

    model_config = ConfigDict(strict=True)

    path: str = Field(..., description="Absolute filesystem path")
    name: str = Field(..., description="Display label")
    timestamp: int = Field(..., ge=0, le=MAX_TIMESTAMP, description="Last access, epoch ms")


# On disk: a JSON array of entries, most recent first
RecentFileList = TypeAdapter(list[RecentFileEntry])
