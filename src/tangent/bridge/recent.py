"""RecentFilesStore - the persisted most-recently-used notebook list.

The list lives in a single JSON file inside the app data directory and is
rewritten in full on every insert. Inserts are serialized by a process-wide
lock so two concurrent ``add`` calls in one bridge process cannot lose each
other's update. Writers in other processes are not coordinated.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from pydantic import ValidationError

from tangent.bridge.errors import IOFailure, ParseFailure
from tangent.bridge.files import read_text, write_text
from tangent.bridge.paths import recent_files_path
from tangent.models.recent import RecentFileEntry, RecentFileList
from tangent.utils.config import get_settings

logger = logging.getLogger(__name__)

_write_lock = threading.Lock()


class RecentFilesStore:
    """
    Load, update and persist the recent files list.

    Invariants of the persisted list:
    - at most ``limit`` entries
    - no two entries share a ``path``
    - most recently added first
    """

    def __init__(self, path: Path | None = None, limit: int | None = None):
        settings = get_settings()
        self.path = path or recent_files_path()
        self.limit = limit if limit is not None else settings.recent_files_limit

    def _read(self) -> str | None:
        """Raw file contents, or None when the store does not exist yet."""
        try:
            return read_text(self.path)
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise IOFailure(f"Failed to read recent files: {e}") from e

    def list_entries(self) -> list[RecentFileEntry]:
        """
        Return the persisted list.

        A missing store is an empty list. A store that cannot be parsed is an
        error.
        """
        content = self._read()
        if content is None:
            return []

        try:
            return RecentFileList.validate_json(content)
        except ValidationError as e:
            raise ParseFailure(f"Failed to parse recent files: {e}") from e

    def _load_for_update(self) -> list[RecentFileEntry]:
        content = self._read()
        if content is None:
            return []

        try:
            return RecentFileList.validate_json(content)
        except ValidationError as e:
            # Unlike list_entries(), a corrupt store is discarded here
            logger.warning(f"Discarding unparsable recent files at {self.path}: {e}")
            return []

    def add(self, path: str, name: str, timestamp: int) -> list[RecentFileEntry]:
        """
        Record ``path`` as the most recently used file.

        Any previous entry for the same path is replaced. Returns the list
        as written.
        """
        try:
            entry = RecentFileEntry(path=path, name=name, timestamp=timestamp)
        except ValidationError as e:
            raise ParseFailure(f"Invalid recent file entry: {e}") from e

        with _write_lock:
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise IOFailure(f"Failed to create app directory: {e}") from e

            entries = [f for f in self._load_for_update() if f.path != path]
            entries.insert(0, entry)
            del entries[self.limit:]

            content = RecentFileList.dump_json(entries).decode("utf-8")
            try:
                write_text(self.path, content)
            except OSError as e:
                raise IOFailure(f"Failed to write recent files: {e}") from e

        logger.info(f"Recorded recent file {path} ({len(entries)} entries)")
        return entries

