"""Notebook file passthrough.

Content is opaque text. Files are read and written as UTF-8 with newline
translation disabled so that what was written is exactly what is read back.
"""

from __future__ import annotations

import logging
from pathlib import Path

from tangent.bridge.errors import IOFailure

logger = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    """Read a whole file as UTF-8 text without newline translation."""
    with path.open(encoding="utf-8", newline="") as f:
        return f.read()


def write_text(path: Path, content: str) -> None:
    """Truncate and write a whole file as UTF-8 text without newline translation."""
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(content)


def read_notebook_file(path: str) -> str:
    """Return the full contents of the notebook at ``path``."""
    try:
        content = read_text(Path(path))
    except (OSError, ValueError) as e:
        raise IOFailure(f"Failed to read file: {e}") from e

    logger.debug(f"Read {len(content)} chars from {path}")
    return content


def write_notebook_file(path: str, content: str) -> None:
    """Overwrite (or create) the notebook at ``path`` with ``content``.

    The parent directory must already exist. Not atomic: a failed write can
    leave a truncated file behind.
    """
    try:
        write_text(Path(path), content)
    except (OSError, ValueError) as e:
        raise IOFailure(f"Failed to write file: {e}") from e

    logger.info(f"Wrote {len(content)} chars to {path}")
