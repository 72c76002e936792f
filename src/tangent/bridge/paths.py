"""Helpers for resolving the platform app data and documents locations.

Both directories can be pinned through settings (``TANGENT_APP_DATA_DIR`` and
``TANGENT_DOCUMENTS_DIR``); otherwise they follow the platform convention:

    Linux    $XDG_DATA_HOME/<app>          $XDG_DOCUMENTS_DIR or ~/Documents
    macOS    ~/Library/Application Support/<app>   ~/Documents
    Windows  %APPDATA%\\<app>               ~/Documents
"""

from __future__ import annotations

import os
import shlex
import sys
from pathlib import Path

from tangent.bridge.errors import PlatformResolutionError
from tangent.utils.config import get_settings

_APP_DATA_ERROR = "Failed to get app data directory"
_DOCUMENTS_ERROR = "Failed to get documents directory"


def _home(message: str) -> Path:
    try:
        return Path.home()
    except RuntimeError as e:
        raise PlatformResolutionError(message) from e


def _xdg_user_dir(name: str) -> Path | None:
    """Look up an XDG user dir from the environment or ``user-dirs.dirs``."""
    value = os.environ.get(f"XDG_{name}_DIR")
    if value:
        return Path(os.path.expandvars(value)).expanduser()

    config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(_home(_DOCUMENTS_ERROR), ".config")
    user_dirs = Path(config_home) / "user-dirs.dirs"
    if not user_dirs.exists():
        return None

    try:
        lines = user_dirs.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError):
        return None

    prefix = f"XDG_{name}_DIR="
    for line in lines:
        line = line.strip()
        if not line.startswith(prefix):
            continue
        try:
            raw = shlex.split(line[len(prefix):])
        except ValueError:
            return None
        if not raw:
            return None
        return Path(raw[0].replace("$HOME", str(_home(_DOCUMENTS_ERROR))))
    return None


def app_data_dir() -> Path:
    """Per-application private data directory. Not created here."""
    settings = get_settings()
    if settings.app_data_dir is not None:
        return Path(settings.app_data_dir).expanduser()

    identifier = settings.app_identifier
    if sys.platform == "win32":
        base = os.environ.get("APPDATA")
        if not base:
            raise PlatformResolutionError(_APP_DATA_ERROR)
        return Path(base) / identifier
    if sys.platform == "darwin":
        return _home(_APP_DATA_ERROR) / "Library" / "Application Support" / identifier

    base = os.environ.get("XDG_DATA_HOME")
    if not base:
        base = os.path.join(_home(_APP_DATA_ERROR), ".local/share")
    return Path(base) / identifier


def documents_dir() -> Path:
    """User-facing documents directory."""
    settings = get_settings()
    if settings.documents_dir is not None:
        return Path(settings.documents_dir).expanduser()

    if sys.platform.startswith("linux"):
        xdg = _xdg_user_dir("DOCUMENTS")
        if xdg is not None:
            return xdg
    return _home(_DOCUMENTS_ERROR) / "Documents"


def recent_files_path() -> Path:
    return app_data_dir() / get_settings().recent_files_name


def default_save_dir() -> Path:
    return documents_dir() / get_settings().notebooks_folder_name
