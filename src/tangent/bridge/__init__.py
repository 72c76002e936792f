"""File Bridge - filesystem commands for the Tangent UI shell."""

from tangent.bridge.commands import (
    COMMANDS,
    add_recent_file,
    get_default_save_directory,
    get_recent_files,
    invoke,
    read_notebook_file,
    write_notebook_file,
)
from tangent.bridge.errors import (
    BridgeError,
    InvalidArgumentsError,
    IOFailure,
    ParseFailure,
    PlatformResolutionError,
    UnknownCommandError,
)
from tangent.bridge.recent import RecentFilesStore

__all__ = [
    "BridgeError",
    "COMMANDS",
    "IOFailure",
    "InvalidArgumentsError",
    "ParseFailure",
    "PlatformResolutionError",
    "RecentFilesStore",
    "UnknownCommandError",
    "add_recent_file",
    "get_default_save_directory",
    "get_recent_files",
    "invoke",
    "read_notebook_file",
    "write_notebook_file",
]
