"""File Bridge - the named commands the UI shell invokes.

Each command is stateless: paths are resolved per call and every failure is
raised as a ``BridgeError`` carrying the message shown to the user.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from functools import lru_cache
from typing import Any, get_type_hints

from pydantic import BaseModel, ConfigDict, ValidationError, create_model

from tangent.bridge.errors import (
    InvalidArgumentsError,
    IOFailure,
    PlatformResolutionError,
    UnknownCommandError,
)
from tangent.bridge.files import read_notebook_file, write_notebook_file
from tangent.bridge.paths import default_save_dir
from tangent.bridge.recent import RecentFilesStore
from tangent.models.recent import RecentFileEntry

logger = logging.getLogger(__name__)


def get_recent_files() -> list[RecentFileEntry]:
    """Return the recent files list, most recent first."""
    return RecentFilesStore().list_entries()


def add_recent_file(path: str, name: str, timestamp: int) -> None:
    """Move ``path`` to the front of the recent files list."""
    RecentFilesStore().add(path, name, timestamp)


def get_default_save_directory() -> str:
    """Resolve ``<documents>/Tangent Notebooks``, creating it if needed."""
    notebooks_dir = default_save_dir().absolute()

    if not notebooks_dir.exists():
        try:
            notebooks_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise IOFailure(f"Failed to create notebooks directory: {e}") from e
        logger.info(f"Created default save directory {notebooks_dir}")

    result = str(notebooks_dir)
    try:
        # Undecodable bytes survive as lone surrogates and are not valid text
        result.encode("utf-8")
    except UnicodeEncodeError as e:
        raise PlatformResolutionError("Failed to convert path to string") from e
    return result


COMMANDS: dict[str, Callable[..., Any]] = {
    "read_notebook_file": read_notebook_file,
    "write_notebook_file": write_notebook_file,
    "get_recent_files": get_recent_files,
    "add_recent_file": add_recent_file,
    "get_default_save_directory": get_default_save_directory,
}


@lru_cache
def _arguments_model(handler: Callable[..., Any]) -> type[BaseModel]:
    """Strict pydantic model of ``handler``'s keyword arguments."""
    hints = get_type_hints(handler)
    fields: dict[str, Any] = {}
    for name, param in inspect.signature(handler).parameters.items():
        default = ... if param.default is inspect.Parameter.empty else param.default
        fields[name] = (hints.get(name, Any), default)
    return create_model(
        f"{handler.__name__}_arguments",
        __config__=ConfigDict(strict=True, extra="forbid"),
        **fields,
    )


def invoke(command: str, args: dict[str, Any] | None = None) -> Any:
    """
    Dispatch ``command`` with keyword ``args``.

    Raises UnknownCommandError for unregistered names and
    InvalidArgumentsError when the arguments are missing, unexpected or of
    the wrong type for the handler.
    """
    handler = COMMANDS.get(command)
    if handler is None:
        raise UnknownCommandError(f"Unknown command: {command}")

    args = args or {}
    try:
        arguments = _arguments_model(handler).model_validate(args)
    except ValidationError as e:
        raise InvalidArgumentsError(f"Invalid arguments for {command}: {e}") from e

    logger.debug(f"Invoking {command} with {sorted(args)}")
    return handler(**dict(arguments))
