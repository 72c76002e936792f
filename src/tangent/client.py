"""Bridge client for the UI side.

Talks to the bridge server over HTTP and adds the open/save/watch helpers the
notebook front end builds on top of the raw commands.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import PurePath
from typing import Any

import httpx

from tangent.bridge.errors import BridgeError
from tangent.models.recent import RecentFileEntry, RecentFileList
from tangent.utils.config import get_settings

logger = logging.getLogger(__name__)

NOTEBOOK_SUFFIX = ".js"
DEFAULT_NOTEBOOK_NAME = "notebook.js"


class BridgeConnectionError(BridgeError):
    """The bridge server could not be reached."""


@dataclass
class OpenedNotebook:
    """A notebook read through the bridge."""

    path: str
    content: str


def notebook_display_name(path: str) -> str:
    """Last path component, with either separator, or a generic name."""
    return PurePath(path.replace("\\", "/")).name or DEFAULT_NOTEBOOK_NAME


def now_ms() -> int:
    return int(time.time() * 1000)


class BridgeClient:
    """
    Client for the Tangent bridge server.

    Every command failure is raised as ``BridgeError`` with the server's
    message; transport failures raise ``BridgeConnectionError``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        if base_url is None:
            settings = get_settings()
            base_url = f"http://{settings.api_host}:{settings.api_port}"
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(base_url=self.base_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> BridgeClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def invoke(self, command: str, **args: Any) -> Any:
        """Call a bridge command and return its result."""
        try:
            response = self._client.post(f"/v1/invoke/{command}", json=args)
        except httpx.TransportError as e:
            raise BridgeConnectionError(f"Could not reach bridge at {self.base_url}: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise BridgeError(f"Unexpected response from bridge ({response.status_code})") from e

        if not isinstance(data, dict):
            raise BridgeError(f"Unexpected response from bridge ({response.status_code})")

        if response.is_success and data.get("ok"):
            return data.get("result")

        error = data.get("error") or data.get("detail") or f"HTTP {response.status_code}"
        raise BridgeError(str(error))

    def health(self) -> dict[str, Any]:
        try:
            response = self._client.get("/v1/health")
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise BridgeConnectionError(f"Could not reach bridge at {self.base_url}: {e}") from e
        return response.json()

    # ==================== Commands ====================

    def read_notebook_file(self, path: str) -> str:
        return self.invoke("read_notebook_file", path=path)

    def write_notebook_file(self, path: str, content: str) -> None:
        self.invoke("write_notebook_file", path=path, content=content)

    def get_recent_files(self) -> list[RecentFileEntry]:
        return RecentFileList.validate_python(self.invoke("get_recent_files"))

    def add_recent_file(self, path: str, name: str, timestamp: int) -> None:
        self.invoke("add_recent_file", path=path, name=name, timestamp=timestamp)

    def get_default_save_directory(self) -> str:
        return self.invoke("get_default_save_directory")

    # ==================== Notebook helpers ====================

    def open_notebook(self, path: str) -> OpenedNotebook:
        """Read a notebook and move it to the front of the recent list."""
        content = self.read_notebook_file(path)
        self.add_recent_file(path, notebook_display_name(path), now_ms())
        return OpenedNotebook(path=path, content=content)

    def save_notebook(self, content: str, path: str | None = None) -> str:
        """
        Write a notebook and record it as recent.

        Without ``path`` the notebook goes to ``untitled.js`` in the default
        save directory. Returns the path written.
        """
        if path is None:
            directory = self.get_default_save_directory()
            path = str(PurePath(directory) / f"untitled{NOTEBOOK_SUFFIX}")

        self.write_notebook_file(path, content)
        self.add_recent_file(path, notebook_display_name(path), now_ms())
        logger.info(f"Saved notebook to {path}")
        return path

    def watch_file(
        self,
        path: str,
        interval: float = 2.0,
        stop: Callable[[], bool] | None = None,
    ) -> Iterator[str]:
        """
        Poll ``path`` and yield its content each time it changes.

        The first successful read is always yielded. Read errors are logged
        and polling continues, since the file may be mid-save or moved.
        Stops when ``stop()`` returns True or the consumer closes the
        generator.
        """
        last_content: str | None = None
        while stop is None or not stop():
            try:
                content = self.read_notebook_file(path)
            except BridgeError as e:
                logger.warning(f"File watch error for {path}: {e}")
            else:
                if content != last_content:
                    last_content = content
                    yield content
            time.sleep(interval)
