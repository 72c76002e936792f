"""Bridge error types.

Every failure crossing the bridge is a ``BridgeError`` whose ``str()`` is the
message shown to the user. Subclasses only classify the failure; callers on
the UI side see the text.
"""

from __future__ import annotations


class BridgeError(Exception):
    """Base class for errors reported back over the command bridge."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class IOFailure(BridgeError):
    """Reading, writing or creating something on disk failed."""


class ParseFailure(BridgeError):
    """Persisted data or a request argument could not be parsed."""


class PlatformResolutionError(BridgeError):
    """A required system directory could not be resolved."""


class UnknownCommandError(BridgeError):
    """The requested command is not registered."""


class InvalidArgumentsError(BridgeError):
    """Arguments do not match the command's signature."""
