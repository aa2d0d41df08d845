"""Exception hierarchy raised by the package."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class FrankaException(Exception):
    """Base class for every error raised by the package."""


class ModelException(FrankaException):
    """Raised when the model library cannot be loaded or used."""


class NetworkException(FrankaException):
    """Raised when the connection to the controller fails."""


class ProtocolException(FrankaException):
    """Raised when the controller sends something unexpected."""


class IncompatibleVersionException(FrankaException):
    """Raised when the server and the library speak different protocol versions."""

    def __init__(self, server_version: int, library_version: int) -> None:
        self.server_version = server_version
        self.library_version = library_version
        super().__init__(
            f"fcikit: Incompatible library version (server version: {server_version}, "
            f"library version: {library_version}). Please check for system updates "
            f"or choose a library version that uses the server version {server_version}."
        )


class ControlException(FrankaException):
    """Raised when a control or motion generation loop fails.

    Carries the log of the last states and commands before the failure.
    """

    def __init__(self, what: str, log: Sequence[Any] = ()) -> None:
        super().__init__(what)
        self.log = list(log)


class CommandException(FrankaException):
    """Raised when the controller reports a failed or aborted command."""


class InvalidOperationException(FrankaException):
    """Raised when a conflicting operation is already running."""


class RealtimeException(FrankaException):
    """Raised when realtime priority cannot be obtained."""