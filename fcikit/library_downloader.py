"""Fetches the model library from the controller into a temporary file."""

from __future__ import annotations

import os
import platform
import tempfile
from collections.abc import Callable
from enum import Enum
from types import TracebackType

from .exceptions import ModelException


class LoadStatus(Enum):
    """Status of a model library request."""

    SUCCESS = 0
    ERROR = 1


_ARCHITECTURES = {
    "x86_64": "x64",
    "amd64": "x64",
    "i386": "x86",
    "i686": "x86",
    "x86": "x86",
    "aarch64": "arm64",
    "arm64": "arm64",
}

_SYSTEMS = {"windows": "windows", "linux": "linux"}

_SUFFIXES = {"windows": ".dll", "linux": ".so"}


def _architecture() -> str:
    machine = platform.machine().lower()
    if machine in _ARCHITECTURES:
        return _ARCHITECTURES[machine]
    if machine.startswith("arm"):
        return "arm"
    raise ModelException("fcikit: Unsupported architecture!")


def _operating_system() -> str:
    try:
        return _SYSTEMS[platform.system().lower()]
    except KeyError:
        raise ModelException("fcikit: Unsupported operating system!") from None


class LibraryDownloader:
    """Downloads the model library and removes it again on close.

    ``fetch(architecture, operating_system)`` returns ``(status, data)``;
    architecture is one of x64, x86, arm64, arm and the system one of
    windows, linux.
    """

    def __init__(self, fetch: Callable[[str, str], tuple[LoadStatus, bytes]]) -> None:
        architecture = _architecture()
        operating_system = _operating_system()
        status, data = fetch(architecture, operating_system)
        if status != LoadStatus.SUCCESS:
            raise ModelException("fcikit: Server reports error when loading model library.")
        try:
            fd, self._path = tempfile.mkstemp(suffix=_SUFFIXES[operating_system])
            with os.fdopen(fd, "wb") as stream:
                stream.write(bytes(data))
        except (OSError, TypeError, ValueError) as ex:
            raise ModelException("fcikit: Cannot save model library.") from ex

    def path(self) -> str:
        """Return the path of the downloaded library file."""
        return self._path

    def close(self) -> None:
        """Remove the downloaded file, ignoring errors."""
        try:
            os.remove(self._path)
        except OSError:
            pass

    def __enter__(self) -> LibraryDownloader:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()