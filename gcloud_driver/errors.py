"""Exception hierarchy for gcloud-driver."""

from __future__ import annotations

from typing import Optional, Sequence


class DriverError(Exception):
    """Base exception for all gcloud-driver errors."""


class ExecutionFailure(DriverError, IOError):
    """The external tool exited with a non-zero status."""

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
        output: str = "",
    ):
        super().__init__(message)
        self.command = list(command) if command is not None else []
        self.returncode = returncode
        self.output = output


class ParseFailure(DriverError, ValueError):
    """The tool succeeded but its output did not match the expected JSON shape."""

    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.text = text


class ConfigurationError(DriverError, ValueError):
    """A caller-side precondition was violated before anything was spawned."""


class ProcessSpawnFailure(DriverError, OSError):
    """The external tool binary could not be located or started."""

    def __init__(self, message: str, command: Optional[Sequence[str]] = None):
        super().__init__(message)
        self.command = list(command) if command is not None else []
