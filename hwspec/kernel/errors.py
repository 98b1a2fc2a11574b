"""
Fatal detection errors. Degraded results are not errors; see
`hwspec.kernel.contracts.Detection`.
"""
from typing import Optional


class PlatformError(Exception):
    """Base class for errors that abort a detection run."""

    prefix = "Platform error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"


class UnsupportedPlatformError(PlatformError):
    prefix = "Unsupported platform"


class CommandFailedError(PlatformError):
    """
    A required external command could not be started or exited non-zero,
    or its output did not contain what detection needs.
    """

    prefix = "Command failed"

    def __init__(self, message: str, command: Optional[str] = None):
        super().__init__(message)
        self.command = command
