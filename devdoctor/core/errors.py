"""Error types and CLI exit codes.

Exit codes map to shell exit status. Exceptions are reserved for failures
that must abort the current operation: an invalid version requirement at
construction time, or discovery output that cannot be read at all.
Recoverable outcomes use `devdoctor.core.result` instead.
"""

from enum import IntEnum

__all__ = ["DevDoctorError", "ErrorCode", "MalformedOutput", "ParseError"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (bad config, invalid arguments)
    - 2: Environment error (missing toolchain, wrong version)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2


class DevDoctorError(Exception):
    """Base class for errors raised by checkups."""


class ParseError(DevDoctorError, ValueError):
    """A version string is not a valid semantic version."""

    def __init__(self, value: str) -> None:
        super().__init__(f"invalid semantic version: {value!r}")
        self.value = value


class MalformedOutput(DevDoctorError):
    """A discovery tool ran but its output is not usable structured data."""

    def __init__(self, message: str, output: str = "") -> None:
        super().__init__(message)
        self.output = output
