"""Error normalization for the miden-node launcher."""

from __future__ import annotations

import errno
from enum import Enum

# Shell conventions for commands that cannot be run at all.
EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127
EXIT_SIGNAL_BASE = 128


class LauncherErrorCode(str, Enum):
    CONFIGURATION_INVALID = "configuration_invalid"
    GENESIS_MISSING = "genesis_missing"
    BOOTSTRAP_FAILED = "bootstrap_failed"
    START_FAILED = "start_failed"
    BINARY_NOT_FOUND = "binary_not_found"
    BINARY_NOT_EXECUTABLE = "binary_not_executable"


class LauncherError(Exception):
    """Fatal launcher failure carrying the exit status the container should report."""

    def __init__(
        self,
        code: LauncherErrorCode,
        message: str,
        *,
        exit_status: int = 1,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.exit_status = exit_status
        self.cause = cause


def exit_status_from_returncode(returncode: int) -> int:
    """Translate a ``subprocess`` return code into a shell-style exit status.

    Negative return codes mean the child died from a signal.
    """

    if returncode < 0:
        return EXIT_SIGNAL_BASE + (-returncode)
    return returncode


def map_launch_error(error: OSError, *, binary: str) -> LauncherError:
    """Map OS errors raised while spawning or exec'ing the node binary."""

    if isinstance(error, FileNotFoundError) or error.errno == errno.ENOENT:
        return LauncherError(
            LauncherErrorCode.BINARY_NOT_FOUND,
            f"{binary}: command not found",
            exit_status=EXIT_NOT_FOUND,
            cause=error,
        )
    if isinstance(error, PermissionError) or error.errno in (errno.EACCES, errno.ENOEXEC):
        return LauncherError(
            LauncherErrorCode.BINARY_NOT_EXECUTABLE,
            f"{binary}: cannot execute ({error.strerror or error})",
            exit_status=EXIT_NOT_EXECUTABLE,
            cause=error,
        )
    return LauncherError(
        LauncherErrorCode.START_FAILED,
        f"{binary}: {error}",
        exit_status=EXIT_NOT_EXECUTABLE,
        cause=error,
    )
