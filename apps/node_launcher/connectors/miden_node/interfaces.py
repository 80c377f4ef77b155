"""Interfaces for the node binary process boundary."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class CommandRunner(Protocol):
    """Runs a command to completion."""

    def run(self, argv: Sequence[str]) -> int:
        """Run ``argv`` synchronously and return its raw return code."""


class ProcessHandoff(Protocol):
    """Transfers control of the container to the long-running node process."""

    def handoff(self, argv: Sequence[str]) -> int:
        """Launch ``argv`` as the node service.

        Process-replacing implementations never return. Supervising
        implementations return the node's exit status once it terminates.
        """


class NodeCommands(Protocol):
    """The two node subcommands the launcher drives."""

    def bootstrap(self) -> None:
        """Initialize the store; raise ``LauncherError`` on failure."""

    def start(self, passthrough: Sequence[str]) -> int:
        """Hand off to the node service loop."""
