"""miden-node command line client: bootstrap invocation and service handoff."""

from __future__ import annotations

import logging
import os
import signal
import subprocess
import sys
import threading
from collections.abc import Callable, Sequence
from typing import Any

from .config import NodeLauncherConfig
from .errors import LauncherError, LauncherErrorCode, exit_status_from_returncode, map_launch_error
from .interfaces import CommandRunner, NodeCommands, ProcessHandoff

logger = logging.getLogger(__name__)

FORWARDED_SIGNALS = tuple(
    getattr(signal, name) for name in ("SIGTERM", "SIGINT", "SIGHUP", "SIGQUIT") if hasattr(signal, name)
)


def _flush_output() -> None:
    for handler in logging.getLogger().handlers:
        handler.flush()
    sys.stdout.flush()
    sys.stderr.flush()


class SubprocessRunner(CommandRunner):
    """Runs a command in the foreground with inherited stdio."""

    def run(self, argv: Sequence[str]) -> int:
        try:
            completed = subprocess.run(list(argv), check=False)
        except OSError as exc:
            raise map_launch_error(exc, binary=argv[0]) from exc
        return completed.returncode


class ExecHandoff(ProcessHandoff):
    """Replaces the current process image with the node process."""

    def __init__(self, execvp: Callable[[str, list[str]], Any] = os.execvp):
        self._execvp = execvp

    def handoff(self, argv: Sequence[str]) -> int:
        _flush_output()
        try:
            self._execvp(argv[0], list(argv))
        except OSError as exc:
            raise map_launch_error(exc, binary=argv[0]) from exc
        raise RuntimeError("execvp returned without replacing the process")


class SupervisedHandoff(ProcessHandoff):
    """Runs the node as a child, forwarding termination signals to it.

    Used where process replacement is not wanted. The launcher does nothing
    after the child exits besides reporting its exit status.
    """

    def __init__(
        self,
        popen: Callable[..., subprocess.Popen[Any]] = subprocess.Popen,
        forwarded_signals: Sequence[int] = FORWARDED_SIGNALS,
    ):
        self._popen = popen
        self._forwarded_signals = tuple(forwarded_signals)

    def handoff(self, argv: Sequence[str]) -> int:
        _flush_output()
        try:
            proc = self._popen(list(argv))
        except OSError as exc:
            raise map_launch_error(exc, binary=argv[0]) from exc

        previous = self._install_forwarding(proc)
        try:
            returncode = proc.wait()
        finally:
            self._restore(previous)
        return exit_status_from_returncode(returncode)

    def _install_forwarding(self, proc: subprocess.Popen[Any]) -> dict[int, Any]:
        if threading.current_thread() is not threading.main_thread():
            return {}

        def forward(signum: int, _frame: Any) -> None:
            if proc.poll() is None:
                proc.send_signal(signum)

        previous: dict[int, Any] = {}
        for signum in self._forwarded_signals:
            previous[signum] = signal.signal(signum, forward)
        return previous

    @staticmethod
    def _restore(previous: dict[int, Any]) -> None:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


class MidenNodeCli(NodeCommands):
    """Builds and runs the ``miden-node bundled`` subcommands."""

    def __init__(self, *, config: NodeLauncherConfig, runner: CommandRunner, handoff: ProcessHandoff):
        self._config = config
        self._runner = runner
        self._handoff = handoff

    def bootstrap_argv(self) -> list[str]:
        return [
            self._config.node_binary,
            "bundled",
            "bootstrap",
            "--data-directory",
            self._config.data_directory,
            "--accounts-directory",
            self._config.accounts_directory,
            "--genesis-config-file",
            self._config.genesis_file,
        ]

    def start_argv(self, passthrough: Sequence[str] = ()) -> list[str]:
        return [
            self._config.node_binary,
            "bundled",
            "start",
            "--rpc.url",
            self._config.rpc_url,
            "--data-directory",
            self._config.data_directory,
            *passthrough,
        ]

    def bootstrap(self) -> None:
        argv = self.bootstrap_argv()
        logger.info("miden_node_bootstrap_begin", extra={"event": "bootstrap", "argv": argv})
        returncode = self._runner.run(argv)
        if returncode != 0:
            exit_status = exit_status_from_returncode(returncode)
            logger.error(
                "miden_node_bootstrap_failed",
                extra={"event": "bootstrap", "exit_status": exit_status},
            )
            raise LauncherError(
                LauncherErrorCode.BOOTSTRAP_FAILED,
                f"bootstrap exited with status {exit_status}",
                exit_status=exit_status,
            )
        logger.info("miden_node_bootstrap_complete", extra={"event": "bootstrap"})

    def start(self, passthrough: Sequence[str] = ()) -> int:
        argv = self.start_argv(passthrough)
        logger.info(
            "miden_node_start",
            extra={"event": "start", "rpc_url": self._config.rpc_url, "argv": argv},
        )
        return self._handoff.handoff(argv)
