"""Launcher composition root and startup lifecycle orchestration."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Protocol

from connectors.miden_node.config import NodeLauncherConfig
from connectors.miden_node.errors import LauncherError, LauncherErrorCode
from connectors.miden_node.interfaces import NodeCommands

logger = logging.getLogger(__name__)


class SupportsInitializationCheck(Protocol):
    def is_initialized(self) -> bool: ...


class SupportsStartupReport(Protocol):
    def banner(self, commit_file: str | Path) -> Any: ...

    def genesis(self, genesis_file: str | Path) -> Any: ...

    def accounts(self, accounts_directory: str | Path) -> Any: ...


class LifecyclePhase(str, Enum):
    PENDING = "pending"
    RESOLVING_CONFIG = "resolving_config"
    CHECKING_GENESIS = "checking_genesis"
    INSPECTING = "inspecting"
    BOOTSTRAPPING = "bootstrapping"
    READY = "ready"
    STARTING = "starting"
    FAILED = "failed"


HealthPublisher = Callable[["LifecycleState"], None]


def _discard(_: "LifecycleState") -> None:
    return None


@dataclass(slots=True)
class LifecycleState:
    config_ready: bool = False
    genesis_ready: bool = False
    inspected: bool = False
    initialized: bool = False
    bootstrapped: bool = False
    started: bool = False
    phase: LifecyclePhase = LifecyclePhase.PENDING
    last_error: str | None = None

    def to_payload(self) -> dict[str, Any]:
        return {
            "startup": {
                "config": self.config_ready,
                "genesis": self.genesis_ready,
                "inspected": self.inspected,
                "bootstrapped": self.bootstrapped,
                "started": self.started,
            },
            "store_initialized": self.initialized,
            "phase": self.phase.value,
            "last_error": self.last_error,
        }


@dataclass(slots=True)
class LauncherCompositionRoot:
    """Drives config -> inspection -> optional bootstrap -> node handoff.

    Every step blocks. A bootstrap failure aborts before start is attempted,
    so an uninitialized store is never handed to the node service.
    """

    config_loader: Callable[[], NodeLauncherConfig]
    commands_factory: Callable[[NodeLauncherConfig], NodeCommands]
    state_inspector_factory: Callable[[NodeLauncherConfig], SupportsInitializationCheck]
    reporter: SupportsStartupReport
    health_publisher: HealthPublisher = _discard

    _state: LifecycleState = field(default_factory=LifecycleState, init=False)

    @property
    def state(self) -> LifecycleState:
        return self._state

    def run(self, passthrough: Sequence[str] = ()) -> int:
        try:
            self._enter(LifecyclePhase.RESOLVING_CONFIG)
            config = self.config_loader()
            self._state.config_ready = True
            self._publish()

            self._enter(LifecyclePhase.CHECKING_GENESIS)
            self._require_genesis(config)
            self._state.genesis_ready = True
            self._publish()

            self.reporter.banner(config.commit_file)
            self.reporter.genesis(config.genesis_file)

            self._enter(LifecyclePhase.INSPECTING)
            inspector = self.state_inspector_factory(config)
            self._state.initialized = inspector.is_initialized()
            self._state.inspected = True
            self._publish()

            commands = self.commands_factory(config)
            if not self._state.initialized:
                self._enter(LifecyclePhase.BOOTSTRAPPING)
                commands.bootstrap()
                self._state.bootstrapped = True
                self._state.initialized = True
                self.reporter.accounts(config.accounts_directory)

            self._enter(LifecyclePhase.READY)

            self._state.started = True
            self._enter(LifecyclePhase.STARTING)
            return commands.start(tuple(passthrough))
        except Exception as exc:  # noqa: BLE001
            self._state.last_error = str(exc)
            self._state.phase = LifecyclePhase.FAILED
            self._publish()
            raise

    @staticmethod
    def _require_genesis(config: NodeLauncherConfig) -> None:
        if not Path(config.genesis_file).is_file():
            raise LauncherError(
                LauncherErrorCode.GENESIS_MISSING,
                f"genesis config file not found: {config.genesis_file}",
            )

    def _enter(self, phase: LifecyclePhase) -> None:
        self._state.phase = phase
        self._publish()

    def _publish(self) -> None:
        self.health_publisher(self._state)
