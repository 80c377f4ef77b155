"""Dependency injection entry points for the miden-node connector."""

from __future__ import annotations

from dataclasses import dataclass

from .client import ExecHandoff, MidenNodeCli, SubprocessRunner, SupervisedHandoff
from .config import NodeLauncherConfig
from .interfaces import NodeCommands, ProcessHandoff


@dataclass(frozen=True)
class NodeDependencies:
    """Container exposing interface-typed node dependencies."""

    commands: NodeCommands


def build_handoff(config: NodeLauncherConfig) -> ProcessHandoff:
    if config.handoff_mode == "supervise":
        return SupervisedHandoff()
    return ExecHandoff()


def build_node_dependencies(config: NodeLauncherConfig | None = None) -> NodeDependencies:
    """Build the default dependency graph for driving the node binary."""

    resolved_config = config or NodeLauncherConfig.from_env()
    commands = MidenNodeCli(
        config=resolved_config,
        runner=SubprocessRunner(),
        handoff=build_handoff(resolved_config),
    )
    return NodeDependencies(commands=commands)
