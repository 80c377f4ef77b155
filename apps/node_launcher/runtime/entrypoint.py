"""Container entrypoint for the miden-node image.

Usage:
  node-launcher [node start arguments...]

All arguments are forwarded verbatim to ``miden-node bundled start``.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Mapping, Sequence

from connectors.miden_node.config import NodeLauncherConfig
from connectors.miden_node.dependencies import NodeDependencies, build_node_dependencies
from connectors.miden_node.errors import LauncherError
from services.diagnostics.reporter import StartupReporter
from services.state.inspector import StateInspector

from .lifecycle import LauncherCompositionRoot, LifecycleState

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(level=resolved, format=LOG_FORMAT, stream=sys.stdout)


def publish_lifecycle(state: LifecycleState) -> None:
    logger.debug("launcher_lifecycle_state", extra={"event": "lifecycle", "state": state.to_payload()})


def build_composition_root(
    config: NodeLauncherConfig,
    *,
    dependencies: NodeDependencies | None = None,
) -> LauncherCompositionRoot:
    resolved_dependencies = dependencies or build_node_dependencies(config)
    return LauncherCompositionRoot(
        config_loader=lambda: config,
        commands_factory=lambda _: resolved_dependencies.commands,
        state_inspector_factory=lambda cfg: StateInspector(cfg.data_directory),
        reporter=StartupReporter(),
        health_publisher=publish_lifecycle,
    )


def main(
    argv: Sequence[str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    dependencies_factory: Callable[[NodeLauncherConfig], NodeDependencies] = build_node_dependencies,
) -> int:
    passthrough = list(sys.argv[1:] if argv is None else argv)

    try:
        config = NodeLauncherConfig.from_env(environ)
    except LauncherError as exc:
        configure_logging(NodeLauncherConfig.log_level)
        logger.error("launcher_config_invalid: %s", exc, extra={"event": "config", "code": exc.code.value})
        return exc.exit_status

    configure_logging(config.log_level)
    root = build_composition_root(config, dependencies=dependencies_factory(config))
    try:
        return root.run(passthrough)
    except LauncherError as exc:
        logger.error(
            "launcher_aborted: %s",
            exc,
            extra={"event": "abort", "code": exc.code.value, "exit_status": exc.exit_status},
        )
        return exc.exit_status


if __name__ == "__main__":
    raise SystemExit(main())
