"""miden-node connector package."""

from .client import ExecHandoff, MidenNodeCli, SubprocessRunner, SupervisedHandoff
from .config import NodeLauncherConfig
from .dependencies import NodeDependencies, build_handoff, build_node_dependencies
from .errors import LauncherError, LauncherErrorCode, exit_status_from_returncode, map_launch_error

__all__ = [
    "ExecHandoff",
    "LauncherError",
    "LauncherErrorCode",
    "MidenNodeCli",
    "NodeDependencies",
    "NodeLauncherConfig",
    "SubprocessRunner",
    "SupervisedHandoff",
    "build_handoff",
    "build_node_dependencies",
    "exit_status_from_returncode",
    "map_launch_error",
]
