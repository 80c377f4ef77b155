"""Configuration model for the miden-node launcher."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import LauncherError, LauncherErrorCode

HANDOFF_MODES = ("exec", "supervise")


def _env_or_default(environ: Mapping[str, str], name: str, default: str) -> str:
    value = environ.get(name)
    if not value:
        return default
    return value


@dataclass(frozen=True)
class NodeLauncherConfig:
    """Effective launcher settings, resolved once per container start."""

    data_directory: str = "/data"
    accounts_directory: str = "/accounts"
    rpc_url: str = "http://0.0.0.0:57291"
    genesis_file: str = "/app/genesis.toml"
    commit_file: str = "/app/miden-node-commit.txt"
    node_binary: str = "miden-node"
    handoff_mode: str = "exec"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "NodeLauncherConfig":
        """Build config from environment variables.

        Empty values fall back to the defaults, same as unset ones.
        """

        env = os.environ if environ is None else environ
        handoff_mode = _env_or_default(env, "MIDEN_LAUNCHER_HANDOFF", cls.handoff_mode).lower()
        if handoff_mode not in HANDOFF_MODES:
            raise LauncherError(
                LauncherErrorCode.CONFIGURATION_INVALID,
                f"unknown handoff mode {handoff_mode!r}, expected one of {', '.join(HANDOFF_MODES)}",
            )

        return cls(
            data_directory=_env_or_default(env, "MIDEN_NODE_DATA_DIRECTORY", cls.data_directory),
            accounts_directory=_env_or_default(env, "MIDEN_NODE_ACCOUNTS_DIRECTORY", cls.accounts_directory),
            rpc_url=_env_or_default(env, "MIDEN_NODE_RPC_URL", cls.rpc_url),
            node_binary=_env_or_default(env, "MIDEN_NODE_BINARY", cls.node_binary),
            handoff_mode=handoff_mode,
            log_level=_env_or_default(env, "MIDEN_LAUNCHER_LOG_LEVEL", cls.log_level).upper(),
        )
