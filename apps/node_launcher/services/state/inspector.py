"""Boot-time detection of an already-initialized node store."""

from __future__ import annotations

import logging
from pathlib import Path

from connectors.miden_node.errors import LauncherError, LauncherErrorCode

logger = logging.getLogger(__name__)

STORE_MARKER = "db"


class StateInspector:
    """Reports whether the data directory already holds an initialized store.

    The marker subpath's existence is the only signal. There is no version or
    checksum check, so a store is either present or it gets bootstrapped.
    """

    def __init__(self, data_directory: str | Path, *, marker: str = STORE_MARKER) -> None:
        self._data_directory = Path(data_directory)
        self._marker = marker

    @property
    def marker_path(self) -> Path:
        return self._data_directory / self._marker

    def is_initialized(self) -> bool:
        try:
            initialized = self.marker_path.exists()
        except OSError as exc:
            raise LauncherError(
                LauncherErrorCode.CONFIGURATION_INVALID,
                f"cannot inspect data directory {self._data_directory}: {exc.strerror or exc}",
                cause=exc,
            ) from exc
        logger.info(
            "node_store_inspected",
            extra={"event": "inspect", "marker": str(self.marker_path), "initialized": initialized},
        )
        return initialized
