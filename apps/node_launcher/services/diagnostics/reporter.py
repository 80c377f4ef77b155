"""Operator-facing startup diagnostics: banner, genesis dump, account listing."""

from __future__ import annotations

import logging
import stat
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

logger = logging.getLogger(__name__)


def _log_block(text: str) -> None:
    logger.info("%s", text)


class StartupReporter:
    """Renders diagnostic text blocks and hands them to ``emit``.

    Purely observational. Nothing here influences the lifecycle decisions.
    """

    def __init__(self, *, emit: Callable[[str], None] = _log_block) -> None:
        self._emit = emit

    def banner(self, commit_file: str | Path) -> None:
        try:
            self._emit(self.render_banner(commit_file))
        except OSError as exc:
            logger.warning("startup_banner_unavailable", extra={"event": "diagnostics", "error": str(exc)})

    def genesis(self, genesis_file: str | Path) -> None:
        self._emit(self.render_genesis(genesis_file))

    def accounts(self, accounts_directory: str | Path) -> None:
        try:
            self._emit(self.render_accounts(accounts_directory))
        except OSError as exc:
            logger.warning("accounts_listing_unavailable", extra={"event": "diagnostics", "error": str(exc)})

    @staticmethod
    def render_banner(commit_file: str | Path) -> str:
        lines = ["=== Miden Node Startup ==="]
        path = Path(commit_file)
        if path.is_file():
            commit = path.read_text(encoding="utf-8", errors="replace").strip()
            lines.append(f"Miden-node commit: {commit}")
        return "\n".join(lines)

    @staticmethod
    def render_genesis(genesis_file: str | Path) -> str:
        path = Path(genesis_file)
        contents = path.read_text(encoding="utf-8", errors="replace").rstrip("\n")
        return "\n".join(
            [
                f"=== Genesis Config ({path}) ===",
                contents,
                "=== End Genesis Config ===",
            ]
        )

    @staticmethod
    def render_accounts(accounts_directory: str | Path) -> str:
        path = Path(accounts_directory)
        lines = ["=== Accounts Created at Bootstrap ==="]
        if not path.is_dir():
            lines.append(f"(no accounts directory at {path})")
        else:
            entries = sorted(path.iterdir(), key=lambda entry: entry.name)
            if not entries:
                lines.append("(empty)")
            for entry in entries:
                info = entry.lstat()
                modified = datetime.fromtimestamp(info.st_mtime, tz=UTC).strftime("%Y-%m-%d %H:%M")
                lines.append(f"{stat.filemode(info.st_mode)} {info.st_size:>10} {modified} {entry.name}")
        lines.append("=== End Accounts List ===")
        return "\n".join(lines)
