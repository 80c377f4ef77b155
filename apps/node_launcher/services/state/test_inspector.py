from __future__ import annotations

import errno
from pathlib import Path

import pytest

from connectors.miden_node.errors import LauncherError, LauncherErrorCode
from services.state.inspector import StateInspector


def test_missing_data_directory_is_uninitialized(tmp_path: Path) -> None:
    inspector = StateInspector(tmp_path / "absent")

    assert inspector.is_initialized() is False


def test_empty_data_directory_is_uninitialized(tmp_path: Path) -> None:
    assert StateInspector(tmp_path).is_initialized() is False


def test_marker_directory_means_initialized(tmp_path: Path) -> None:
    (tmp_path / "db").mkdir()

    assert StateInspector(tmp_path).is_initialized() is True


def test_other_contents_do_not_count_as_initialized(tmp_path: Path) -> None:
    (tmp_path / "accounts").mkdir()
    (tmp_path / "db.sqlite3").write_text("", encoding="utf-8")
    (tmp_path / "version").write_text("1", encoding="utf-8")

    assert StateInspector(tmp_path).is_initialized() is False


def test_inspection_reflects_current_filesystem(tmp_path: Path) -> None:
    inspector = StateInspector(tmp_path)
    assert inspector.is_initialized() is False

    (tmp_path / "db").mkdir()

    assert inspector.is_initialized() is True


def test_unsearchable_data_directory_is_a_launcher_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def denied(self: Path, *args: object, **kwargs: object) -> bool:
        raise PermissionError(errno.EACCES, "Permission denied", str(self))

    monkeypatch.setattr(Path, "exists", denied)

    with pytest.raises(LauncherError) as excinfo:
        StateInspector(tmp_path).is_initialized()

    assert excinfo.value.code == LauncherErrorCode.CONFIGURATION_INVALID
    assert excinfo.value.exit_status == 1
    assert "Permission denied" in str(excinfo.value)
