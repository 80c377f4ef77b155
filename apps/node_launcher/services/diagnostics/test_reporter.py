from __future__ import annotations

from pathlib import Path

from services.diagnostics.reporter import StartupReporter


def test_banner_includes_commit_when_present(tmp_path: Path) -> None:
    commit_file = tmp_path / "commit.txt"
    commit_file.write_text("abc123\n", encoding="utf-8")

    text = StartupReporter.render_banner(commit_file)

    assert text.splitlines() == ["=== Miden Node Startup ===", "Miden-node commit: abc123"]


def test_banner_without_commit_file(tmp_path: Path) -> None:
    assert StartupReporter.render_banner(tmp_path / "missing.txt") == "=== Miden Node Startup ==="


def test_genesis_dump_wraps_file_contents(tmp_path: Path) -> None:
    genesis = tmp_path / "genesis.toml"
    genesis.write_text('timestamp = 1\n[fee]\nasset = "x"\n', encoding="utf-8")

    lines = StartupReporter.render_genesis(genesis).splitlines()

    assert lines[0] == f"=== Genesis Config ({genesis}) ==="
    assert lines[1:-1] == ["timestamp = 1", "[fee]", 'asset = "x"']
    assert lines[-1] == "=== End Genesis Config ==="


def test_accounts_listing_names_each_entry(tmp_path: Path) -> None:
    (tmp_path / "faucet.mac").write_bytes(b"\x00" * 12)
    (tmp_path / "account.mac").write_bytes(b"\x00" * 3)

    lines = StartupReporter.render_accounts(tmp_path).splitlines()

    assert lines[0] == "=== Accounts Created at Bootstrap ==="
    assert lines[-1] == "=== End Accounts List ==="
    assert lines[1].endswith(" account.mac")
    assert lines[2].endswith(" faucet.mac")
    assert lines[1].startswith("-")


def test_accounts_listing_handles_missing_directory(tmp_path: Path) -> None:
    text = StartupReporter.render_accounts(tmp_path / "nope")

    assert "(no accounts directory at" in text


def test_reporter_emits_rendered_blocks(tmp_path: Path) -> None:
    emitted: list[str] = []
    genesis = tmp_path / "genesis.toml"
    genesis.write_text("x = 1\n", encoding="utf-8")
    reporter = StartupReporter(emit=emitted.append)

    reporter.banner(tmp_path / "missing.txt")
    reporter.genesis(genesis)
    reporter.accounts(tmp_path)

    assert len(emitted) == 3
    assert emitted[0].startswith("=== Miden Node Startup ===")
    assert "x = 1" in emitted[1]
    assert "genesis.toml" in emitted[2]


def test_banner_tolerates_non_utf8_commit_file(tmp_path: Path) -> None:
    commit_file = tmp_path / "commit.txt"
    commit_file.write_bytes(b"\xff\xfeabc\n")

    lines = StartupReporter.render_banner(commit_file).splitlines()

    assert lines[0] == "=== Miden Node Startup ==="
    assert lines[1].startswith("Miden-node commit: ")
    assert lines[1].endswith("abc")


def test_banner_and_accounts_log_io_failures(tmp_path: Path) -> None:
    def broken_emit(_: str) -> None:
        raise OSError("stdout closed")

    reporter = StartupReporter(emit=broken_emit)

    reporter.banner(tmp_path / "missing.txt")
    reporter.accounts(tmp_path)
