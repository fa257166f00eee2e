"""
CLI integration tests: commands run against a temporary data directory.

These tests verify:
- session list/show/export/rename/delete
- trash list/restore/purge/empty
- slug resolution and version output
- Error handling and exit codes
"""

import json

import pytest
from click.testing import CliRunner

from agent_session_manager import __version__
from agent_session_manager.cli import cli
from agent_session_manager.sessions import encode_path


# =============================================================================
# Test Fixtures
# =============================================================================


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def disable_config_autoload(monkeypatch):
    """Disable config auto-loading in all CLI tests."""
    monkeypatch.setattr("agent_session_manager.cli.app.find_config", lambda: None)


@pytest.fixture
def invoke(runner, data_dir):
    """Run the CLI rooted at the temporary data directory."""

    def _invoke(*args, input=None):
        return runner.invoke(cli, ["--data-dir", str(data_dir), *args], input=input)

    return _invoke


@pytest.fixture
def populated(write_session):
    write_session("-home-g-alpha", "aaaa1111-0000", [("user", "Hello there"), ("assistant", "General Kenobi")])
    write_session("-home-g-beta", "bbbb2222-0000", [("user", "fix the parser")])
    write_session("-home-g-beta", "cccc3333-0000", [("user", "old work")], tree="trash")


# =============================================================================
# Root group
# =============================================================================


class TestRoot:
    def test_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "session" in result.output
        assert "trash" in result.output

    def test_version_option(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_version_command(self, invoke):
        result = invoke("version")
        assert result.exit_code == 0
        assert f"Agent Session Manager v{__version__}" in result.output

    def test_version_paths(self, invoke):
        result = invoke("version", "--paths")
        assert result.exit_code == 0
        assert "Locations" in result.output
        assert "projects" in result.output

    def test_explicit_config_file(self, runner, tmp_path, data_dir, populated):
        config = tmp_path / "config.yaml"
        config.write_text(f"data_dir: {data_dir}\n")
        result = runner.invoke(cli, ["-c", str(config), "session", "list", "--serial"])
        assert result.exit_code == 0
        assert "2 session(s) total" in result.output


# =============================================================================
# Session commands
# =============================================================================


class TestSessionList:
    def test_lists_live_sessions(self, invoke, populated):
        result = invoke("session", "list")
        assert result.exit_code == 0
        assert "aaaa1111" in result.output
        assert "bbbb2222" in result.output
        assert "cccc3333" not in result.output
        assert "2 session(s) total" in result.output

    def test_serial_load(self, invoke, populated):
        result = invoke("session", "list", "--serial")
        assert result.exit_code == 0
        assert "2 session(s) total" in result.output

    def test_search(self, invoke, populated):
        result = invoke("session", "list", "--search", "PARSER")
        assert result.exit_code == 0
        assert "bbbb2222" in result.output
        assert "aaaa1111" not in result.output

    def test_empty(self, invoke):
        result = invoke("session", "list")
        assert result.exit_code == 0
        assert "No sessions found" in result.output


class TestSessionShow:
    def test_show_messages(self, invoke, populated):
        result = invoke("session", "show", "aaaa")
        assert result.exit_code == 0
        assert "aaaa1111-0000" in result.output
        assert "Hello there" in result.output
        assert "General Kenobi" in result.output

    def test_show_last(self, invoke, populated):
        result = invoke("session", "show", "aaaa", "--last", "1")
        assert result.exit_code == 0
        assert "General Kenobi" in result.output
        assert "Hello there" not in result.output

    def test_show_from_trash(self, invoke, populated):
        result = invoke("session", "show", "cccc", "--trash")
        assert result.exit_code == 0
        assert "old work" in result.output

    def test_not_found(self, invoke, populated):
        result = invoke("session", "show", "zzzz")
        assert result.exit_code == 1
        assert "No session found" in result.output

    def test_ambiguous(self, invoke, write_session):
        write_session("-p", "abc1")
        write_session("-p", "abc2")
        result = invoke("session", "show", "abc")
        assert result.exit_code == 1
        assert "ambiguous" in result.output


class TestSessionExport:
    def test_export_to_directory(self, invoke, populated, tmp_path):
        out = tmp_path / "exports"
        result = invoke("session", "export", "aaaa", "--output", str(out))
        assert result.exit_code == 0
        assert "Exported" in result.output

        files = list(out.glob("*.md"))
        assert len(files) == 1
        assert files[0].name.endswith("_aaaa1111.md")
        assert "General Kenobi" in files[0].read_text(encoding="utf-8")


class TestSessionRename:
    def test_rename(self, invoke, populated, data_dir):
        result = invoke("session", "rename", "bbbb", "Parser fix")
        assert result.exit_code == 0

        path = data_dir / "projects" / "-home-g-beta" / "bbbb2222-0000.jsonl"
        last = json.loads(path.read_text().splitlines()[-1])
        assert last["customTitle"] == "Parser fix"

        shown = invoke("session", "show", "bbbb")
        assert "Title: Parser fix" in shown.output

    def test_empty_title_fails(self, invoke, populated):
        result = invoke("session", "rename", "bbbb", "  ")
        assert result.exit_code == 1
        assert "must not be empty" in result.output


class TestSessionDelete:
    def test_delete_with_yes(self, invoke, populated, data_dir):
        result = invoke("session", "delete", "aaaa", "--yes")
        assert result.exit_code == 0
        assert not (data_dir / "projects" / "-home-g-alpha" / "aaaa1111-0000.jsonl").exists()
        assert (data_dir / "trash" / "-home-g-alpha" / "aaaa1111-0000.jsonl").exists()

    def test_delete_declined(self, invoke, populated, data_dir):
        result = invoke("session", "delete", "aaaa", input="n\n")
        assert result.exit_code == 0
        assert "Cancelled" in result.output
        assert (data_dir / "projects" / "-home-g-alpha" / "aaaa1111-0000.jsonl").exists()

    def test_delete_confirmed(self, invoke, populated, data_dir):
        result = invoke("session", "delete", "aaaa", input="y\n")
        assert result.exit_code == 0
        assert (data_dir / "trash" / "-home-g-alpha" / "aaaa1111-0000.jsonl").exists()


# =============================================================================
# Trash commands
# =============================================================================


class TestTrash:
    def test_list(self, invoke, populated):
        result = invoke("trash", "list")
        assert result.exit_code == 0
        assert "cccc3333" in result.output
        assert "1 session(s) in trash" in result.output

    def test_list_empty(self, invoke):
        result = invoke("trash", "list")
        assert result.exit_code == 0
        assert "Trash is empty" in result.output

    def test_restore(self, invoke, populated, data_dir):
        result = invoke("trash", "restore", "cccc")
        assert result.exit_code == 0
        assert (data_dir / "projects" / "-home-g-beta" / "cccc3333-0000.jsonl").exists()
        assert "3 session(s) total" in invoke("session", "list").output

    def test_restore_unknown(self, invoke, populated):
        result = invoke("trash", "restore", "aaaa")
        assert result.exit_code == 1

    def test_delete_then_restore_round_trip(self, invoke, populated, data_dir):
        path = data_dir / "projects" / "-home-g-alpha" / "aaaa1111-0000.jsonl"
        before = path.read_bytes()

        assert invoke("session", "delete", "aaaa", "-y").exit_code == 0
        assert invoke("trash", "restore", "aaaa").exit_code == 0
        assert path.read_bytes() == before

    def test_purge(self, invoke, populated, data_dir):
        result = invoke("trash", "purge", "cccc", "--yes")
        assert result.exit_code == 0
        assert not (data_dir / "trash" / "-home-g-beta" / "cccc3333-0000.jsonl").exists()

    def test_empty(self, invoke, populated, data_dir):
        result = invoke("trash", "empty", "--yes")
        assert result.exit_code == 0
        assert "1 session(s) removed" in result.output
        assert not (data_dir / "trash").exists()

    def test_empty_declined(self, invoke, populated, data_dir):
        result = invoke("trash", "empty", input="n\n")
        assert result.exit_code == 0
        assert (data_dir / "trash").exists()


# =============================================================================
# Resolve command
# =============================================================================


class TestResolve:
    def test_encode(self, invoke):
        result = invoke("resolve", "--encode", "/home/box/git/project")
        assert result.exit_code == 0
        assert result.output.strip() == "-home-box-git-project"

    def test_unresolved(self, invoke):
        result = invoke("resolve", "--", "-nonexistent-dir-xyz-123")
        assert result.exit_code == 1
        assert "unresolved" in result.output

    def test_resolves_existing_directory(self, invoke, tmp_path):
        target = tmp_path / "my-project"
        target.mkdir()
        result = invoke("resolve", "--", encode_path(target))
        assert result.exit_code == 0
        assert result.output.strip() == str(target)
