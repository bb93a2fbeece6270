"""Tests for the command-line entry point"""
import logging
import os
from unittest.mock import patch

import pytest

from git_spawn.cli.main import main
from git_spawn.exceptions import GitOperationError


@pytest.fixture(autouse=True)
def isolated_logging(monkeypatch, temp_dir):
    """Keep --debug log files out of the real home directory and undo setup_logging."""
    monkeypatch.setenv("HOME", str(temp_dir))
    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level

    yield

    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)


class TestExitCodes:
    """Test exit statuses and error reporting."""

    def test_help(self, capsys):
        assert main(["--help"]) == 0
        assert "Usage" in capsys.readouterr().out

    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert "git-spawn" in capsys.readouterr().out

    def test_no_arguments(self, capsys):
        assert main([]) == 1
        assert "Usage" in capsys.readouterr().err

    def test_conflicting_flags(self, capsys):
        assert main(["task", "--share", "a", "--clone", "b"]) == 1
        assert "Cannot use both --share and --clone" in capsys.readouterr().err

    def test_unknown_flag(self, capsys):
        assert main(["task", "--bogus"]) == 1
        assert "Usage" in capsys.readouterr().err

    def test_outside_repository(self, temp_dir, monkeypatch, capsys):
        monkeypatch.chdir(temp_dir)
        assert main(["list"]) == 1
        assert "Not a git repository" in capsys.readouterr().err

    def test_git_exit_status_propagates(self, git_repo, repo_path, monkeypatch):
        monkeypatch.chdir(repo_path)
        error = GitOperationError("worktree add", "fatal: boom", status=128)
        with patch("git_spawn.cli.main.WorktreeManager.create", side_effect=error):
            assert main(["task", "--no-shell"]) == 128

    def test_keyboard_interrupt(self, git_repo, repo_path, monkeypatch, capsys):
        monkeypatch.chdir(repo_path)
        with patch("git_spawn.cli.main.WorktreeManager.list_worktrees", side_effect=KeyboardInterrupt):
            assert main(["list"]) == 1
        assert "cancelled" in capsys.readouterr().err


class TestCommands:
    """Test commands end to end without spawning a shell."""

    def test_create_and_cleanup(self, git_repo, repo_path, monkeypatch, capsys):
        monkeypatch.chdir(repo_path)
        assert main(["feature/x", "--share", ".env", "--no-shell"]) == 0

        worktree = repo_path.parent / "test_repo-feature-x"
        assert worktree.is_dir()
        assert (worktree / ".env").is_symlink()
        assert os.path.realpath(os.getcwd()) == os.path.realpath(worktree)

        assert main(["cleanup", "--no-shell"]) == 0
        assert not worktree.exists()
        assert "feature/x" in [head.name for head in git_repo.heads]

    def test_no_shell_prints_directory_once(self, git_repo, repo_path, monkeypatch, capsys):
        monkeypatch.chdir(repo_path)
        assert main(["task", "--no-shell"]) == 0

        worktree = str(repo_path.parent / "test_repo-task")
        lines = capsys.readouterr().out.splitlines()
        assert lines[-1] == worktree
        assert sum(worktree in line for line in lines) == 1

    def test_share_outside_worktree_refused(self, git_repo, repo_path, managed_worktree, monkeypatch, capsys):
        monkeypatch.chdir(managed_worktree)
        assert main(["share", "../test_repo/.env"]) == 1

        assert "Refusing to share or clone" in capsys.readouterr().err
        assert not (repo_path / ".env").is_symlink()
        assert (repo_path / ".env").read_text() == "SECRET=1\n"

    def test_create_twice_collides(self, git_repo, repo_path, monkeypatch, capsys):
        monkeypatch.chdir(repo_path)
        assert main(["task", "--no-shell"]) == 0
        monkeypatch.chdir(repo_path)
        assert main(["task", "--no-shell"]) == 1
        assert "already exists" in capsys.readouterr().err

    def test_clone_command(self, git_repo, repo_path, managed_worktree, monkeypatch):
        monkeypatch.chdir(managed_worktree)
        assert main(["clone", ".env,config/local.json"]) == 0
        assert (managed_worktree / "config" / "local.json").is_file()

    def test_filesystem_error(self, git_repo, repo_path, managed_worktree, monkeypatch, capsys):
        (managed_worktree / ".env").mkdir()
        monkeypatch.chdir(managed_worktree)
        assert main(["share", ".env"]) == 1
        assert "Error" in capsys.readouterr().err

    def test_share_on_main_refused(self, git_repo, repo_path, monkeypatch, capsys):
        monkeypatch.chdir(repo_path)
        assert main(["share", ".env"]) == 1
        assert "protected branch" in capsys.readouterr().err

    def test_list(self, git_repo, repo_path, managed_worktree, monkeypatch):
        monkeypatch.chdir(repo_path)
        with patch("git_spawn.services.display_service.console") as mock_console:
            assert main(["list"]) == 0
        assert mock_console.print.called

    def test_debug_writes_log_file(self, git_repo, repo_path, temp_dir, monkeypatch):
        monkeypatch.chdir(repo_path)
        with patch("git_spawn.services.display_service.console"):
            assert main(["list", "--debug"]) == 0
        assert (temp_dir / ".git-spawn" / "git-spawn.log").exists()
