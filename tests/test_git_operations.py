"""Tests for GitOperations"""
import os

import git
import pytest

from git_spawn.exceptions import GitOperationError, NotARepositoryError, UsageError
from git_spawn.services.git import GitOperations


def same_path(a, b) -> bool:
    return os.path.realpath(str(a)) == os.path.realpath(str(b))


class TestRepositoryRoots:
    """Test repository root and main checkout detection."""

    def test_repo_root(self, git_repo, repo_path):
        ops = GitOperations(str(repo_path))
        assert same_path(ops.get_repo_root(), repo_path)

    def test_repo_root_from_subdirectory(self, git_repo, repo_path):
        ops = GitOperations(str(repo_path / "config"))
        assert same_path(ops.get_repo_root(), repo_path)

    def test_repo_root_of_linked_worktree(self, git_repo, managed_worktree):
        ops = GitOperations(str(managed_worktree))
        assert same_path(ops.get_repo_root(), managed_worktree)

    def test_main_repo_root_from_main(self, git_repo, repo_path):
        ops = GitOperations(str(repo_path))
        assert same_path(ops.get_main_repo_root(), repo_path)

    def test_main_repo_root_from_linked_worktree(self, git_repo, repo_path, managed_worktree):
        ops = GitOperations(str(managed_worktree))
        assert same_path(ops.get_main_repo_root(), repo_path)

    def test_not_a_repository(self, temp_dir):
        ops = GitOperations(str(temp_dir))
        with pytest.raises(NotARepositoryError):
            ops.get_repo_root()

    def test_missing_path(self, temp_dir):
        ops = GitOperations(str(temp_dir / "nonexistent"))
        with pytest.raises(NotARepositoryError):
            ops.get_repo_root()


class TestBranchQueries:
    """Test branch existence, current branch and name validation."""

    def test_branch_exists(self, git_repo, repo_path):
        git_repo.git.branch("feature/existing")
        ops = GitOperations(str(repo_path))
        assert ops.branch_exists("main") is True
        assert ops.branch_exists("feature/existing") is True
        assert ops.branch_exists("nope") is False

    def test_remote_style_name_is_not_local_branch(self, git_repo, repo_path):
        ops = GitOperations(str(repo_path))
        assert ops.branch_exists("origin/main") is False

    def test_current_branch(self, git_repo, repo_path, managed_worktree):
        assert GitOperations(str(repo_path)).get_current_branch() == "main"
        assert GitOperations(str(managed_worktree)).get_current_branch() == "feature-x"

    def test_current_branch_detached(self, git_repo, repo_path):
        git_repo.git.checkout(git_repo.head.commit.hexsha)
        assert GitOperations(str(repo_path)).get_current_branch() is None

    def test_validate_branch_name(self, git_repo, repo_path):
        ops = GitOperations(str(repo_path))
        ops.validate_branch_name("feature/add-auth")
        with pytest.raises(UsageError, match="Invalid branch name"):
            ops.validate_branch_name("bad..name")
        with pytest.raises(UsageError):
            ops.validate_branch_name("has space")


class TestGitOperationError:
    """Test translation of GitPython errors."""

    def test_from_command_error_keeps_status_and_stderr(self):
        error = git.exc.GitCommandError(["git", "worktree", "add"], 128, stderr="fatal: invalid reference: x")
        translated = GitOperationError.from_command_error("worktree add", error)
        assert translated.status == 128
        assert translated.exit_code == 128
        assert translated.message == "fatal: invalid reference: x"
        assert "worktree add" in str(translated)

    def test_exit_code_defaults_to_one(self):
        assert GitOperationError("worktree add").exit_code == 1
        assert GitOperationError("worktree add", status=0).exit_code == 1
